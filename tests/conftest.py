import pytest

STATUS_FIELD_NODE = {
    "id": "F_status",
    "name": "Status",
    "options": [
        {"id": "OPT_todo", "name": "Todo"},
        {"id": "OPT_ip", "name": "In Progress"},
        {"id": "OPT_done", "name": "Done"},
    ],
}


def item_node(item_id, option_id=None, labels=None, title=None):
    values = [{}]
    if option_id is not None:
        values.append({
            "optionId": option_id,
            "name": option_id,
            "field": {"id": "F_status", "name": "Status"},
        })
    content = {"title": title or item_id}
    if labels is not None:
        content["labels"] = {"nodes": [{"name": label} for label in labels]}
    return {"id": item_id, "fieldValues": {"nodes": values}, "content": content}


def project_node(items, fields=None, total=None):
    return {
        "id": "PVT_project",
        "title": "Release",
        "fields": {"nodes": fields if fields is not None else [{"id": "F_title", "name": "Title"}, STATUS_FIELD_NODE]},
        "items": {"totalCount": len(items) if total is None else total, "nodes": items},
    }


@pytest.fixture
def abc_project():
    # A: Todo, no labels. B: Done, bug. C: Todo, docs.
    return project_node([
        item_node("A", "OPT_todo", labels=[]),
        item_node("B", "OPT_done", labels=["bug"]),
        item_node("C", "OPT_todo", labels=["docs"]),
    ])
