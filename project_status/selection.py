import logging

from project_status.exception import StatusNotFoundError
from project_status.models import UpdateCandidate

STATUS_FIELD_NAME = "Status"


def find_status_field(fields, name=STATUS_FIELD_NAME):
    for project_field in fields:
        if project_field.name == name:
            logging.debug(f"statusField: {project_field.id}")
            return project_field
    raise StatusNotFoundError(f"No field named '{name}' found in the project")


def resolve_status_option(status_field, status_name):
    options = status_field.options()
    for option in options:
        if option.name == status_name:
            logging.debug(f"selectedStatusSetting: {option.id} ({option.name})")
            return option

    available = ", ".join(option.name for option in options) or "none"
    raise StatusNotFoundError(
        f"Status '{status_name}' not found in field '{status_field.name}'. Available: {available}")


def matches_labels(labels, label_filter):
    # items without labels always pass, the filter only narrows labeled items
    if not label_filter or not labels:
        return True
    return any(label in label_filter for label in labels)


def select_candidates(items, target_option_id, label_filter=frozenset(), status_field_name=STATUS_FIELD_NAME):
    """Return the items that must be moved to ``target_option_id``, in fetch order.

    An item qualifies when it has a value for the status field, passes the
    label filter, and is not already at the target option.
    """
    candidates = []
    for item in items:
        status_value = item.field_value(status_field_name)
        if status_value is None:
            continue
        if not matches_labels(item.labels, label_filter):
            logging.debug(f"item {item.id} labels {item.labels} do not match {sorted(label_filter)}, ignoring")
            continue
        if status_value.value == target_option_id:
            continue
        candidates.append(UpdateCandidate(item_id=item.id, current_value=status_value.value))
    return candidates
