import logging

from project_status.github_graphql.manager import GitHubProjectManager
from project_status.selection import find_status_field, resolve_status_option, select_candidates
from project_status.updater import StatusUpdater


def run(inputs, manager=None):
    """Move every matching item of the project to ``inputs.status``.

    Returns the ids of the updated items, in the order they were updated.
    """
    if manager is None:
        manager = GitHubProjectManager(inputs.project, inputs.token, timeout=inputs.timeout)

    project = manager.fetch_project(include_labels=bool(inputs.labels))
    if project.item_count > len(project.items):
        logging.warning(f"project has {project.item_count} items, only the first {len(project.items)} are processed")

    status_field = find_status_field(project.fields)
    status_option = resolve_status_option(status_field, inputs.status)

    candidates = select_candidates(project.items, status_option.id, inputs.labels)
    logging.info(f"{len(candidates)} of {len(project.items)} items need to move to '{status_option.name}'")

    updated = StatusUpdater(manager, project.id, status_field.id, status_option.id).update(candidates)
    logging.info(f"updated {len(updated)} items")
    return updated
