import re
import logging
from dataclasses import dataclass
from typing import FrozenSet

from project_status.exception import InvalidInputError, UnsupportedOwnerTypeError
from project_status.models import ProjectReference

# https://github.com/orgs|users/<ownerName>/projects/<projectNumber>
project_url_pattern = re.compile(
    r'^(?:https://)?github\.com/(?P<owner_type>orgs|users)/(?P<owner_name>[^/]+)/projects/(?P<project_number>\d+)')

OWNER_TYPE_QUERIES = {
    "orgs": "organization",
    "users": "user",
}

DEFAULT_TIMEOUT = 30


@dataclass(frozen=True)
class ActionInputs:
    project: ProjectReference
    token: str
    status: str
    labels: FrozenSet[str] = frozenset()
    timeout: int = DEFAULT_TIMEOUT


def must_get_owner_type_query(owner_type):
    if owner_type not in OWNER_TYPE_QUERIES:
        raise UnsupportedOwnerTypeError(
            f"Unsupported ownerType: {owner_type}. Must be one of 'orgs' or 'users'")
    return OWNER_TYPE_QUERIES[owner_type]


def parse_project_url(project_url):
    logging.debug(f"Project URL: {project_url}")

    match = project_url_pattern.match(project_url or "")
    if match is None:
        raise InvalidInputError(
            f"Invalid project URL: {project_url}. Project URL should match the format "
            f"https://github.com/<orgs-or-users>/<ownerName>/projects/<projectNumber>")

    reference = ProjectReference(
        owner_type=must_get_owner_type_query(match.group("owner_type")),
        owner_name=match.group("owner_name"),
        project_number=int(match.group("project_number")),
    )
    logging.debug(f"Owner name: {reference.owner_name}")
    logging.debug(f"Project number: {reference.project_number}")
    logging.debug(f"Owner type: {reference.owner_type}")
    return reference


def parse_labels(labeled):
    """Split a comma separated label list. An empty result means no filtering."""
    if not labeled:
        return frozenset()
    return frozenset(label.strip() for label in labeled.split(",") if label.strip())


def require(name, value):
    if value is None or not str(value).strip():
        raise InvalidInputError(f"Input required and not supplied: {name}")
    return str(value).strip()


def resolve_inputs(project_url, github_token, status, labeled="", timeout=DEFAULT_TIMEOUT):
    project_url = require("project-url", project_url)
    token = require("github-token", github_token)
    status = require("status", status)

    if timeout is None or int(timeout) <= 0:
        raise InvalidInputError(f"Invalid timeout: {timeout}. Must be a positive number of seconds")

    return ActionInputs(
        project=parse_project_url(project_url),
        token=token,
        status=status,
        labels=parse_labels(labeled),
        timeout=int(timeout),
    )
