import logging

import requests

from project_status.exception import TransportError
from project_status.github_graphql.ql_queries import build_project_query
from project_status.github_graphql.ql_mutation import MOVE_ITEM_TO_STATUS
from project_status.models import Project

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"


class GitHubProjectManager:
    def __init__(self, reference, token, timeout=30, url=GITHUB_GRAPHQL_URL):
        self.reference = reference
        self.timeout = timeout
        self.url = url
        self.headers = {
            'Authorization': f'Bearer {token}',
            'Content-Type': 'application/json'
        }

    def fetch_project(self, include_labels=False):
        variables = {
            'owner_name': self.reference.owner_name,
            'project_number': self.reference.project_number
        }
        query = build_project_query(self.reference.owner_type, include_labels)
        data = self.__post(query, variables, "Query")

        # an unknown owner or project number comes back as null
        root = data.get(self.reference.owner_type) or {}
        project = Project.from_node(root.get("projectV2"))

        logging.debug(f"Project node ID: {project.id}")
        logging.debug(f"Project item count: {project.item_count}")
        return project

    def move_item_to_status(self, project_id, item_id, field_id, option_id):
        variables = {
            'project_id': project_id,
            'item_id': item_id,
            'field_id': field_id,
            'single_select_option_id': option_id
        }
        return self.__post(MOVE_ITEM_TO_STATUS, variables, "Mutation")

    def __post(self, query, variables, kind):
        try:
            response = requests.post(self.url, headers=self.headers, timeout=self.timeout,
                                     json={'query': query, 'variables': variables})
        except requests.RequestException as e:
            raise TransportError(f"{kind} failed to run: {e}") from e

        if response.status_code != 200:
            raise TransportError(f"{kind} failed to run by returning code of {response.status_code}. {response.text}")

        body = response.json()
        if body.get('errors'):
            messages = "; ".join(error.get('message', str(error)) for error in body['errors'])
            raise TransportError(f"{kind} failed to run: {messages}")
        return body.get('data') or {}
