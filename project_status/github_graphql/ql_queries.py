from project_status.exception import UnsupportedOwnerTypeError

GET_PROJECT_QUERY_TEMPLATE = """
query($owner_name: String!, $project_number: Int!) {
  %(owner_type)s(login: $owner_name) {
    projectV2(number: $project_number) {
      id
      title
      fields(first: 50) {
        nodes {
          ... on ProjectV2FieldCommon {
            id
            name
          }
          ... on ProjectV2SingleSelectField {
            id
            name
            options {
              id
              name
            }
          }
        }
      }
      items(first: 100) {
        totalCount
        nodes {
          id
          fieldValues(first: 50) {
            nodes {
              ... on ProjectV2ItemFieldSingleSelectValue {
                optionId
                name
                field {
                  ... on ProjectV2FieldCommon {
                    id
                    name
                  }
                }
              }
            }
          }
          content {
%(content)s
          }
        }
      }
    }
  }
}
"""

ISSUE_CONTENT = """            ... on Issue {
              title
            }"""

LABELED_ISSUE_CONTENT = """            ... on Issue {
              title
              labels(first: 50) {
                nodes {
                  name
                }
              }
            }"""


def build_project_query(owner_type, include_labels=False):
    if owner_type not in ("organization", "user"):
        raise UnsupportedOwnerTypeError(f"Unsupported query root: {owner_type}. Must be one of 'organization' or 'user'")
    return GET_PROJECT_QUERY_TEMPLATE % {
        'owner_type': owner_type,
        'content': LABELED_ISSUE_CONTENT if include_labels else ISSUE_CONTENT,
    }
