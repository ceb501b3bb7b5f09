import json
from dataclasses import dataclass, field
from typing import List, Optional

from project_status.exception import MalformedFieldSettingsError


@dataclass(frozen=True)
class ProjectReference:
    owner_type: str
    owner_name: str
    project_number: int


@dataclass(frozen=True)
class StatusOption:
    id: str
    name: str


@dataclass(frozen=True)
class FieldValue:
    field_id: str
    field_name: str
    value: Optional[str]


@dataclass(frozen=True)
class UpdateCandidate:
    item_id: str
    current_value: Optional[str]


def parse_field_options(field_name, options):
    """Validate a single-select option list of the shape [{id, name}, ...]."""
    if not isinstance(options, list):
        raise MalformedFieldSettingsError(
            f"Field '{field_name}' has malformed options: expected a list, got {type(options).__name__}")

    parsed = []
    for option in options:
        if not isinstance(option, dict) \
                or not isinstance(option.get("id"), str) \
                or not isinstance(option.get("name"), str):
            raise MalformedFieldSettingsError(
                f"Field '{field_name}' has a malformed option: {option!r}")
        parsed.append(StatusOption(id=option["id"], name=option["name"]))
    return parsed


def parse_field_settings(field_name, settings):
    """Deserialize a legacy ``settings`` JSON string into its option list."""
    try:
        decoded = json.loads(settings)
    except (TypeError, ValueError) as e:
        raise MalformedFieldSettingsError(f"Field '{field_name}' has unreadable settings: {e}") from e

    if not isinstance(decoded, dict) or "options" not in decoded:
        raise MalformedFieldSettingsError(f"Field '{field_name}' settings carry no options")
    return parse_field_options(field_name, decoded["options"])


@dataclass(frozen=True)
class ProjectField:
    """A project field as fetched.

    Single-select fields of ProjectV2 boards carry their choices as a structured
    ``raw_options`` list, legacy boards serialize them into ``settings``. Neither
    is validated until :meth:`options` is asked for, so unrelated fields with
    other settings never fail a run.
    """
    id: str
    name: str
    raw_options: Optional[list] = None
    settings: Optional[str] = None

    @classmethod
    def from_node(cls, node):
        return cls(
            id=node.get("id"),
            name=node.get("name"),
            raw_options=node.get("options"),
            settings=node.get("settings"),
        )

    def options(self) -> List[StatusOption]:
        if self.raw_options is not None:
            return parse_field_options(self.name, self.raw_options)
        if self.settings is not None:
            return parse_field_settings(self.name, self.settings)
        return []


@dataclass(frozen=True)
class ProjectItem:
    id: str
    title: Optional[str] = None
    field_values: List[FieldValue] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)

    @classmethod
    def from_node(cls, node):
        field_values = []
        for value_node in (node.get("fieldValues") or {}).get("nodes") or []:
            # value types the query does not select come back as empty objects
            project_field = (value_node or {}).get("field")
            if not project_field:
                continue
            field_values.append(FieldValue(
                field_id=project_field.get("id"),
                field_name=project_field.get("name"),
                value=value_node.get("optionId"),
            ))

        content = node.get("content") or {}
        labels = [label["name"] for label in ((content.get("labels") or {}).get("nodes") or []) if label]

        return cls(id=node["id"], title=content.get("title"), field_values=field_values, labels=labels)

    def field_value(self, field_name):
        for value in self.field_values:
            if value.field_name == field_name:
                return value
        return None


@dataclass(frozen=True)
class Project:
    id: Optional[str]
    fields: List[ProjectField] = field(default_factory=list)
    items: List[ProjectItem] = field(default_factory=list)
    item_count: int = 0

    @classmethod
    def from_node(cls, node):
        if not node:
            return cls(id=None)

        items = node.get("items") or {}
        return cls(
            id=node.get("id"),
            fields=[ProjectField.from_node(n) for n in (node.get("fields") or {}).get("nodes") or [] if n],
            items=[ProjectItem.from_node(n) for n in items.get("nodes") or [] if n],
            item_count=items.get("totalCount") or 0,
        )
