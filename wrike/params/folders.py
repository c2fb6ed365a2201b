"""Parameters of the folder methods."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from wrike.params.attachments import Date
from wrike.params.common import JSONStruct, Metadata, json_field, url_field


def _opt(key):
    """Optional form value, omitted while None."""
    return field(default=None, metadata=url_field(key, True))


def _many(key):
    """List form value, omitted while empty."""
    return field(default_factory=list, metadata=url_field(key, True))


def _text(key, omitempty=False):
    """Text form value, empty by default."""
    return field(default="", metadata=url_field(key, omitempty))


def _json_opt(key):
    """Optional JSON member, omitted while None."""
    return field(default=None, metadata=json_field(key, True))


def _json_many(key):
    """List JSON member, omitted while empty."""
    return field(default_factory=list, metadata=json_field(key, True))


def _json_text(key, omitempty=True):
    """Text JSON member, empty by default."""
    return field(default="", metadata=json_field(key, omitempty))


class Comparator(str, Enum):
    """Comparison used by a custom field filter."""

    EQUAL_TO = "EqualTo"
    IS_EMPTY = "IsEmpty"
    IS_NOT_EMPTY = "IsNotEmpty"
    LESS_THAN = "LessThan"
    LESS_OR_EQUAL_TO = "LessOrEqualTo"
    GREATER_THAN = "GreaterThan"
    GREATER_OR_EQUAL_TO = "GreaterOrEqualTo"
    IN_RANGE = "InRange"
    NOT_IN_RANGE = "NotInRange"
    CONTAINS = "Contains"
    STARTS_WITH = "StartsWith"
    ENDS_WITH = "EndsWith"
    CONTAINS_ALL = "ContainsAll"
    CONTAINS_ANY = "ContainsAny"


class DateRange(Date):
    """A date range, sent as ``<key>[Start]`` and ``<key>[End]``."""


@dataclass(kw_only=True)
class CustomFieldFilter(JSONStruct):
    """Filter on a custom field value."""

    id: str = _json_text("id", False)
    comparator: Comparator | str = _json_text("comparator")
    value: str | None = _json_opt("value")
    min_value: str | None = _json_opt("minValue")
    max_value: str | None = _json_opt("maxValue")
    values: list[str] = _json_many("values")


@dataclass(kw_only=True)
class GetFolderSubtree:
    """Parameters of the folder subtree query."""

    permalink: str | None = _opt("permalink")
    descendants: bool | None = _opt("descendants")
    metadata: Metadata | None = _opt("metadata")
    custom_field: CustomFieldFilter | None = _opt("customField")
    updated_date: DateRange | None = _opt("updatedDate")
    project: bool | None = _opt("project")
    fields: list[str] | None = _opt("fields")


@dataclass(kw_only=True)
class GetFolderTree(GetFolderSubtree):
    """Parameters of the folder tree query."""

    deleted: bool | None = _opt("deleted")


@dataclass(kw_only=True)
class CustomField(JSONStruct):
    """A custom field value on a folder or task."""

    id: str = _json_text("id", False)
    value: str = _json_text("value")


@dataclass(kw_only=True)
class Project(JSONStruct):
    """Project settings of a new folder."""

    owner_ids: list[str] = _json_many("ownerIds")
    status: str = _json_text("status")
    start_date: str = _json_text("startDate")
    end_date: str = _json_text("endDate")


@dataclass(kw_only=True)
class ProjectModify(JSONStruct):
    """Project changes of an existing folder."""

    owners_add: list[str] = _json_many("ownerAdd")
    owners_remove: list[str] = _json_many("ownerRemove")
    status: str = _json_text("status")
    start_date: str = _json_text("startDate")
    end_date: str = _json_text("endDate")


@dataclass(kw_only=True)
class CreateFolder:
    """Parameters of the folder creation; ``project`` is always sent."""

    title: str = _text("title")
    description: str = _text("description", True)
    shareds: list[str] = _many("shareds")
    metadata: list[Metadata] | None = _opt("metadata")
    custom_fields: list[CustomField] = _many("customFields")
    custom_columns: list[str] = _many("customColumns")
    project: Project = field(default_factory=Project, metadata=url_field("project", True))


@dataclass(kw_only=True)
class GetFolders:
    """Parameters of the folders query."""

    fields: list[str] | None = _opt("fields")


@dataclass(kw_only=True)
class CopyFolder:
    """Parameters of the folder copy."""

    parent: str = _text("parent")
    title: str = _text("title")
    title_prefix: str = _text("titlePrefix", True)
    copy_descriptions: bool | None = _opt("copyDescriptions")
    copy_responsibles: bool | None = _opt("copyResponsibles")
    add_responsibles: list[str] = _many("addResponsibles")
    remove_responsibles: list[str] = _many("removeResponsibles")
    copy_custom_fields: bool | None = _opt("copyCustomFields")
    copy_custom_statuses: bool | None = _opt("copyCustomStatuses")
    copy_statuses: bool | None = _opt("copyStatuses")
    copy_parents: bool | None = _opt("copyParents")
    reschedule_date: str = _text("rescheduleDate", True)
    reschedule_mode: str = _text("rescheduleMode", True)
    entry_limit: int | None = _opt("entryLimit")


@dataclass(kw_only=True)
class ModifyFolders:
    """Parameters of the update of several folders."""

    custom_fields: list[CustomField] = _many("customFields")


@dataclass(kw_only=True)
class ModifyFolder(ModifyFolders):
    """Parameters of the folder update.

    ``title``, ``description`` and ``project`` are always sent.
    """

    title: str = _text("title")
    description: str | None = field(default=None, metadata=url_field("description"))
    add_parents: list[str] = _many("addParents")
    remove_parents: list[str] = _many("removeParents")
    add_shareds: list[str] = _many("addShareds")
    remove_shareds: list[str] = _many("removeShareds")
    metadata: list[Metadata] | None = _opt("metadata")
    restore: bool | None = _opt("restore")
    custom_columns: list[str] = _many("customColumns")
    project: ProjectModify = field(
        default_factory=ProjectModify, metadata=url_field("project")
    )