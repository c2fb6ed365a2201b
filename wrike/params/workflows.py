"""Parameters of the workflow methods."""

from __future__ import annotations

from dataclasses import dataclass, field

from wrike.params.common import JSONStruct, json_field, url_field


@dataclass(kw_only=True)
class CreateWorkflow:
    """Parameters of the workflow creation."""

    name: str = field(default="", metadata=url_field("name"))


@dataclass(kw_only=True)
class CustomStatus(JSONStruct):
    """Custom status to add or change; unset fields are left out."""

    id: str | None = field(default=None, metadata=json_field("id", True))
    name: str | None = field(default=None, metadata=json_field("name", True))
    standard_name: bool | None = field(
        default=None, metadata=json_field("standardName", True)
    )
    color: str | None = field(default=None, metadata=json_field("color", True))
    standard: bool | None = field(default=None, metadata=json_field("standard", True))
    group: str | None = field(default=None, metadata=json_field("group", True))
    hidden: bool | None = field(default=None, metadata=json_field("hidden", True))


@dataclass(kw_only=True)
class ModifyWorkflow:
    """Parameters of the workflow update."""

    name: str | None = field(default=None, metadata=url_field("name", True))
    hidden: bool | None = field(default=None, metadata=url_field("hidden", True))
    custom_status: CustomStatus | None = field(
        default=None, metadata=url_field("customStatus", True)
    )