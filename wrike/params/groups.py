"""Parameters of the group methods."""

from __future__ import annotations

from dataclasses import dataclass, field

from wrike.params.common import Avatar, Metadata, url_field


def _if_set(key):
    """A form value sent only when it is not None."""
    return field(default=None, metadata=url_field(key, True))


def _if_any(key):
    """A list form value sent only when it holds something."""
    return field(default_factory=list, metadata=url_field(key, True))


@dataclass(kw_only=True)
class CreateGroup:
    """Parameters of the group creation."""

    title: str = field(default="", metadata=url_field("title", True))
    members: list[str] = _if_any("members")
    parent: str | None = _if_set("parent")
    avatar: Avatar | None = _if_set("avatar")
    metadata: list[Metadata] | None = _if_set("metadata")


@dataclass(kw_only=True)
class ModifyGroup:
    """Parameters of the group update."""

    title: str | None = _if_set("title")
    add_members: list[str] = _if_any("addMembers")
    remove_members: list[str] = _if_any("removeMembers")
    parent: str | None = _if_set("parent")
    avatar: Avatar | None = _if_set("avatar")
    metadata: list[Metadata] | None = _if_set("metadata")


@dataclass(kw_only=True)
class QueryGroup:
    """Parameters of the single group query."""

    fields: list[str] | None = _if_set("fields")


@dataclass(kw_only=True)
class QueryGroups(QueryGroup):
    """Parameters of the groups query."""

    metadata: Metadata | None = _if_set("metadata")