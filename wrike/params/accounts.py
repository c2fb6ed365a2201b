"""Parameters of the account, contact and user methods."""

from __future__ import annotations

from dataclasses import dataclass, field

from wrike.params.common import JSONStruct, Metadata, json_field, url_field


def _optional(key):
    """A form value that is left out while unset."""
    return field(default=None, metadata=url_field(key, True))


def _member(key):
    """A JSON member that is left out while unset."""
    return field(default=None, metadata=json_field(key, True))


@dataclass(kw_only=True)
class QueryAccounts:
    """Parameters of the account query."""

    metadata: Metadata | None = _optional("metadata")
    fields: list[str] | None = _optional("fields")


@dataclass(kw_only=True)
class ModifyAccount:
    """Parameters of the account update."""

    metadata: list[Metadata] | None = _optional("metadata")


@dataclass(kw_only=True)
class QueryContacts:
    """Parameters of the contacts query."""

    me: bool | None = _optional("me")
    metadata: Metadata | None = _optional("metadata")
    deleted: bool | None = _optional("deleted")
    fields: list[str] | None = _optional("fields")


@dataclass(kw_only=True)
class ModifyContact:
    """Parameters of the contact update."""

    metadata: list[Metadata] | None = _optional("metadata")


@dataclass(kw_only=True)
class Profile(JSONStruct):
    """User profile data to change; unset fields are left out."""

    account_id: str | None = _member("accountId")
    role: str | None = _member("role")
    external: bool | None = _member("external")


@dataclass(kw_only=True)
class ModifyUser:
    """Parameters of the user update."""

    profile: Profile | None = _optional("profile")