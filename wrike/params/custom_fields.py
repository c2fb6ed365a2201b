"""Parameters of the custom field methods."""

from __future__ import annotations

from dataclasses import dataclass, field

from wrike.params.common import url_field


def _unless_unset(key):
    """A form value that is left out while it is None."""
    return field(default=None, metadata=url_field(key, True))


def _unless_empty(key):
    """A list form value that is left out while it is empty."""
    return field(default_factory=list, metadata=url_field(key, True))


@dataclass(kw_only=True)
class Settings:
    """Custom field settings, sent as ``settings[<name>]`` form values."""

    inheritance_type: str | None = _unless_unset("inheritanceType")
    decimal_places: int | None = _unless_unset("decimalPlaces")
    use_thousands_separator: bool | None = _unless_unset("useThousandsSeparator")
    currency: str | None = _unless_unset("currency")
    aggregation: str | None = _unless_unset("aggregation")
    values: list[str] | None = _unless_unset("values")
    allow_other_values: bool | None = _unless_unset("allowOtherValues")
    contacts: list[str] = _unless_empty("contacts")


@dataclass(kw_only=True)
class CreateCustomField:
    """Parameters of the custom field creation."""

    title: str = field(default="", metadata=url_field("title"))
    type: str = field(default="", metadata=url_field("type"))
    shareds: list[str] = _unless_empty("shareds")
    settings: Settings | None = _unless_unset("settings")


@dataclass(kw_only=True)
class ModifyCustomField:
    """Parameters of the custom field update.

    ``title`` and ``type`` are always sent, empty when unset.
    """

    title: str | None = field(default=None, metadata=url_field("title"))
    type: str | None = field(default=None, metadata=url_field("type"))
    add_shareds: list[str] = _unless_empty("addShareds")
    remove_shareds: list[str] = _unless_empty("removeShareds")
    settings: Settings | None = _unless_unset("settings")