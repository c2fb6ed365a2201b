"""Declaring request parameters and encoding them as form values."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import urlencode

_JSON = "json"
_URL = "url"

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass(frozen=True)
class _Tag:
    name: str
    omitempty: bool


def json_field(name: str, omitempty: bool = False) -> dict[str, _Tag]:
    """Field metadata giving the JSON key of a ``JSONStruct`` attribute.

    A field whose default is ``None`` is optional: with ``omitempty`` it is
    left out only when ``None``. Other fields are left out when they hold a
    zero value (``False``, ``0``, an empty string or sequence).
    """
    return {_JSON: _Tag(name, omitempty)}


def url_field(name: str, omitempty: bool = False) -> dict[str, _Tag]:
    """Field metadata giving the form key of a parameters attribute.

    Empty values follow the same rules as ``json_field``.
    """
    return {_URL: _Tag(name, omitempty)}


def _is_empty(value: Any, spec: dataclasses.Field) -> bool:
    if value is None:
        return True
    if spec.default is None:
        return False
    if isinstance(value, JSONStruct) or dataclasses.is_dataclass(value):
        return False
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, bytes, list, tuple, dict)):
        return len(value) == 0
    return False


def _to_json_value(value: Any) -> Any:
    if isinstance(value, JSONStruct):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_to_json_value(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _to_json_value(item) for key, item in value.items()}
    return value


def _dumps(value: Any) -> str:
    text = json.dumps(_to_json_value(value), separators=(",", ":"), ensure_ascii=False)
    for char, escape in _JSON_ESCAPES.items():
        text = text.replace(char, escape)
    return text


class JSONStruct:
    """Base for parameter dataclasses sent to the API as a JSON document."""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object for this value, in field order."""
        result: dict[str, Any] = {}
        for spec in dataclasses.fields(self):
            tag = spec.metadata.get(_JSON)
            if tag is None:
                continue
            value = getattr(self, spec.name)
            if tag.omitempty and _is_empty(value, spec):
                continue
            result[tag.name] = _to_json_value(value)
        return result

    def to_json(self) -> str:
        """Return the compact JSON text for this value."""
        return _dumps(self)


def _url_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _add_struct(values: dict[str, list[str]], obj: Any, scope: str) -> None:
    for spec in dataclasses.fields(obj):
        tag = spec.metadata.get(_URL)
        if tag is None:
            continue
        name = f"{scope}[{tag.name}]" if scope else tag.name
        value = getattr(obj, spec.name)
        if tag.omitempty and _is_empty(value, spec):
            continue
        if isinstance(value, (JSONStruct, list, tuple)):
            values[name] = [_dumps(value)]
        elif dataclasses.is_dataclass(value) and not isinstance(value, type):
            _add_struct(values, value, name)
        else:
            values.setdefault(name, []).append(_url_string(value))


def encode_values(params: Any) -> dict[str, list[str]]:
    """Return the form values of a parameters dataclass, keyed by name.

    ``None`` gives no values. JSON structures and lists are sent as JSON text;
    other nested dataclasses are flattened as ``outer[inner]`` keys.
    """
    if params is None:
        return {}
    if not dataclasses.is_dataclass(params) or isinstance(params, type):
        raise TypeError(
            f"expected a parameters dataclass, got {type(params).__name__}"
        )
    values: dict[str, list[str]] = {}
    _add_struct(values, params, "")
    return values


def encode(params: Any) -> str:
    """Return the URL-encoded form of ``params``, sorted by key."""
    values = encode_values(params)
    return urlencode([(key, item) for key in sorted(values) for item in values[key]])


@dataclass
class Metadata(JSONStruct):
    """A key/value metadata entry."""

    key: str = field(default="", metadata=json_field("key"))
    value: str = field(default="", metadata=json_field("value"))


@dataclass
class Avatar(JSONStruct):
    """Letters and colour of a group avatar."""

    letters: str = field(default="", metadata=json_field("letters"))
    color: str = field(default="", metadata=json_field("color"))