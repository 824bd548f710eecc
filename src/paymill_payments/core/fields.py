"""
Static field tables mapping model attributes to their wire representation.

Every model declares a ``WIRE_FIELDS`` tuple of :class:`WireField` entries.
The helpers in this module walk that table to serialize a model for a JSON
round trip (:func:`encode_value` / :func:`decode_value`) or to build a
form-encoded request body (:func:`form_value` / :func:`to_form`).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Mapping, Optional

__all__ = [
    "BOOLEAN",
    "ENUM",
    "ENUM_LIST",
    "INTEGER",
    "NESTED",
    "NESTED_LIST",
    "PLAIN",
    "TIMESTAMP",
    "VALUE",
    "WireField",
    "decode_value",
    "encode_value",
    "from_epoch",
    "form_value",
    "to_epoch",
    "to_form",
]

PLAIN = "plain"
INTEGER = "integer"
BOOLEAN = "boolean"
TIMESTAMP = "timestamp"
ENUM = "enum"
ENUM_LIST = "enum_list"
NESTED = "nested"
NESTED_LIST = "nested_list"
# Scalar value type exposing ``parse(str)`` and rendering through ``str()``.
VALUE = "value"

_KINDS = frozenset(
    (PLAIN, INTEGER, BOOLEAN, TIMESTAMP, ENUM, ENUM_LIST, NESTED, NESTED_LIST, VALUE)
)
_NEEDS_TARGET = frozenset((ENUM, ENUM_LIST, NESTED, NESTED_LIST, VALUE))


@dataclass(frozen=True)
class WireField:
    """
    One row of a model's field table.

    ``attr`` is the Python attribute, ``wire`` the JSON/form key (defaults to
    ``attr``). ``target`` is the enum class, value class, or the registered
    model name for nested kinds. ``updateable`` marks the field for partial
    update payloads.
    """

    attr: str
    wire: Optional[str] = None
    kind: str = PLAIN
    target: Any = None
    updateable: bool = False

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise TypeError(f"Unknown field kind '{self.kind}' for {self.attr}")
        if self.kind in _NEEDS_TARGET and self.target is None:
            raise TypeError(f"Field {self.attr} of kind '{self.kind}' needs a target")

    @property
    def name(self) -> str:
        return self.attr if self.wire is None else self.wire


def to_epoch(value: Optional[datetime]) -> Optional[int]:
    """Epoch seconds for ``value``; naive values are UTC, non-positive results count as unset."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    seconds = int(value.timestamp())
    return seconds if seconds > 0 else None


def from_epoch(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    seconds = int(value)
    if seconds <= 0:
        return None
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def _to_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)


def _to_bool(value: Any) -> Optional[bool]:
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


def _resolve(field: WireField):
    if isinstance(field.target, str):
        # Imported lazily; the registry lives with the model base class.
        from .model import resolve_model

        return resolve_model(field.target)
    return field.target


def _decode_nested(model_cls, raw: Any):
    if isinstance(raw, str):
        # The API sometimes embeds only the id of a related resource.
        return model_cls.from_wire({"id": raw})
    return model_cls.from_wire(raw)


def encode_value(field: WireField, value: Any) -> Any:
    """Full (JSON) representation of ``value``."""
    if value is None:
        return None
    kind = field.kind
    if kind == TIMESTAMP:
        return to_epoch(value)
    if kind == ENUM:
        return value.value
    if kind == ENUM_LIST:
        return [item.value for item in value]
    if kind == NESTED:
        return value.to_wire()
    if kind == NESTED_LIST:
        return [item.to_wire() for item in value]
    if kind == VALUE:
        return str(value)
    return value


def decode_value(field: WireField, raw: Any) -> Any:
    if raw is None:
        return None
    kind = field.kind
    if kind == INTEGER:
        return _to_int(raw)
    if kind == BOOLEAN:
        return _to_bool(raw)
    if kind == TIMESTAMP:
        return from_epoch(raw)
    if kind == ENUM:
        return field.target(raw)
    if kind == ENUM_LIST:
        return [field.target(item) for item in raw]
    if kind == NESTED:
        return _decode_nested(_resolve(field), raw)
    if kind == NESTED_LIST:
        model_cls = _resolve(field)
        return [_decode_nested(model_cls, item) for item in raw]
    if kind == VALUE:
        return field.target.parse(raw)
    return raw


def form_value(field: WireField, value: Any) -> Any:
    """Representation of ``value`` inside a form-encoded request body."""
    if value is None:
        return None
    kind = field.kind
    if kind == NESTED:
        return getattr(value, "id", None)
    if kind == NESTED_LIST:
        return [item.id for item in value]
    return encode_value(field, value)


def _form_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return str(to_epoch(value))
    return str(value)


def to_form(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Flatten ``payload`` for ``application/x-www-form-urlencoded`` bodies.

    ``None`` values are dropped, booleans render as ``true``/``false`` and
    sequences are sent under ``key[]``.
    """
    form: Dict[str, Any] = {}
    for key, value in payload.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            form[f"{key}[]"] = [_form_scalar(item) for item in value]
        else:
            form[key] = _form_scalar(value)
    return form


def wire_names(fields: Iterable[WireField]) -> Dict[str, WireField]:
    return {field.name: field for field in fields}
