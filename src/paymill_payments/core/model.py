"""
Base classes shared by every Paymill model.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Type, TypeVar

from .fields import WireField, decode_value, encode_value, form_value, wire_names

__all__ = ["Model", "Resource", "resolve_model"]

M = TypeVar("M", bound="Model")

_MODEL_REGISTRY: Dict[str, Type["Model"]] = {}


def resolve_model(name: str) -> Type["Model"]:
    try:
        return _MODEL_REGISTRY[name]
    except KeyError as exc:
        raise LookupError(f"No model registered under '{name}'") from exc


def _annotated_attributes(cls: type) -> set:
    names = set()
    for klass in cls.__mro__:
        names.update(getattr(klass, "__annotations__", {}) or {})
    return names


class Model:
    """
    Mixin for dataclasses described by a static ``WIRE_FIELDS`` table.

    Subclasses are validated when they are defined: every table row must name
    an annotated attribute and updateable rows must carry a wire name.
    """

    WIRE_FIELDS: ClassVar[Tuple[WireField, ...]] = ()
    _wire_index: ClassVar[Dict[str, WireField]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "WIRE_FIELDS" not in cls.__dict__:
            return
        attributes = _annotated_attributes(cls)
        for field in cls.WIRE_FIELDS:
            if field.attr not in attributes:
                raise TypeError(f"{cls.__name__}.WIRE_FIELDS names unknown attribute '{field.attr}'")
            if field.updateable and not field.name:
                raise TypeError(f"{cls.__name__}.{field.attr} is updateable but has no wire name")
        cls._wire_index = wire_names(cls.WIRE_FIELDS)
        _MODEL_REGISTRY[cls.__name__] = cls

    def to_wire(self) -> Dict[str, Any]:
        """Every populated field keyed by its wire name."""
        payload: Dict[str, Any] = {}
        for field in self.WIRE_FIELDS:
            value = encode_value(field, getattr(self, field.attr))
            if value is not None:
                payload[field.name] = value
        return payload

    @classmethod
    def from_wire(cls: Type[M], payload: Optional[Mapping[str, Any]]) -> M:
        """Build an instance from a decoded JSON object; unknown keys are ignored."""
        values: Dict[str, Any] = {}
        for name, raw in (payload or {}).items():
            field = cls._wire_index.get(name)
            if field is None:
                continue
            values[field.attr] = decode_value(field, raw)
        return cls(**values)

    @classmethod
    def updateable_fields(cls) -> Tuple[WireField, ...]:
        return tuple(field for field in cls.WIRE_FIELDS if field.updateable)

    def updateable_params(self) -> Dict[str, Any]:
        """Partial update payload: updateable fields that are set."""
        params: Dict[str, Any] = {}
        for field in self.updateable_fields():
            value = form_value(field, getattr(self, field.attr))
            if value is not None:
                params[field.name] = value
        return params


@dataclass
class Resource(Model):
    """
    A top-level API object identified by an opaque string id.

    ``id`` is the first dataclass field so resources can be built as
    ``Offer()`` or ``Offer("offer_123")``. ``FILTER`` and ``ORDER`` name the
    query builders accepted by the resource's list call.
    """

    id: Optional[str] = None

    FILTER: ClassVar[Optional[type]] = None
    ORDER: ClassVar[Optional[type]] = None

    @classmethod
    def create_filter(cls):
        if cls.FILTER is None:
            raise TypeError(f"{cls.__name__} does not support filtering")
        return cls.FILTER()

    @classmethod
    def create_order(cls):
        if cls.ORDER is None:
            raise TypeError(f"{cls.__name__} does not support ordering")
        return cls.ORDER()
