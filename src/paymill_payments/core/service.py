"""
Generic create/list/get/update/delete dispatch shared by the resource services.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Generic, Iterator, List, Mapping, Optional, Type, TypeVar, Union

from .client import PaymillClient
from .errors import InvalidArgumentError, MissingIdentifierError
from .fields import to_form
from .model import Resource
from .query import Filter, Order

__all__ = ["PaymillList", "ResourceService", "reference", "require", "require_amount"]

T = TypeVar("T", bound=Resource)


@dataclass
class PaymillList(Generic[T]):
    """One page of a list call plus the total number of matches."""

    data: List[T] = field(default_factory=list)
    data_count: int = 0

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> T:
        return self.data[index]


def _identifier(resource: Union[Resource, str, None], action: str) -> str:
    resource_id = resource if isinstance(resource, str) or resource is None else resource.id
    if not resource_id:
        raise MissingIdentifierError(f"Cannot {action} a resource without an id")
    return resource_id


def _check_page(name: str, value: Optional[int]) -> None:
    if value is not None and (not isinstance(value, int) or value < 0):
        raise InvalidArgumentError(f"{name} must be a non-negative integer, got {value!r}")


def require(value: Any, name: str) -> Any:
    """Reject ``None`` and empty strings before a request is built."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidArgumentError(f"{name} is required")
    return value


def require_amount(amount: Any, name: str = "amount") -> int:
    require(amount, name)
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise InvalidArgumentError(f"{name} must be a positive integer in cents, got {amount!r}")
    return amount


def reference(value: Union[Resource, str, None]) -> Optional[str]:
    """Id of a related resource given either the resource or its id."""
    if value is None or isinstance(value, str):
        return value
    return value.id


class ResourceService(Generic[T]):
    """
    Base for per-resource services.

    Subclasses set ``model`` and ``path`` and publish the operations their
    endpoint supports; ``list`` and ``get`` are available everywhere.
    """

    model: ClassVar[Type[Resource]]
    path: ClassVar[str]

    def __init__(self, client: PaymillClient) -> None:
        self.client = client

    def _decode(self, envelope: Mapping[str, Any]) -> T:
        return self.model.from_wire(envelope.get("data") or {})

    def _create(self, params: Mapping[str, Any], path: Optional[str] = None) -> T:
        envelope = self.client.request("POST", path or self.path, data=to_form(params))
        return self._decode(envelope)

    def list(
        self,
        filter: Optional[Filter] = None,
        order: Optional[Order] = None,
        count: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> PaymillList[T]:
        """
        List resources. ``None`` for ``filter`` or ``order`` means no constraint.
        """
        if filter is not None and not isinstance(filter, self.model.FILTER):
            raise InvalidArgumentError(
                f"{type(filter).__name__} cannot filter {self.model.__name__} resources"
            )
        if order is not None and not isinstance(order, self.model.ORDER):
            raise InvalidArgumentError(
                f"{type(order).__name__} cannot order {self.model.__name__} resources"
            )
        _check_page("count", count)
        _check_page("offset", offset)

        params: Dict[str, Any] = {}
        if filter is not None:
            params.update(filter.to_params())
        if order is not None:
            params.update(order.to_params())
        if count is not None:
            params["count"] = count
        if offset is not None:
            params["offset"] = offset

        envelope = self.client.request("GET", self.path, params=params)
        items = [self.model.from_wire(item) for item in envelope.get("data") or []]
        data_count = envelope.get("data_count")
        return PaymillList(
            data=items,
            data_count=len(items) if data_count is None else int(data_count),
        )

    def get(self, resource: Union[T, str]) -> T:
        """Fetch one resource by id or by an instance carrying the id."""
        resource_id = _identifier(resource, "fetch")
        return self._decode(self.client.request("GET", f"{self.path}/{resource_id}"))

    def _update(self, resource: T, extra: Optional[Mapping[str, Any]] = None) -> T:
        """Send the updateable fields of ``resource`` that are set."""
        _identifier(resource, "update")
        params = resource.updateable_params()
        if extra:
            params.update(extra)
        return self._put(resource, params)

    def _put(self, resource: Union[T, str], params: Mapping[str, Any]) -> T:
        resource_id = _identifier(resource, "update")
        envelope = self.client.request(
            "PUT", f"{self.path}/{resource_id}", data=to_form(params)
        )
        return self._decode(envelope)

    def _delete(self, resource: Union[T, str], params: Optional[Mapping[str, Any]] = None) -> T:
        resource_id = _identifier(resource, "delete")
        envelope = self.client.request(
            "DELETE",
            f"{self.path}/{resource_id}",
            data=to_form(params) if params else None,
        )
        data = envelope.get("data")
        if isinstance(data, dict) and data:
            return self.model.from_wire(data)
        # Some endpoints answer a delete with an empty list.
        return self.model(resource_id)
