"""
Core primitives: configuration, transport, field mapping and query building.
"""

from .client import PaymillClient
from .config import (
    DEFAULT_API_URL,
    PaymillConfig,
    PaymillParameters,
    load_paymill_config,
)
from .environment import PaymillEnvironment, build_environment
from .errors import (
    ApiError,
    AuthenticationError,
    ConfigError,
    InvalidArgumentError,
    MissingIdentifierError,
    NotFoundError,
    PaymillError,
    ServerError,
    TransportError,
    ValidationError,
)
from .fields import WireField, to_form
from .model import Model, Resource
from .query import Comparison, DateRange, Direction, Filter, Order
from .service import PaymillList, ResourceService

__all__ = [
    "ApiError",
    "AuthenticationError",
    "Comparison",
    "ConfigError",
    "DEFAULT_API_URL",
    "DateRange",
    "Direction",
    "Filter",
    "InvalidArgumentError",
    "MissingIdentifierError",
    "Model",
    "NotFoundError",
    "Order",
    "PaymillClient",
    "PaymillConfig",
    "PaymillEnvironment",
    "PaymillError",
    "PaymillList",
    "PaymillParameters",
    "Resource",
    "ResourceService",
    "ServerError",
    "TransportError",
    "ValidationError",
    "WireField",
    "build_environment",
    "load_paymill_config",
    "to_form",
]
