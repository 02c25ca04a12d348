"""Core components."""

from .contracts import MetricQuery, Transport
from .enums import ErrorKind
from .exceptions import (
    ERROR_CLASSES,
    BadRange,
    DataKitError,
    DatasourceUnavailable,
    GrafanaUnavailable,
    InternalTransportError,
    TransportError,
    Unauthorized,
)
from .validation import validate_range

__all__ = [
    "ErrorKind",
    "ERROR_CLASSES",
    "DataKitError",
    "BadRange",
    "GrafanaUnavailable",
    "Unauthorized",
    "DatasourceUnavailable",
    "InternalTransportError",
    "TransportError",
    "MetricQuery",
    "Transport",
    "validate_range",
]
