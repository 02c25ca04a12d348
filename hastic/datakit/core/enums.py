"""Core enumerations.

Key Types:
    - ErrorKind: Closed set of failure kinds surfaced to callers
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of failures a query can end with.

    Every ``DataKitError`` subclass is tagged with exactly one kind, and
    every kind has exactly one error class (see ``ERROR_CLASSES``).
    """

    INVALID_RANGE = "invalid_range"
    GATEWAY_UNAVAILABLE = "gateway_unavailable"
    UNAUTHORIZED = "unauthorized"
    DATASOURCE_UNAVAILABLE = "datasource_unavailable"
    INTERNAL = "internal"
