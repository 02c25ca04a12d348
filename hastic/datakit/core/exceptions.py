"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any, ClassVar

from .enums import ErrorKind


class DataKitError(Exception):
    """Base exception for all library errors.

    Carries the datasource context of the failing query when it is known.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        datasource_type: str | None = None,
        datasource_url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.datasource_type = datasource_type
        self.datasource_url = datasource_url


class BadRange(DataKitError):
    """Query range is malformed (``from_ > to``)."""

    kind = ErrorKind.INVALID_RANGE


class GrafanaUnavailable(DataKitError):
    """The Grafana gateway refused the connection."""

    kind = ErrorKind.GATEWAY_UNAVAILABLE


class Unauthorized(DataKitError):
    """The gateway rejected the API key (HTTP 401)."""

    kind = ErrorKind.UNAUTHORIZED


class DatasourceUnavailable(DataKitError):
    """The datasource behind the gateway is down (HTTP 502)."""

    kind = ErrorKind.DATASOURCE_UNAVAILABLE


class InternalTransportError(DataKitError):
    """Unclassified transport or response failure."""

    kind = ErrorKind.INTERNAL


ERROR_CLASSES: dict[ErrorKind, type[DataKitError]] = {
    ErrorKind.INVALID_RANGE: BadRange,
    ErrorKind.GATEWAY_UNAVAILABLE: GrafanaUnavailable,
    ErrorKind.UNAUTHORIZED: Unauthorized,
    ErrorKind.DATASOURCE_UNAVAILABLE: DatasourceUnavailable,
    ErrorKind.INTERNAL: InternalTransportError,
}


class TransportError(Exception):
    """Failure raised by a transport before classification.

    Not part of the public taxonomy: the runner always converts it into one
    of the ``DataKitError`` kinds.
    """

    def __init__(
        self,
        message: str,
        errno: int | str | None = None,
        response: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.errno = errno
        self.response = response
