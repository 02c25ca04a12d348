"""Classification of transport failures into the library error taxonomy."""

from __future__ import annotations

import errno
import json
import logging
from urllib.parse import urlsplit

from ...core.exceptions import (
    DataKitError,
    DatasourceUnavailable,
    GrafanaUnavailable,
    InternalTransportError,
    Unauthorized,
)

logger = logging.getLogger(__name__)

HTTP_STATUS_UNAUTHORIZED = 401
HTTP_STATUS_BAD_GATEWAY = 502

_CONNECTION_REFUSED = (errno.ECONNREFUSED, "ECONNREFUSED")


def classify_transport_error(
    error: BaseException,
    *,
    url: str,
    datasource_type: str | None = None,
) -> DataKitError:
    """Map a transport failure to exactly one ``DataKitError``.

    The failure is logged (with the response status, body and headers when
    the transport got a response) before the typed error is returned for
    the caller to raise.

    Args:
        error: Exception raised by the transport; ``errno`` and ``response``
            attributes are inspected when present
        url: Absolute URL of the failed request
        datasource_type: Type of the datasource the request targeted

    Returns:
        GrafanaUnavailable, Unauthorized, DatasourceUnavailable or
        InternalTransportError
    """
    msg = f"Data kit: fail while request data: {error}"
    path = urlsplit(url).path
    logger.error(
        "%s query url: %s",
        msg,
        json.dumps(path),
        extra={"path": path, "datasource_type": datasource_type},
    )

    if getattr(error, "errno", None) in _CONNECTION_REFUSED:
        return GrafanaUnavailable(str(error))

    response = getattr(error, "response", None)
    if response is not None:
        status = getattr(response, "status", None)
        logger.error(
            "Response: status: %s, response data: %s, headers: %s",
            status,
            json.dumps(getattr(response, "data", None), default=str),
            json.dumps(dict(getattr(response, "headers", None) or {}), default=str),
            extra={"path": path, "status": status},
        )
        if status == HTTP_STATUS_UNAUTHORIZED:
            return Unauthorized(f"Unauthorized. Check the API_KEY. {error}")
        if status == HTTP_STATUS_BAD_GATEWAY:
            return DatasourceUnavailable(
                f"datasource {path} unavailable, message: {error}",
                datasource_type,
                url,
            )

    return InternalTransportError(msg)
