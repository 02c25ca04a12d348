"""Grafana request runner: auth headers, transport options, error mapping."""

from __future__ import annotations

from typing import Any

from ...core.contracts import Transport
from ...core.exceptions import DataKitError
from ...models import HTTPResponse, MetricRequest
from .classifier import classify_transport_error

AUTHORIZATION_HEADER = "Authorization"

# Request fields that transport options from a query schema may not replace
_RESERVED_OPTIONS = frozenset({"url", "method", "headers"})


class GrafanaRunner:
    """Executes resolved metric requests against a Grafana endpoint."""

    def __init__(
        self,
        transport: Transport,
        api_key: str,
        datasource_type: str | None = None,
    ) -> None:
        self._t = transport
        self._api_key = api_key
        self._datasource_type = datasource_type

    def build_headers(self, request: MetricRequest) -> dict[str, str]:
        """Merge query headers over the bearer header.

        The bearer header is always sent; a query-supplied ``Authorization``
        header does not replace it.
        """
        headers = {
            name: value
            for name, value in (request.headers or {}).items()
            if name.lower() != AUTHORIZATION_HEADER.lower()
        }
        headers[AUTHORIZATION_HEADER] = f"Bearer {self._api_key}"
        return headers

    def build_options(self, request: MetricRequest) -> dict[str, Any]:
        return {
            key: value
            for key, value in (request.schema or {}).items()
            if key not in _RESERVED_OPTIONS
        }

    async def run(self, request: MetricRequest) -> HTTPResponse:
        """Send one request.

        Args:
            request: Request whose ``url`` is already absolute

        Raises:
            DataKitError: Classified transport failure
        """
        try:
            return await self._t.request(
                url=request.url,
                method=request.method,
                headers=self.build_headers(request),
                **self.build_options(request),
            )
        except DataKitError:
            raise
        except Exception as e:
            raise classify_transport_error(
                e, url=request.url, datasource_type=self._datasource_type
            ) from e
