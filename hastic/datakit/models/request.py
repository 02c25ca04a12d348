"""Request and response shapes exchanged with transports."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class MetricRequest:
    """One page request produced by a metric query builder.

    Attributes:
        url: Path relative to the Grafana endpoint (absolute once resolved)
        method: HTTP method
        headers: Extra headers merged over the authorization header
        schema: Extra transport options (``params``, ``json``, ``data``...)
    """

    url: str
    method: str = "GET"
    headers: Mapping[str, str] | None = None
    schema: Mapping[str, Any] | None = None

    def with_url(self, url: str) -> MetricRequest:
        return replace(self, url=url)


@dataclass(frozen=True)
class HTTPResponse:
    """Transport-agnostic response."""

    status: int
    data: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)


def as_metric_request(query: MetricRequest | Mapping[str, Any]) -> MetricRequest:
    """Accept either a MetricRequest or a plain ``{"url": ..., ...}`` mapping."""
    if isinstance(query, MetricRequest):
        return query
    return MetricRequest(
        url=query["url"],
        method=query.get("method") or "GET",
        headers=query.get("headers"),
        schema=query.get("schema"),
    )
