"""Collaborator contracts consumed by the query engine.

Architecture:
    The engine never builds metric-specific queries, parses provider
    responses, or speaks HTTP itself. It talks to those collaborators
    through the protocols below, so any object with matching methods can be
    plugged in (including test stubs).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..models import HTTPResponse, MetricRequest, TimeSeriesChunk


class MetricQuery(Protocol):
    """Per-metric query builder and result extractor."""

    def get_query(
        self, from_: float, to: float, limit: int, offset: int
    ) -> MetricRequest | Mapping[str, Any]:
        """Build the request for one page of ``limit`` rows starting at ``offset``."""
        ...

    def get_results(self, response: HTTPResponse) -> TimeSeriesChunk | Mapping[str, Any]:
        """Extract ``columns`` and ``values`` from a raw response."""
        ...


class Transport(Protocol):
    """Executes one HTTP-like request.

    Failures must raise an exception exposing optional ``errno`` and
    ``response`` (with ``status``, ``data`` and ``headers``) attributes.
    """

    async def request(
        self,
        *,
        url: str,
        method: str,
        headers: Mapping[str, str],
        **options: Any,
    ) -> HTTPResponse: ...
