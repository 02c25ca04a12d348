"""Query entry points: aggregated fetch and point streaming.

Architecture:
    Both entry points validate the range before any request, derive the
    Grafana endpoint from the given URL, and page through the query with a
    ChunkExecutor. ``query_by_metric`` merges every page into one result;
    ``DatasourceStream.query`` hands the pages to a PointStream that fetches
    them only as the consumer pulls.

    Credentials and URLs are explicit parameters. When no transport is
    given, an aiohttp ``HTTPClient`` is created for the query and closed
    when the query ends.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from ..config import DataKitSettings
from ..core.contracts import Transport
from ..core.validation import validate_range
from ..models import Metric, TimeSeriesChunk, TimeSeriesResult, as_metric_request
from ..runtime.chunking import ChunkExecutor, ChunkPlan, ChunkPolicy
from ..runtime.rest import GrafanaRunner
from ..runtime.stream import PointStream
from ..utils.http import HTTPClient
from ..utils.urls import get_grafana_url, join_url

logger = logging.getLogger(__name__)


class _MetricPager:
    """Fetches one page of a metric query per call."""

    def __init__(
        self,
        metric: Metric,
        grafana_url: str,
        runner: GrafanaRunner,
        from_: float,
        to: float,
    ) -> None:
        self._metric = metric
        self._grafana_url = grafana_url
        self._runner = runner
        self._from = from_
        self._to = to

    async def __call__(self, plan: ChunkPlan) -> TimeSeriesChunk:
        query = self._metric.metric_query
        request = as_metric_request(query.get_query(self._from, self._to, plan.limit, plan.offset))
        request = request.with_url(join_url(self._grafana_url, request.url))
        response = await self._runner.run(request)
        return TimeSeriesChunk.from_results(query.get_results(response))


async def query_by_metric(
    metric: Metric,
    url: str,
    from_: float,
    to: float,
    api_key: str,
    *,
    transport: Transport | None = None,
    settings: DataKitSettings | None = None,
) -> TimeSeriesResult:
    """Fetch a whole range for a metric.

    Args:
        metric: Datasource and query builder to use
        url: Grafana URL (API base or dashboard link)
        from_: Range start (epoch milliseconds)
        to: Range end (epoch milliseconds)
        api_key: Grafana API key, sent as a bearer token
        transport: Transport to use (defaults to a fresh HTTPClient)
        settings: Paging and timeout settings

    Returns:
        TimeSeriesResult with the columns of the last page and every row

    Raises:
        BadRange: If ``from_ > to`` (no request is sent)
        DataKitError: If any page fails; partial data is discarded
    """
    datasource_type = metric.datasource.type
    validate_range(from_, to, datasource_type=datasource_type, url=url)

    settings = settings or DataKitSettings()
    logger.debug(
        "query_by_metric",
        extra={"datasource_type": datasource_type, "from": from_, "to": to},
    )
    owned = transport is None
    client = HTTPClient(timeout=settings.timeout) if transport is None else transport
    runner = GrafanaRunner(client, api_key, datasource_type)
    executor = ChunkExecutor(ChunkPolicy(page_size=settings.page_size), endpoint_id=datasource_type)
    pager = _MetricPager(metric, get_grafana_url(url), runner, from_, to)

    try:
        result = await executor.execute(pager)
    finally:
        if owned:
            await client.close()
    return result.data


class DatasourceStream:
    """Streams a metric's points page by page.

    Example:
        >>> stream = DatasourceStream(metric, "https://grafana/d/abc", api_key)
        >>> async with await stream.query(from_, to) as points:
        ...     batch = await points.pull(1000)
    """

    def __init__(
        self,
        metric: Metric,
        url: str,
        api_key: str,
        *,
        transport: Transport | None = None,
        settings: DataKitSettings | None = None,
    ) -> None:
        self.metric = metric
        self.url = url
        self.api_key = api_key
        self.grafana_url = get_grafana_url(url)
        self._transport = transport
        self._settings = settings or DataKitSettings()

    async def query(self, from_: float, to: float) -> PointStream:
        """Open a point stream over ``[from_, to]``.

        The range is validated immediately; pages are only requested as the
        returned stream is pulled.

        Raises:
            BadRange: If ``from_ > to``
        """
        validate_range(from_, to, datasource_type=self.metric.datasource.type, url=self.url)
        return PointStream(self._query(from_, to))

    async def _query(self, from_: float, to: float) -> AsyncIterator[TimeSeriesChunk]:
        datasource_type = self.metric.datasource.type
        owned = self._transport is None
        client = HTTPClient(timeout=self._settings.timeout) if owned else self._transport
        runner = GrafanaRunner(client, self.api_key, datasource_type)
        executor = ChunkExecutor(
            ChunkPolicy(page_size=self._settings.page_size), endpoint_id=datasource_type
        )
        pager = _MetricPager(self.metric, self.grafana_url, runner, from_, to)

        try:
            async for chunk in executor.iterate(pager):
                yield chunk
        finally:
            if owned:
                await client.close()
