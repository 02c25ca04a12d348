"""Stub Grafana collaborators shared by tests."""

from __future__ import annotations

from typing import Any

from hastic.datakit.models import Datasource, HTTPResponse, Metric, MetricRequest

COLUMNS = ["timestamp", "value"]


def make_rows(offset: int, count: int) -> list[list[float]]:
    return [[offset + i, (offset + i) * 0.5] for i in range(count)]


class StubMetricQuery:
    """Query builder that encodes paging in the request params."""

    def get_query(self, from_: float, to: float, limit: int, offset: int) -> MetricRequest:
        return MetricRequest(
            url="api/datasources/proxy/1/query",
            method="GET",
            headers={"X-Query": "stub"},
            schema={"params": {"from": from_, "to": to, "limit": limit, "offset": offset}},
        )

    def get_results(self, response: HTTPResponse) -> dict[str, Any]:
        return response.data


class PagedTransport:
    """Transport serving pages of the given sizes, one per request."""

    def __init__(self, page_sizes: list[int]) -> None:
        self.page_sizes = page_sizes
        self.calls: list[dict[str, Any]] = []

    async def request(self, *, url, method, headers, **options) -> HTTPResponse:
        self.calls.append({"url": url, "method": method, "headers": headers, **options})
        index = len(self.calls) - 1
        offset = options["params"]["offset"]
        count = self.page_sizes[index] if index < len(self.page_sizes) else 0
        return HTTPResponse(
            status=200,
            data={"columns": COLUMNS, "values": make_rows(offset, count)},
            headers={"Content-Type": "application/json"},
        )


def make_metric(datasource_type: str = "influxdb") -> Metric:
    return Metric(datasource=Datasource(type=datasource_type), metric_query=StubMetricQuery())
