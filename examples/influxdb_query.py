#!/usr/bin/env python3
"""Fetch or stream an InfluxDB series through a Grafana datasource proxy."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import time

from hastic.datakit import (
    DataKitSettings,
    Datasource,
    DatasourceStream,
    HTTPResponse,
    Metric,
    MetricRequest,
    query_by_metric,
)


class InfluxQuery:
    """InfluxQL paging via LIMIT/OFFSET."""

    def __init__(self, datasource_id: int, database: str, select: str) -> None:
        self.datasource_id = datasource_id
        self.database = database
        self.select = select

    def get_query(self, from_: float, to: float, limit: int, offset: int) -> MetricRequest:
        q = (
            f"{self.select} WHERE time >= {int(from_)}ms AND time <= {int(to)}ms "
            f"LIMIT {limit} OFFSET {offset}"
        )
        return MetricRequest(
            url=f"api/datasources/proxy/{self.datasource_id}/query",
            schema={"params": {"db": self.database, "q": q, "epoch": "ms"}},
        )

    def get_results(self, response: HTTPResponse) -> dict:
        series = response.data["results"][0].get("series") or [{}]
        return {"columns": series[0].get("columns", []), "values": series[0].get("values", [])}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Query an InfluxDB series through Grafana")
    p.add_argument("url", help="Grafana URL or dashboard link")
    p.add_argument("datasource_id", type=int)
    p.add_argument("database")
    p.add_argument("select", help='e.g. \'SELECT "value" FROM "cpu"\'')
    p.add_argument("--hours", type=float, default=1.0)
    p.add_argument("--stream", action="store_true", help="pull points in batches of 1000")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)
    api_key = os.environ["GRAFANA_API_KEY"]
    settings = DataKitSettings.from_env()

    metric = Metric(
        datasource=Datasource(type="influxdb"),
        metric_query=InfluxQuery(args.datasource_id, args.database, args.select),
    )
    to = time.time() * 1000
    from_ = to - args.hours * 3600 * 1000

    if not args.stream:
        result = await query_by_metric(metric, args.url, from_, to, api_key, settings=settings)
        print(f"Columns : {result.columns}")
        print(f"Rows    : {len(result.values)}")
        return

    stream = DatasourceStream(metric, args.url, api_key, settings=settings)
    total = 0
    async with await stream.query(from_, to) as points:
        while batch := await points.pull(1000):
            total += len(batch)
            print(f"{total:>10} points, last: {batch[-1].values}")


if __name__ == "__main__":
    asyncio.run(main())
