"""Chunk execution logic for fetching and aggregating pages.

This module provides the ChunkExecutor class that walks a query page by
page, either merging pages into one result or yielding them one at a time.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from time import perf_counter

from ...models import TimeSeriesChunk, TimeSeriesResult
from .definitions import ChunkPlan, ChunkPolicy, ChunkResult
from .planners import OffsetChunkPlanner
from .telemetry import log_chunk_completed, log_chunk_error, log_chunk_execution_complete

FetchChunk = Callable[[ChunkPlan], Awaitable[TimeSeriesChunk]]


class ChunkExecutor:
    """Executes paged queries.

    Pages are fetched strictly one after another, since each page's offset
    depends on the rows returned before it.
    """

    def __init__(self, policy: ChunkPolicy | None = None, *, endpoint_id: str = "unknown") -> None:
        """Initialize chunk executor.

        Args:
            policy: Paging policy (defaults to ``ChunkPolicy()``)
            endpoint_id: Identifier used in telemetry
        """
        self._policy = policy or ChunkPolicy()
        self._planner = OffsetChunkPlanner(self._policy)
        self._endpoint_id = endpoint_id

    @property
    def policy(self) -> ChunkPolicy:
        return self._policy

    async def iterate(self, fetch_chunk: FetchChunk) -> AsyncIterator[TimeSeriesChunk]:
        """Yield pages as they arrive.

        The next page is only requested once the consumer resumes the
        generator, so at most one page is in flight.

        Args:
            fetch_chunk: Async function that takes a ChunkPlan and returns a page
        """
        plan: ChunkPlan | None = self._planner.first()
        while plan is not None:
            chunk = await self._fetch(plan, fetch_chunk)
            yield chunk
            plan = self._planner.next(plan, chunk)

    async def execute(self, fetch_chunk: FetchChunk) -> ChunkResult:
        """Fetch every page and concatenate them.

        Args:
            fetch_chunk: Async function that takes a ChunkPlan and returns a page

        Returns:
            ChunkResult with the aggregated rows

        Raises:
            DataKitError: From any page; rows gathered so far are discarded
        """
        start = perf_counter()
        data = TimeSeriesResult()
        chunks_used = 0

        async for chunk in self.iterate(fetch_chunk):
            data.extend(chunk)
            chunks_used += 1

        result = ChunkResult(data=data, chunks_used=chunks_used, total_points=len(data))
        log_chunk_execution_complete(
            endpoint_id=self._endpoint_id,
            result=result,
            total_latency_ms=(perf_counter() - start) * 1000.0,
        )
        return result

    async def _fetch(self, plan: ChunkPlan, fetch_chunk: FetchChunk) -> TimeSeriesChunk:
        chunk_start = perf_counter()
        try:
            chunk = await fetch_chunk(plan)
        except Exception as e:
            log_chunk_error(
                endpoint_id=self._endpoint_id,
                chunk_index=plan.chunk_index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        log_chunk_completed(
            endpoint_id=self._endpoint_id,
            chunk_index=plan.chunk_index,
            offset=plan.offset,
            rows=chunk.row_count,
            latency_ms=(perf_counter() - chunk_start) * 1000.0,
        )
        return chunk
