"""Offset-based page planning."""

from __future__ import annotations

from ...models import TimeSeriesChunk
from .definitions import ChunkPlan, ChunkPolicy


class OffsetChunkPlanner:
    """Plans successive pages by row offset.

    The backend has no "has more" flag: a page shorter than the requested
    limit ends the sequence. A backend whose last page is exactly full costs
    one extra (empty) round-trip.
    """

    def __init__(self, policy: ChunkPolicy) -> None:
        self._policy = policy

    def first(self) -> ChunkPlan:
        return ChunkPlan(offset=0, limit=self._policy.page_size, chunk_index=0)

    def next(self, plan: ChunkPlan, chunk: TimeSeriesChunk) -> ChunkPlan | None:
        """Plan the page after ``plan``, or ``None`` if ``chunk`` was the last.

        Args:
            plan: Plan that produced ``chunk``
            chunk: Page returned for ``plan``

        Returns:
            Next plan, or None on a short page
        """
        if chunk.row_count < plan.limit:
            return None
        return ChunkPlan(
            offset=plan.offset + chunk.row_count,
            limit=self._policy.page_size,
            chunk_index=plan.chunk_index + 1,
        )
