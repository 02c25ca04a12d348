"""Pull-based point stream over a paged query.

Architecture:
    A query produces whole pages (up to ``page_size`` rows each) while a
    consumer asks for arbitrary numbers of points. PointStream bridges the
    two with an explicit buffer and a refill-on-demand rule:

    - a page is requested only when the buffer cannot satisfy a pull
    - pulls are served from the front of the buffer, in backend order
    - between pulls the buffer holds less than one page of points

    The only suspension point is awaiting the next page from the producer.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import AsyncIterator

from ..models import TimeSeriesChunk, TimeSeriesPoint

logger = logging.getLogger(__name__)


class PointStream:
    """Backpressure-aware stream of points for a single consumer."""

    def __init__(self, chunks: AsyncIterator[TimeSeriesChunk]) -> None:
        """Initialize the stream.

        Args:
            chunks: Page producer, resumed only when the buffer runs short
        """
        self._chunks = chunks
        self._buffer: deque[TimeSeriesPoint] = deque()
        self._producer_done = False
        self._error: BaseException | None = None

    @property
    def buffered(self) -> int:
        """Number of points fetched but not yet pulled."""
        return len(self._buffer)

    @property
    def exhausted(self) -> bool:
        """True once every point has been delivered."""
        return self._producer_done and not self._buffer

    async def pull(self, count: int) -> list[TimeSeriesPoint]:
        """Take up to ``count`` points from the stream.

        Args:
            count: Maximum number of points to return

        Returns:
            Points in backend order; an empty list means end of stream

        Raises:
            ValueError: If count is not positive
            DataKitError: If fetching a page failed. The stream is then
                terminated and every later pull raises the same error.
        """
        if count <= 0:
            raise ValueError(f"pull count must be positive, got {count}")
        if self._error is not None:
            raise self._error

        while len(self._buffer) < count and not self._producer_done:
            try:
                chunk = await anext(self._chunks)
            except StopAsyncIteration:
                self._producer_done = True
                break
            except Exception as e:
                self._fail(e)
                raise
            self._buffer.extend(chunk.points())

        size = min(count, len(self._buffer))
        return [self._buffer.popleft() for _ in range(size)]

    def _fail(self, error: BaseException) -> None:
        logger.error(
            "stream_terminated",
            extra={"error_type": type(error).__name__, "error_message": str(error)},
        )
        self._error = error
        self._producer_done = True
        self._buffer.clear()

    async def aclose(self) -> None:
        """Stop the stream and release the page producer."""
        self._producer_done = True
        self._buffer.clear()
        aclose = getattr(self._chunks, "aclose", None)
        if aclose is not None:
            await aclose()

    def __aiter__(self) -> AsyncIterator[TimeSeriesPoint]:
        return self._iter_points()

    async def _iter_points(self) -> AsyncIterator[TimeSeriesPoint]:
        while True:
            points = await self.pull(1)
            if not points:
                return
            yield points[0]

    async def __aenter__(self) -> PointStream:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
