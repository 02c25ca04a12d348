"""Precise unit tests for PointStream.

Tests focus on refill-on-demand, ordering, the buffer bound and failures.
"""

from __future__ import annotations

import pytest

from hastic.datakit.core import GrafanaUnavailable
from hastic.datakit.models import TimeSeriesChunk
from hastic.datakit.runtime import PointStream

PAGE_SIZE = 4


class CountingProducer:
    """Async iterator of pages that counts how often it was resumed."""

    def __init__(self, sizes: list[int], fail_at: int | None = None) -> None:
        self.sizes = sizes
        self.fail_at = fail_at
        self.resumed = 0
        self.closed = False
        self._offset = 0

    def __aiter__(self):
        return self

    async def __anext__(self) -> TimeSeriesChunk:
        if self.resumed == self.fail_at:
            self.resumed += 1
            raise GrafanaUnavailable("connect ECONNREFUSED")
        if self.resumed >= len(self.sizes):
            raise StopAsyncIteration
        size = self.sizes[self.resumed]
        self.resumed += 1
        values = [(float(self._offset + i),) for i in range(size)]
        self._offset += size
        return TimeSeriesChunk(columns=[f"page{self.resumed}"], values=values)

    async def aclose(self) -> None:
        self.closed = True


class TestPointStreamPull:
    """Test pull() semantics."""

    @pytest.mark.asyncio
    async def test_pull_refills_only_when_short(self):
        producer = CountingProducer([PAGE_SIZE, PAGE_SIZE, 1])
        stream = PointStream(producer)

        first = await stream.pull(3)
        assert [p.values[0] for p in first] == [0.0, 1.0, 2.0]
        assert producer.resumed == 1
        assert stream.buffered == 1

        second = await stream.pull(1)
        assert [p.values[0] for p in second] == [3.0]
        assert producer.resumed == 1

        third = await stream.pull(2)
        assert [p.values[0] for p in third] == [4.0, 5.0]
        assert producer.resumed == 2

    @pytest.mark.asyncio
    async def test_points_carry_their_page_columns(self):
        stream = PointStream(CountingProducer([2, 1]))
        points = await stream.pull(3)
        assert [p.columns for p in points] == [["page1"], ["page1"], ["page2"]]

    @pytest.mark.asyncio
    async def test_large_pull_spans_pages(self):
        producer = CountingProducer([PAGE_SIZE, PAGE_SIZE, 2])
        stream = PointStream(producer)

        points = await stream.pull(9)
        assert [p.values[0] for p in points] == [float(i) for i in range(9)]
        assert stream.buffered == 1

    @pytest.mark.asyncio
    async def test_end_of_stream(self):
        stream = PointStream(CountingProducer([PAGE_SIZE, 1]))

        points = await stream.pull(100)
        assert len(points) == PAGE_SIZE + 1
        assert stream.exhausted

        assert await stream.pull(1) == []
        assert await stream.pull(5) == []

    @pytest.mark.asyncio
    async def test_buffer_stays_below_one_page_between_pulls(self):
        stream = PointStream(CountingProducer([PAGE_SIZE] * 5 + [3]))

        for count in [1, 3, 5, 2, 7, 1, 4]:
            await stream.pull(count)
            assert stream.buffered < PAGE_SIZE

    @pytest.mark.asyncio
    @pytest.mark.parametrize("count", [0, -3])
    async def test_rejects_non_positive_count(self, count):
        stream = PointStream(CountingProducer([1]))
        with pytest.raises(ValueError):
            await stream.pull(count)


class TestPointStreamFailure:
    """Test error propagation."""

    @pytest.mark.asyncio
    async def test_failure_terminates_stream(self):
        producer = CountingProducer([PAGE_SIZE, PAGE_SIZE], fail_at=1)
        stream = PointStream(producer)

        assert len(await stream.pull(PAGE_SIZE)) == PAGE_SIZE

        with pytest.raises(GrafanaUnavailable):
            await stream.pull(1)

        with pytest.raises(GrafanaUnavailable):
            await stream.pull(1)
        assert producer.resumed == 2
        assert stream.buffered == 0


class TestPointStreamIteration:
    """Test async iteration and closing."""

    @pytest.mark.asyncio
    async def test_async_for_yields_every_point_in_order(self):
        stream = PointStream(CountingProducer([PAGE_SIZE, PAGE_SIZE, 2]))
        values = [point.values[0] async for point in stream]
        assert values == [float(i) for i in range(10)]

    @pytest.mark.asyncio
    async def test_context_manager_closes_producer(self):
        producer = CountingProducer([PAGE_SIZE, PAGE_SIZE])
        async with PointStream(producer) as stream:
            await stream.pull(1)

        assert producer.closed
        assert stream.exhausted
        assert await stream.pull(1) == []
