"""Time series containers produced by paginated queries."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

Row = tuple[float, ...]


@dataclass(frozen=True)
class TimeSeriesPoint:
    """A single row paired with the column layout of the chunk it came from."""

    columns: list[str]
    values: Row


@dataclass(frozen=True)
class TimeSeriesChunk:
    """One page of rows returned by a single backend round-trip.

    Attributes:
        columns: Column names, in row order (usually ``["timestamp", ...]``)
        values: Rows, each a tuple with one value per column
    """

    columns: list[str]
    values: list[Row]

    @property
    def row_count(self) -> int:
        return len(self.values)

    def points(self) -> Iterator[TimeSeriesPoint]:
        """Flatten the chunk into points sharing this chunk's columns."""
        for row in self.values:
            yield TimeSeriesPoint(columns=self.columns, values=row)

    @classmethod
    def from_results(cls, results: TimeSeriesChunk | Mapping[str, Any]) -> TimeSeriesChunk:
        """Normalize whatever a result extractor returned into a chunk."""
        if isinstance(results, TimeSeriesChunk):
            return results
        columns = list(results.get("columns") or [])
        values = [tuple(row) for row in results.get("values") or []]
        return cls(columns=columns, values=values)


@dataclass
class TimeSeriesResult:
    """Concatenation of every chunk of a non-streaming query."""

    columns: list[str] = field(default_factory=list)
    values: list[Row] = field(default_factory=list)

    def extend(self, chunk: TimeSeriesChunk) -> None:
        self.values.extend(chunk.values)
        self.columns = chunk.columns

    def __len__(self) -> int:
        return len(self.values)

    def to_dict(self) -> dict[str, Sequence[Any]]:
        return {"columns": list(self.columns), "values": list(self.values)}
