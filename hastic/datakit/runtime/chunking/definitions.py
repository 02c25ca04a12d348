"""Chunking metadata definitions and policy structures.

This module defines the data structures used to describe how a query is
split into pages and what the paging produced.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...config import CHUNK_SIZE
from ...models import TimeSeriesResult


@dataclass(frozen=True)
class ChunkPolicy:
    """Paging policy for a query.

    Attributes:
        page_size: Rows requested per page. A page with fewer rows than this
            is taken as the last one.
    """

    page_size: int = CHUNK_SIZE

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError(f"ChunkPolicy page_size must be positive, got {self.page_size}")


@dataclass(frozen=True)
class ChunkPlan:
    """Plan for a single page.

    Attributes:
        offset: Rows already returned by previous pages
        limit: Rows requested for this page
        chunk_index: Zero-based index of this page
    """

    offset: int
    limit: int
    chunk_index: int = 0


@dataclass
class ChunkResult:
    """Result of chunked execution.

    Attributes:
        data: Aggregated rows from all pages
        chunks_used: Number of pages that were fetched
        total_points: Total number of rows aggregated
    """

    data: TimeSeriesResult
    chunks_used: int
    total_points: int = 0
