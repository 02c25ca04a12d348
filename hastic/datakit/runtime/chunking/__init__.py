"""Paging layer for offset-based time series queries.

Architecture:
    The chunking layer consists of:
    - definitions.py: Paging structures (ChunkPolicy, ChunkPlan, ChunkResult)
    - planners.py: Offset planning and short-page termination
    - executors.py: Page fetching, either aggregated or one page at a time
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import ChunkPlan, ChunkPolicy, ChunkResult
from .executors import ChunkExecutor
from .planners import OffsetChunkPlanner

__all__ = [
    "ChunkPolicy",
    "ChunkPlan",
    "ChunkResult",
    "ChunkExecutor",
    "OffsetChunkPlanner",
]
