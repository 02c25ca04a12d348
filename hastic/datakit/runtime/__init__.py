"""Runtime: paging, request running and streaming."""

from .chunking import ChunkExecutor, ChunkPlan, ChunkPolicy, ChunkResult
from .rest import GrafanaRunner, classify_transport_error
from .stream import PointStream

__all__ = [
    "ChunkExecutor",
    "ChunkPlan",
    "ChunkPolicy",
    "ChunkResult",
    "GrafanaRunner",
    "PointStream",
    "classify_transport_error",
]
