"""Structured logging for chunking operations.

This module provides telemetry hooks for paging, emitting structured logs
for observability. Handlers are left to the application.
"""

from __future__ import annotations

import logging

from .definitions import ChunkResult

logger = logging.getLogger(__name__)


def log_chunk_completed(
    *,
    endpoint_id: str,
    chunk_index: int,
    offset: int,
    rows: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single page.

    Args:
        endpoint_id: Query identifier (usually the datasource type)
        chunk_index: Zero-based index of the page
        offset: Row offset the page was requested at
        rows: Number of rows the page returned
        latency_ms: Round-trip latency in milliseconds (optional)
    """
    logger.debug(
        "chunk_completed",
        extra={
            "endpoint_id": endpoint_id,
            "chunk_index": chunk_index,
            "offset": offset,
            "rows": rows,
            "latency_ms": latency_ms,
        },
    )


def log_chunk_execution_complete(
    *,
    endpoint_id: str,
    result: ChunkResult,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of an aggregated query.

    Args:
        endpoint_id: Query identifier
        result: ChunkResult from execution
        total_latency_ms: Total latency in milliseconds (optional)
    """
    logger.info(
        "chunk_execution_complete",
        extra={
            "endpoint_id": endpoint_id,
            "chunks_used": result.chunks_used,
            "total_points": result.total_points,
            "total_latency_ms": total_latency_ms,
        },
    )


def log_chunk_error(
    *,
    endpoint_id: str,
    chunk_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page.

    Args:
        endpoint_id: Query identifier
        chunk_index: Zero-based index of the page that failed
        error_type: Error class name (e.g. "DatasourceUnavailable")
        error_message: Error message
    """
    logger.error(
        "chunk_error",
        extra={
            "endpoint_id": endpoint_id,
            "chunk_index": chunk_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
