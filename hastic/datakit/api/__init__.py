"""High-level query entry points."""

from .data_api import DatasourceStream, query_by_metric

__all__ = [
    "DatasourceStream",
    "query_by_metric",
]
