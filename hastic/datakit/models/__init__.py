"""Data models for time series queries.

Model Categories:
    - Series: TimeSeriesChunk, TimeSeriesPoint, TimeSeriesResult
    - Requests: MetricRequest, HTTPResponse
    - Descriptors: Datasource, Metric
"""

from .metric import Datasource, Metric
from .request import HTTPResponse, MetricRequest, as_metric_request
from .series import Row, TimeSeriesChunk, TimeSeriesPoint, TimeSeriesResult

__all__ = [
    "Datasource",
    "HTTPResponse",
    "Metric",
    "MetricRequest",
    "Row",
    "TimeSeriesChunk",
    "TimeSeriesPoint",
    "TimeSeriesResult",
    "as_metric_request",
]
