"""Hastic DataKit - paged time series queries through Grafana datasources."""

from .api import DatasourceStream, query_by_metric
from .config import CHUNK_SIZE, DataKitSettings
from .core import (
    ERROR_CLASSES,
    BadRange,
    DataKitError,
    DatasourceUnavailable,
    ErrorKind,
    GrafanaUnavailable,
    InternalTransportError,
    MetricQuery,
    Transport,
    TransportError,
    Unauthorized,
    validate_range,
)
from .models import (
    Datasource,
    HTTPResponse,
    Metric,
    MetricRequest,
    TimeSeriesChunk,
    TimeSeriesPoint,
    TimeSeriesResult,
)
from .runtime import PointStream
from .utils import HTTPClient, get_grafana_url

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "query_by_metric",
    "DatasourceStream",
    "PointStream",
    # Settings
    "CHUNK_SIZE",
    "DataKitSettings",
    # Contracts
    "MetricQuery",
    "Transport",
    "HTTPClient",
    # Models
    "Datasource",
    "Metric",
    "MetricRequest",
    "HTTPResponse",
    "TimeSeriesChunk",
    "TimeSeriesPoint",
    "TimeSeriesResult",
    # Exceptions
    "ErrorKind",
    "ERROR_CLASSES",
    "DataKitError",
    "BadRange",
    "GrafanaUnavailable",
    "Unauthorized",
    "DatasourceUnavailable",
    "InternalTransportError",
    "TransportError",
    # Helpers
    "get_grafana_url",
    "validate_range",
]
