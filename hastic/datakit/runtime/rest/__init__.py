"""REST runtime abstractions."""

from .classifier import classify_transport_error
from .runner import GrafanaRunner

__all__ = [
    "GrafanaRunner",
    "classify_transport_error",
]
