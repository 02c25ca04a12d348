"""Utility functions."""

from .http import HTTPClient
from .urls import get_grafana_url, join_url

__all__ = ["HTTPClient", "get_grafana_url", "join_url"]
