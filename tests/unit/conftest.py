"""Shared fixtures for DataKit unit tests."""

import pytest

from hastic.datakit.models import Metric
from tests.helpers.grafana import make_metric


@pytest.fixture
def metric() -> Metric:
    return make_metric()
