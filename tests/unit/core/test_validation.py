"""Unit tests for range validation."""

import logging

import pytest

from hastic.datakit.core import BadRange, ErrorKind, validate_range


class TestValidateRange:
    """Test validate_range."""

    def test_valid_range_passes(self, caplog):
        with caplog.at_level(logging.WARNING):
            validate_range(1_000, 2_000)
        assert caplog.records == []

    def test_inverted_range_raises_with_context(self):
        with pytest.raises(BadRange) as exc_info:
            validate_range(2_000, 1_000, datasource_type="influxdb", url="https://grafana")

        error = exc_info.value
        assert error.kind is ErrorKind.INVALID_RANGE
        assert error.datasource_type == "influxdb"
        assert error.datasource_url == "https://grafana"
        assert "from 2000 > to 1000" in str(error)

    def test_empty_range_only_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="hastic.datakit.core.validation"):
            validate_range(1_000, 1_000)

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.WARNING
        assert "from === to" in caplog.records[0].getMessage()
