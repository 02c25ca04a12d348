"""Query range validation."""

from __future__ import annotations

import logging

from .exceptions import BadRange

logger = logging.getLogger(__name__)


def validate_range(
    from_: float,
    to: float,
    *,
    datasource_type: str | None = None,
    url: str | None = None,
) -> None:
    """Reject ranges that cannot be queried.

    Args:
        from_: Range start (epoch milliseconds)
        to: Range end (epoch milliseconds)
        datasource_type: Datasource type attached to the error
        url: Query URL attached to the error

    Raises:
        BadRange: If ``from_ > to``
    """
    if from_ > to:
        raise BadRange(
            f"Data-kit got wrong range: from {from_} > to {to}",
            datasource_type,
            url,
        )

    if from_ == to:
        logger.warning(
            "Data-kit got from === to",
            extra={"from": from_, "to": to, "datasource_type": datasource_type},
        )
