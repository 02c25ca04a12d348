"""Metric and datasource descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from ..core.contracts import MetricQuery


class Datasource(BaseModel):
    """Grafana datasource descriptor.

    Only ``type`` is used by the library (as error context); any other
    fields from the Grafana API are kept as extras.
    """

    type: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True, extra="allow")


@dataclass(frozen=True)
class Metric:
    """A datasource paired with the query builder for one of its metrics."""

    datasource: Datasource
    metric_query: MetricQuery
