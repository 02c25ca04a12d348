"""Library settings.

Only paging and transport tuning live here. Credentials and Grafana URLs are
always passed explicitly to the query functions.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

# Rows requested per page; a shorter page ends the pagination
CHUNK_SIZE = 50_000

# Total request timeout for the default HTTP transport (seconds)
DEFAULT_TIMEOUT = 30.0

ENV_PAGE_SIZE = "DATAKIT_PAGE_SIZE"
ENV_TIMEOUT = "DATAKIT_TIMEOUT"


class DataKitSettings(BaseModel):
    """Read-only settings shared by every query."""

    page_size: int = Field(default=CHUNK_SIZE, gt=0)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DataKitSettings:
        """Build settings from ``DATAKIT_*`` environment variables.

        Unset variables fall back to the defaults.
        """
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        if env.get(ENV_PAGE_SIZE):
            values["page_size"] = env[ENV_PAGE_SIZE]
        if env.get(ENV_TIMEOUT):
            values["timeout"] = env[ENV_TIMEOUT]
        return cls.model_validate(values)
