"""Grafana endpoint derivation."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

# "/<subpath>/d/<uid>..." as found in dashboard links
_DASHBOARD_PATH = re.compile(r"^/*([^/]*)/d/")


def get_grafana_url(url: str) -> str:
    """Derive the Grafana API base from a dashboard link.

    ``https://host/org1/d/abc`` becomes ``https://host/org1`` and
    ``https://host/d/abc`` becomes ``https://host``. URLs that are not
    dashboard links are returned unchanged.
    """
    parsed = urlsplit(url)
    match = _DASHBOARD_PATH.match(parsed.path)
    if match is None:
        return url

    # origin never carries credentials
    host = parsed.netloc.rpartition("@")[2]
    origin = f"{parsed.scheme}://{host}"
    sub_path = match.group(1)
    if sub_path:
        return f"{origin}/{sub_path}"
    return origin


def join_url(base: str, path: str) -> str:
    """Append a relative query path to a Grafana base URL."""
    return f"{base.rstrip('/')}/{path.lstrip('/')}"
