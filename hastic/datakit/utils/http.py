"""HTTP client helper."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import aiohttp

from ..core.exceptions import TransportError
from ..models import HTTPResponse


class HTTPClient:
    """Async HTTP client wrapper implementing the ``Transport`` protocol.

    Non-2xx responses and connection failures are raised as
    ``TransportError`` so they can be classified by the runner.
    """

    def __init__(self, base_url: str | None = None, timeout: float = 30.0) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def request(
        self,
        *,
        url: str,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        **options: Any,
    ) -> HTTPResponse:
        """Execute a request.

        Args:
            url: Absolute URL, or a path relative to ``base_url``
            method: HTTP method
            headers: Request headers
            **options: Passed through to ``aiohttp.ClientSession.request``

        Returns:
            HTTPResponse with the decoded body

        Raises:
            TransportError: On connection failure, timeout or non-2xx status
        """
        if self.base_url and not url.startswith("http"):
            url = f"{self.base_url}{url}"

        try:
            async with self.session.request(
                method.upper(), url, headers=headers, **options
            ) as response:
                result = HTTPResponse(
                    status=response.status,
                    data=await self._read_body(response),
                    headers=dict(response.headers),
                )
        except aiohttp.ClientOSError as e:
            raise TransportError(str(e), errno=e.errno) from e
        except aiohttp.ClientError as e:
            raise TransportError(str(e)) from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request to {url} timed out") from e

        if result.status >= 400:
            raise TransportError(
                f"Request failed with status code {result.status}", response=result
            )
        return result

    @staticmethod
    async def _read_body(response: aiohttp.ClientResponse) -> Any:
        text = await response.text()
        if not text:
            return None
        try:
            return json.loads(text)
        except ValueError:
            return text

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
