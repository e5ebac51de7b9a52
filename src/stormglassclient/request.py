from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx


class Request:
    """Thin async HTTP transport used by the API clients.

    Error statuses are raised as ``httpx.HTTPStatusError`` so callers can tell
    a server-side failure (a response exists) from a request that never got an
    answer (connection, DNS, timeout).
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None, timeout: float = 30.0):
        # follow_redirects handles any 301/302 from the API
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)
        self._log = logging.getLogger(__name__)

    async def get(self, url: str, headers: Optional[Dict[str, str]] = None) -> httpx.Response:
        resp = await self._client.get(url, headers=headers)
        self._log.debug("GET %s -> %s", url, resp.status_code)
        resp.raise_for_status()
        return resp

    @staticmethod
    def is_response_error(err: Any) -> bool:
        """True when the remote service answered with an error status."""
        response = getattr(err, 'response', None)
        return response is not None and getattr(response, 'status_code', None) is not None

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> 'Request':
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
