"""Shared async HTTP client for outbound calls (reCAPTCHA siteverify)."""

from typing import Any, Mapping, Optional

import httpx


class HttpClient:
    """Thin async wrapper around httpx.AsyncClient with a per-service timeout.

    The underlying client is created lazily so a Lambda cold start that never
    reaches the network (preflight, bad input) does not open a pool.
    """

    def __init__(
        self,
        timeout: float = 5.0,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._timeout = timeout
        self._headers = dict(headers or {})
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout, headers=self._headers
            )
        return self._client

    async def post_form(
        self, url: str, data: Mapping[str, str], **kwargs: Any
    ) -> httpx.Response:
        """POST *data* as application/x-www-form-urlencoded."""
        return await self.client.post(url, data=dict(data), **kwargs)

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
