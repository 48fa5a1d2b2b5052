"""Async HTTP client for reading published CDN objects."""

import httpx
from loguru import logger

from settings import CDN_TIMEOUT


class CdnClient:
    """Thin httpx wrapper; the connection pool is opened lazily and reused."""

    def __init__(self, timeout: float = CDN_TIMEOUT, transport: httpx.AsyncBaseTransport | None = None):
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._request_count = 0

    async def __aenter__(self):
        return self

    async def __aexit__(self, *_):
        await self.aclose()

    @property
    def request_count(self) -> int:
        return self._request_count

    def _http(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                limits=httpx.Limits(max_connections=20, max_keepalive_connections=5),
                follow_redirects=True,
            )
        return self._client

    async def fetch(self, url: str) -> httpx.Response:
        """GET a URL; the caller decides what a non-2xx status means."""
        self._request_count += 1
        resp = await self._http().get(url)
        logger.debug("CDN GET {} -> {}", url, resp.status_code)
        return resp

    async def aclose(self) -> None:
        if self._client is not None:
            logger.debug("Total CDN requests: {}", self._request_count)
            await self._client.aclose()
            self._client = None
