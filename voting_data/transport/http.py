"""HTTP transport using aiohttp, one session per transport."""

import logging
from urllib.parse import urljoin

import aiohttp

from voting_data.errors import TransportError
from voting_data.transport.base import BufferedResponse, Response, Transport

logger = logging.getLogger(__name__)


class HttpTransport(Transport):
    """Fetch documents relative to a base URL.

    The session is created lazily and closed by ``close()`` or on leaving an
    ``async with`` block. No retries are attempted.
    """

    def __init__(
        self,
        base_url: str,
        timeout_sec: float = 15.0,
        user_agent: str | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._timeout = aiohttp.ClientTimeout(total=timeout_sec)
        self._headers = {"User-Agent": user_agent or "voting-data-loader"}
        self._session = session
        self._owns_session = session is None

    def resolve(self, url: str) -> str:
        return urljoin(self._base_url, url)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout, headers=self._headers)
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            logger.debug("HTTP session closed")

    async def fetch(self, url: str) -> Response:
        target = self.resolve(url)
        session = await self._get_session()
        logger.debug("HTTP GET %s", target)
        try:
            async with session.get(target) as resp:
                body = await resp.read()
                status_text = resp.reason or str(resp.status)
                ok = 200 <= resp.status < 300
        except TimeoutError as exc:
            raise TransportError(url, "Request timed out") from exc
        except aiohttp.ClientError as exc:
            raise TransportError(url, f"Network error: {exc}") from exc

        logger.debug("HTTP GET %s -> %s (%d bytes)", target, status_text, len(body))
        return BufferedResponse(target, ok, status_text, body)
