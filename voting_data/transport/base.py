"""Abstract base for document transports."""

import json
from abc import ABC, abstractmethod
from typing import Any

from voting_data.errors import DecodeError


class Response(ABC):
    """Result of a single fetch."""

    @property
    @abstractmethod
    def ok(self) -> bool:
        """True when the fetch succeeded."""
        ...

    @property
    @abstractmethod
    def status_text(self) -> str:
        """Human-readable status description, e.g. 'Not Found'."""
        ...

    @abstractmethod
    async def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            DecodeError: If the body is not valid JSON.
        """
        ...


class BufferedResponse(Response):
    """Response whose body has already been read into memory."""

    def __init__(self, url: str, ok: bool, status_text: str, body: bytes = b"") -> None:
        self._url = url
        self._ok = ok
        self._status_text = status_text
        self._body = body

    @property
    def ok(self) -> bool:
        return self._ok

    @property
    def status_text(self) -> str:
        return self._status_text

    async def json(self) -> Any:
        try:
            return json.loads(self._body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
            raise DecodeError(self._url, str(exc)) from exc


class Transport(ABC):
    """Abstract base for all transports."""

    @abstractmethod
    async def fetch(self, url: str) -> Response:
        """Fetch a document by identifier.

        Non-success answers are reported through ``Response.ok``, not raised.
        """
        ...

    async def close(self) -> None:
        """Release any held resources. No-op by default."""

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
