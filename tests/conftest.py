"""Shared pytest fixtures."""

import asyncio
import json
from typing import Any

import pytest

from voting_data.loader import MeetingLoader
from voting_data.transport.base import BufferedResponse, Response, Transport


class MockTransport(Transport):
    """Test double Transport serving documents from a dict.

    Values are JSON-serialisable payloads, raw ``bytes`` bodies, or
    ``(ok, status_text)`` tuples for non-success answers. Unknown URLs answer
    404. Every fetched URL is appended to ``calls``.
    """

    def __init__(self, documents: dict[str, Any] | None = None, delay: float = 0.0) -> None:
        self.documents: dict[str, Any] = dict(documents or {})
        self.calls: list[str] = []
        self.delay = delay
        self.closed = False

    async def fetch(self, url: str) -> Response:
        self.calls.append(url)
        if self.delay:
            await asyncio.sleep(self.delay)
        if url not in self.documents:
            return BufferedResponse(url, False, "Not Found")
        value = self.documents[url]
        if isinstance(value, tuple):
            ok, status_text = value
            return BufferedResponse(url, ok, status_text)
        if isinstance(value, bytes):
            return BufferedResponse(url, True, "OK", value)
        return BufferedResponse(url, True, "OK", json.dumps(value).encode("utf-8"))

    async def close(self) -> None:
        self.closed = True


def make_motion(title: str = "Approve minutes", votes: list[str] | None = None) -> dict:
    return {
        "title": title,
        "description": f"{title} as presented",
        "votes": votes if votes is not None else ["yes", "yes", "no"],
        "result": "passed",
    }


def make_meeting(date: str = "2024-01-08", status: str = "completed", motions: list | None = None) -> dict:
    return {
        "date": date,
        "status": status,
        "attendance": {"present": ["Mayor", "Post 1", "Post 2"]},
        "motions": motions if motions is not None else [make_motion()],
    }


@pytest.fixture
def sample_config() -> dict:
    return {
        "city": "Dunwoody",
        "councilMembers": ["Mayor", "Post 1", "Post 2"],
        "meetingFiles": ["meetings/a.json", "meetings/b.json", "meetings/c.json"],
    }


@pytest.fixture
def sample_documents(sample_config: dict) -> dict[str, Any]:
    return {
        "config.json": sample_config,
        "meetings/a.json": make_meeting("2024-01-08"),
        "meetings/b.json": make_meeting("2024-02-12"),
        "meetings/c.json": make_meeting("2024-03-11", status="upcoming", motions=[]),
    }


@pytest.fixture
def mock_transport(sample_documents: dict[str, Any]) -> MockTransport:
    return MockTransport(sample_documents)


@pytest.fixture
def loader(mock_transport: MockTransport) -> MeetingLoader:
    return MeetingLoader(mock_transport)
