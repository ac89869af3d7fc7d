"""Plain dataclasses and type aliases shared across the loader. No logic."""

from dataclasses import dataclass, field
from typing import Any

from voting_data.errors import LoaderError

# Decoded JSON objects, passed through unchanged
Configuration = dict[str, Any]
MeetingDocument = dict[str, Any]

KNOWN_STATUSES = ("completed", "upcoming", "cancelled")
MEETING_FIELDS = ("date", "status", "attendance", "motions")
MOTION_FIELDS = ("title", "description", "votes", "result")


@dataclass
class MeetingOutcome:
    path: str
    document: MeetingDocument | None = None
    error: LoaderError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.document is not None


@dataclass
class PreloadResult:
    config: Configuration
    meetings: list[MeetingDocument] = field(default_factory=list)
    failures: list[MeetingOutcome] = field(default_factory=list)
