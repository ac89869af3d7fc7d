"""Date parsing and most-recent-first ordering of meetings."""

import logging
from datetime import datetime, timezone
from typing import Any

from dateutil import parser as dtparser

from voting_data.models import MeetingDocument

logger = logging.getLogger(__name__)

# Fills fields a loose date omits, e.g. the day in "February 2024"
_DEFAULT_DATE = datetime(1970, 1, 1)


def parse_meeting_date(value: Any) -> datetime | None:
    """Parse a meeting ``date`` value into an aware datetime.

    Naive values are taken as UTC so they compare against aware ones. Parts
    missing from loose dates come from a fixed 1970-01-01 anchor.
    Returns None for non-strings and strings dateutil cannot parse.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = dtparser.isoparse(value)
    except ValueError:
        try:
            parsed = dtparser.parse(value, default=_DEFAULT_DATE)
        except (ValueError, OverflowError):
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _sort_key(position: int, meeting: MeetingDocument) -> tuple[int, float, int]:
    parsed = parse_meeting_date(meeting.get("date"))
    if parsed is None:
        # Unparseable dates go last, in input order
        return (1, 0.0, position)
    return (0, -parsed.timestamp(), position)


def sort_meetings(meetings: list[MeetingDocument]) -> list[MeetingDocument]:
    """Return meetings newest first.

    Equal dates keep their input order through the explicit position
    component of the key. Meetings with unparseable dates follow every
    dated meeting.
    """
    keyed = [(_sort_key(i, m), m) for i, m in enumerate(meetings)]
    undated = sum(1 for key, _ in keyed if key[0] == 1)
    if undated:
        logger.debug("%d meeting(s) with unparseable dates sorted last", undated)
    keyed.sort(key=lambda pair: pair[0])
    return [m for _, m in keyed]
