"""Structural and cross-reference checks for meeting documents."""

from collections.abc import Mapping, Sized
from typing import Any

from voting_data.errors import ValidationError
from voting_data.models import KNOWN_STATUSES, MEETING_FIELDS, MOTION_FIELDS, Configuration


def _expected_vote_count(config: Configuration | None) -> int | None:
    """Council size from the loaded configuration, or None when unknown."""
    if not isinstance(config, Mapping):
        return None
    members = config.get("councilMembers")
    if not isinstance(members, Sized) or isinstance(members, (str, bytes)):
        return None
    return len(members)


def _check_motion(motion: Any, index: int, source_label: str, expected_votes: int | None) -> str | None:
    """Check one motion. Returns a warning string or None; raises on a missing field."""
    if not isinstance(motion, Mapping):
        raise ValidationError(
            source_label, None, index,
            message=f"Motion {index} is not an object in {source_label}",
        )

    for field in MOTION_FIELDS:
        if field not in motion:
            raise ValidationError(source_label, field, index)

    if expected_votes is None:
        return None
    votes = motion["votes"]
    vote_count = len(votes) if isinstance(votes, (list, tuple)) else None
    if vote_count != expected_votes:
        return f"Vote count mismatch for motion \"{motion['title']}\" in {source_label}"
    return None


def validate_meeting(
    document: Any,
    source_label: str,
    config: Configuration | None = None,
) -> list[str]:
    """Validate a decoded meeting document.

    Required fields are checked in order and the first missing one raises.
    For completed meetings every motion is checked in order, again stopping
    at the first missing field. Unknown statuses and vote counts that differ
    from the council size are returned as warnings.

    Args:
        document: Decoded JSON value.
        source_label: Identifier used in messages, normally the file path.
        config: Currently loaded configuration, if any.

    Returns:
        List of warning messages (empty when the document is clean).

    Raises:
        ValidationError: On the first missing required field.
    """
    if not isinstance(document, Mapping):
        raise ValidationError(
            source_label, None,
            message=f"Meeting document in {source_label} is not an object",
        )

    for field in MEETING_FIELDS:
        if field not in document:
            raise ValidationError(source_label, field)

    warnings: list[str] = []

    status = document["status"]
    if status not in KNOWN_STATUSES:
        warnings.append(f"Unexpected status '{status}' in {source_label}")

    motions = document["motions"]
    if status == "completed" and isinstance(motions, list) and motions:
        expected_votes = _expected_vote_count(config)
        for index, motion in enumerate(motions):
            warning = _check_motion(motion, index, source_label, expected_votes)
            if warning:
                warnings.append(warning)

    return warnings
