"""Load, validate, cache and aggregate council meeting records."""

from voting_data.errors import DecodeError, LoaderError, StateError, TransportError, ValidationError
from voting_data.loader import MeetingLoader

__all__ = [
    "DecodeError",
    "LoaderError",
    "MeetingLoader",
    "StateError",
    "TransportError",
    "ValidationError",
]
