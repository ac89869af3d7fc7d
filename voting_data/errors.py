"""Error taxonomy for the meeting data loader."""


class LoaderError(Exception):
    """Base class for every failure raised by the loader."""


class TransportError(LoaderError):
    """Raised when a fetch does not answer with a success status."""

    def __init__(self, path: str, status_text: str, message: str | None = None) -> None:
        self.path = path
        self.status_text = status_text
        super().__init__(message or f"Failed to load {path}: {status_text}")


class DecodeError(LoaderError):
    """Raised when a response body is not valid JSON."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed JSON in {path}: {reason}")


class ValidationError(LoaderError):
    """Raised when a meeting document or one of its motions lacks a required field."""

    def __init__(self, source: str, field: str | None, motion_index: int | None = None,
                 message: str | None = None) -> None:
        self.source = source
        self.field = field
        self.motion_index = motion_index
        if message is None:
            if motion_index is None:
                message = f"Missing required field '{field}' in {source}"
            else:
                message = f"Motion {motion_index} missing field '{field}' in {source}"
        super().__init__(message)


class StateError(LoaderError):
    """Raised when an operation runs before its precondition holds."""
