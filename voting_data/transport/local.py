"""Transport that reads documents from a directory on disk."""

import asyncio
import logging
from pathlib import Path

from voting_data.transport.base import BufferedResponse, Response, Transport

logger = logging.getLogger(__name__)


class FileTransport(Transport):
    """Resolve identifiers against a base directory.

    A missing file answers ``ok=False`` with status text "Not Found", the way
    a static file server would.
    """

    def __init__(self, base_dir: Path | str = ".") -> None:
        self._base_dir = Path(base_dir)

    def resolve(self, url: str) -> Path:
        return self._base_dir / url

    async def fetch(self, url: str) -> Response:
        path = self.resolve(url)
        try:
            body = await asyncio.to_thread(path.read_bytes)
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            logger.debug("File not found: %s", path)
            return BufferedResponse(str(path), False, "Not Found")
        except PermissionError:
            return BufferedResponse(str(path), False, "Forbidden")
        except OSError as exc:
            logger.debug("Cannot read %s: %s", path, exc)
            return BufferedResponse(str(path), False, f"Unreadable: {exc.strerror or exc}")
        except ValueError as exc:
            # e.g. embedded NUL in the identifier
            return BufferedResponse(str(path), False, f"Bad Request: {exc}")
        return BufferedResponse(str(path), True, "OK", body)
