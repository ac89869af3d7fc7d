"""Meeting loader: configuration store, meeting cache, concurrent aggregation."""

import asyncio
import logging
from typing import Any

from voting_data.errors import DecodeError, LoaderError, StateError, TransportError
from voting_data.models import Configuration, MeetingDocument, MeetingOutcome, PreloadResult
from voting_data.ordering import sort_meetings
from voting_data.transport.base import Response, Transport
from voting_data.validator import validate_meeting

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.json"


async def _decode(response: Response, path: str) -> Any:
    """Decode a response body, normalising decode failures to DecodeError."""
    try:
        return await response.json()
    except DecodeError:
        raise
    except ValueError as exc:
        raise DecodeError(path, str(exc)) from exc


class MeetingLoader:
    """Loads the configuration and meeting files through a transport.

    Each instance owns its configuration and cache. Concurrent loads of the
    same uncached path are not deduplicated: both fetch and the later store
    wins.
    """

    def __init__(self, transport: Transport, default_config_path: str = DEFAULT_CONFIG_PATH) -> None:
        self._transport = transport
        self._default_config_path = default_config_path
        self._config: Configuration | None = None
        self._cache: dict[str, MeetingDocument] = {}

    # --- Config store ---

    async def load_config(self, path: str | None = None) -> Configuration:
        """Fetch and store the configuration document, replacing any previous one.

        Raises:
            TransportError: If the fetch is not successful.
            DecodeError: If the body is not valid JSON.
        """
        path = path or self._default_config_path
        try:
            response = await self._transport.fetch(path)
            if not response.ok:
                raise TransportError(
                    path, response.status_text,
                    message=f"Failed to load config: {response.status_text}",
                )
            self._config = await _decode(response, path)
        except LoaderError as exc:
            logger.error("Error loading configuration %s: %s", path, exc)
            raise
        logger.debug("Configuration loaded from %s", path)
        return self._config

    def get_config(self) -> Configuration | None:
        return self._config

    # --- Meeting cache ---

    async def load_meeting_file(self, path: str) -> MeetingDocument:
        """Load, validate and cache one meeting file.

        A cached path is returned as-is without fetching. Documents that fail
        validation are not cached, so a later call fetches again.

        Raises:
            TransportError: If the fetch is not successful.
            DecodeError: If the body is not valid JSON.
            ValidationError: If a required field is missing.
        """
        if path in self._cache:
            return self._cache[path]

        try:
            response = await self._transport.fetch(path)
            if not response.ok:
                raise TransportError(
                    path, response.status_text,
                    message=f"Failed to load meeting file {path}: {response.status_text}",
                )
            meeting = await _decode(response, path)
            warnings = validate_meeting(meeting, path, self._config)
        except LoaderError as exc:
            logger.error("Error loading meeting file %s: %s", path, exc)
            raise

        for warning in warnings:
            logger.warning("%s", warning)

        self._cache[path] = meeting
        return meeting

    def get_cached_meeting(self, path: str) -> MeetingDocument | None:
        return self._cache.get(path)

    def clear_cache(self) -> None:
        self._cache.clear()

    # --- Aggregation ---

    async def _load_outcome(self, path: str) -> MeetingOutcome:
        """Load one file. Never raises; any failure is returned in the outcome."""
        try:
            meeting = await self.load_meeting_file(path)
        except LoaderError as exc:
            logger.warning("Failed to load %s: %s", path, exc)
            return MeetingOutcome(path=path, error=exc)
        except Exception as exc:
            err = LoaderError(f"Unexpected error loading {path}: {exc!r}")
            logger.warning("Failed to load %s: %s", path, err)
            return MeetingOutcome(path=path, error=err)
        return MeetingOutcome(path=path, document=meeting)

    def _meeting_files(self) -> list[str]:
        if self._config is None:
            raise StateError("Configuration must be loaded first")
        files = self._config.get("meetingFiles") if isinstance(self._config, dict) else None
        if not isinstance(files, list):
            logger.warning("Configuration has no meetingFiles list")
            return []
        return [str(f) for f in files]

    async def load_all_outcomes(self) -> list[MeetingOutcome]:
        """Load every configured meeting file concurrently.

        Returns one outcome per entry in ``meetingFiles``, in that order.

        Raises:
            StateError: If no configuration is loaded. Checked before any fetch.
        """
        files = self._meeting_files()
        logger.info("Loading %d meeting file(s)", len(files))
        return list(await asyncio.gather(*(self._load_outcome(path) for path in files)))

    @staticmethod
    def _successful(outcomes: list[MeetingOutcome]) -> list[MeetingDocument]:
        """Documents from successful outcomes, newest first."""
        loaded = [o.document for o in outcomes if o.ok]
        failed = len(outcomes) - len(loaded)
        if failed:
            logger.info("%d/%d meeting file(s) failed to load", failed, len(outcomes))
        return sort_meetings(loaded)

    async def load_all_meetings(self) -> list[MeetingDocument]:
        """Load every configured meeting, dropping failures, newest first.

        Raises:
            StateError: If no configuration is loaded.
        """
        return self._successful(await self.load_all_outcomes())

    async def preload(self, config_path: str | None = None) -> PreloadResult:
        """Load the configuration then all meetings. Any raised error is fatal.

        Files that failed to load are reported in ``PreloadResult.failures``.
        """
        try:
            config = await self.load_config(config_path)
            outcomes = await self.load_all_outcomes()
        except LoaderError as exc:
            logger.error("Preload failed: %s", exc)
            raise
        meetings = self._successful(outcomes)
        logger.info("Preloaded %d meetings", len(meetings))
        return PreloadResult(
            config=config,
            meetings=meetings,
            failures=[o for o in outcomes if not o.ok],
        )
