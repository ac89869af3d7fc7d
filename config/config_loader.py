"""Load settings.yaml into typed dataclasses. Applies environment overrides."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

_SETTINGS_PATH = Path(__file__).parent / "settings.yaml"

# Environment variable -> (section, key)
_ENV_OVERRIDES = {
    "VOTING_DATA_LOCATION": ("source", "location"),
    "VOTING_DATA_CONFIG_PATH": ("source", "config_path"),
}


@dataclass
class SourceSettings:
    location: str              # base directory or http(s) base URL
    config_path: str = "config.json"


@dataclass
class HttpSettings:
    timeout_sec: float = 15.0
    user_agent: str = "voting-data-loader"


@dataclass
class AppSettings:
    source: SourceSettings
    http: HttpSettings = field(default_factory=HttpSettings)


def load_settings(settings_path: Path = _SETTINGS_PATH) -> AppSettings:
    """Load and validate settings from settings.yaml.

    Raises FileNotFoundError if the settings file is missing and ValueError
    if it lacks a ``source.location`` entry. Environment variables listed in
    ``_ENV_OVERRIDES`` win over the file.
    """
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    with settings_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Settings file must contain a mapping: {settings_path}")

    source_raw = dict(raw.get("source") or {})
    http_raw = dict(raw.get("http") or {})
    sections = {"source": source_raw, "http": http_raw}

    for env_name, (section, key) in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name, "").strip()
        if value:
            sections[section][key] = value
            logger.debug("Setting %s.%s overridden by %s", section, key, env_name)

    if not source_raw.get("location"):
        raise ValueError(f"Missing 'source.location' in {settings_path}")

    source = SourceSettings(
        location=str(source_raw["location"]),
        config_path=str(source_raw.get("config_path", "config.json")),
    )
    http = HttpSettings(
        timeout_sec=float(http_raw.get("timeout_sec", 15.0)),
        user_agent=str(http_raw.get("user_agent", "voting-data-loader")),
    )

    logger.info("Meeting data source: %s", source.location)
    return AppSettings(source=source, http=http)
