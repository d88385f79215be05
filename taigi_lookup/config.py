"""Configuration loading utilities for the Taigi lookup bot."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)


DEFAULT_SETTINGS_PATH = Path(__file__).parent / "data" / "settings.yaml"

# Every source the bot queries must have an entry under `sources:`.
REQUIRED_SOURCES = ("taigitv", "sutian", "itaigi")


@dataclass(frozen=True)
class SourceSettings:
    """Where and how to query one dictionary source."""

    key: str
    name: str
    icon: str
    site_root: str
    search_url: str
    entry_url: Optional[str] = None
    max_results: int = 3

    @staticmethod
    def from_dict(key: str, data: Dict[str, Any]) -> "SourceSettings":
        return SourceSettings(
            key=key,
            name=str(data["name"]),
            icon=str(data.get("icon", "")),
            site_root=str(data["site_root"]).rstrip("/"),
            search_url=str(data["search_url"]),
            entry_url=data.get("entry_url"),
            max_results=int(data.get("max_results", 3)),
        )


@dataclass(frozen=True)
class Settings:
    """Typed view over the settings YAML file."""

    channel_id: int
    empty_keyword_prompt: str
    no_result_reaction: str
    sources: Dict[str, SourceSettings]

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Settings":
        discord_cfg = data.get("discord", {})
        sources_cfg = data.get("sources", {})
        return Settings(
            channel_id=int(discord_cfg["channel_id"]),
            empty_keyword_prompt=discord_cfg.get(
                "empty_keyword_prompt", "Please provide a keyword to search for."
            ),
            no_result_reaction=discord_cfg.get("no_result_reaction", "❌"),
            sources={
                key: SourceSettings.from_dict(key, value)
                for key, value in sources_cfg.items()
            },
        )

    def source(self, key: str) -> SourceSettings:
        try:
            return self.sources[key]
        except KeyError:
            raise KeyError(f"No settings for source '{key}'") from None


class SettingsLoader:
    """Loads and caches settings from YAML configuration files."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or DEFAULT_SETTINGS_PATH
        self._cache: Settings | None = None

    @property
    def path(self) -> Path:
        return self._path

    def load(self, force: bool = False) -> Settings:
        if self._cache is not None and not force:
            return self._cache
        with self._path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
        self._cache = Settings.from_dict(data or {})
        return self._cache


def get_settings() -> Settings:
    """Convenience accessor for default settings."""

    return SettingsLoader().load()


@dataclass(frozen=True)
class BotConfig:
    """Process-level configuration read once at startup."""

    token: str
    channel_id: int
    settings: Settings

    @staticmethod
    def from_env() -> "BotConfig":
        token = os.environ.get("DISCORD_TOKEN")
        if not token:
            raise RuntimeError("DISCORD_TOKEN environment variable must be set")

        settings_path = os.environ.get("TAIGI_LOOKUP_SETTINGS")
        settings = SettingsLoader(Path(settings_path) if settings_path else None).load()
        missing = [key for key in REQUIRED_SOURCES if key not in settings.sources]
        if missing:
            raise RuntimeError(
                f"Settings file is missing source entries: {', '.join(missing)}"
            )

        channel_id = settings.channel_id
        raw_channel = os.environ.get("TAIGI_LOOKUP_CHANNEL_ID")
        if raw_channel:
            try:
                channel_id = int(raw_channel)
            except ValueError:
                logger.warning(
                    "Invalid channel id %s for TAIGI_LOOKUP_CHANNEL_ID", raw_channel
                )

        return BotConfig(token=token, channel_id=channel_id, settings=settings)


__all__ = ["BotConfig", "REQUIRED_SOURCES", "Settings", "SettingsLoader", "SourceSettings", "get_settings"]
