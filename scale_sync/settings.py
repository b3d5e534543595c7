from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from .errors import ConfigError

DEFAULT_CONFIG_FILE = "config.json"


class ProviderSettings(BaseModel):
    """OAuth client credentials and locale for one provider."""

    client_id: str
    client_secret: str = ""
    timezone: str = "Asia/Tokyo"
    base_url: str
    token_file: Path

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone {value!r}") from exc
        return value

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


class HealthPlanetSettings(ProviderSettings):
    base_url: str = "https://www.healthplanet.jp"
    token_file: Path = Path("hp_token.json")


class FitbitSettings(ProviderSettings):
    base_url: str = "https://api.fitbit.com"
    token_file: Path = Path("fb_token.json")
    compensate_partial_writes: bool = False


class Settings(BaseSettings):
    """Application settings loaded from ``config.json``, the environment and ``.env``.

    Environment variables use ``__`` to reach nested provider fields, e.g.
    ``HEALTH_PLANET__CLIENT_ID`` or ``FITBIT__TIMEZONE``. Values read from the
    JSON config file take precedence over the environment.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    health_planet: HealthPlanetSettings
    fitbit: FitbitSettings
    http_timeout_seconds: float = 30.0


def _read_config_file(path: Path) -> Dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return data


def load_settings(config_file: Optional[Path] = None) -> Settings:
    """Build :class:`Settings`, raising :class:`ConfigError` on any failure.

    When ``config_file`` is ``None`` the default ``config.json`` is read if it
    exists; an explicitly requested file must exist.
    """

    values: Dict[str, Any] = {}
    if config_file is not None:
        values = _read_config_file(config_file)
    elif Path(DEFAULT_CONFIG_FILE).exists():
        values = _read_config_file(Path(DEFAULT_CONFIG_FILE))

    try:
        return Settings(**values)
    except (ValidationError, SettingsError) as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc

