"""Settings models and configuration loading for the GLOF Sentinel application."""

from functools import cached_property, lru_cache
from typing import Annotated, Any, Self

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Rolling windows offered by the dashboard (public view / authority view)
RISK_WINDOW_SIZES = (3, 7)


def _parse_bool(v: Any) -> bool:
    """Parse boolean from string '1'/'0' or actual bool."""
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        return v == "1"
    return bool(v)


_BoolFromStr = Annotated[bool, BeforeValidator(_parse_bool)]


class ReadingSourceSettings(BaseModel):
    """Reading source settings."""

    model_config = ConfigDict(frozen=True)

    demo_mode: bool = True
    history_days: int = 7
    mock_seed: int | None = None


class MonitorSettings(BaseModel):
    """Periodic risk monitor settings."""

    model_config = ConfigDict(frozen=True)

    refresh_interval_sec: int = 30
    site_id: str = "default"


class ServerSettings(BaseModel):
    """Dashboard API server settings."""

    model_config = ConfigDict(frozen=True)

    host: str = "127.0.0.1"
    port: int = 8000
    window_size: int = RISK_WINDOW_SIZES[0]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"

    # Readings
    demo_mode: _BoolFromStr = True
    history_days: int = Field(default=7, ge=1, le=30)
    mock_seed: int | None = None

    # Monitor
    refresh_interval_sec: int = Field(default=30, ge=1)
    site_id: str = "default"

    # Server
    server_host: str = "127.0.0.1"
    server_port: int = Field(default=8000, gt=0, le=65535)
    window_size: int = RISK_WINDOW_SIZES[0]

    @cached_property
    def readings(self) -> ReadingSourceSettings:
        """Get reading source settings as nested object."""
        return ReadingSourceSettings(
            demo_mode=self.demo_mode,
            history_days=self.history_days,
            mock_seed=self.mock_seed,
        )

    @cached_property
    def monitor(self) -> MonitorSettings:
        """Get monitor settings as nested object."""
        return MonitorSettings(
            refresh_interval_sec=self.refresh_interval_sec,
            site_id=self.site_id,
        )

    @cached_property
    def server(self) -> ServerSettings:
        """Get server settings as nested object."""
        return ServerSettings(
            host=self.server_host,
            port=self.server_port,
            window_size=self.window_size,
        )

    @model_validator(mode="after")
    def validate_settings(self) -> Self:
        """Validate cross-field configuration constraints."""
        errors: list[str] = []

        if self.window_size not in RISK_WINDOW_SIZES:
            errors.append(
                f"WINDOW_SIZE ({self.window_size}) must be one of "
                f"{', '.join(str(s) for s in RISK_WINDOW_SIZES)}"
            )

        # The mock generator yields history_days + 1 daily readings
        if self.demo_mode and self.window_size > self.history_days + 1:
            errors.append(
                f"WINDOW_SIZE ({self.window_size}) cannot exceed "
                f"HISTORY_DAYS + 1 ({self.history_days + 1})"
            )

        if errors:
            raise ValueError(
                "Configuration validation failed:\n  - "
                + "\n  - ".join(errors)
            )

        return self


# Settings override for testing - allows injecting custom Settings without
# modifying environment variables or clearing the lru_cache.
_settings_override: Settings | None = None


@lru_cache(maxsize=1)
def _load_settings() -> Settings:
    """Load settings from environment (cached)."""
    return Settings()


def get_settings() -> Settings:
    """Get the global settings instance.

    Returns the test override if set, otherwise loads from environment
    variables (cached after first load). For testing, use set_settings()
    from glof.lib.config.testing to override.
    """
    if _settings_override is not None:
        return _settings_override
    return _load_settings()
