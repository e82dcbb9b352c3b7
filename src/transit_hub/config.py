"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="TRANSIT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Kosovo Transit Engine API"
    api_prefix: str = "/api"
    catalog_file: Optional[Path] = Field(
        default=None,
        description="Optional JSON route catalog. The built-in Kosovo catalog is used when unset.",
    )
    timezone: str = Field(
        default="Europe/Belgrade",
        description="Timezone used when a request does not carry an explicit time.",
    )
    default_frequency_minutes: int = Field(
        default=30,
        ge=1,
        description="Headway used when a schedule description cannot be parsed.",
    )
    occupancy_low_ratio: float = Field(default=0.3, ge=0.0, le=1.0)
    occupancy_medium_ratio: float = Field(default=0.7, ge=0.0, le=1.0)
    delay_probability: float = Field(default=0.2, ge=0.0, le=1.0)
    max_delay_minutes: int = Field(default=10, ge=1)
    telemetry_seed: Optional[int] = Field(
        default=None,
        description="Seed for synthesized occupancy/delay values. Unset means a fresh draw every tick.",
    )
    planner_strategy: str = Field(default="template")
    feed_refresh_seconds: int = Field(
        default=5,
        ge=1,
        description="Cadence at which clients are expected to poll the live vehicle feed.",
    )
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:8080",
            "http://127.0.0.1:8080",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("catalog_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Optional[Path]:
        if value is None or value == "":
            return None
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
