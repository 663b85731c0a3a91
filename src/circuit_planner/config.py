"""Application configuration and settings management."""

from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="CIRCUIT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Circuit Planner API"
    api_prefix: str = "/api"
    max_circuit_items: int = Field(
        default=200,
        ge=1,
        description="Largest number of candidate events accepted in one optimisation request.",
    )
    default_radius_km: Optional[float] = Field(
        default=None,
        gt=0.0,
        description="Search radius applied around the start point when a request does not set one.",
    )
    distance_precision: int = Field(default=1, ge=0, description="Decimals kept on reported distances.")
    maps_directions_url: str = Field(
        default="https://www.google.com/maps/dir/",
        description="Base URL used to build turn-by-turn navigation links.",
    )
    travel_mode: Literal["driving", "walking", "bicycling", "transit"] = Field(default="driving")
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
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
