"""Library configuration and settings management."""

from pathlib import Path
from typing import Annotated, Any

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

PACKAGE_ROOT = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="WHERE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    catalog_file: Path = Field(
        default=PACKAGE_ROOT / "data" / "regions.csv",
        description="Region catalog (CSV or XLSX) loaded into the default catalog.",
    )
    log_level: str = Field(default="WARNING", description="Level applied to the package logger.")
    default_providers: Annotated[tuple[str, ...], NoDecode] = Field(
        default=(),
        description="Providers kept when loading the default catalog. Empty means all providers.",
    )

    @field_validator("catalog_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> str:
        level = str(value or "WARNING").strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}:
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @field_validator("default_providers", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return tuple(str(item).strip().lower() for item in value if str(item).strip())
        if isinstance(value, list):
            return tuple(str(item).strip().lower() for item in value if str(item).strip())
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item).strip().lower() for item in parsed if str(item).strip())
            except (json.JSONDecodeError, TypeError):
                pass
            # Try comma-separated
            if "," in value:
                return tuple(item.strip().lower() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip().lower(),)
        return tuple()


settings = Settings()
