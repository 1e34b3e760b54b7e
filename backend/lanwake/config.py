"""lanwake configuration — Pydantic BaseSettings loaded from .env."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lanwake.utils.wol import parse_source_ip


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "lanwake"
    debug: bool = False
    log_level: str = "INFO"

    # Network
    host: str = "127.0.0.1"
    port: int = 8080
    api_prefix: str = "/api"

    # Local IPv4 address the broadcast is sent from (empty = OS default)
    source_ip: str = ""

    # Storage paths (relative resolved from the working directory at startup)
    devices_file: str = "./data/devices.json"
    static_dir: str = ""

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        env_prefix="LANWAKE_",
        extra="ignore",
    )

    @field_validator("source_ip")
    @classmethod
    def validate_source_ip(cls, value: str) -> str:
        value = value.strip()
        if value:
            parse_source_ip(value)
        return value

    @model_validator(mode="after")
    def _resolve_paths(self) -> "Settings":
        """Ensure data paths are absolute."""
        base = Path.cwd()
        for field in ("devices_file", "static_dir"):
            val = getattr(self, field)
            if val and not Path(val).is_absolute():
                setattr(self, field, str(base / val))
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
