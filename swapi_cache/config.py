from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://www.swapi.tech/api"
DEFAULT_CACHE_TTL = 3600
DEFAULT_CACHE_NAME = "swapi-cache"
DEFAULT_KEY_PREFIX = "swapi_cache_"


class CachePolicy(BaseModel):
    model_config = ConfigDict(frozen=True)

    ttl_seconds: float = Field(default=DEFAULT_CACHE_TTL, ge=0)
    enabled: bool = True


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SWAPI_CACHE_", extra="ignore")

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    log_level: str = "INFO"
    config_path: str = "swapi-cache.yaml"
    cache_enabled: bool = True
    cache_ttl: float = Field(default=DEFAULT_CACHE_TTL, ge=0)
    cache_backend: Literal["memory", "filesystem", "redis"] = "filesystem"
    cache_name: str = DEFAULT_CACHE_NAME
    cache_root: str | None = None
    cache_key_prefix: str = DEFAULT_KEY_PREFIX
    redis_url: str = "redis://localhost:6379/0"

    def cache_policy(self) -> CachePolicy:
        return CachePolicy(ttl_seconds=self.cache_ttl, enabled=self.cache_enabled)


def _resolve_env_token(value: Any) -> Any:
    if isinstance(value, str) and value.startswith("os.environ/"):
        env_name = value.split("/", 1)[1]
        return os.getenv(env_name)
    if isinstance(value, dict):
        return {k: _resolve_env_token(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_resolve_env_token(v) for v in value]
    return value


def load_yaml_config(path: str | Path, **overrides: Any) -> Settings:
    """Build settings from a YAML file, letting ``overrides`` win.

    Values written as ``os.environ/NAME`` are looked up in the environment.
    A missing file yields plain environment-driven settings.
    """
    cfg_path = Path(path)
    data: dict[str, Any] = {}
    if cfg_path.exists():
        data = yaml.safe_load(cfg_path.read_text()) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {cfg_path} must contain a mapping")
    data = _resolve_env_token(data)
    data.update(overrides)
    return Settings(**data)


def configure_logging(level: str | int = "INFO") -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(level=level)


@lru_cache
def get_settings() -> Settings:
    return load_yaml_config(Settings().config_path)
