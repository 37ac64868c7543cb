"""Configuration helpers bound to python-decouple."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from decouple import Config as DecoupleConfig, RepositoryEmpty, RepositoryEnv

DEFAULT_MARKER = ".amber"
DEFAULT_HASH = "sha1"
DEFAULT_ENCRYPTION = "-"


@dataclass(frozen=True, slots=True)
class Settings:
    """Process-wide defaults for locating and sealing artifacts."""

    marker: str = DEFAULT_MARKER
    hash_name: str = DEFAULT_HASH
    encryption_name: str = DEFAULT_ENCRYPTION
    key: str = ""


def load_config(env_path: str = ".env") -> DecoupleConfig:
    """Return a decouple config object anchored to the repository .env file.

    Environment variables always win; the .env file is optional.
    """

    if Path(env_path).is_file():
        return DecoupleConfig(RepositoryEnv(env_path))
    return DecoupleConfig(RepositoryEmpty())


def build_settings(config: DecoupleConfig) -> Settings:
    return Settings(
        marker=config("AMBER_MARKER", default=DEFAULT_MARKER),
        hash_name=config("AMBER_HASH", default=DEFAULT_HASH),
        encryption_name=config("AMBER_ENCRYPTION", default=DEFAULT_ENCRYPTION),
        key=config("AMBER_KEY", default=""),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached settings for this process."""

    return build_settings(load_config())
