"""Tests for decouple-backed settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from amber import settings as settings_module
from amber.settings import Settings, build_settings, get_settings, load_config

ENV_VARS = ("AMBER_MARKER", "AMBER_HASH", "AMBER_ENCRYPTION", "AMBER_KEY")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_without_env_file(tmp_path: Path) -> None:
    config = load_config(str(tmp_path / "missing.env"))

    assert build_settings(config) == Settings()


def test_env_file_values(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("AMBER_MARKER=.store\nAMBER_HASH=sha256\nAMBER_ENCRYPTION=aes128\nAMBER_KEY=0123456789abcdef\n")

    settings = build_settings(load_config(str(env_file)))

    assert settings == Settings(
        marker=".store",
        hash_name="sha256",
        encryption_name="aes128",
        key="0123456789abcdef",
    )


def test_environment_overrides_env_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("AMBER_HASH=sha256\n")
    monkeypatch.setenv("AMBER_HASH", "sha512")

    assert build_settings(load_config(str(env_file))).hash_name == "sha512"


def test_get_settings_is_cached(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("AMBER_MARKER", ".first")

    first = get_settings()
    monkeypatch.setenv("AMBER_MARKER", ".second")

    assert get_settings() is first
    assert first.marker == ".first"
    assert settings_module.DEFAULT_MARKER == ".amber"
