from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from dynaform.exceptions import SettingsError
from dynaform.settings import Settings, get_settings

if TYPE_CHECKING:
    from pathlib import Path


def test_settings_load_from_env_file(tmp_path: Path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_payload = (
        f"APP_ENV={'test'}\n"
        f"LOG_LEVEL={'DEBUG'}\n"
        f"LOG_JSON={'false'}\n"
        f"POPUP_TIMEOUT_SECONDS={1.5}\n"
        f"POPUP_OFFSET_PX={4}\n"
    )
    env_file.write_text(
        env_payload,
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)

    settings = Settings()

    assert settings.app_env == "test"
    assert settings.log_level == "DEBUG"
    assert settings.log_json is False
    assert settings.popup_timeout_seconds == 1.5
    assert settings.popup_offset_px == 4


def test_settings_defaults(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    settings = Settings()

    assert settings.popup_timeout_seconds == 3.0
    assert settings.popup_offset_px == 10


def test_settings_rejects_non_positive_popup_timeout(monkeypatch) -> None:
    monkeypatch.setenv("POPUP_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_uses_environment(monkeypatch) -> None:
    get_settings.cache_clear()
    monkeypatch.setenv("APP_ENV", "ci")

    settings = get_settings()
    assert settings.app_env == "ci"

    get_settings.cache_clear()


def test_get_settings_wraps_invalid_values(monkeypatch) -> None:
    get_settings.cache_clear()
    monkeypatch.setenv("POPUP_OFFSET_PX", "-5")

    with pytest.raises(SettingsError, match="Failed to load settings"):
        get_settings()

    get_settings.cache_clear()
