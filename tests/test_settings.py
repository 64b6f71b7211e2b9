from __future__ import annotations

from pathlib import Path

import pytest

from aboutinfo import settings as settings_module


@pytest.fixture(autouse=True)
def _clear_locale(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("ABOUTINFO_NL", "LC_ALL", "LC_MESSAGES", "LANG"):
        monkeypatch.delenv(var, raising=False)


def test_default_nl_strips_encoding_and_modifier(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LANG", "de_CH.UTF-8@euro")
    assert settings_module.default_nl() == "de_CH"


def test_default_nl_priority(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LANG", "fr_FR.UTF-8")
    monkeypatch.setenv("LC_ALL", "C")
    assert settings_module.default_nl() == "fr_FR"
    monkeypatch.setenv("ABOUTINFO_NL", "ja_JP")
    assert settings_module.default_nl() == "ja_JP"


def test_default_nl_fallback() -> None:
    assert settings_module.default_nl() == settings_module.DEFAULT_NL


def test_load_settings_honours_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ABOUTINFO_HOME", str(tmp_path))
    loaded = settings_module.load_settings()
    assert loaded.home_dir == tmp_path
    assert loaded.features_dir == tmp_path / "features"
    assert loaded.telemetry_file == tmp_path / "logs" / "telemetry.jsonl"
