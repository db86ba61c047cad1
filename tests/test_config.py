import pytest
from pydantic import ValidationError

from elevation_shadows.config import Settings, get_settings


def test_defaults():
    settings = get_settings()
    assert settings.anchor_elevation == 100.0
    assert settings.preserve_opacity is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ELEVATION_ANCHOR", "64.5")
    monkeypatch.setenv("ELEVATION_PRESERVE_OPACITY", "false")
    settings = Settings()
    assert settings.anchor_elevation == 64.5
    assert settings.preserve_opacity is False


def test_settings_are_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("ELEVATION_ANCHOR", "30")
    assert get_settings() is first
    get_settings.cache_clear()
    assert get_settings().anchor_elevation == 30.0


def test_anchor_must_be_positive(monkeypatch):
    monkeypatch.setenv("ELEVATION_ANCHOR", "0")
    with pytest.raises(ValidationError):
        Settings()


def test_dotenv_file_is_not_read(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("ELEVATION_ANCHOR=30\n", "utf-8")
    monkeypatch.chdir(tmp_path)
    assert get_settings().anchor_elevation == 100.0
