"""Tests for settings lookup."""
from pathlib import Path

from utils import config


def test_defaults(monkeypatch):
    for name in ("EXPORT_TIMEOUT", "WATERMARK", "SURVEYS_DIR", "FONTS_DIR"):
        monkeypatch.delenv(f"ORAL_HYGIENE_{name}", raising=False)
    monkeypatch.setattr(config, "_from_secrets", lambda key: None)
    assert config.export_timeout() == 10.0
    assert config.watermark_path().name == "watermark.png"
    assert config.surveys_dir() == Path(config.ROOT) / "surveys"
    assert config.fonts_dir() == Path(config.ROOT) / "assets" / "fonts"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("ORAL_HYGIENE_WATERMARK", str(tmp_path / "logo.png"))
    monkeypatch.setenv("ORAL_HYGIENE_EXPORT_TIMEOUT", "2.5")
    assert config.watermark_path() == tmp_path / "logo.png"
    assert config.export_timeout() == 2.5


def test_bad_timeout_falls_back(monkeypatch):
    monkeypatch.setenv("ORAL_HYGIENE_EXPORT_TIMEOUT", "soon")
    assert config.export_timeout() == 10.0


def test_secrets_used_when_env_missing(monkeypatch):
    monkeypatch.delenv("ORAL_HYGIENE_LOG_LEVEL", raising=False)
    monkeypatch.setattr(config, "_from_secrets", lambda key: "DEBUG" if key == "log_level" else None)
    assert config.get_setting("log_level") == "DEBUG"
