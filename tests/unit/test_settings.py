"""
Unit-тесты для проверки конфигурации.
"""

import pytest

from config import settings


def test_validate_config_missing_binary(monkeypatch):
    monkeypatch.setattr(settings, "PDFTOTEXT_BINARY", "/nonexistent/pdftotext")

    with pytest.raises(ValueError) as exc_info:
        settings.validate_config()
    assert "/nonexistent/pdftotext" in str(exc_info.value)


def test_validate_config_empty_binary(monkeypatch):
    monkeypatch.setattr(settings, "PDFTOTEXT_BINARY", "")

    with pytest.raises(ValueError):
        settings.validate_config()


def test_validate_config_ok(monkeypatch):
    monkeypatch.setattr(settings.shutil, "which", lambda name: f"/usr/bin/{name}")

    assert settings.validate_config() is True
