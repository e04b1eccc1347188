"""Tests for settings loading and validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from formreader.settings import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("OCR_API_URL", "OCR_UPLOAD_PATH", "OCR_UPLOAD_TIMEOUT", "LOG_LEVEL", "SHOW_PREVIEW"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings(_env_file=None)
        assert s.upload_url == "http://localhost:5000/api/upload"
        assert s.ocr_upload_timeout == 120.0
        assert s.log_level == "INFO"
        assert s.show_preview is True

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OCR_API_URL", "https://ocr.example.com/")
        monkeypatch.setenv("OCR_UPLOAD_PATH", "v2/upload")
        monkeypatch.setenv("OCR_UPLOAD_TIMEOUT", "30")
        monkeypatch.setenv("SHOW_PREVIEW", "false")
        s = Settings(_env_file=None)
        assert s.upload_url == "https://ocr.example.com/v2/upload"
        assert s.ocr_upload_timeout == 30.0
        assert s.show_preview is False

    def test_log_level_normalized(self) -> None:
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_log_level_invalid(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")
