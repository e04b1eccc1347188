"""Tests for the debug panel helpers."""

from __future__ import annotations

from formreader.ui.debug import HTTPX_ENV_VARS, check_backend


def test_check_backend_reports_bad_url() -> None:
    report = check_backend("http://[not-an-address]/api/upload")
    assert report.startswith("unreachable (InvalidURL")


def test_check_backend_reports_unsupported_scheme() -> None:
    assert check_backend("ftp://ocr.test/api/upload").startswith("unreachable (UnsupportedProtocol")


def test_only_httpx_environment_listed() -> None:
    assert "REQUESTS_CA_BUNDLE" not in HTTPX_ENV_VARS
    assert "SSL_CERT_FILE" in HTTPX_ENV_VARS
