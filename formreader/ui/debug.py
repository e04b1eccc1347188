from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import httpx
import streamlit as st

from formreader.settings import BASE_DIR, Settings

logger = logging.getLogger(__name__)

# Environment variables httpx reads for TLS and proxies
HTTPX_ENV_VARS = ("SSL_CERT_FILE", "SSL_CERT_DIR", "HTTPS_PROXY", "HTTP_PROXY", "ALL_PROXY", "NO_PROXY")


def check_backend(url: str, timeout: float = 5.0) -> str:
    """One-line reachability report for the OCR service (any HTTP answer counts)."""
    try:
        response = httpx.options(url, timeout=timeout)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        return f"unreachable ({e.__class__.__name__}: {e})"
    return f"reachable (HTTP {response.status_code})"


def debug_panel(settings: Settings):
    st.sidebar.markdown("---")
    st.sidebar.subheader("🔧 Debug")
    if not st.sidebar.checkbox("Enable debug mode"):
        return

    st.sidebar.write("**Python**:", sys.version.split()[0], "| httpx", httpx.__version__, "| streamlit", st.__version__)

    # Which .env files settings were loaded from, without printing their content
    env_files = [p for p in (BASE_DIR / ".env", Path.cwd() / ".env") if p.exists()]
    st.sidebar.write("**.env files**:", [str(p) for p in env_files] or "(none)")

    st.sidebar.json(settings.model_dump() | {"upload_url": settings.upload_url}, expanded=False)

    st.sidebar.markdown("**httpx environment**")
    for k in HTTPX_ENV_VARS:
        st.sidebar.caption(f"{k}: {os.getenv(k) or '(unset)'}")

    if st.sidebar.button("Check OCR service"):
        report = check_backend(settings.upload_url)
        logger.info("OCR service check: %s", report)
        st.sidebar.write(f"`{settings.upload_url}`: {report}")
