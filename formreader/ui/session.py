from __future__ import annotations

import streamlit as st

from formreader.services.uploader import Uploader
from formreader.settings import Settings
from formreader.state import ResultSession

_RESULT_KEY = "result_session"
_UPLOADER_KEY = "uploader"


def get_result_session() -> ResultSession:
    """Return this browser session's ResultSession, creating it on first use."""
    if _RESULT_KEY not in st.session_state:
        st.session_state[_RESULT_KEY] = ResultSession()
    return st.session_state[_RESULT_KEY]


def get_uploader(settings: Settings) -> Uploader:
    """Return this browser session's Uploader; rebuilt if the endpoint changed."""
    uploader = st.session_state.get(_UPLOADER_KEY)
    if uploader is None or (uploader.url != settings.upload_url and not uploader.busy):
        uploader = Uploader(settings.upload_url, timeout=settings.ocr_upload_timeout)
        st.session_state[_UPLOADER_KEY] = uploader
    return uploader
