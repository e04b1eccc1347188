from __future__ import annotations

import streamlit as st

from formreader.logging_config import configure_logging
from formreader.settings import load_settings
from formreader.ui.debug import debug_panel
from formreader.ui.result_viewer import result_viewer
from formreader.ui.session import get_result_session, get_uploader
from formreader.ui.upload_form import upload_form

settings = load_settings()
configure_logging(settings.log_level)

st.set_page_config(page_title="AI Handwritten Form Reader", layout="centered")
st.title("AI Handwritten Form Reader")
st.caption("Upload a scanned form and get structured extracted data.")

st.sidebar.markdown("### Settings")
st.sidebar.markdown(f"- OCR service: `{settings.upload_url}`")
st.sidebar.markdown("- Override with `OCR_API_URL` / `OCR_UPLOAD_PATH` in env or .env.")

debug_panel(settings)

session = get_result_session()
uploader = get_uploader(settings)

upload_form(session, uploader, show_preview=settings.show_preview)
result_viewer(session)
