from __future__ import annotations

import logging

import streamlit as st

from formreader.config import ACCEPTED_FILE_TYPES, PREVIEW_OPTIONS
from formreader.services.uploader import ProgressCallback, UploadError, Uploader
from formreader.state import ResultSession
from formreader.utils.files import format_bytes, is_pdf
from formreader.utils.preview import render_pdf_page_png_bytes

logger = logging.getLogger(__name__)

_PENDING_KEY = "upload_pending"
_ERROR_KEY = "upload_error"


@st.dialog("Upload failed")
def upload_failed_dialog(message: str) -> None:
    st.error(f"Upload failed: {message}")
    if st.button("OK", type="primary"):
        st.rerun()


def _request_upload() -> None:
    st.session_state[_PENDING_KEY] = True


def _show_preview(name: str, data: bytes, content_type: str | None) -> None:
    try:
        if is_pdf(name, content_type):
            png = render_pdf_page_png_bytes(data, 1, zoom=PREVIEW_OPTIONS["zoom"])
            st.image(png, caption=f"{name} (page 1)", width=PREVIEW_OPTIONS["width"])
        else:
            st.image(data, caption=name, width=PREVIEW_OPTIONS["width"])
    except (RuntimeError, ValueError, OSError) as e:
        logger.warning("Preview of %s failed: %s", name, e)
        st.warning("Preview unavailable for this file.")


def submit_upload(
    session: ResultSession,
    uploader: Uploader,
    file_name: str,
    data: bytes,
    content_type: str | None = None,
    on_progress: ProgressCallback | None = None,
) -> bool:
    """Run one upload; hand the result to the session or queue the failure message."""
    try:
        result = uploader.submit(file_name, data, content_type=content_type, on_progress=on_progress)
    except UploadError as e:
        st.session_state[_ERROR_KEY] = str(e)
        return False
    session.receive_result(result, file_name=file_name)
    return True


def upload_form(session: ResultSession, uploader: Uploader, *, show_preview: bool = True) -> None:
    """File picker, trigger button and progress bar for a single upload."""
    # Set by the button callback, so this run renders the controls disabled
    pending = bool(st.session_state.pop(_PENDING_KEY, False))
    busy = pending or uploader.busy

    error = st.session_state.pop(_ERROR_KEY, None)
    if error:
        upload_failed_dialog(error)

    uploaded = st.file_uploader(
        "Upload a scanned form (image or PDF)",
        type=ACCEPTED_FILE_TYPES,
        disabled=busy,
    )
    if uploaded is None:
        st.caption("No file selected")
        return

    data = uploaded.getvalue()
    st.caption(f"{uploaded.name} • {format_bytes(len(data))}")
    if show_preview:
        _show_preview(uploaded.name, data, uploaded.type)

    st.button(
        "Processing…" if busy else "Extract data",
        type="primary",
        disabled=busy,
        on_click=_request_upload,
        key="extract_button",
    )
    if not pending:
        return

    bar = st.progress(0, text="Uploading…")

    def _on_progress(percent: int) -> None:
        text = "Extracting data…" if percent >= 100 else f"Uploading… {percent}%"
        bar.progress(percent, text=text)

    ok = submit_upload(session, uploader, uploaded.name, data, uploaded.type, on_progress=_on_progress)
    bar.progress(uploader.progress, text="Done" if ok else "Upload failed")
    # Re-render with the controls enabled again; a failure opens the dialog there
    st.rerun()
