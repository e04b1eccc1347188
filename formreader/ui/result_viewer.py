from __future__ import annotations

import streamlit as st

from formreader.config import NOTE_KEY, OCR_TEXT_KEY, PLACEHOLDER
from formreader.services.projector import build_export, render_value
from formreader.state import ResultSession, ViewMode


def result_viewer(session: ResultSession) -> None:
    """Formatted table / raw JSON view of the current result, plus JSON download."""
    if not session.has_result:
        return

    field_map = session.field_map
    with st.container(border=True):
        st.subheader("Extracted Data")
        doc_type = session.result.get("document_type") if isinstance(session.result, dict) else None
        if doc_type or session.file_name:
            st.caption(" • ".join(str(p) for p in (session.file_name, doc_type) if p))

        note = render_value(field_map, NOTE_KEY)
        if note:
            st.warning(note)

        st.toggle(
            "Raw JSON",
            value=session.mode is ViewMode.RAW,
            on_change=session.toggle_mode,
            key="result_view_raw",
        )

        if session.mode is ViewMode.RAW:
            st.code(session.display_json(), language="json")
        else:
            fields = session.available_fields()
            if fields:
                st.table([{"Field": f.label, "Value": render_value(field_map, f.key)} for f in fields])
            else:
                st.info("No fields found in this document.")
            with st.expander("OCR text"):
                st.text(render_value(field_map, OCR_TEXT_KEY, default=PLACEHOLDER))

        export = build_export(session.result)
        st.download_button(
            "Download JSON",
            data=export.data,
            file_name=export.file_name,
            mime=export.mime,
        )
