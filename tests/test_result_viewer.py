"""Tests for the Streamlit result view, driven through AppTest."""

from __future__ import annotations

import json

from streamlit.testing.v1 import AppTest

JANE = {"pages": [{"fields": [{"name": "name", "value": "Jane Doe", "confidence": 0.97}]}]}


def _viewer_app(result):
    import streamlit as st

    from formreader.state import ResultSession
    from formreader.ui.result_viewer import result_viewer

    if "session" not in st.session_state:
        session = ResultSession()
        if result is not None:
            session.receive_result(result, file_name="form.png")
        st.session_state["session"] = session
    result_viewer(st.session_state["session"])


def _run(result) -> AppTest:
    at = AppTest.from_function(_viewer_app, args=(result,))
    at.run()
    assert not at.exception
    return at


def test_no_result_renders_nothing() -> None:
    at = _run(None)
    assert len(at.subheader) == 0
    assert len(at.toggle) == 0


def test_formatted_view_shows_name_row() -> None:
    at = _run(JANE)
    assert at.subheader[0].value == "Extracted Data"
    table = at.table[0].value
    assert list(table["Field"]) == ["Name"]
    assert list(table["Value"]) == ["Jane Doe"]


def test_raw_view_strips_confidence() -> None:
    at = _run(JANE)
    at.toggle[0].set_value(True).run()
    assert at.session_state["session"].mode.value == "raw"
    raw = at.code[0].value
    assert "confidence" not in raw
    assert json.loads(raw) == {"pages": [{"fields": [{"name": "name", "value": "Jane Doe"}]}]}
    assert len(at.table) == 0


def test_toggle_back_to_formatted() -> None:
    at = _run(JANE)
    at.toggle[0].set_value(True).run()
    at.toggle[0].set_value(False).run()
    assert at.session_state["session"].mode.value == "formatted"
    assert list(at.table[0].value["Value"]) == ["Jane Doe"]


def test_no_pages_shows_empty_state() -> None:
    at = _run({"pages": []})
    assert len(at.table) == 0
    assert at.info[0].value == "No fields found in this document."


def test_backend_note_is_shown() -> None:
    result = {
        "document_type": "unknown",
        "pages": [{"fields": [{"name": "note", "value": "OpenAI API key not configured.", "confidence": 0.0}]}],
    }
    at = _run(result)
    assert at.warning[0].value == "OpenAI API key not configured."
    assert at.info[0].value == "No fields found in this document."
