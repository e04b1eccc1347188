"""Tests for the per-session result state machine."""

from __future__ import annotations

import pytest

from formreader.config import DisplayField
from formreader.state import ResultSession, ViewMode

RESULT = {"pages": [{"fields": [{"name": "name", "value": "Jane Doe", "confidence": 0.97}]}]}


class TestResultSession:
    def test_starts_without_result(self) -> None:
        session = ResultSession()
        assert session.has_result is False
        assert session.mode is ViewMode.FORMATTED
        assert session.field_map == {}
        assert session.available_fields() == []

    def test_receive_result(self) -> None:
        session = ResultSession()
        session.receive_result(RESULT, file_name="form.png")
        assert session.has_result
        assert session.file_name == "form.png"
        assert session.available_fields() == [DisplayField("Name", "name")]

    def test_new_result_replaces_and_keeps_mode(self) -> None:
        session = ResultSession()
        session.receive_result(RESULT)
        session.toggle_mode()
        session.receive_result({"pages": []}, file_name="other.pdf")
        assert session.mode is ViewMode.RAW
        assert session.field_map == {}
        assert session.file_name == "other.pdf"

    def test_toggle_flips_without_touching_result(self) -> None:
        session = ResultSession()
        session.receive_result(RESULT)
        assert session.toggle_mode() is ViewMode.RAW
        assert session.toggle_mode() is ViewMode.FORMATTED
        assert session.result is RESULT
        assert RESULT["pages"][0]["fields"][0]["confidence"] == 0.97

    def test_toggle_without_result_raises(self) -> None:
        with pytest.raises(RuntimeError):
            ResultSession().toggle_mode()

    def test_display_json_has_no_confidence(self) -> None:
        session = ResultSession()
        session.receive_result(RESULT)
        assert "confidence" not in session.display_json()
        assert "Jane Doe" in session.display_json()

    def test_reset(self) -> None:
        session = ResultSession()
        session.receive_result(RESULT, file_name="form.png")
        session.toggle_mode()
        session.reset()
        assert session.has_result is False
        assert session.file_name is None
        assert session.mode is ViewMode.FORMATTED
