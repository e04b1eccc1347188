from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional

from formreader.config import DISPLAY_FIELDS, DisplayField
from formreader.services.projector import (
    FieldMap,
    available_fields,
    build_field_map,
    to_display_json,
)


class ViewMode(str, Enum):
    FORMATTED = "formatted"
    RAW = "raw"


@dataclass
class ResultSession:
    """Current extraction result and view mode for one browser session.

    ``result is None`` is the NoResult state; anything else is Displaying.
    Projections are recomputed from ``result`` on every access.
    """

    result: Any = None
    file_name: Optional[str] = None
    mode: ViewMode = ViewMode.FORMATTED

    @property
    def has_result(self) -> bool:
        return self.result is not None

    def receive_result(self, result: Any, file_name: Optional[str] = None) -> None:
        self.result = result
        self.file_name = file_name

    def toggle_mode(self) -> ViewMode:
        if not self.has_result:
            raise RuntimeError("No result to display")
        self.mode = ViewMode.RAW if self.mode is ViewMode.FORMATTED else ViewMode.FORMATTED
        return self.mode

    def reset(self) -> None:
        self.result = None
        self.file_name = None
        self.mode = ViewMode.FORMATTED

    @property
    def field_map(self) -> FieldMap:
        return build_field_map(self.result)

    def available_fields(self) -> List[DisplayField]:
        return available_fields(self.field_map, DISPLAY_FIELDS)

    def display_json(self) -> str:
        return to_display_json(self.result)
