from __future__ import annotations

import json
import time
from typing import Any, Dict, Iterable, List, NamedTuple, Optional

from formreader.config import CONFIDENCE_KEY, DISPLAY_FIELDS, EXPORT_OPTIONS, DisplayField

FieldMap = Dict[str, Dict[str, Any]]


class ExportPayload(NamedTuple):
    file_name: str
    data: str
    mime: str


def build_field_map(result: Any) -> FieldMap:
    """Flatten the first page's fields into a name -> field lookup.

    Later duplicates overwrite earlier ones. Anything that is not a
    ``{"pages": [{"fields": [...]}]}`` shaped document yields ``{}``.
    """
    if not isinstance(result, dict):
        return {}
    pages = result.get("pages")
    if not isinstance(pages, list) or not pages:
        return {}
    first = pages[0]
    fields = (first.get("fields") if isinstance(first, dict) else None) or []

    field_map: FieldMap = {}
    for field in fields:
        if not isinstance(field, dict):
            continue
        name = field.get("name")
        if name and isinstance(name, str):
            field_map[name] = field
    return field_map


def render_value(field_map: FieldMap, key: str, default: Optional[str] = None) -> Optional[str]:
    """Return the display value for ``key``, or ``default`` when missing or empty."""
    entry = field_map.get(key)
    if not entry:
        return default
    value = entry.get("value")
    if not value:
        return default
    return value if isinstance(value, str) else str(value)


def available_fields(
    field_map: FieldMap, display_fields: Iterable[DisplayField] = DISPLAY_FIELDS
) -> List[DisplayField]:
    return [f for f in display_fields if render_value(field_map, f.key) is not None]


def filter_confidence(node: Any) -> Any:
    """Deep copy of a JSON-shaped value with every ``confidence`` key removed.

    Input is assumed to be a tree (decoded JSON); cycles are not detected.
    """
    if isinstance(node, list):
        return [filter_confidence(item) for item in node]
    if isinstance(node, dict):
        return {k: filter_confidence(v) for k, v in node.items() if k != CONFIDENCE_KEY}
    return node


def to_display_json(result: Any) -> str:
    """Pretty-printed, confidence-free JSON text used by the raw view and export."""
    return json.dumps(filter_confidence(result), indent=EXPORT_OPTIONS["indent"], ensure_ascii=False)


def export_file_name(now_ms: Optional[int] = None) -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{EXPORT_OPTIONS['file_prefix']}-{now_ms}.json"


def build_export(result: Any, now_ms: Optional[int] = None) -> ExportPayload:
    """Assemble the download for ``st.download_button``."""
    return ExportPayload(
        file_name=export_file_name(now_ms),
        data=to_display_json(result),
        mime=EXPORT_OPTIONS["mime"],
    )
