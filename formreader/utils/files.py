from __future__ import annotations

import mimetypes


def format_bytes(n: int) -> str:
    units = ["B", "KB", "MB", "GB", "TB"]
    size = float(n)
    for u in units:
        if size < 1024.0 or u == units[-1]:
            return f"{size:.1f} {u}"
        size /= 1024.0
    return f"{n} B"


def guess_content_type(file_name: str) -> str:
    """Best-effort MIME type from the file name; falls back to octet-stream."""
    content_type, _ = mimetypes.guess_type(file_name or "")
    return content_type or "application/octet-stream"


def is_pdf(file_name: str, content_type: str | None = None) -> bool:
    if content_type:
        return content_type == "application/pdf"
    return (file_name or "").lower().endswith(".pdf")
