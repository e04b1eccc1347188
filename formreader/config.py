from __future__ import annotations

from typing import NamedTuple


class DisplayField(NamedTuple):
    label: str
    key: str


# ---------------------------
# Result display
# ---------------------------
# Canonical fields eligible for the formatted view, in display order.
DISPLAY_FIELDS = (
    DisplayField("Name", "name"),
    DisplayField("Phone", "phone"),
    DisplayField("Email", "email"),
    DisplayField("Address", "address"),
    DisplayField("Postcode", "postcode"),
    DisplayField("Date of Birth", "dob"),
)

# Fields the backend may add outside the display list.
OCR_TEXT_KEY = "ocrText"
NOTE_KEY = "note"

CONFIDENCE_KEY = "confidence"
PLACEHOLDER = "—"


# ---------------------------
# Upload
# ---------------------------
# Picker filter only; the backend rejects anything else.
ACCEPTED_FILE_TYPES = ["png", "jpg", "jpeg", "gif", "bmp", "tif", "tiff", "webp", "pdf"]


# ---------------------------
# Export / preview
# ---------------------------
EXPORT_OPTIONS = {
    "file_prefix": "extracted-data",
    "indent": 2,
    "mime": "application/json",
}

PREVIEW_OPTIONS = {
    "zoom": 2.0,
    "width": 480,
}
