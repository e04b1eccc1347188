"""Streamlit client for the handwritten form OCR service.

Modules are organized into:
- config: constants and options
- settings: environment/.env/TOML backed settings
- state: per-session result state and view mode
- services: upload client and result projection helpers
- utils: lightweight helpers (file sizes, page preview)
- ui: Streamlit UI components and panels
"""
