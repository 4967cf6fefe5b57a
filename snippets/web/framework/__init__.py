"""Frontend framework layer for the Streamlit apps.

This package centralizes:
- page initialization (set_page_config)
- session-state helpers
- toast notifications
"""
