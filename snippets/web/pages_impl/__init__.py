"""Page implementations (render functions) for the Streamlit apps.

The entry scripts at the repository root stay thin wrappers that:
- load settings and call init_page(...)
- call the corresponding render() function here
"""
