from snippets.config import load_settings
from snippets.web.framework.page import init_page, PageSpec
from snippets.web.pages_impl.icon_grid import render

settings = load_settings()

# MUST be the first Streamlit command on this page
init_page(PageSpec(title=settings.grid_page_title, icon="🖼️"), settings)

render(settings)
