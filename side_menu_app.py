from snippets.config import load_settings
from snippets.web.framework.page import init_page, PageSpec
from snippets.web.pages_impl.side_menu import render

settings = load_settings()

# MUST be the first Streamlit command on this page
init_page(PageSpec(title=settings.menu_page_title, icon="🧭"), settings)

render()
