from __future__ import annotations

import streamlit as st

from snippets.config import Settings
from snippets.grid.model import IconGrid, make_rows
from snippets.infra.exceptions import handle_errors
from snippets.infra.logging import get_logger
from snippets.web.assets import theme_resource_uri
from snippets.web.framework.notifications import notifier
from snippets.web.framework.state import get_or_create

logger = get_logger(__name__)

GRID_KEY = "icon_grid"
MODEL_KEY = "icon_grid_model"
GENERATION_KEY = "icon_grid_generation"


def get_grid(settings: Settings) -> IconGrid:
    return get_or_create(MODEL_KEY, lambda: IconGrid(make_rows(), notifier(settings.notification_icon)))


def grid_widget_key() -> str:
    """Key of the dataframe widget for the current generation."""
    return f"{GRID_KEY}_{st.session_state.get(GENERATION_KEY, 0)}"


@handle_errors(logger)
def _on_cell_select() -> None:
    grid: IconGrid = st.session_state[MODEL_KEY]
    selection = st.session_state[grid_widget_key()].selection
    cells = selection.get("cells", [])
    for position, column_key in cells:
        grid.on_cell_selected(int(position), str(column_key))
    if cells:
        # a fresh widget key drops the selection, so the same cell can be clicked again
        st.session_state[GENERATION_KEY] = st.session_state.get(GENERATION_KEY, 0) + 1


def render(settings: Settings) -> None:
    grid = get_grid(settings)
    icon_uri = theme_resource_uri(settings.icon_path, settings.theme)

    st.dataframe(
        grid.frame(icon_uri),
        key=grid_widget_key(),
        on_select=_on_cell_select,
        selection_mode="single-cell",
        hide_index=True,
        column_config={
            grid.number_column.key: st.column_config.NumberColumn(grid.number_column.caption),
            grid.icon_column.key: st.column_config.ImageColumn(grid.icon_column.caption),
        },
    )
