"""
Unit tests: grid with a clickable icon column
"""
import pytest
import sys
from pathlib import Path
from types import SimpleNamespace

sys.path.insert(0, str(Path(__file__).parent.parent))

from snippets.grid.model import GridColumn, IconGrid, Row, make_rows
from snippets.infra.exceptions import GridError, SnippetError
from snippets.web.pages_impl import icon_grid as icon_grid_page


@pytest.fixture
def messages():
    return []


@pytest.fixture
def grid(messages):
    return IconGrid(make_rows(), messages.append)


class TestRows:
    """Row generation"""

    def test_numbers_are_one_to_twenty(self):
        """Rows hold the numbers 1..20"""
        assert [r.number for r in make_rows()] == list(range(1, 21))

    def test_strictly_ascending_without_duplicates(self):
        """Rows ascend by one with no gaps or duplicates"""
        numbers = [r.number for r in make_rows()]
        assert len(set(numbers)) == len(numbers) == 20
        assert all(b - a == 1 for a, b in zip(numbers, numbers[1:]))

    def test_rows_are_immutable(self):
        """A row cannot be modified"""
        row = make_rows()[0]
        with pytest.raises(AttributeError):
            row.number = 5


class TestIconClicks:
    """Click routing"""

    def test_icon_cell_click_notifies_for_every_row(self, grid, messages):
        """Every icon cell produces exactly one message"""
        for row in grid.rows:
            messages.clear()
            assert grid.on_item_click(row, grid.icon_column) is True
            assert messages == [f"{row.number} clicked!"]

    def test_number_cell_click_does_not_notify(self, grid, messages):
        """Clicks in the number column stay silent"""
        for row in grid.rows:
            assert grid.on_item_click(row, grid.number_column) is False
        assert messages == []

    def test_renderer_click_uses_same_handler(self, grid, messages):
        """The renderer click reaches the same handler"""
        grid.on_renderer_click(Row(7))
        assert messages == ["7 clicked!"]

    def test_column_compared_by_identity(self, grid, messages):
        """A different column with the same key does not count as the icon column"""
        lookalike = GridColumn("icon")
        assert grid.on_item_click(grid.rows[0], lookalike) is False
        assert messages == []

    def test_cell_selection_routes_by_column_key(self, grid, messages):
        """A cell selection is routed by its column key"""
        assert grid.on_cell_selected(4, "icon") is True
        assert grid.on_cell_selected(4, "number") is False
        assert messages == ["5 clicked!"]

    def test_cell_selection_out_of_range(self, grid):
        """A row position outside the grid raises GridError"""
        with pytest.raises(GridError):
            grid.on_cell_selected(20, "icon")
        with pytest.raises(GridError):
            grid.on_cell_selected(-1, "icon")

    def test_cell_selection_unknown_column(self, grid):
        """An unknown column key raises GridError"""
        with pytest.raises(GridError) as exc:
            grid.on_cell_selected(0, "label")
        assert exc.value.details["column"] == "label"


class TestFrame:
    """Tabular contents"""

    def test_frame_columns(self, grid):
        """The frame has the number and icon columns"""
        df = grid.frame("data:image/svg+xml;base64,AAAA")
        assert list(df.columns) == ["number", "icon"]
        assert df["number"].tolist() == list(range(1, 21))
        assert set(df["icon"]) == {"data:image/svg+xml;base64,AAAA"}

    def test_captions(self, grid):
        """Only the number column has a caption"""
        assert grid.number_column.caption == "Number"
        assert grid.icon_column.caption == ""


class TestSelectionCallback:
    """Streamlit on_select callback wiring"""

    @pytest.fixture
    def session(self, monkeypatch, grid):
        state = {icon_grid_page.MODEL_KEY: grid}
        monkeypatch.setattr(icon_grid_page.st, "session_state", state)
        return state

    def _select(self, session, cells):
        session[icon_grid_page.grid_widget_key()] = SimpleNamespace(
            selection={"rows": [], "columns": [], "cells": cells})
        icon_grid_page._on_cell_select()

    def test_selected_icon_cell_notifies_once(self, session, messages):
        """Selecting an icon cell shows one message"""
        self._select(session, [(2, "icon")])
        assert messages == ["3 clicked!"]

    def test_selected_number_cell_is_silent(self, session, messages):
        """Selecting a number cell shows nothing"""
        self._select(session, [(2, "number")])
        assert messages == []

    def test_same_icon_clicked_twice_notifies_twice(self, session, messages):
        """Clicking the same icon again shows the message again"""
        self._select(session, [(2, "icon")])
        first_key = icon_grid_page.grid_widget_key()
        self._select(session, [(2, "icon")])
        assert messages == ["3 clicked!", "3 clicked!"]
        assert icon_grid_page.grid_widget_key() != first_key

    def test_handled_click_renews_widget_key(self, session):
        """A handled selection moves the grid to a new widget key"""
        assert icon_grid_page.grid_widget_key() == "icon_grid_0"
        self._select(session, [(0, "number")])
        assert icon_grid_page.grid_widget_key() == "icon_grid_1"

    def test_bad_cell_is_reraised(self, session):
        """An invalid cell surfaces as a SnippetError"""
        with pytest.raises(SnippetError):
            self._select(session, [(99, "icon")])


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
