"""Grid with a clickable icon column.

The grid shows the numbers 1..20 in a "Number" column next to an icon column
that renders the same theme image on every row. Activating the icon (through
the image renderer or through a row click that lands in the icon column)
shows a "<N> clicked!" notification.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import pandas as pd

from snippets.infra.exceptions import GridError
from snippets.infra.logging import get_logger

logger = get_logger(__name__)

FIRST_NUMBER = 1
LAST_NUMBER = 20


@dataclass(frozen=True)
class Row:
    number: int


@dataclass(frozen=True, eq=False)
class GridColumn:
    """A grid column. Columns compare by identity."""

    key: str
    caption: str = ""


def make_rows(first: int = FIRST_NUMBER, last: int = LAST_NUMBER) -> List[Row]:
    return [Row(n) for n in range(first, last + 1)]


class IconGrid:
    """Two-column grid (number, icon) and its click routing."""

    def __init__(self, rows: Sequence[Row], notify: Callable[[str], None]) -> None:
        self.rows = tuple(rows)
        self.notify = notify
        self.number_column = GridColumn("number", "Number")
        self.icon_column = GridColumn("icon")
        self.columns = (self.number_column, self.icon_column)

    def icon_clicked(self, row: Row) -> None:
        logger.debug("icon clicked on row %s", row.number)
        self.notify(f"{row.number} clicked!")

    def on_renderer_click(self, row: Row) -> None:
        self.icon_clicked(row)

    def on_item_click(self, row: Row, column: GridColumn) -> bool:
        """Generic row click. Only clicks in the icon column reach icon_clicked."""
        if column is not self.icon_column:
            return False
        self.icon_clicked(row)
        return True

    def column(self, key: str) -> Optional[GridColumn]:
        for col in self.columns:
            if col.key == key:
                return col
        return None

    def on_cell_selected(self, position: int, column_key: str) -> bool:
        """Route a (row position, column key) cell selection to on_item_click."""
        if not 0 <= position < len(self.rows):
            raise GridError(f"No row at position {position}", row=position, column=column_key)
        column = self.column(column_key)
        if column is None:
            raise GridError(f"Unknown column {column_key!r}", row=position, column=column_key)
        return self.on_item_click(self.rows[position], column)

    def frame(self, icon_uri: str) -> pd.DataFrame:
        """The grid contents; every row maps to the same icon."""
        return pd.DataFrame({
            self.number_column.key: [r.number for r in self.rows],
            self.icon_column.key: [icon_uri] * len(self.rows),
        })
