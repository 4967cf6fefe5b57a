from .model import GridColumn, IconGrid, Row, make_rows

__all__ = ["GridColumn", "IconGrid", "Row", "make_rows"]
