from __future__ import annotations

import base64
import mimetypes
from dataclasses import dataclass
from pathlib import Path

import streamlit as st

from snippets.config import THEMES_DIR
from snippets.infra.exceptions import AssetError

mimetypes.add_type("image/svg+xml", ".svg")


@dataclass(frozen=True)
class ThemeResource:
    """A file inside a theme directory, addressed by a theme-relative path."""

    path: str
    theme: str = "mytheme"

    @property
    def file(self) -> Path:
        return THEMES_DIR / self.theme / self.path

    def data_uri(self) -> str:
        """Inline the resource as a ``data:`` URI (what ImageColumn can display)."""
        try:
            payload = self.file.read_bytes()
        except OSError as e:
            raise AssetError(f"Cannot read theme resource {self.path!r}: {e}",
                             path=self.path, theme=self.theme) from e
        mime = mimetypes.guess_type(self.file.name)[0] or "application/octet-stream"
        return f"data:{mime};base64,{base64.b64encode(payload).decode('ascii')}"


@st.cache_data
def theme_resource_uri(path: str, theme: str = "mytheme") -> str:
    return ThemeResource(path, theme).data_uri()
