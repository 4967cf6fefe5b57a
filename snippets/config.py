from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from snippets.infra.exceptions import ConfigError
from snippets.infra.logging import LEVELS

# snippets/config.py -> snippets -> root
PROJECT_ROOT = Path(__file__).resolve().parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
SETTINGS_FILE = CONFIG_DIR / "settings.yaml"
ENV_FILE = CONFIG_DIR / ".env.local"
THEMES_DIR = Path(__file__).resolve().parent / "web" / "themes"

ENV_OVERRIDES = {
    "SNIPPETS_LOG_LEVEL": "log_level",
    "SNIPPETS_LOG_FILE": "log_file",
    "SNIPPETS_THEME": "theme",
}


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_file: Optional[str] = None
    theme: str = "mytheme"
    icon_path: str = "img/icon.svg"
    grid_page_title: str = "Click image in grid"
    menu_page_title: str = "Side menu"
    notification_icon: Optional[str] = None


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", file=str(path)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}", file=str(path))
    return data


def load_settings(path: Optional[Path] = None, *, env_file: Optional[Path] = ENV_FILE) -> Settings:
    """Load settings from YAML, then apply SNIPPETS_* environment overrides.

    A missing settings file means defaults. ``env_file`` is loaded with
    python-dotenv first (without overriding variables already set).
    """
    if env_file is not None and env_file.exists():
        load_dotenv(env_file)

    path = SETTINGS_FILE if path is None else path
    raw = _read_yaml(path) if path.exists() else {}

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"Unknown settings: {', '.join(unknown)}", config_key=unknown[0])

    settings = Settings(**raw)
    overrides = {attr: os.environ[var] for var, attr in ENV_OVERRIDES.items() if os.environ.get(var)}
    if overrides:
        settings = replace(settings, **overrides)

    if str(settings.log_level).upper() not in LEVELS:
        raise ConfigError(f"Unknown log level: {settings.log_level}", config_key="log_level")
    return replace(settings, log_level=str(settings.log_level).upper())
