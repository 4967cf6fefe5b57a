"""
Infrastructure layer.

- logging: LoggerManager / get_logger
- exceptions: SnippetError hierarchy and handle_errors
"""
from .exceptions import (
    AssetError,
    ConfigError,
    GridError,
    RouteNotFoundError,
    SnippetError,
    handle_errors,
)
from .logging import LoggerManager, configure_logging, get_logger

__all__ = [
    "AssetError",
    "ConfigError",
    "GridError",
    "RouteNotFoundError",
    "SnippetError",
    "handle_errors",
    "LoggerManager",
    "configure_logging",
    "get_logger",
]
