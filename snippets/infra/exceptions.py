"""
Infrastructure layer - exceptions.

Standard exception classes and the decorator used around UI callbacks.
"""

from typing import Any, Dict, Optional
from functools import wraps


class SnippetError(Exception):
    """Base exception for the snippet apps"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "UNKNOWN_ERROR"
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ConfigError(SnippetError):
    """Invalid or unreadable settings"""
    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, "CONFIG_ERROR", {"config_key": config_key, **kwargs})


class RouteNotFoundError(SnippetError):
    """No view registered for a navigation path"""
    def __init__(self, message: str, route: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, "ROUTE_NOT_FOUND", {"route": route, **kwargs})


class GridError(SnippetError):
    """A grid event that does not address an existing cell"""
    def __init__(self, message: str, row: Any = None, column: Any = None, **kwargs) -> None:
        super().__init__(message, "GRID_ERROR", {"row": row, "column": column, **kwargs})


class AssetError(SnippetError):
    """A theme resource that cannot be read"""
    def __init__(self, message: str, path: Optional[str] = None, theme: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, "ASSET_ERROR", {"path": path, "theme": theme, **kwargs})


def handle_errors(logger=None):
    """
    Log-and-reraise decorator for UI callbacks.

    SnippetError subclasses are logged and re-raised as they are; anything
    else is logged with its traceback and wrapped in a SnippetError.

    Args:
        logger: logger to use; defaults to this module's logger
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            _logger = logger
            if _logger is None:
                from .logging import get_logger
                _logger = get_logger(__name__)
            try:
                return func(*args, **kwargs)
            except SnippetError as e:
                _logger.error(f"[{e.error_code}] {e.message}", extra={"details": e.details})
                raise
            except Exception as e:
                _logger.error(f"Unhandled error in {func.__name__}: {e}", exc_info=True)
                raise SnippetError(f"Unhandled error: {e}", "UNHANDLED_ERROR",
                                   {"callback": func.__name__}) from e
        return wrapper
    return decorator
