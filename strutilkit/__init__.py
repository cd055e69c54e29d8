"""String transformation helpers, an interactive text menu and a directory listing tool."""

__version__ = "0.1.0"
__all__ = ["strutils", "menu", "filestat"]