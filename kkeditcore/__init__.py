"""Text editor core: string helpers, a directory finder, tool definitions, doc token search, menus and file handling."""

__version__ = "0.1.0"
__all__ = ["files", "finder", "menus", "search", "strutil", "tools"]