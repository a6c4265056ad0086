# conversion_tool/__init__.py

"""Conversion Tool package.

Re-exports the core logic and the sync engine for convenient imports in
tests or other code. The Tk GUI lives in ``conversion_tool.gui``.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    BUNDLE_ID,
    AUTHOR,
    COPYRIGHT,
    COPYRIGHT_YEAR,
    HOMEPAGE,
)

from .logic import (
    ASCII_MAX,
    INT64_MAX,
    INT64_MIN,
    BitWidth,
    Field,
    ParseError,
    format_all,
    format_binary,
    format_char,
    format_decimal,
    format_field,
    format_hex,
    parse_binary,
    parse_char,
    parse_decimal,
    parse_field,
    parse_hex,
    parse_int_maybe,
    signed_form,
    unsigned_form,
)
from .engine import ConversionEngine, ReentrancyGuard, TextBuffer
from .recent_files import PreferenceStore, RecentFilesManager

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE", "BUNDLE_ID",
    "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR", "HOMEPAGE",
    # Logic
    "ASCII_MAX", "INT64_MAX", "INT64_MIN",
    "BitWidth", "Field", "ParseError",
    "format_all", "format_binary", "format_char", "format_decimal",
    "format_field", "format_hex",
    "parse_binary", "parse_char", "parse_decimal", "parse_field",
    "parse_hex", "parse_int_maybe",
    "signed_form", "unsigned_form",
    # Engine
    "ConversionEngine", "ReentrancyGuard", "TextBuffer",
    # Recent files
    "PreferenceStore", "RecentFilesManager",
]
