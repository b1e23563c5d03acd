"""Codepage table for ESC/POS character code tables.

The table maps the numeric codepage id configured on a printer to the Python
codec and character substitutions used when transcoding text for it.
"""

from __future__ import annotations

from .loader import (
    CODEPAGE_RESOURCE,
    CodepageEntry,
    clear_codepage_cache,
    load_codepage_table,
)

__all__ = [
    "CODEPAGE_RESOURCE",
    "CodepageEntry",
    "clear_codepage_cache",
    "load_codepage_table",
]
