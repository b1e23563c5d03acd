"""Text utilities for turning Unicode text into printer bytes.

The Asciifier converts text to the byte encoding of a numeric codepage,
substituting look-alikes for characters the codepage lacks. The markup merger
then splices raw ESC/POS sequences into the result at ``{::escper}key{:/}``
tokens.
"""

from __future__ import annotations

from .asciifier import Asciifier
from .codepage_mapping import CODEPAGE_TO_CODEC, get_codec_name
from .fallback_map import ACCENT_FALLBACK_MAP, LOOKALIKE_MAP
from .markup import markup_token, merge_texts
from .transcoding import (
    apply_substitutions,
    get_unmappable_chars,
    normalize_unicode,
    transcode_to_codepage,
)

__all__ = [
    "ACCENT_FALLBACK_MAP",
    "CODEPAGE_TO_CODEC",
    "LOOKALIKE_MAP",
    "Asciifier",
    "apply_substitutions",
    "get_codec_name",
    "get_unmappable_chars",
    "markup_token",
    "merge_texts",
    "normalize_unicode",
    "transcode_to_codepage",
]
