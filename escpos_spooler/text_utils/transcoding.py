"""Transcoding of Unicode text to legacy printer codepages.

Character Mapping Strategy:
---------------------------
Each character is first encoded directly with the target codec, so characters
native to the codepage are preserved. Only when that fails are the fallback
maps consulted, in order:

1. LOOKALIKE_MAP: ASCII stand-ins for typography, symbols and box drawing.
2. ACCENT_FALLBACK_MAP: base letters for accented characters.

Characters that survive neither become the replacement character.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
import unicodedata

from .fallback_map import ACCENT_FALLBACK_MAP, LOOKALIKE_MAP

_LOGGER = logging.getLogger(__name__)


def normalize_unicode(text: str) -> str:
    """Normalize Unicode text using NFKC normalization.

    NFKC converts compatibility characters to their canonical equivalents
    (ligatures to separate letters, full-width to half-width forms).
    """
    return unicodedata.normalize("NFKC", text)


def apply_substitutions(text: str, substitutions: Mapping[str, str]) -> str:
    """Replace every key of ``substitutions`` found in ``text``."""
    for char, replacement in substitutions.items():
        text = text.replace(char, replacement)
    return text


def _encodable(char: str, codec: str) -> bool:
    try:
        char.encode(codec)
    except UnicodeEncodeError:
        return False
    return True


def transcode_to_codepage(
    text: str,
    codec: str,
    replace_char: str = "?",
    apply_lookalikes: bool = True,
    apply_accents: bool = True,
) -> str:
    """Reduce ``text`` to characters the codec can encode.

    Args:
        text: Unicode text to transcode.
        codec: Python codec of the target codepage (e.g., "cp437").
        replace_char: Character used for unmappable characters.
        apply_lookalikes: Whether to apply look-alike substitutions.
        apply_accents: Whether to apply accent fallbacks.

    Returns:
        Text containing only characters encodable with ``codec``.
    """
    if not text:
        return text

    normalized = normalize_unicode(text)
    result_chars: list[str] = []

    for char in normalized:
        if _encodable(char, codec):
            result_chars.append(char)
            continue

        if apply_lookalikes and char in LOOKALIKE_MAP:
            replacement = LOOKALIKE_MAP[char]
            if all(_encodable(c, codec) for c in replacement):
                result_chars.append(replacement)
                continue

        if apply_accents and char in ACCENT_FALLBACK_MAP:
            replacement = ACCENT_FALLBACK_MAP[char]
            if all(_encodable(c, codec) for c in replacement):
                result_chars.append(replacement)
                continue

        result_chars.append(replace_char)

    return "".join(result_chars)


def get_unmappable_chars(text: str, codec: str) -> list[str]:
    """Return the characters of ``text`` that will print as the replacement char.

    Useful for warning about text that will not print as written.
    """
    if not text:
        return []

    unmappable: list[str] = []
    for char in normalize_unicode(text):
        if char in unmappable or _encodable(char, codec):
            continue
        if char not in LOOKALIKE_MAP and char not in ACCENT_FALLBACK_MAP:
            unmappable.append(char)
    return unmappable
