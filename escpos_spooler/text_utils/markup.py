"""Merging of transcoded text with raw byte insertions."""

from __future__ import annotations

from collections.abc import Mapping

from ..const import MARKUP_CLOSE, MARKUP_OPEN
from .asciifier import Asciifier


def markup_token(key: object) -> str:
    """Return the markup token for ``key`` as it appears in text."""
    return f"{MARKUP_OPEN}{key}{MARKUP_CLOSE}"


def _as_bytes(value: bytes | bytearray | str) -> bytes:
    if isinstance(value, str):
        return value.encode("latin-1")
    return bytes(value)


def merge_texts(
    text: str,
    raw_insertions: Mapping[object, bytes | bytearray | str] | None,
    codepage: int | None,
    asciifier: Asciifier,
) -> bytes:
    """Transcode ``text`` and replace markup tokens with raw bytes.

    Every ``{::escper}key{:/}`` in the transcoded text is replaced verbatim by
    ``raw_insertions[key]``. Tokens are transcoded the same way as the text, so
    keys outside ASCII match too. String values are taken as latin-1 byte
    strings. Tokens without an insertion stay in the output.
    """
    entry = asciifier.entry(codepage)
    merged = asciifier.encode(entry, text)
    for key, value in (raw_insertions or {}).items():
        token = asciifier.encode(entry, markup_token(key))
        merged = merged.replace(token, _as_bytes(value))
    return merged
