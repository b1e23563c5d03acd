"""Text to printer-byte transcoder keyed by numeric codepage id."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import TYPE_CHECKING

from ..const import DEFAULT_CODEPAGE
from .transcoding import apply_substitutions, get_unmappable_chars, transcode_to_codepage

if TYPE_CHECKING:
    from ..codepages import CodepageEntry

_LOGGER = logging.getLogger(__name__)

# Printable ASCII and the printable upper half of an 8-bit table, 16-aligned
_CALIBRATION_RANGES = (range(0x20, 0x80), range(0xA0, 0x100))
_NON_PRINTABLE = 0x7F
_CALIBRATION_ROW = 16


class Asciifier:
    """Convert Unicode text into the byte encoding of a printer codepage."""

    def __init__(self, table: Mapping[int, CodepageEntry] | None = None) -> None:
        if table is None:
            from ..codepages import load_codepage_table  # noqa: PLC0415

            table = load_codepage_table()
        self._table = dict(table)

    @property
    def codepages(self) -> list[int]:
        """Return the known codepage ids."""
        return sorted(self._table)

    def entry(self, codepage: int | None) -> CodepageEntry:
        """Return the table entry for ``codepage``, falling back to codepage 0."""
        if codepage is None:
            return self._table[DEFAULT_CODEPAGE]
        try:
            return self._table[codepage]
        except KeyError:
            _LOGGER.warning("Unknown codepage %s, using codepage %s", codepage, DEFAULT_CODEPAGE)
            return self._table[DEFAULT_CODEPAGE]

    def process(self, codepage: int | None, text: str) -> bytes:
        """Transcode ``text`` to bytes for ``codepage``."""
        return self.encode(self.entry(codepage), text)

    def encode(self, entry: CodepageEntry, text: str) -> bytes:
        """Transcode ``text`` with an already resolved table entry."""
        substituted = apply_substitutions(text, entry.substitutions)
        transcoded = transcode_to_codepage(substituted, entry.codec)
        if _LOGGER.isEnabledFor(logging.DEBUG):
            missing = get_unmappable_chars(substituted, entry.codec)
            if missing:
                _LOGGER.debug("Characters not printable on %s: %s", entry.name, "".join(missing))
        return transcoded.encode(entry.codec, errors="replace")

    @staticmethod
    def all_chars() -> str:
        """Return the calibration string covering every printable character code.

        Rows of 16 characters, so a printout lines up with the code table.
        DEL has no glyph and is printed as a space.
        """
        chars = [
            " " if code == _NON_PRINTABLE else chr(code)
            for span in _CALIBRATION_RANGES
            for code in span
        ]
        rows = [
            "".join(chars[i : i + _CALIBRATION_ROW])
            for i in range(0, len(chars), _CALIBRATION_ROW)
        ]
        return "\n".join(rows) + "\n"
