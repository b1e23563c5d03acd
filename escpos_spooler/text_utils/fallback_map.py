"""Fallback replacements for characters a codepage cannot encode.

Only consulted after direct encoding to the printer's codec failed, so
characters native to a codepage (box drawing in CP437, Cyrillic in CP866)
always reach the printer unchanged.
"""

from __future__ import annotations

# Typography, symbols and drawing characters -> ASCII
LOOKALIKE_MAP: dict[str, str] = {
    # Quotes
    "‘": "'",  # LEFT SINGLE QUOTATION MARK
    "’": "'",  # RIGHT SINGLE QUOTATION MARK
    "‚": ",",  # SINGLE LOW-9 QUOTATION MARK
    "“": '"',  # LEFT DOUBLE QUOTATION MARK
    "”": '"',  # RIGHT DOUBLE QUOTATION MARK
    "„": '"',  # DOUBLE LOW-9 QUOTATION MARK
    "«": "<<",
    "»": ">>",
    "‹": "<",
    "›": ">",
    # Dashes
    "‐": "-",
    "‑": "-",
    "–": "-",  # EN DASH
    "—": "--",  # EM DASH
    "−": "-",  # MINUS SIGN
    # Spaces
    "\u00a0": " ",  # NO-BREAK SPACE
    "\u2009": " ",  # THIN SPACE
    "\u200b": "",  # ZERO WIDTH SPACE
    "\u202f": " ",  # NARROW NO-BREAK SPACE
    "\ufeff": "",  # ZERO WIDTH NO-BREAK SPACE (BOM)
    # Dots and bullets
    "…": "...",
    "·": ".",
    "•": "*",
    # Arrows
    "←": "<-",
    "→": "->",
    "↑": "^",
    "↓": "v",
    # Math
    "×": "x",
    "≠": "!=",
    "≤": "<=",
    "≥": ">=",
    "‰": "o/oo",
    # Currency
    "€": "EUR",
    "₤": "GBP",
    "₹": "INR",
    "₽": "RUB",
    # Marks
    "©": "(C)",
    "®": "(R)",
    "™": "(TM)",
    "№": "No.",
    # Box drawing (native to CP437/CP850)
    "─": "-",
    "│": "|",
    "┌": "+",
    "┐": "+",
    "└": "+",
    "┘": "+",
    "├": "+",
    "┤": "+",
    "┬": "+",
    "┴": "+",
    "┼": "+",
    "═": "=",
    "║": "|",
    "╔": "+",
    "╗": "+",
    "╚": "+",
    "╝": "+",
    # Blocks
    "█": "#",
    "░": ".",
    "▒": "+",
    "▓": "#",
    # Check marks
    "✓": "v",
    "✔": "v",
    "✗": "x",
}

# Accented letters -> base letter, for codepages without them
ACCENT_FALLBACK_MAP: dict[str, str] = {
    "à": "a", "á": "a", "â": "a", "ã": "a", "ä": "a", "å": "a",
    "À": "A", "Á": "A", "Â": "A", "Ã": "A", "Ä": "A", "Å": "A",
    "è": "e", "é": "e", "ê": "e", "ë": "e",
    "È": "E", "É": "E", "Ê": "E", "Ë": "E",
    "ì": "i", "í": "i", "î": "i", "ï": "i",
    "Ì": "I", "Í": "I", "Î": "I", "Ï": "I",
    "ò": "o", "ó": "o", "ô": "o", "õ": "o", "ö": "o", "ø": "o",
    "Ò": "O", "Ó": "O", "Ô": "O", "Õ": "O", "Ö": "O", "Ø": "O",
    "ù": "u", "ú": "u", "û": "u", "ü": "u",
    "Ù": "U", "Ú": "U", "Û": "U", "Ü": "U",
    "ñ": "n", "Ñ": "N",
    "ç": "c", "Ç": "C",
    "ß": "ss",
    "æ": "ae", "Æ": "AE",
    "œ": "oe", "Œ": "OE",
    "ć": "c", "Ć": "C", "č": "c", "Č": "C",
    "ę": "e", "Ę": "E", "ě": "e", "Ě": "E",
    "ł": "l", "Ł": "L",
    "ń": "n", "Ń": "N", "ň": "n", "Ň": "N",
    "ś": "s", "Ś": "S", "š": "s", "Š": "S", "ş": "s", "Ş": "S",
    "ź": "z", "Ź": "Z", "ż": "z", "Ż": "Z", "ž": "z", "Ž": "Z",
    "ą": "a", "Ą": "A",
    "ğ": "g", "Ğ": "G",
    "ı": "i", "İ": "I",
    "ř": "r", "Ř": "R",
}
