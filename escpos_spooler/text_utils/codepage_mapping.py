"""Codepage name to Python codec mapping."""

from __future__ import annotations

# Printer-side table names whose codec name is not a plain lower-casing
CODEPAGE_TO_CODEC: dict[str, str] = {
    "CP851": "cp869",
    "ISO_8859-1": "iso-8859-1",
    "ISO_8859-2": "iso-8859-2",
    "ISO_8859-7": "iso-8859-7",
    "ISO_8859-15": "iso-8859-15",
    "LATIN1": "latin-1",
    "UTF-8": "utf-8",
}


def get_codec_name(codepage: str) -> str:
    """Get the Python codec name for a codepage name.

    Args:
        codepage: Codepage name (e.g., "CP437", "ISO_8859-1").

    Returns:
        Python codec name.
    """
    if codepage.upper() in CODEPAGE_TO_CODEC:
        return CODEPAGE_TO_CODEC[codepage.upper()]

    normalized = codepage.upper().replace("-", "_").replace(" ", "")

    if normalized.startswith("CP") and normalized[2:].isdigit():
        return f"cp{normalized[2:]}"

    if normalized.startswith("ISO_8859_") or normalized.startswith("ISO8859_"):
        num = normalized.split("_")[-1]
        return f"iso-8859-{num}"

    return codepage.lower()
