"""Spool ESC/POS print jobs to serial and file-backed receipt printers."""

from __future__ import annotations

from .codepages import CodepageEntry, load_codepage_table
from .exceptions import (
    CodepageTableError,
    ConfigurationError,
    DeviceOpenError,
    EscposSpoolerError,
    SpoolFallbackError,
    UnknownPrinterIdError,
)
from .printer import (
    EscposSpooler,
    OpenHandle,
    PrinterDefinition,
    PrinterRegistry,
    SpoolerSettings,
)
from .text_utils import Asciifier, merge_texts

__version__ = "1.0.0"

__all__ = [
    "Asciifier",
    "CodepageEntry",
    "CodepageTableError",
    "ConfigurationError",
    "DeviceOpenError",
    "EscposSpooler",
    "EscposSpoolerError",
    "OpenHandle",
    "PrinterDefinition",
    "PrinterRegistry",
    "SpoolFallbackError",
    "SpoolerSettings",
    "UnknownPrinterIdError",
    "load_codepage_table",
    "merge_texts",
]
