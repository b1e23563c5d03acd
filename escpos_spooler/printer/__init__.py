"""Printer device handling for the ESC/POS spooler.

This package opens configured printers as serial ports or files, falls back
to spool files when a device is unavailable, and writes print jobs to them.
"""

from __future__ import annotations

from .config import (
    PRINTER_DEFINITION_SCHEMA,
    PrinterDefinition,
    SpoolerSettings,
    default_printer_definitions,
    load_printer_definitions,
)
from .devices import Device, FileDevice, SerialDevice
from .dispatcher import WriteDispatcher
from .opener import DeviceOpener
from .registry import OpenHandle, PrinterId, PrinterRegistry
from .spooler import EscposSpooler

__all__ = [
    "PRINTER_DEFINITION_SCHEMA",
    "Device",
    "DeviceOpener",
    "EscposSpooler",
    "FileDevice",
    "OpenHandle",
    "PrinterDefinition",
    "PrinterId",
    "PrinterRegistry",
    "SerialDevice",
    "SpoolerSettings",
    "WriteDispatcher",
    "default_printer_definitions",
    "load_printer_definitions",
]
