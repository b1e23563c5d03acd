"""Exceptions raised by the ESC/POS spooler."""

from __future__ import annotations


class EscposSpoolerError(Exception):
    """Base class for spooler errors."""


class ConfigurationError(EscposSpoolerError):
    """Raised when a printer definition or setting is invalid."""


class CodepageTableError(EscposSpoolerError):
    """Raised when the codepage table cannot be loaded."""


class UnknownPrinterIdError(EscposSpoolerError, LookupError):
    """Raised when printing to an id that is not in the registry."""

    def __init__(self, printer_id: object) -> None:
        super().__init__(f"No open printer with id {printer_id!r}")
        self.printer_id = printer_id


class DeviceOpenError(EscposSpoolerError):
    """Raised when a device path cannot be opened."""

    def __init__(self, path: str, reason: str, *, busy: bool = False, errno: int | None = None) -> None:
        super().__init__(f"Could not open {path}: {reason}")
        self.path = path
        self.busy = busy
        self.errno = errno


class SpoolFallbackError(EscposSpoolerError):
    """Raised when not even the fallback spool file can be created."""
