"""Shared test doubles."""

from pathlib import Path
from typing import Any

from escpos_spooler.printer import EscposSpooler, OpenHandle, PrinterDefinition
from escpos_spooler.printer.devices import Device


class FakeDevice(Device):
    """Device recording every call instead of talking to hardware."""

    def __init__(self, path: str = "/dev/fake", *, short_by: int = 0, close_error: Exception | None = None) -> None:
        super().__init__(path)
        self.writes: list[bytes] = []
        self.flush_count = 0
        self.release_count = 0
        self.short_by = short_by
        self.close_error = close_error

    def _write(self, data: bytes) -> int:
        self.writes.append(data)
        return max(0, len(data) - self.short_by)

    def _flush(self) -> None:
        self.flush_count += 1

    def _release(self) -> None:
        if self.close_error is not None:
            raise self.close_error
        self.release_count += 1


def add_fake(
    spooler: EscposSpooler,
    printer_id: Any,
    device: Device,
    *,
    copies: int = 1,
    codepage: int = 0,
) -> OpenHandle:
    """Register ``device`` in the spooler's registry under ``printer_id``."""
    handle = OpenHandle(
        name=f"printer-{printer_id}",
        path=device.path,
        copies=copies,
        codepage=codepage,
        device=device,
    )
    spooler.registry.add(printer_id, handle)
    return handle


def definition(path: Path | str, **kwargs: Any) -> PrinterDefinition:
    return PrinterDefinition(path=str(path), **kwargs)
