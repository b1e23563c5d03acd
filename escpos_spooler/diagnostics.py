from __future__ import annotations

from typing import Any

from .printer import EscposSpooler

REDACTED = "**REDACTED**"


def get_spooler_diagnostics(spooler: EscposSpooler, *, redact_paths: bool = False) -> dict[str, Any]:
    """Return a snapshot of a spooler's settings and open printers."""

    def _path(value: Any) -> Any:
        if value is None:
            return None
        return REDACTED if redact_paths else str(value)

    printers: dict[str, Any] = {}
    for printer_id, handle in spooler.registry.snapshot():
        device = handle.device
        printers[str(printer_id)] = {
            "name": handle.name,
            "path": _path(handle.path),
            "codepage": handle.codepage,
            "copies": handle.copies,
            "device_type": type(device).__name__,
            "shared_by": device.ref_count,
        }

    return {
        "settings": {
            "safe_device_path": spooler.settings.safe_device_path,
            "safe_device_root": _path(spooler.settings.safe_device_root),
            "fallback_root": _path(spooler.settings.fallback_root),
            "locale": spooler.settings.locale,
        },
        "configured_printers": len(spooler.definitions),
        "codepages": spooler.asciifier.codepages,
        "printers": printers,
        "write_mismatches": spooler.mismatch_count,
        "close_failures": {
            str(printer_id): reason for printer_id, (_handle, reason) in spooler.close_failures.items()
        },
    }
