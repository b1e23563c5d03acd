"""Registry of open printer handles."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
import threading

from ..exceptions import UnknownPrinterIdError
from .devices import Device

PrinterId = str | int


@dataclass(frozen=True)
class OpenHandle:
    """An opened printer: definition values plus the device written to."""

    name: str
    path: str
    copies: int
    codepage: int
    device: Device


class PrinterRegistry:
    """Ordered mapping of printer id to open handle."""

    def __init__(self) -> None:
        self._handles: dict[PrinterId, OpenHandle] = {}
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        """Return the lock guarding the registry."""
        return self._lock

    def add(self, printer_id: PrinterId, handle: OpenHandle) -> None:
        """Register ``handle`` under ``printer_id``, replacing any previous entry."""
        with self._lock:
            self._handles[printer_id] = handle

    def get(self, printer_id: PrinterId) -> OpenHandle:
        """Return the handle for ``printer_id``.

        Raises:
            UnknownPrinterIdError: No handle is registered under the id.
        """
        with self._lock:
            try:
                return self._handles[printer_id]
            except KeyError:
                raise UnknownPrinterIdError(printer_id) from None

    def remove(self, printer_id: PrinterId) -> OpenHandle | None:
        """Remove and return the handle for ``printer_id`` if present."""
        with self._lock:
            return self._handles.pop(printer_id, None)

    def snapshot(self) -> list[tuple[PrinterId, OpenHandle]]:
        """Return the current entries as a list safe to iterate while mutating."""
        with self._lock:
            return list(self._handles.items())

    def find_file_device(self, path: str) -> Device | None:
        """Return an already open file device whose handle path is ``path``."""
        with self._lock:
            for handle in self._handles.values():
                if handle.path == path and handle.device.is_file and not handle.device.closed:
                    return handle.device
        return None

    def __contains__(self, printer_id: object) -> bool:
        with self._lock:
            return printer_id in self._handles

    def __iter__(self) -> Iterator[PrinterId]:
        return iter([printer_id for printer_id, _ in self.snapshot()])

    def __len__(self) -> int:
        with self._lock:
            return len(self._handles)

    def __bool__(self) -> bool:
        return len(self) > 0
