"""Resolution of printer definitions to open devices.

Each definition is tried as a serial port first, then as a file. When neither
works the output goes to a spool file under the fallback root, so every
definition ends up with exactly one registry entry and printing never has to
care whether the real device was reachable.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging
from pathlib import Path

from ..const import (
    FALLBACK_BUSY_MARKER,
    FALLBACK_NOTBUSY_MARKER,
    FALLBACK_SUFFIX,
    FILE_MODE_APPEND,
    FILE_MODE_WRITE,
    SAFE_DEVICE_SUFFIX,
)
from ..exceptions import DeviceOpenError, SpoolFallbackError
from ..security import sanitize_device_path, sanitize_filename
from .config import PrinterDefinition, SpoolerSettings
from .devices import Device, FileDevice, SerialDevice
from .registry import OpenHandle, PrinterId, PrinterRegistry

_LOGGER = logging.getLogger(__name__)


class DeviceOpener:
    """Open the devices of a list of printer definitions into a registry."""

    def __init__(
        self,
        settings: SpoolerSettings,
        *,
        subdomain: str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._settings = settings
        self._subdomain = subdomain
        self._log = logger or _LOGGER

    @property
    def file_mode(self) -> str:
        """Return the mode files are opened with."""
        return FILE_MODE_APPEND if self._settings.safe_device_path else FILE_MODE_WRITE

    def effective_path(self, path: str) -> str:
        """Return the path actually opened for a configured device path.

        In safe device path mode the path is flattened into a file name and
        moved below the safe root and the subdomain.
        """
        if not self._settings.safe_device_path:
            return path
        sanitized = sanitize_device_path(path)
        root = self._settings.safe_device_root
        if self._subdomain:
            root = root / sanitize_filename(self._subdomain)
        return str(root / f"{sanitized}{SAFE_DEVICE_SUFFIX}")

    def open(self, definitions: Sequence[PrinterDefinition], registry: PrinterRegistry) -> None:
        """Open every definition into ``registry``.

        The registry key is the definition id, or its index in ``definitions``
        when it has none. Ids already in the registry are left untouched.
        """
        for index, definition in enumerate(definitions):
            printer_id: PrinterId = definition.id if definition.id is not None else index
            if printer_id in registry:
                self._log.debug("Printer %s is already open", printer_id)
                continue
            registry.add(printer_id, self._open_one(printer_id, definition, registry))

    def _open_one(
        self,
        printer_id: PrinterId,
        definition: PrinterDefinition,
        registry: PrinterRegistry,
    ) -> OpenHandle:
        path = self.effective_path(definition.path)
        if self._settings.safe_device_path:
            try:
                Path(path).parent.mkdir(parents=True, exist_ok=True)
            except OSError as err:
                self._log.debug("Cannot create %s: %s", Path(path).parent, err)

        self._log.debug(
            "Trying to open %s@%s@%sbps", definition.name, path, definition.baud_rate
        )

        try:
            device: Device = SerialDevice.open(path, definition.baud_rate)
        except DeviceOpenError as err:
            self._log.debug("Failed to open %s as serial port: %s", path, err)
        else:
            self._log.debug("Opened serial port %r", device)
            return self._handle(definition, path, device)

        try:
            device = FileDevice.open(path, self.file_mode)
        except DeviceOpenError as err:
            if err.busy:
                return self._open_busy(printer_id, definition, path, registry)
            spool = self._open_spool(printer_id, definition, FALLBACK_NOTBUSY_MARKER)
            self._log.warning(
                "Could not open %s as serial port or file (%s), printing to %r instead",
                path,
                err,
                spool,
            )
            return self._handle(definition, spool.path, spool)

        self._log.debug("Opened file %r", device)
        return self._handle(definition, path, device)

    def _open_busy(
        self,
        printer_id: PrinterId,
        definition: PrinterDefinition,
        path: str,
        registry: PrinterRegistry,
    ) -> OpenHandle:
        self._log.debug("%s is busy, looking for an already open handle", path)
        shared = registry.find_file_device(path)
        if shared is not None:
            self._log.debug("Reusing %r for printer %s", shared, printer_id)
            return self._handle(definition, path, shared.acquire())

        spool = self._open_spool(printer_id, definition, FALLBACK_BUSY_MARKER)
        self._log.warning("%s is busy and not opened by us, printing to %r instead", path, spool)
        return self._handle(definition, spool.path, spool)

    def _open_spool(self, printer_id: PrinterId, definition: PrinterDefinition, marker: str) -> FileDevice:
        root = self._settings.fallback_root
        file_name = (
            f"{sanitize_filename(printer_id)}-{sanitize_filename(definition.name)}-{marker}{FALLBACK_SUFFIX}"
        )
        try:
            root.mkdir(parents=True, exist_ok=True)
            return FileDevice.open(str(root / file_name), self.file_mode)
        except (OSError, DeviceOpenError) as err:
            raise SpoolFallbackError(f"Cannot create spool file in {root}: {err}") from err

    @staticmethod
    def _handle(definition: PrinterDefinition, path: str, device: Device) -> OpenHandle:
        return OpenHandle(
            name=definition.name,
            path=path,
            copies=definition.copies,
            codepage=definition.codepage,
            device=device,
        )
