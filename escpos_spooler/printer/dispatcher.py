"""Writing merged print jobs to open devices."""

from __future__ import annotations

from collections.abc import Mapping
import logging

from ..security import sanitize_log_message
from ..text_utils import Asciifier, merge_texts
from .registry import PrinterId, PrinterRegistry

_LOGGER = logging.getLogger(__name__)

_PREVIEW_LENGTH = 60


class WriteDispatcher:
    """Write print jobs to the devices of a registry."""

    def __init__(
        self,
        registry: PrinterRegistry,
        asciifier: Asciifier,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._registry = registry
        self._asciifier = asciifier
        self._log = logger or _LOGGER
        self.mismatch_count = 0
        self.last_mismatch: tuple[PrinterId, int, int] | None = None

    def print(
        self,
        printer_id: PrinterId,
        text: str,
        raw_insertions: Mapping[object, bytes | bytearray | str] | None = None,
    ) -> tuple[int, bytes] | None:
        """Print ``text`` on ``printer_id`` once per configured copy.

        Returns:
            The byte count of the last write and the bytes sent, or None when
            no printer is open.

        Raises:
            UnknownPrinterIdError: Printers are open but none under ``printer_id``.
        """
        if not self._registry:
            self._log.debug("No printers open, skipping print for %s", printer_id)
            return None

        handle = self._registry.get(printer_id)
        output = merge_texts(text, raw_insertions, handle.codepage, self._asciifier)
        device = handle.device

        self._log.debug("Printing on %s @ %r", handle.name, device)
        bytes_written = 0
        with device.lock:
            for _ in range(handle.copies):
                bytes_written = device.write(output)
                if bytes_written != len(output):
                    self.mismatch_count += 1
                    self.last_mismatch = (printer_id, len(output), bytes_written)
                    self._log.warning(
                        "Byte count mismatch on %s: sent %s written %s",
                        handle.name,
                        len(output),
                        bytes_written,
                    )
            device.flush()

        self._log.debug(
            "Printed %s: %s",
            handle.name,
            sanitize_log_message(output[:_PREVIEW_LENGTH].decode("latin-1")),
        )
        return bytes_written, output
