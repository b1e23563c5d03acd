"""ESC/POS spooler: open printers, print to them and close them again."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
from types import TracebackType
from typing import Any

from ..codepages import CodepageEntry, load_codepage_table
from ..security import sanitize_log_message
from ..text_utils import Asciifier, merge_texts
from .calibration import character_test_payload, identification_payload
from .config import (
    PrinterDefinition,
    SpoolerSettings,
    default_printer_definitions,
    load_printer_definitions,
)
from .devices import Device
from .dispatcher import WriteDispatcher
from .opener import DeviceOpener
from .registry import OpenHandle, PrinterId, PrinterRegistry

_LOGGER = logging.getLogger(__name__)

PrinterDefinitions = (
    PrinterDefinition | Mapping[str, Any] | Iterable[PrinterDefinition | Mapping[str, Any]]
)


class EscposSpooler:
    """Print raw ESC/POS text on a set of configured printers.

    Usage:
        with EscposSpooler([{"path": "/dev/usb/lp0", "codepage": 16}]) as spooler:
            spooler.print(0, "Hello{::escper}cut{:/}", {"cut": b"\\x1dV\\x00"})

    Devices that cannot be opened are replaced by spool files, so printing only
    fails for ids that were never opened.
    """

    def __init__(
        self,
        definitions: PrinterDefinitions | None = None,
        *,
        settings: SpoolerSettings | None = None,
        subdomain: str | None = None,
        codepage_table: Mapping[int, CodepageEntry] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._log = logger or _LOGGER
        self.settings = settings or SpoolerSettings.from_env()
        if definitions is None:
            self._log.info("No printers configured, using common device paths")
            self.definitions = default_printer_definitions()
        else:
            self.definitions = load_printer_definitions(definitions)

        # Table errors are fatal here rather than on the first print
        table = codepage_table if codepage_table is not None else load_codepage_table()
        self.asciifier = Asciifier(table)

        self.registry = PrinterRegistry()
        self.close_failures: dict[PrinterId, tuple[OpenHandle, str]] = {}
        self._opener = DeviceOpener(self.settings, subdomain=subdomain, logger=self._log)
        self._dispatcher = WriteDispatcher(self.registry, self.asciifier, logger=self._log)

    def __enter__(self) -> EscposSpooler:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def mismatch_count(self) -> int:
        """Return how many writes accepted fewer bytes than sent."""
        return self._dispatcher.mismatch_count

    def open(self) -> None:
        """Open a device for every configured printer."""
        self._log.debug("Opening %s printers", len(self.definitions))
        with self.registry.lock:
            self._opener.open(self.definitions, self.registry)

    def print(
        self,
        printer_id: PrinterId,
        text: str,
        raw_insertions: Mapping[object, bytes | bytearray | str] | None = None,
    ) -> tuple[int, bytes] | None:
        """Print ``text`` on ``printer_id``.

        ``{::escper}key{:/}`` tokens in ``text`` are replaced by the raw bytes
        in ``raw_insertions[key]`` after transcoding.

        Returns:
            Bytes written by the last copy and the bytes sent, or None when
            no printer is open.

        Raises:
            UnknownPrinterIdError: ``printer_id`` is not open.
        """
        return self._dispatcher.print(printer_id, text, raw_insertions)

    def merge_texts(
        self,
        text: str,
        raw_insertions: Mapping[object, bytes | bytearray | str] | None = None,
        codepage: int = 0,
    ) -> bytes:
        """Return ``text`` transcoded for ``codepage`` with raw insertions applied."""
        return merge_texts(text, raw_insertions, codepage, self.asciifier)

    def identify(self, chartest: bool = False) -> None:
        """Print a calibration page on every printer, then close them.

        Args:
            chartest: Print every printable character code instead of the
                banner naming the printer and its device.
        """
        self._log.debug("Testing printers")
        self.open()
        try:
            for printer_id, handle in self.registry.snapshot():
                self._log.debug("Testing %r", handle.device)
                if chartest:
                    text, insertions = character_test_payload()
                else:
                    text, insertions = identification_payload(handle, self.settings.locale)
                self.print(printer_id, text, insertions)
        finally:
            self.close()

    def close(self) -> None:
        """Close every open printer.

        Entries leave the registry even when their device fails to close; those
        are kept in ``close_failures`` and retried by the next call.
        """
        self._log.debug("Closing printers")
        with self.registry.lock:
            pending = list(self.close_failures.items())
            self.close_failures.clear()
            for printer_id, (handle, _reason) in pending:
                self._close_device(printer_id, handle)

            for printer_id, handle in self.registry.snapshot():
                self.registry.remove(printer_id)
                self._close_device(printer_id, handle)

    def _close_device(self, printer_id: PrinterId, handle: OpenHandle) -> None:
        device: Device = handle.device
        try:
            released = device.close()
        except Exception as err:
            reason = sanitize_log_message(str(err))
            self.close_failures[printer_id] = (handle, reason)
            self._log.warning("Error closing %s @ %r: %s", handle.name, device, reason)
            return
        if released:
            self._log.debug("Closed %s @ %r", handle.name, device)
        else:
            self._log.debug("Released %s, %r still in use", handle.name, device)
