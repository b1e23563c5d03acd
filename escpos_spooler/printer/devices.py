"""Output devices a printer handle writes to.

Both transports expose the same write/flush/close contract, so the rest of the
spooler never needs to know whether it talks to a serial line or a file.
Devices are reference counted: several printer ids may share one device, and
the underlying resource is released when the last of them closes it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import errno
import logging
import threading
from typing import IO, Any

import serial

from ..exceptions import DeviceOpenError
from ..security import sanitize_log_message

_LOGGER = logging.getLogger(__name__)


def _open_error(path: str, err: BaseException) -> DeviceOpenError:
    code = getattr(err, "errno", None)
    return DeviceOpenError(
        path,
        sanitize_log_message(str(err)),
        busy=code == errno.EBUSY,
        errno=code,
    )


class Device(ABC):
    """Abstract writable, flushable, closable output device."""

    is_file: bool = False

    def __init__(self, path: str) -> None:
        self.path = path
        self._refs = 1
        self._closed = False
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        """Lock serializing writes from every id sharing this device."""
        return self._lock

    @property
    def ref_count(self) -> int:
        """Return how many registry entries reference this device."""
        return self._refs

    @property
    def closed(self) -> bool:
        """Return True once the underlying resource has been released."""
        return self._closed

    def acquire(self) -> Device:
        """Add a reference for another printer id and return the device."""
        with self._lock:
            self._refs += 1
        return self

    def write(self, data: bytes) -> int:
        """Write ``data`` and return the number of bytes the transport accepted."""
        with self._lock:
            written = self._write(data)
        return 0 if written is None else int(written)

    def flush(self) -> None:
        """Push buffered bytes to the transport."""
        with self._lock:
            self._flush()

    def close(self) -> bool:
        """Drop one reference, releasing the resource with the last one.

        Returns:
            True if the underlying resource was released by this call.

        Raises:
            Exception: Releasing the resource failed; the reference is kept so
                the close can be retried.
        """
        with self._lock:
            if self._closed:
                return False
            if self._refs > 1:
                self._refs -= 1
                return False
            self._release()
            self._refs = 0
            self._closed = True
            return True

    @abstractmethod
    def _write(self, data: bytes) -> int | None:
        """Write to the transport."""

    @abstractmethod
    def _flush(self) -> None:
        """Flush the transport."""

    @abstractmethod
    def _release(self) -> None:
        """Close the transport."""


class SerialDevice(Device):
    """Serial line opened with pyserial."""

    def __init__(self, path: str, port: Any, baud_rate: int) -> None:
        super().__init__(path)
        self._port = port
        self.baud_rate = baud_rate

    @classmethod
    def open(cls, path: str, baud_rate: int) -> SerialDevice:
        """Open ``path`` as a serial port.

        Raises:
            DeviceOpenError: The path is not a usable serial port.
        """
        try:
            port = serial.Serial(path, baud_rate)
        except (serial.SerialException, OSError, ValueError) as err:
            raise _open_error(path, err) from err
        return cls(path, port, baud_rate)

    def _write(self, data: bytes) -> int | None:
        return self._port.write(data)

    def _flush(self) -> None:
        self._port.flush()

    def _release(self) -> None:
        self._port.close()

    def __repr__(self) -> str:
        return f"<SerialDevice {self.path} @{self.baud_rate}bps>"


class FileDevice(Device):
    """Device node or regular file opened in binary mode."""

    is_file = True

    def __init__(self, path: str, handle: IO[bytes], mode: str) -> None:
        super().__init__(path)
        self._handle = handle
        self.mode = mode

    @classmethod
    def open(cls, path: str, mode: str) -> FileDevice:
        """Open ``path`` as a file with ``mode`` (``wb`` or ``ab``).

        Raises:
            DeviceOpenError: The file cannot be opened. ``busy`` is set when
                the operating system reports the resource as busy.
        """
        try:
            handle = open(path, mode)  # noqa: SIM115
        except OSError as err:
            raise _open_error(path, err) from err
        return cls(path, handle, mode)

    def _write(self, data: bytes) -> int | None:
        return self._handle.write(data)

    def _flush(self) -> None:
        self._handle.flush()

    def _release(self) -> None:
        self._handle.close()

    def __repr__(self) -> str:
        return f"<FileDevice {self.path} mode={self.mode!r}>"
