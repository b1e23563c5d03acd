from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
import serial

from escpos_spooler.printer import EscposSpooler, SpoolerSettings


@pytest.fixture(autouse=True)
def no_serial_ports() -> Generator[None, None, None]:
    """Make every serial open fail unless a test patches it otherwise."""
    with patch("serial.Serial", side_effect=serial.SerialException("could not open port")):
        yield


@pytest.fixture
def settings(tmp_path: Path) -> SpoolerSettings:
    return SpoolerSettings(
        safe_device_path=False,
        safe_device_root=tmp_path / "safe",
        fallback_root=tmp_path / "fallback",
        locale="en",
    )


@pytest.fixture
def make_spooler(settings: SpoolerSettings) -> Callable[..., EscposSpooler]:
    def _make(definitions: Any = (), **kwargs: Any) -> EscposSpooler:
        kwargs.setdefault("settings", settings)
        return EscposSpooler(list(definitions), **kwargs)

    return _make


@pytest.fixture
def printer_file(tmp_path: Path) -> Path:
    path = tmp_path / "lp0"
    path.write_bytes(b"")
    return path
