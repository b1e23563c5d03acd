"""Configuration dataclasses for printers and the spooler."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
import os
from pathlib import Path
import posixpath
import tempfile
from typing import Any

import voluptuous as vol

from ..const import (
    CONF_BAUD_RATE,
    CONF_CODEPAGE,
    CONF_COPIES,
    CONF_ID,
    CONF_NAME,
    CONF_PATH,
    DEFAULT_BAUD_RATE,
    DEFAULT_CODEPAGE,
    DEFAULT_COPIES,
    DEFAULT_DEVICE_PATHS,
    DEFAULT_LOCALE,
    DEFAULT_SAFE_DEVICE_ROOT,
    ENV_FALLBACK_ROOT,
    ENV_LOCALE,
    ENV_SAFE_DEVICE_PATH,
    ENV_SAFE_DEVICE_ROOT,
    FALLBACK_DIR_NAME,
)
from ..exceptions import ConfigurationError
from ..security import MAX_BAUD_RATE, MAX_COPIES, validate_numeric_input

_TRUE_VALUES = {"1", "true", "yes", "on"}

PRINTER_DEFINITION_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_ID, default=None): vol.Any(None, vol.All(str, vol.Length(min=1)), int),
        vol.Optional(CONF_NAME): str,
        vol.Required(CONF_PATH): vol.All(str, vol.Strip, vol.Length(min=1)),
        vol.Optional(CONF_BAUD_RATE, default=DEFAULT_BAUD_RATE): vol.All(
            vol.Coerce(int), vol.Range(min=1, max=MAX_BAUD_RATE)
        ),
        vol.Optional(CONF_CODEPAGE, default=DEFAULT_CODEPAGE): vol.All(vol.Coerce(int), vol.Range(min=0)),
        vol.Optional(CONF_COPIES, default=DEFAULT_COPIES): vol.All(
            vol.Coerce(int), vol.Range(min=1, max=MAX_COPIES)
        ),
    },
    extra=vol.REMOVE_EXTRA,
)


@dataclass(frozen=True)
class PrinterDefinition:
    """A configured printer. ``id`` defaults to the position in the printer list."""

    path: str
    name: str = ""
    id: str | int | None = None
    baud_rate: int = DEFAULT_BAUD_RATE
    codepage: int = DEFAULT_CODEPAGE
    copies: int = DEFAULT_COPIES

    def __post_init__(self) -> None:
        if not self.path:
            raise ConfigurationError("Printer path must not be empty")
        try:
            object.__setattr__(self, "copies", validate_numeric_input(self.copies, 1, MAX_COPIES, "copies"))
            object.__setattr__(
                self, "baud_rate", validate_numeric_input(self.baud_rate, 1, MAX_BAUD_RATE, "baud_rate")
            )
        except ValueError as err:
            raise ConfigurationError(str(err)) from err
        if not self.name:
            object.__setattr__(self, "name", posixpath.basename(self.path) or self.path)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PrinterDefinition:
        """Validate a mapping and build a definition from it."""
        try:
            validated = PRINTER_DEFINITION_SCHEMA(dict(data))
        except vol.Invalid as err:
            raise ConfigurationError(f"Invalid printer definition: {err}") from err
        return cls(
            path=validated[CONF_PATH],
            name=validated.get(CONF_NAME, ""),
            id=validated[CONF_ID],
            baud_rate=validated[CONF_BAUD_RATE],
            codepage=validated[CONF_CODEPAGE],
            copies=validated[CONF_COPIES],
        )


def load_printer_definitions(
    items: PrinterDefinition | Mapping[str, Any] | Iterable[PrinterDefinition | Mapping[str, Any]],
) -> list[PrinterDefinition]:
    """Normalize one or many definitions (or mappings) into a list."""
    if isinstance(items, (PrinterDefinition, Mapping)):
        items = [items]
    definitions: list[PrinterDefinition] = []
    for item in items:
        if isinstance(item, PrinterDefinition):
            definitions.append(item)
        elif isinstance(item, Mapping):
            definitions.append(PrinterDefinition.from_dict(item))
        else:
            raise ConfigurationError(f"Unsupported printer definition: {item!r}")
    return definitions


def default_printer_definitions() -> list[PrinterDefinition]:
    """Return one definition per conventional device node.

    Used when no printers are configured. Meant for development; most of the
    paths will not exist and end up on a fallback spool file.
    """
    return [PrinterDefinition(path=path, codepage=DEFAULT_CODEPAGE, copies=1) for path in DEFAULT_DEVICE_PATHS]


def _default_fallback_root() -> Path:
    return Path(tempfile.gettempdir()) / FALLBACK_DIR_NAME


@dataclass
class SpoolerSettings:
    """Runtime settings of the spooler."""

    safe_device_path: bool = False
    safe_device_root: Path = field(default_factory=lambda: Path(DEFAULT_SAFE_DEVICE_ROOT))
    fallback_root: Path = field(default_factory=_default_fallback_root)
    locale: str = DEFAULT_LOCALE

    def __post_init__(self) -> None:
        self.safe_device_root = Path(self.safe_device_root)
        self.fallback_root = Path(self.fallback_root)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SpoolerSettings:
        """Build settings from ``ESCPOS_SPOOLER_*`` environment variables."""
        env = os.environ if environ is None else environ
        settings = cls()
        if ENV_SAFE_DEVICE_PATH in env:
            settings.safe_device_path = env[ENV_SAFE_DEVICE_PATH].strip().lower() in _TRUE_VALUES
        if env.get(ENV_SAFE_DEVICE_ROOT):
            settings.safe_device_root = Path(env[ENV_SAFE_DEVICE_ROOT])
        if env.get(ENV_FALLBACK_ROOT):
            settings.fallback_root = Path(env[ENV_FALLBACK_ROOT])
        if env.get(ENV_LOCALE):
            settings.locale = env[ENV_LOCALE]
        return settings
