"""Input sanitizing helpers for device paths and log output."""

from __future__ import annotations

import re

MAX_LOG_MESSAGE_LENGTH = 500
MAX_COPIES = 99
MAX_BAUD_RATE = 4_000_000

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")
# Characters a shell or a path join would interpret
_HOSTILE_PATH_CHARS = re.compile(r"[/\s'\"&^$#!;*]")
_NON_PATH_CHARS = re.compile(r"[^\w/.\-@]")
_NON_FILENAME_CHARS = re.compile(r"[^\w.\-@]")
# "." and ".." would resolve to the current or parent directory
_LEADING_DOTS = re.compile(r"^\.+")


def sanitize_log_message(message: str, max_length: int = MAX_LOG_MESSAGE_LENGTH) -> str:
    """Strip control characters and truncate a message before logging it."""
    cleaned = _CONTROL_CHARS.sub("", str(message))
    if len(cleaned) > max_length:
        return cleaned[: max_length - 3] + "..."
    return cleaned


def sanitize_device_path(path: str) -> str:
    """Flatten a device path into a single safe file name component.

    ``/dev/usb/lp0`` becomes ``_dev_usb_lp0``.
    """
    flattened = _HOSTILE_PATH_CHARS.sub("_", path)
    return _NON_PATH_CHARS.sub("", flattened)


def sanitize_filename(value: object) -> str:
    """Return ``value`` reduced to characters safe inside a file name."""
    cleaned = _NON_FILENAME_CHARS.sub("_", str(value))
    return _LEADING_DOTS.sub("_", cleaned) or "_"


def validate_numeric_input(value: object, min_val: int, max_val: int, name: str) -> int:
    """Coerce ``value`` to int and check it lies within ``[min_val, max_val]``."""
    try:
        number = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError) as err:
        raise ValueError(f"{name} must be an integer (got {value!r})") from err
    if number < min_val or number > max_val:
        raise ValueError(f"{name} must be between {min_val} and {max_val} (got {number})")
    return number
