"""Constants for the ESC/POS spooler."""

from __future__ import annotations

from escpos.constants import ESC, HW_INIT, PAPER_FULL_CUT

# Environment configuration keys
ENV_SAFE_DEVICE_PATH = "ESCPOS_SPOOLER_SAFE_DEVICE_PATH"
ENV_SAFE_DEVICE_ROOT = "ESCPOS_SPOOLER_SAFE_DEVICE_ROOT"
ENV_FALLBACK_ROOT = "ESCPOS_SPOOLER_FALLBACK_ROOT"
ENV_LOCALE = "ESCPOS_SPOOLER_LOCALE"

# Printer definition keys
CONF_ID = "id"
CONF_NAME = "name"
CONF_PATH = "path"
CONF_BAUD_RATE = "baud_rate"
CONF_CODEPAGE = "codepage"
CONF_COPIES = "copies"

# Default values
DEFAULT_BAUD_RATE = 9600
DEFAULT_CODEPAGE = 0
DEFAULT_COPIES = 1
DEFAULT_LOCALE = "en"
DEFAULT_SAFE_DEVICE_ROOT = "/var/lib/escpos_spooler"
FALLBACK_DIR_NAME = "escpos_spooler"

# File open modes
FILE_MODE_WRITE = "wb"
FILE_MODE_APPEND = "ab"

# Safe device path relocation
SAFE_DEVICE_SUFFIX = ".bill"

# Spool fallback files
FALLBACK_SUFFIX = ".spool"
FALLBACK_BUSY_MARKER = "fallback-busy"
FALLBACK_NOTBUSY_MARKER = "fallback-notbusy"

# Conventional device nodes tried when no printers are configured.
# Development convenience only; most of these end up on a spool file.
DEFAULT_DEVICE_PATHS: list[str] = [
    "/dev/ttyUSB0",
    "/dev/ttyUSB1",
    "/dev/ttyUSB2",
    "/dev/usb/lp0",
    "/dev/usb/lp1",
    "/dev/usb/lp2",
    "/dev/salor-hospitality-front",
    "/dev/salor-hospitality-top",
    "/dev/salor-hospitality-back-top-left",
    "/dev/salor-hospitality-back-top-right",
    "/dev/salor-hospitality-back-bottom-left",
    "/dev/salor-hospitality-back-bottom-right",
]

# Raw byte markup: {::escper}key{:/}
MARKUP_OPEN = "{::escper}"
MARKUP_CLOSE = "{:/}"

# ESC/POS sequences used by calibration prints
STYLE_BANNER = ESC + b"!\x38"  # double tall, double wide, bold
STYLE_FONT_A = ESC + b"!\x00"
FEED_AND_CUT = b"\n" * 6 + PAPER_FULL_CUT
INIT = HW_INIT

# Localized calibration banner
TEST_BANNER_MESSAGES: dict[str, str] = {
    "en": "Printing test",
    "de": "Testdruck",
    "fr": "Impression de test",
    "es": "Prueba de impresión",
    "it": "Stampa di prova",
    "pl": "Wydruk testowy",
    "tr": "Test baskısı",
    "el": "Δοκιμαστική εκτύπωση",
    "ru": "Тестовая печать",
}
