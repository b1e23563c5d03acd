"""Payloads for calibration prints."""

from __future__ import annotations

from ..const import (
    DEFAULT_LOCALE,
    FEED_AND_CUT,
    INIT,
    STYLE_BANNER,
    STYLE_FONT_A,
    TEST_BANNER_MESSAGES,
)
from ..text_utils import Asciifier, markup_token
from .registry import OpenHandle

INSERT_INIT = "init"
INSERT_CUT = "cut"
INSERT_CHARTEST = "chartest"
INSERT_BANNER_STYLE = "banner"
INSERT_FONT_A = "font_a"


def banner_text(locale: str | None) -> str:
    """Return the calibration banner text for ``locale`` (e.g. ``de`` or ``de_DE``)."""
    if locale:
        for candidate in (locale, locale.replace("-", "_").split("_")[0]):
            if candidate in TEST_BANNER_MESSAGES:
                return TEST_BANNER_MESSAGES[candidate]
    return TEST_BANNER_MESSAGES[DEFAULT_LOCALE]


def character_test_payload() -> tuple[str, dict[str, bytes]]:
    """Return text and raw insertions printing every printable character code.

    The calibration characters go out as raw latin-1 bytes so the printer shows
    its own glyph for each code.
    """
    text = markup_token(INSERT_INIT) + markup_token(INSERT_CHARTEST) + markup_token(INSERT_CUT)
    return text, {
        INSERT_INIT: INIT,
        INSERT_CHARTEST: Asciifier.all_chars().encode("latin-1"),
        INSERT_CUT: FEED_AND_CUT,
    }


def identification_payload(handle: OpenHandle, locale: str | None) -> tuple[str, dict[str, bytes]]:
    """Return text and raw insertions for a banner naming the printer and device."""
    text = (
        markup_token(INSERT_INIT)
        + markup_token(INSERT_BANNER_STYLE)
        + f"{banner_text(locale)}\r\n"
        + markup_token(INSERT_FONT_A)
        + f"{handle.name}\r\n"
        + f"{handle.device!r}"
        + markup_token(INSERT_CUT)
    )
    return text, {
        INSERT_INIT: INIT,
        INSERT_BANNER_STYLE: STYLE_BANNER,
        INSERT_FONT_A: STYLE_FONT_A,
        INSERT_CUT: FEED_AND_CUT,
    }
