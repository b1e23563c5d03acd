"""Tests for the Asciifier and the transcoding helpers."""

import logging

import pytest

from escpos_spooler.codepages import CodepageEntry
from escpos_spooler.text_utils import Asciifier, get_unmappable_chars, transcode_to_codepage


@pytest.fixture(scope="module")
def asciifier() -> Asciifier:
    return Asciifier()


class TestProcess:
    """Tests for Asciifier.process."""

    def test_ascii_passes_through(self, asciifier):
        assert asciifier.process(0, "Hello\r\n\x1b@") == b"Hello\r\n\x1b@"

    def test_native_characters_are_encoded(self, asciifier):
        assert asciifier.process(0, "é") == b"\x82"
        assert asciifier.process(17, "Привет") == "Привет".encode("cp866")

    def test_substitutions_apply_before_encoding(self, asciifier):
        assert asciifier.process(0, "5 €") == b"5 EUR"
        assert asciifier.process(16, "5 €") == b"5 \x80"

    def test_lookalikes(self, asciifier):
        assert asciifier.process(0, "“hi” — ok") == b'"hi" -- ok'

    def test_accent_fallback(self, asciifier):
        assert asciifier.process(0, "Łódź") == b"L\xa2dz"

    def test_unknown_codepage_falls_back_to_zero(self, asciifier, caplog):
        with caplog.at_level(logging.WARNING):
            assert asciifier.process(999, "é") == b"\x82"
        assert "Unknown codepage 999" in caplog.text

    def test_none_codepage_uses_default(self, asciifier):
        assert asciifier.process(None, "é") == b"\x82"

    def test_custom_table(self):
        table = {0: CodepageEntry(id=0, name="LATIN1", codec="latin-1", substitutions={"x": "y"})}
        assert Asciifier(table).process(0, "éx") == b"\xe9y"


class TestAllChars:
    """Tests for the calibration character set."""

    def test_covers_printable_ranges(self):
        chars = Asciifier.all_chars()
        for code in list(range(0x20, 0x7F)) + list(range(0xA0, 0x100)):
            assert chr(code) in chars
        for code in range(0x7F, 0xA0):
            assert chr(code) not in chars

    def test_rows_of_sixteen(self):
        rows = Asciifier.all_chars().splitlines()
        assert len(rows) == 12
        assert all(len(row) == 16 for row in rows)

    def test_rows_start_on_table_columns(self):
        rows = Asciifier.all_chars().splitlines()
        assert rows[0].startswith(" !\"#")
        assert rows[5] == "pqrstuvwxyz{|}~ "
        assert rows[6][0] == "\xa0"
        assert rows[-1][-1] == "\xff"

    def test_is_latin1_encodable(self):
        assert Asciifier.all_chars().encode("latin-1")


class TestTranscoding:
    """Tests for transcode_to_codepage and get_unmappable_chars."""

    def test_empty_text(self):
        assert transcode_to_codepage("", "cp437") == ""

    def test_native_box_drawing_preserved(self):
        assert transcode_to_codepage("┌─┐", "cp437") == "┌─┐"
        assert transcode_to_codepage("┌─┐", "cp1252") == "+-+"

    def test_replacement_char(self):
        assert transcode_to_codepage("漢", "cp437") == "?"
        assert transcode_to_codepage("漢", "cp437", replace_char="_") == "_"

    def test_unmappable_chars(self):
        assert get_unmappable_chars("a漢b漢€", "cp437") == ["漢"]
        assert get_unmappable_chars("", "cp437") == []
