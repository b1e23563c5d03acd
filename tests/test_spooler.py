"""Tests for printing through the spooler."""

import logging

import pytest

from escpos_spooler import EscposSpooler, UnknownPrinterIdError
from escpos_spooler.codepages import CodepageEntry
from escpos_spooler.const import DEFAULT_DEVICE_PATHS

from .helpers import FakeDevice, add_fake, definition


class TestPrint:
    """Tests for EscposSpooler.print."""

    @pytest.mark.parametrize("copies", [1, 2, 5])
    def test_writes_each_copy_and_flushes_once(self, make_spooler, copies):
        spooler = make_spooler()
        device = FakeDevice()
        add_fake(spooler, "bar", device, copies=copies)

        result = spooler.print("bar", "Hello")

        assert device.writes == [b"Hello"] * copies
        assert device.flush_count == 1
        assert result == (5, b"Hello")

    def test_merges_insertions_with_handle_codepage(self, make_spooler):
        spooler = make_spooler()
        device = FakeDevice()
        add_fake(spooler, 0, device, codepage=16)

        spooler.print(0, "{::escper}init{:/}5 €", {"init": b"\x1b@"})

        assert device.writes == [b"\x1b@5 \x80"]

    def test_unknown_id_fails_without_io(self, make_spooler):
        spooler = make_spooler()
        device = FakeDevice()
        add_fake(spooler, "bar", device)

        with pytest.raises(UnknownPrinterIdError) as err:
            spooler.print("kitchen", "Hello")
        assert err.value.printer_id == "kitchen"
        assert isinstance(err.value, LookupError)
        assert device.writes == []
        assert device.flush_count == 0

    def test_empty_registry_is_noop(self, make_spooler):
        spooler = make_spooler()
        assert spooler.print("anything", "Hello") is None

    def test_print_before_open_is_noop(self, make_spooler, printer_file):
        spooler = make_spooler([definition(printer_file)])
        assert spooler.print(0, "Hello") is None
        assert printer_file.read_bytes() == b""

    def test_write_count_mismatch_is_logged_not_fatal(self, make_spooler, caplog):
        spooler = make_spooler()
        device = FakeDevice(short_by=2)
        add_fake(spooler, "bar", device, copies=3)

        with caplog.at_level(logging.WARNING):
            result = spooler.print("bar", "Hello")

        assert result == (3, b"Hello")
        assert len(device.writes) == 3
        assert device.flush_count == 1
        assert spooler.mismatch_count == 3
        assert caplog.text.count("Byte count mismatch") == 3

    def test_prints_to_file(self, make_spooler, printer_file):
        with make_spooler([definition(printer_file, copies=2)]) as spooler:
            spooler.print(0, "Grüße\n")
        assert printer_file.read_bytes() == b"Gr\x81\xe1e\n" * 2
        assert len(spooler.registry) == 0


class TestConstruction:
    """Tests for building a spooler."""

    def test_default_definitions(self, settings):
        spooler = EscposSpooler(settings=settings)
        assert [d.path for d in spooler.definitions] == DEFAULT_DEVICE_PATHS

    def test_mapping_definitions(self, settings):
        spooler = EscposSpooler([{"path": "/dev/usb/lp0", "copies": 2}], settings=settings)
        assert spooler.definitions[0].copies == 2

    def test_single_definition(self, settings, printer_file):
        spooler = EscposSpooler(definition(printer_file), settings=settings)
        assert len(spooler.definitions) == 1

    def test_custom_codepage_table(self, make_spooler):
        table = {0: CodepageEntry(id=0, name="LATIN1", codec="latin-1")}
        spooler = make_spooler(codepage_table=table)
        assert spooler.merge_texts("é") == b"\xe9"

    def test_injected_logger(self, make_spooler, tmp_path, caplog):
        logger = logging.getLogger("tests.spooler")
        spooler = make_spooler([definition(tmp_path / "missing" / "lp0")], logger=logger)
        with caplog.at_level(logging.WARNING, logger="tests.spooler"):
            spooler.open()
        assert any(record.name == "tests.spooler" for record in caplog.records)

    def test_merge_texts(self, make_spooler):
        spooler = make_spooler()
        assert spooler.merge_texts("a{::escper}x{:/}", {"x": b"\x00"}, 0) == b"a\x00"
