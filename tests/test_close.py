"""Tests for closing printers."""

from unittest.mock import MagicMock

from escpos_spooler.printer import FileDevice

from .helpers import FakeDevice, add_fake


class TestClose:
    """Tests for EscposSpooler.close."""

    def test_closes_everything(self, make_spooler):
        spooler = make_spooler()
        devices = [FakeDevice(f"/dev/lp{i}") for i in range(3)]
        for index, device in enumerate(devices):
            add_fake(spooler, index, device)

        spooler.close()

        assert len(spooler.registry) == 0
        assert all(device.release_count == 1 for device in devices)
        assert spooler.close_failures == {}

    def test_failure_is_isolated(self, make_spooler, caplog):
        spooler = make_spooler()
        broken = FakeDevice("/dev/broken", close_error=OSError("I/O error"))
        healthy = FakeDevice("/dev/lp1")
        add_fake(spooler, "broken", broken)
        add_fake(spooler, "healthy", healthy)

        spooler.close()

        assert len(spooler.registry) == 0
        assert healthy.release_count == 1
        assert not broken.closed
        assert list(spooler.close_failures) == ["broken"]
        assert spooler.close_failures["broken"][1] == "I/O error"
        assert "Error closing printer-broken" in caplog.text

    def test_failed_close_is_retried(self, make_spooler):
        spooler = make_spooler()
        broken = FakeDevice("/dev/broken", close_error=OSError("I/O error"))
        add_fake(spooler, "broken", broken)
        spooler.close()

        broken.close_error = None
        spooler.close()

        assert broken.closed
        assert spooler.close_failures == {}

    def test_shared_device_released_once(self, make_spooler):
        spooler = make_spooler()
        handle = MagicMock()
        device = FileDevice("/dev/usb/lp0", handle, "wb")
        add_fake(spooler, "a", device)
        add_fake(spooler, "b", device.acquire())

        spooler.close()

        handle.close.assert_called_once()
        assert len(spooler.registry) == 0

    def test_close_without_open(self, make_spooler):
        spooler = make_spooler()
        spooler.close()
        assert len(spooler.registry) == 0

    def test_non_os_error_is_isolated(self, make_spooler):
        spooler = make_spooler()
        broken = FakeDevice("/dev/broken", close_error=ValueError("boom"))
        healthy = FakeDevice("/dev/lp1")
        add_fake(spooler, "broken", broken)
        add_fake(spooler, "ok", healthy)

        spooler.close()

        assert len(spooler.registry) == 0
        assert healthy.release_count == 1
        assert spooler.close_failures["broken"][1] == "boom"
