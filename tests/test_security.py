"""Tests for the sanitizing helpers."""

import pytest

from escpos_spooler.security import (
    sanitize_device_path,
    sanitize_filename,
    sanitize_log_message,
    validate_numeric_input,
)


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/dev/usb/lp0", "_dev_usb_lp0"),
        ("/dev/salor hospitality;rm -rf *", "_dev_salor_hospitality_rm_-rf__"),
        ("a'b\"c&d^e$f#g!h", "a_b_c_d_e_f_g_h"),
        ("COM1:(9600)", "COM19600"),
        ("printer@host.lan", "printer@host.lan"),
    ],
)
def test_sanitize_device_path(path, expected):
    assert sanitize_device_path(path) == expected


def test_sanitize_filename():
    assert sanitize_filename("../etc/passwd") == "__etc_passwd"
    assert sanitize_filename("..") == "_"
    assert sanitize_filename(".hidden") == "_hidden"
    assert sanitize_filename("shop.example") == "shop.example"
    assert sanitize_filename(3) == "3"
    assert sanitize_filename("") == "_"


def test_sanitize_log_message_strips_control_chars():
    assert sanitize_log_message("a\x1b@b\x00c\nd") == "a@bc\nd"


def test_sanitize_log_message_truncates():
    message = sanitize_log_message("x" * 50, max_length=10)
    assert message == "xxxxxxx..."


def test_validate_numeric_input():
    assert validate_numeric_input("3", 1, 5, "copies") == 3
    with pytest.raises(ValueError, match="between 1 and 5"):
        validate_numeric_input(6, 1, 5, "copies")
    with pytest.raises(ValueError, match="must be an integer"):
        validate_numeric_input("many", 1, 5, "copies")
