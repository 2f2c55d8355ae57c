import pytest
from hypothesis import given, strategies as st

from ptools.addresses import (
    first_line,
    format_ip,
    format_ip_bytes,
    int_to_mac,
    mac6_to_int,
    mac_to_int,
)

MADE_UP_MAC = bytes([0x02, 0x00, 0x00, 0x00, 0x00, 0x01])


def test_mac_zero():
    assert mac_to_int(bytes(6)) == 0


def test_mac_all_ones():
    assert mac_to_int(b"\xff" * 6) == 0xFFFFFFFFFFFF


def test_mac6_matches_mac_to_int():
    assert mac6_to_int(*MADE_UP_MAC) == mac_to_int(MADE_UP_MAC)


def test_mac_uses_only_first_six_bytes():
    assert mac_to_int(MADE_UP_MAC + b"\xaa\xbb") == mac_to_int(MADE_UP_MAC)


def test_mac_too_short():
    with pytest.raises(ValueError):
        mac_to_int(b"\x01\x02")


def test_mac6_rejects_out_of_range_byte():
    with pytest.raises(ValueError):
        mac6_to_int(256, 0, 0, 0, 0, 0)


def test_int_to_mac_negative():
    with pytest.raises(ValueError):
        int_to_mac(-1)


@given(st.binary(min_size=6, max_size=6))
def test_mac_round_trip(mac):
    assert int_to_mac(mac_to_int(mac)) == mac


@given(st.integers(min_value=0, max_value=2**48 - 1))
def test_int_round_trip(val):
    assert mac_to_int(int_to_mac(val)) == val


def test_format_ip_memory_order():
    assert format_ip(0xC0A8010A) == "10.1.168.192"


def test_format_ip_bytes():
    assert format_ip_bytes(bytes([192, 168, 1, 10])) == "192.168.1.10"


def test_format_ip_bytes_missing():
    with pytest.raises(ValueError):
        format_ip_bytes(None)


def test_format_ip_out_of_range():
    with pytest.raises(ValueError):
        format_ip(2**32)


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_format_ip_matches_little_endian_bytes(ip):
    assert format_ip(ip) == format_ip_bytes(ip.to_bytes(4, "little"))


def test_first_line_stops_at_crlf():
    assert first_line("abc\r\ndef") == "abc"
    assert first_line("one\ntwo") == "one"


def test_first_line_without_break():
    assert first_line("single") == "single"


def test_first_line_missing():
    assert first_line(None) == "nullptr"