import pytest

from wififrame.errors import ParseFailure
from wififrame.frame_control import parse_frame_control
from wififrame.header import (
    DataHeader,
    ManagementHeader,
    SequenceControl,
    parse_data_header,
    parse_mac,
    parse_management_header,
    parse_sequence_control,
)
from wififrame.mac_address import MacAddress

A1 = bytes([2, 0, 0, 0, 0, 1])
A2 = bytes([2, 0, 0, 0, 0, 2])
A3 = bytes([2, 0, 0, 0, 0, 3])
A4 = bytes([2, 0, 0, 0, 0, 4])
DURATION = bytes([58, 1])
SEQ = bytes([96, 119])


def _fc(first_byte, flags):
    return parse_frame_control(bytes([first_byte, flags]))[0]


def _body(*extra):
    return DURATION + A1 + A2 + A3 + SEQ + b"".join(extra)


def test_parse_mac_returns_address_and_rest():
    mac, rest = parse_mac(A1 + b"\x09\x08")
    assert mac == MacAddress(A1)
    assert rest == b"\x09\x08"


def test_parse_mac_too_short():
    with pytest.raises(ParseFailure):
        parse_mac(A1[:5])


def test_sequence_control_round_trip():
    fragment, sequence = 3, 0x5A7
    raw = bytes([(fragment << 4) | (sequence >> 8), sequence & 0xFF])
    control, rest = parse_sequence_control(raw + b"\xaa")
    assert control == SequenceControl(fragment, sequence)
    assert rest == b"\xaa"


def test_sequence_control_too_short():
    with pytest.raises(ParseFailure):
        parse_sequence_control(b"\x01")


def test_management_header_fields():
    header, rest = parse_management_header(_fc(0x80, 0), _body(b"\x01\x02\x03"))
    assert header.duration == DURATION
    assert header.address_1 == MacAddress(A1)
    assert header.address_2 == MacAddress(A2)
    assert header.address_3 == MacAddress(A3)
    assert header.sequence_control == parse_sequence_control(SEQ)[0]
    assert rest == b"\x01\x02\x03"


def test_management_header_too_short():
    with pytest.raises(ParseFailure):
        parse_management_header(_fc(0x80, 0), _body()[:-1])


@pytest.mark.parametrize(
    "flags, src, dest, bssid",
    [
        (0, "address_2", "address_1", "address_3"),
        (1, "address_3", "address_2", "address_1"),
        (2, "address_1", "address_3", "address_2"),
        (3, "address_3", "address_3", "address_1"),
    ],
)
def test_management_header_addresses(flags, src, dest, bssid):
    header, _ = parse_management_header(_fc(0x80, flags), _body())
    assert isinstance(header, ManagementHeader)
    assert header.src() == getattr(header, src)
    assert header.dest() == getattr(header, dest)
    assert header.bssid() == getattr(header, bssid)


def test_data_header_without_fourth_address():
    header, rest = parse_data_header(_fc(0x08, 0), _body(b"payload"))
    assert header.address_4 is None
    assert header.qos is None
    assert rest == b"payload"


def test_data_header_with_fourth_address():
    header, rest = parse_data_header(_fc(0x08, 3), _body(A4, b"payload"))
    assert header.address_4 == MacAddress(A4)
    assert rest == b"payload"


def test_data_header_fourth_address_optional():
    header, rest = parse_data_header(_fc(0x08, 3), _body(b"\x01\x02\x03\x04"))
    assert header.address_4 is None
    assert rest == b"\x01\x02\x03\x04"


def test_qos_data_header_reads_qos_bytes():
    header, rest = parse_data_header(_fc(0x88, 0), _body(b"\x07\x00", b"payload"))
    assert header.qos == b"\x07\x00"
    assert rest == b"payload"


def test_qos_data_header_missing_qos():
    with pytest.raises(ParseFailure):
        parse_data_header(_fc(0x88, 0), _body(b"\x07"))


@pytest.mark.parametrize(
    "flags, src, dest, bssid",
    [
        (0, "address_2", "address_1", "address_4"),
        (1, "address_3", "address_2", "address_1"),
        (2, "address_1", "address_3", "address_2"),
    ],
)
def test_data_header_addresses(flags, src, dest, bssid):
    header, _ = parse_data_header(_fc(0x08, flags), _body())
    assert isinstance(header, DataHeader)
    assert header.src() == getattr(header, src)
    assert header.dest() == getattr(header, dest)
    assert header.bssid() == getattr(header, bssid)


def test_data_header_wds_addresses():
    header, _ = parse_data_header(_fc(0x08, 3), _body(A4))
    assert header.src() == MacAddress(A4)
    assert header.dest() == MacAddress(A3)
    assert header.bssid() is None