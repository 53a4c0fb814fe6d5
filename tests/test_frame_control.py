import pytest

from wififrame.errors import ParseFailure
from wififrame.frame_control import FrameControl, parse_frame_control
from wififrame.frame_types import FrameSubType, FrameType

FLAG_METHODS = [
    FrameControl.to_ds,
    FrameControl.from_ds,
    FrameControl.more_frag,
    FrameControl.retry,
    FrameControl.pwr_mgmt,
    FrameControl.more_data,
    FrameControl.wep,
    FrameControl.order,
]


@pytest.mark.parametrize("bit", range(8))
def test_flags(bit):
    frame_control, _ = parse_frame_control(bytes([0b0000_0000, 1 << bit]))
    results = [method(frame_control) for method in FLAG_METHODS]
    assert results == [check == bit for check in range(8)]


def test_beacon():
    frame_control, _ = parse_frame_control(bytes([0b1000_0000, 0b0000_0000]))
    assert frame_control.frame_type is FrameType.MANAGEMENT
    assert frame_control.frame_subtype is FrameSubType.BEACON


def test_remaining_bytes_returned():
    frame_control, rest = parse_frame_control(bytes([128, 0, 7, 8, 9]))
    assert rest == bytes([7, 8, 9])
    assert frame_control.flags == 0
    assert frame_control.protocol_version == 0


@pytest.mark.parametrize(
    "first_byte, frame_type, subtype",
    [
        (180, FrameType.CONTROL, FrameSubType.RTS),
        (196, FrameType.CONTROL, FrameSubType.CTS),
        (212, FrameType.CONTROL, FrameSubType.ACK),
        (132, FrameType.CONTROL, FrameSubType.BLOCK_ACK_REQUEST),
        (148, FrameType.CONTROL, FrameSubType.BLOCK_ACK),
        (8, FrameType.DATA, FrameSubType.DATA),
        (136, FrameType.DATA, FrameSubType.QOS_DATA),
        (200, FrameType.DATA, FrameSubType.QOS_NULL),
        (72, FrameType.DATA, FrameSubType.NULL_DATA),
        (64, FrameType.MANAGEMENT, FrameSubType.PROBE_REQUEST),
        (80, FrameType.MANAGEMENT, FrameSubType.PROBE_RESPONSE),
        (176, FrameType.MANAGEMENT, FrameSubType.AUTHENTICATION),
        (192, FrameType.MANAGEMENT, FrameSubType.DEAUTHENTICATION),
    ],
)
def test_known_headers(first_byte, frame_type, subtype):
    frame_control, _ = parse_frame_control(bytes([first_byte, 0]))
    assert frame_control.frame_type is frame_type
    assert frame_control.frame_subtype is subtype


def test_data_flags_from_sample():
    frame_control, _ = parse_frame_control(bytes([8, 98]))
    assert frame_control.flags == 98
    assert frame_control.from_ds()
    assert not frame_control.to_ds()
    assert frame_control.wep()


def test_unknown_type_is_unhandled():
    frame_control, _ = parse_frame_control(bytes([0b0000_1100, 0]))
    assert frame_control.frame_type is FrameType.UNKNOWN
    assert frame_control.frame_subtype is FrameSubType.UNHANDLED


def test_protocol_version_bits():
    frame_control, _ = parse_frame_control(bytes([0b1000_0011, 0]))
    assert frame_control.protocol_version == 3
    assert frame_control.frame_subtype is FrameSubType.BEACON


@pytest.mark.parametrize("payload", [b"", bytes([128])])
def test_too_short(payload):
    with pytest.raises(ParseFailure):
        parse_frame_control(payload)