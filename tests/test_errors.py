import pytest

from wififrame.errors import (
    Incomplete,
    ParseFailure,
    UnhandledFrameSubtype,
    UnhandledProtocol,
    WifiError,
)
from wififrame.frame_control import parse_frame_control
from wififrame.frame_types import FrameSubType, FrameType


def test_unhandled_subtype_keeps_header_and_data():
    frame_control, rest = parse_frame_control(bytes([0b1011_0000, 0, 9, 8]))
    error = UnhandledFrameSubtype(frame_control, rest)
    assert error.frame_control.frame_subtype is FrameSubType.AUTHENTICATION
    assert error.frame_control.frame_type is FrameType.MANAGEMENT
    assert error.data == bytes([9, 8])
    assert "Authentication (Management)" in str(error)


def test_parse_failure_message_contains_data():
    error = ParseFailure("broken", [1, 2, 3])
    assert error.data == bytes([1, 2, 3])
    assert error.message == "broken"
    assert str(error).endswith("data: [1, 2, 3]")
    assert "broken" in str(error)


def test_incomplete_with_size():
    error = Incomplete(4)
    assert error.needed == 4
    assert error.message == "At least 4 bytes are missing"
    assert str(error) == "There wasn't enough data. At least 4 bytes are missing"


def test_incomplete_without_size():
    error = Incomplete()
    assert error.needed is None
    assert error.message == ""
    assert str(error) == "There wasn't enough data. "


def test_unhandled_protocol_message():
    error = UnhandledProtocol("BlockAckMode::Reserved in BlockAck parser.")
    assert str(error).endswith("BlockAckMode::Reserved in BlockAck parser.")
    assert error.message == "BlockAckMode::Reserved in BlockAck parser."


@pytest.mark.parametrize(
    "cls, args, message",
    [
        (ParseFailure, ("x", b""), "x"),
        (Incomplete, (1,), "At least 1 bytes are missing"),
        (UnhandledProtocol, ("y",), "y"),
    ],
)
def test_all_errors_share_base(cls, args, message):
    error = cls(*args)
    with pytest.raises(WifiError) as caught:
        raise error
    assert caught.value is error
    assert caught.value.message == message