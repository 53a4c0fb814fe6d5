"""Management and data frame headers and the parsers for them."""

from __future__ import annotations

from dataclasses import dataclass

from .bits import BitReader
from .errors import ParseFailure
from .frame_control import FrameControl
from .mac_address import MacAddress

_EOF_MESSAGE = "An error occurred while parsing the data: Eof"


def _take(data, count):
    """Split ``count`` bytes off the front of ``data``."""
    data = bytes(data)
    if len(data) < count:
        raise ParseFailure(_EOF_MESSAGE, data)
    return data[:count], data[count:]


@dataclass
class SequenceControl:
    """The fragment and sequence numbers of a frame."""

    fragment_number: int
    sequence_number: int


@dataclass
class ManagementHeader:
    """The header shared by all management frames.

    Which of the three addresses is the sender, receiver or BSSID depends
    on the ``to_ds`` and ``from_ds`` flags of the frame control header.
    """

    frame_control: FrameControl
    duration: bytes
    address_1: MacAddress
    address_2: MacAddress
    address_3: MacAddress
    sequence_control: SequenceControl

    def src(self):
        """The sender of the frame."""
        if self.frame_control.to_ds():
            return self.address_3
        if self.frame_control.from_ds():
            return self.address_1
        return self.address_2

    def dest(self):
        """The receiver of the frame; ff:ff:.. usually means broadcast."""
        to_ds = self.frame_control.to_ds()
        from_ds = self.frame_control.from_ds()
        if to_ds and from_ds:
            return self.address_3
        if to_ds:
            return self.address_2
        if from_ds:
            return self.address_3
        return self.address_1

    def bssid(self):
        """The BSSID this frame belongs to."""
        if self.frame_control.to_ds():
            return self.address_1
        if self.frame_control.from_ds():
            return self.address_2
        return self.address_3


@dataclass
class DataHeader:
    """The header shared by all data frames.

    A fourth address is present when both ``to_ds`` and ``from_ds`` are
    set, and two QoS bytes follow for QoS subtypes.
    """

    frame_control: FrameControl
    duration: bytes
    address_1: MacAddress
    address_2: MacAddress
    address_3: MacAddress
    sequence_control: SequenceControl
    address_4: MacAddress | None = None
    qos: bytes | None = None

    def src(self):
        """The sender of the frame, if known."""
        to_ds = self.frame_control.to_ds()
        from_ds = self.frame_control.from_ds()
        if to_ds and from_ds:
            return self.address_4
        if to_ds:
            return self.address_3
        if from_ds:
            return self.address_1
        return self.address_2

    def dest(self):
        """The receiver of the frame; ff:ff:.. usually means broadcast."""
        to_ds = self.frame_control.to_ds()
        from_ds = self.frame_control.from_ds()
        if to_ds and from_ds:
            return self.address_3
        if to_ds:
            return self.address_2
        if from_ds:
            return self.address_3
        return self.address_1

    def bssid(self):
        """The BSSID, absent in a wireless distribution system."""
        to_ds = self.frame_control.to_ds()
        from_ds = self.frame_control.from_ds()
        if to_ds and from_ds:
            return None
        if to_ds:
            return self.address_1
        if from_ds:
            return self.address_2
        return self.address_4


def parse_mac(data):
    """Read a MAC address; returns it and the bytes that follow."""
    octets, rest = _take(data, 6)
    return MacAddress(octets), rest


def parse_sequence_control(data):
    """Read a sequence control field; returns it and the bytes that follow."""
    reader = BitReader(data)
    fragment_number = reader.take(4)
    sequence_number = reader.take(12)
    return SequenceControl(fragment_number, sequence_number), reader.remaining()


def _parse_common(data):
    duration, rest = _take(data, 2)
    address_1, rest = parse_mac(rest)
    address_2, rest = parse_mac(rest)
    address_3, rest = parse_mac(rest)
    sequence_control, rest = parse_sequence_control(rest)
    return (duration, address_1, address_2, address_3, sequence_control), rest


def parse_management_header(frame_control, data):
    """Parse a management header; returns it and the bytes that follow."""
    (duration, address_1, address_2, address_3, sequence_control), rest = (
        _parse_common(data)
    )
    header = ManagementHeader(
        frame_control=frame_control,
        duration=duration,
        address_1=address_1,
        address_2=address_2,
        address_3=address_3,
        sequence_control=sequence_control,
    )
    return header, rest


def parse_data_header(frame_control, data):
    """Parse a data header; returns it and the bytes that follow."""
    (duration, address_1, address_2, address_3, sequence_control), rest = (
        _parse_common(data)
    )

    address_4 = None
    if frame_control.to_ds() and frame_control.from_ds():
        try:
            address_4, rest = parse_mac(rest)
        except ParseFailure:
            address_4 = None

    qos = None
    if frame_control.frame_subtype.is_qos():
        qos, rest = _take(rest, 2)

    header = DataHeader(
        frame_control=frame_control,
        duration=duration,
        address_1=address_1,
        address_2=address_2,
        address_3=address_3,
        sequence_control=sequence_control,
        address_4=address_4,
        qos=qos,
    )
    return header, rest