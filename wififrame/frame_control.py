"""The frame control header at the start of every 802.11 frame."""

from __future__ import annotations

from dataclasses import dataclass

from .bits import BitReader
from .frame_types import FrameSubType, FrameType


def _flag_is_set(data, bit):
    return bool(data & (1 << bit))


@dataclass
class FrameControl:
    """The first two bytes of every frame.

    The first byte holds the protocol version, frame type and subtype;
    the second byte holds the flags.
    """

    protocol_version: int
    frame_type: FrameType
    frame_subtype: FrameSubType
    flags: int

    def to_ds(self):
        """Set if the frame goes to the distribution system."""
        return _flag_is_set(self.flags, 0)

    def from_ds(self):
        """Set if the frame comes from the distribution system."""
        return _flag_is_set(self.flags, 1)

    def more_frag(self):
        """Set if more fragments of this frame follow."""
        return _flag_is_set(self.flags, 2)

    def retry(self):
        """Set if this frame is a retransmission."""
        return _flag_is_set(self.flags, 3)

    def pwr_mgmt(self):
        """The power mode the station will be in after this frame."""
        return _flag_is_set(self.flags, 4)

    def more_data(self):
        """Set if the AP buffers more frames for the station."""
        return _flag_is_set(self.flags, 5)

    def wep(self):
        """Set if the frame body is encrypted."""
        return _flag_is_set(self.flags, 6)

    def order(self):
        """Set if the frame is sent with strict ordering."""
        return _flag_is_set(self.flags, 7)


_FRAME_TYPES = {
    0: FrameType.MANAGEMENT,
    1: FrameType.CONTROL,
    2: FrameType.DATA,
}

_MANAGEMENT_SUBTYPES = (
    FrameSubType.ASSOCIATION_REQUEST,
    FrameSubType.ASSOCIATION_RESPONSE,
    FrameSubType.REASSOCIATION_REQUEST,
    FrameSubType.REASSOCIATION_RESPONSE,
    FrameSubType.PROBE_REQUEST,
    FrameSubType.PROBE_RESPONSE,
    FrameSubType.TIMING_ADVERTISEMENT,
    FrameSubType.RESERVED,
    FrameSubType.BEACON,
    FrameSubType.ATIM,
    FrameSubType.DISASSOCIATION,
    FrameSubType.AUTHENTICATION,
    FrameSubType.DEAUTHENTICATION,
    FrameSubType.ACTION,
    FrameSubType.ACTION_NO_ACK,
    FrameSubType.RESERVED,
)

_CONTROL_SUBTYPES = (
    FrameSubType.RESERVED,
    FrameSubType.RESERVED,
    FrameSubType.TRIGGER,
    FrameSubType.TACK,
    FrameSubType.BEAMFORMING_REPORT_POLL,
    FrameSubType.NDP_ANNOUNCEMENT,
    FrameSubType.CONTROL_FRAME_EXTENSION,
    FrameSubType.CONTROL_WRAPPER,
    FrameSubType.BLOCK_ACK_REQUEST,
    FrameSubType.BLOCK_ACK,
    FrameSubType.PS_POLL,
    FrameSubType.RTS,
    FrameSubType.CTS,
    FrameSubType.ACK,
    FrameSubType.CF_END,
    FrameSubType.CF_END_CF_ACK,
)

_DATA_SUBTYPES = (
    FrameSubType.DATA,
    FrameSubType.DATA_CF_ACK,
    FrameSubType.DATA_CF_POLL,
    FrameSubType.DATA_CF_ACK_CF_POLL,
    FrameSubType.NULL_DATA,
    FrameSubType.CF_ACK,
    FrameSubType.CF_POLL,
    FrameSubType.CF_ACK_CF_POLL,
    FrameSubType.QOS_DATA,
    FrameSubType.QOS_DATA_CF_ACK,
    FrameSubType.QOS_DATA_CF_POLL,
    FrameSubType.QOS_DATA_CF_ACK_CF_POLL,
    FrameSubType.QOS_NULL,
    FrameSubType.RESERVED,
    FrameSubType.QOS_CF_POLL,
    FrameSubType.QOS_CF_ACK_CF_POLL,
)

_SUBTYPE_TABLES = {
    FrameType.MANAGEMENT: _MANAGEMENT_SUBTYPES,
    FrameType.CONTROL: _CONTROL_SUBTYPES,
    FrameType.DATA: _DATA_SUBTYPES,
}


def parse_frame_control(data):
    """Parse the frame control header.

    Returns the header and the bytes that follow it.
    """
    reader = BitReader(data)
    subtype_bits = reader.take(4)
    type_bits = reader.take(2)
    protocol_version = reader.take(2)
    flags = reader.take(8)

    frame_type = _FRAME_TYPES.get(type_bits, FrameType.UNKNOWN)
    table = _SUBTYPE_TABLES.get(frame_type)
    frame_subtype = table[subtype_bits] if table else FrameSubType.UNHANDLED

    frame_control = FrameControl(
        protocol_version=protocol_version,
        frame_type=frame_type,
        frame_subtype=frame_subtype,
        flags=flags,
    )
    return frame_control, reader.remaining()