"""Entry point for parsing raw IEEE 802.11 frames."""

from __future__ import annotations

from .control import (
    parse_ack,
    parse_block_ack,
    parse_block_ack_request,
    parse_cts,
    parse_rts,
)
from .data import parse_data, parse_null_data, parse_qos_data, parse_qos_null
from .errors import UnhandledFrameSubtype
from .frame_control import parse_frame_control
from .frame_types import FrameSubType
from .management import (
    parse_association_request,
    parse_association_response,
    parse_beacon,
    parse_probe_request,
    parse_probe_response,
)

_PARSERS = {
    # Management
    FrameSubType.BEACON: parse_beacon,
    FrameSubType.PROBE_REQUEST: parse_probe_request,
    FrameSubType.PROBE_RESPONSE: parse_probe_response,
    FrameSubType.ASSOCIATION_REQUEST: parse_association_request,
    FrameSubType.ASSOCIATION_RESPONSE: parse_association_response,
    # Control
    FrameSubType.RTS: parse_rts,
    FrameSubType.CTS: parse_cts,
    FrameSubType.ACK: parse_ack,
    FrameSubType.BLOCK_ACK_REQUEST: parse_block_ack_request,
    FrameSubType.BLOCK_ACK: parse_block_ack,
    # Data
    FrameSubType.DATA: parse_data,
    FrameSubType.NULL_DATA: parse_null_data,
    FrameSubType.QOS_DATA: parse_qos_data,
    FrameSubType.QOS_NULL: parse_qos_null,
}


def parse_frame(data):
    """Parse an IEEE 802.11 frame from raw bytes.

    No FCS check is done; that has to happen separately. Raises
    ``UnhandledFrameSubtype`` for subtypes that have no parser.
    """
    frame_control, rest = parse_frame_control(data)
    parser = _PARSERS.get(frame_control.frame_subtype)
    if parser is None:
        raise UnhandledFrameSubtype(frame_control, rest)
    return parser(frame_control, rest)