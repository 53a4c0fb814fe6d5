"""Parsers for control frames."""

from __future__ import annotations

import struct

from .bits import BitReader
from .errors import ParseFailure, UnhandledProtocol
from .frames import (
    Ack,
    BasicBlockAckInfo,
    BlockAck,
    BlockAckMode,
    BlockAckRequest,
    CompressedBlockAckInfo,
    Cts,
    Rts,
)
from .header import parse_mac, parse_sequence_control

_EOF_MESSAGE = "An error occurred while parsing the data: Eof"
_BASIC_BITMAP_LENGTH = 128
_U64 = struct.Struct("<Q")


def _take(data, count):
    """Split ``count`` bytes off the front of ``data``."""
    data = bytes(data)
    if len(data) < count:
        raise ParseFailure(_EOF_MESSAGE, data)
    return data[:count], data[count:]


def _read_u64(data):
    raw, rest = _take(data, _U64.size)
    return _U64.unpack(raw)[0], rest


def _parse_block_ack_control(control):
    """Read the policy, mode and TID_INFO from a two byte BlockAck control field."""
    reader = BitReader(control)
    policy = reader.flag()
    multi_tid = reader.flag()
    compressed_bitmap = reader.flag()
    reader.take(9)  # reserved
    tid_info = reader.take(4)

    if multi_tid and compressed_bitmap:
        mode = BlockAckMode.MULTI_TID_BLOCK_ACK
    elif multi_tid:
        raise UnhandledProtocol("Reserved block ack mode in BlockAck parser.")
    elif compressed_bitmap:
        mode = BlockAckMode.COMPRESSED_BLOCK_ACK
    else:
        mode = BlockAckMode.BASIC_BLOCK_ACK
    return policy, mode, tid_info


def _parse_tid(data):
    """Read a per-TID info field: 12 reserved bits followed by a 4 bit TID."""
    raw, rest = _take(data, 2)
    reader = BitReader(raw)
    reader.take(12)
    return reader.take(4), rest


def _parse_block_ack_prefix(data):
    duration, rest = _take(data, 2)
    destination, rest = parse_mac(rest)
    source, rest = parse_mac(rest)
    control, rest = _take(rest, 2)
    return duration, destination, source, control, rest


def parse_rts(frame_control, data):
    """Parse an RTS frame: duration, destination, source."""
    duration, rest = _take(data, 2)
    destination, rest = parse_mac(rest)
    source, _ = parse_mac(rest)
    return Rts(
        frame_control=frame_control,
        duration=duration,
        source=source,
        destination=destination,
    )


def parse_cts(frame_control, data):
    """Parse a CTS frame: duration, destination."""
    duration, rest = _take(data, 2)
    destination, _ = parse_mac(rest)
    return Cts(frame_control=frame_control, duration=duration, destination=destination)


def parse_ack(frame_control, data):
    """Parse an ACK frame: duration, destination."""
    duration, rest = _take(data, 2)
    destination, _ = parse_mac(rest)
    return Ack(frame_control=frame_control, duration=duration, destination=destination)


def parse_block_ack_request(frame_control, data):
    """Parse a BlockAckRequest frame.

    In multi-TID mode TID_INFO + 1 entries of TID and starting sequence
    control follow; otherwise TID_INFO is the TID and a single starting
    sequence control follows.
    """
    duration, destination, source, control, rest = _parse_block_ack_prefix(data)
    policy, mode, tid_info = _parse_block_ack_control(control)

    requested_tids = []
    if mode is BlockAckMode.MULTI_TID_BLOCK_ACK:
        for _ in range(tid_info + 1):
            tid, rest = _parse_tid(rest)
            sequence_control, rest = parse_sequence_control(rest)
            requested_tids.append((tid, sequence_control))
    else:
        sequence_control, _ = parse_sequence_control(rest)
        requested_tids.append((tid_info, sequence_control))

    return BlockAckRequest(
        frame_control=frame_control,
        duration=duration,
        source=source,
        destination=destination,
        policy=policy,
        mode=mode,
        requested_tids=requested_tids,
    )


def parse_block_ack(frame_control, data):
    """Parse a BlockAck frame.

    Multi-TID and compressed modes carry 8 byte bitmaps per TID; the basic
    mode carries a single 128 byte bitmap.
    """
    duration, destination, source, control, rest = _parse_block_ack_prefix(data)
    policy, mode, tid_info = _parse_block_ack_control(control)

    if mode is BlockAckMode.MULTI_TID_BLOCK_ACK:
        acks = []
        for _ in range(tid_info + 1):
            tid, rest = _parse_tid(rest)
            sequence_control, rest = parse_sequence_control(rest)
            bitmap, rest = _read_u64(rest)
            acks.append((tid, sequence_control, bitmap))
        info = CompressedBlockAckInfo(acks)
    elif mode is BlockAckMode.COMPRESSED_BLOCK_ACK:
        sequence_control, rest = parse_sequence_control(rest)
        bitmap, _ = _read_u64(rest)
        info = CompressedBlockAckInfo([(tid_info, sequence_control, bitmap)])
    else:
        sequence_control, rest = parse_sequence_control(rest)
        bitmap, _ = _take(rest, _BASIC_BITMAP_LENGTH)
        info = BasicBlockAckInfo(tid_info, sequence_control, bitmap)

    return BlockAck(
        frame_control=frame_control,
        duration=duration,
        source=source,
        destination=destination,
        policy=policy,
        mode=mode,
        acks=info,
    )