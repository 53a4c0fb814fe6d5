"""Parsed frame structures for every supported frame subtype."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .frame_control import FrameControl
from .header import DataHeader, ManagementHeader, SequenceControl
from .mac_address import MacAddress
from .station_info import StationInfo


class Frame:
    """Base class of all parsed frames.

    Frames that carry a management or data header take their addresses
    from it; control frames override these methods.
    """

    def src(self):
        """The sender of the frame, if it is carried."""
        return self.header.src()

    def dest(self):
        """The receiver of the frame."""
        return self.header.dest()

    def bssid(self):
        """The BSSID of the frame, if it is carried."""
        return self.header.bssid()


class BlockAckMode(Enum):
    """How a block acknowledgment is encoded."""

    BASIC_BLOCK_ACK = "BasicBlockAck"
    COMPRESSED_BLOCK_ACK = "CompressedBlockAck"
    MULTI_TID_BLOCK_ACK = "MultiTidBlockAck"

    def __str__(self):
        return self.value


@dataclass
class BasicBlockAckInfo:
    """A basic block acknowledgment with a 128 byte bitmap."""

    tid: int
    sequence_control: SequenceControl
    bitmap: bytes


@dataclass
class CompressedBlockAckInfo:
    """Compressed acknowledgments as ``(tid, sequence_control, bitmap)``."""

    acks: list[tuple[int, SequenceControl, int]]


# Management frames


@dataclass
class Beacon(Frame):
    header: ManagementHeader
    timestamp: int
    beacon_interval: int
    capability_info: int
    station_info: StationInfo


@dataclass
class ProbeRequest(Frame):
    header: ManagementHeader
    station_info: StationInfo


@dataclass
class ProbeResponse(Frame):
    header: ManagementHeader
    timestamp: int
    beacon_interval: int
    capability_info: int
    station_info: StationInfo


@dataclass
class AssociationRequest(Frame):
    header: ManagementHeader
    beacon_interval: int
    capability_info: int
    station_info: StationInfo


@dataclass
class AssociationResponse(Frame):
    header: ManagementHeader
    capability_info: int
    status_code: int
    association_id: int
    station_info: StationInfo


# Control frames


class _ControlFrame(Frame):
    """Control frames carry their addresses directly and no BSSID."""

    def src(self):
        return getattr(self, "source", None)

    def dest(self):
        return self.destination

    def bssid(self):
        return None


@dataclass
class Rts(_ControlFrame):
    """Request to send: a node announces that it wants to send data."""

    frame_control: FrameControl
    duration: bytes
    source: MacAddress
    destination: MacAddress


@dataclass
class Cts(_ControlFrame):
    """Clear to send: the requesting node may transmit."""

    frame_control: FrameControl
    duration: bytes
    destination: MacAddress


@dataclass
class Ack(_ControlFrame):
    """Acknowledges that data has been received."""

    frame_control: FrameControl
    duration: bytes
    destination: MacAddress


@dataclass
class BlockAckRequest(_ControlFrame):
    """Requests acknowledgment of the frames sent in a block ack session.

    ``policy`` is true when no immediate acknowledgment is required.
    """

    frame_control: FrameControl
    duration: bytes
    source: MacAddress
    destination: MacAddress
    policy: bool
    mode: BlockAckMode
    requested_tids: list[tuple[int, SequenceControl]]


@dataclass
class BlockAck(_ControlFrame):
    """Acknowledges the frames received in a block ack session.

    ``policy`` is true when no immediate acknowledgment is required.
    """

    frame_control: FrameControl
    duration: bytes
    source: MacAddress
    destination: MacAddress
    policy: bool
    mode: BlockAckMode
    acks: BasicBlockAckInfo | CompressedBlockAckInfo


# Data frames


@dataclass
class Data(Frame):
    header: DataHeader
    data: bytes


@dataclass
class NullData(Frame):
    header: DataHeader


@dataclass
class QosData(Frame):
    header: DataHeader
    data: bytes


@dataclass
class QosNull(Frame):
    header: DataHeader