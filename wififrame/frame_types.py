"""Frame types and frame subtypes of IEEE 802.11."""

from __future__ import annotations

from enum import Enum


class FrameType(Enum):
    """The two-bit frame type from the frame control header."""

    MANAGEMENT = "Management"
    CONTROL = "Control"
    DATA = "Data"
    UNKNOWN = "Unknown"

    def __str__(self):
        return self.value


class FrameSubType(Enum):
    """The frame subtype, interpreted according to the frame type."""

    # Management subtypes
    ASSOCIATION_REQUEST = "AssociationRequest"
    ASSOCIATION_RESPONSE = "AssociationResponse"
    REASSOCIATION_REQUEST = "ReassociationRequest"
    REASSOCIATION_RESPONSE = "ReassociationResponse"
    PROBE_REQUEST = "ProbeRequest"
    PROBE_RESPONSE = "ProbeResponse"
    TIMING_ADVERTISEMENT = "TimingAdvertisement"
    BEACON = "Beacon"
    ATIM = "Atim"
    DISASSOCIATION = "Disassociation"
    AUTHENTICATION = "Authentication"
    DEAUTHENTICATION = "Deauthentication"
    ACTION = "Action"
    ACTION_NO_ACK = "ActionNoAck"

    # Control subtypes
    TRIGGER = "Trigger"
    TACK = "Tack"
    BEAMFORMING_REPORT_POLL = "BeamformingReportPoll"
    NDP_ANNOUNCEMENT = "NdpAnnouncement"
    CONTROL_FRAME_EXTENSION = "ControlFrameExtension"
    CONTROL_WRAPPER = "ControlWrapper"
    BLOCK_ACK_REQUEST = "BlockAckRequest"
    BLOCK_ACK = "BlockAck"
    PS_POLL = "PsPoll"
    RTS = "Rts"
    CTS = "Cts"
    ACK = "Ack"
    CF_END = "CfEnd"
    CF_END_CF_ACK = "CfEndCfAck"

    # Data subtypes
    DATA = "Data"
    DATA_CF_ACK = "DataCfAck"
    DATA_CF_POLL = "DataCfPoll"
    DATA_CF_ACK_CF_POLL = "DataCfAckCfPoll"
    NULL_DATA = "NullData"
    CF_ACK = "CfAck"
    CF_POLL = "CfPoll"
    CF_ACK_CF_POLL = "CfAckCfPoll"
    QOS_DATA = "QosData"
    QOS_DATA_CF_ACK = "QosDataCfAck"
    QOS_DATA_CF_POLL = "QosDataCfPoll"
    QOS_DATA_CF_ACK_CF_POLL = "QosDataCfAckCfPoll"
    QOS_NULL = "QosNull"
    QOS_CF_POLL = "QosCfPoll"
    QOS_CF_ACK_CF_POLL = "QosCfAckCfPoll"

    # Special subtypes
    RESERVED = "Reserved"
    UNHANDLED = "Unhandled"

    def __str__(self):
        return self.value

    def is_qos(self):
        """Whether frames of this subtype carry a QoS control field."""
        return self in _QOS_SUBTYPES


_QOS_SUBTYPES = frozenset(
    {
        FrameSubType.QOS_DATA,
        FrameSubType.QOS_DATA_CF_ACK,
        FrameSubType.QOS_DATA_CF_POLL,
        FrameSubType.QOS_DATA_CF_ACK_CF_POLL,
        FrameSubType.QOS_NULL,
        FrameSubType.QOS_CF_POLL,
        FrameSubType.QOS_CF_ACK_CF_POLL,
    }
)