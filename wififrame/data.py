"""Parsers for data frames."""

from __future__ import annotations

from .frames import Data, NullData, QosData, QosNull
from .header import parse_data_header


def parse_data(frame_control, data):
    """Parse a data frame; everything after the header is its payload."""
    header, rest = parse_data_header(frame_control, data)
    return Data(header=header, data=bytes(rest))


def parse_null_data(frame_control, data):
    """Parse a null data frame; bytes after the header are ignored."""
    header, _ = parse_data_header(frame_control, data)
    return NullData(header=header)


def parse_qos_data(frame_control, data):
    """Parse a QoS data frame; everything after the header is its payload."""
    header, rest = parse_data_header(frame_control, data)
    return QosData(header=header, data=bytes(rest))


def parse_qos_null(frame_control, data):
    """Parse a QoS null frame; bytes after the header are ignored."""
    header, _ = parse_data_header(frame_control, data)
    return QosNull(header=header)