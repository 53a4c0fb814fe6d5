"""Parsers for management frames."""

from __future__ import annotations

import struct

from .errors import ParseFailure
from .frames import (
    AssociationRequest,
    AssociationResponse,
    Beacon,
    ProbeRequest,
    ProbeResponse,
)
from .header import parse_management_header
from .station_info import parse_station_info

_EOF_MESSAGE = "An error occurred while parsing the data: Eof"

_FIELDS = {
    "H": struct.Struct("<H"),
    "Q": struct.Struct("<Q"),
}


def _unpack(code, data):
    fmt = _FIELDS[code]
    if len(data) < fmt.size:
        raise ParseFailure(_EOF_MESSAGE, data)
    return fmt.unpack_from(data)[0], data[fmt.size :]


def _read(codes, data):
    values = []
    for code in codes:
        value, data = _unpack(code, data)
        values.append(value)
    return values, data


def parse_association_request(frame_control, data):
    """Parse an association request frame body."""
    header, rest = parse_management_header(frame_control, data)
    (beacon_interval, capability_info), rest = _read("HH", rest)
    station_info, _ = parse_station_info(rest)
    return AssociationRequest(
        header=header,
        beacon_interval=beacon_interval,
        capability_info=capability_info,
        station_info=station_info,
    )


def parse_association_response(frame_control, data):
    """Parse an association response frame body."""
    header, rest = parse_management_header(frame_control, data)
    (capability_info, status_code, association_id), rest = _read("HHH", rest)
    station_info, _ = parse_station_info(rest)
    return AssociationResponse(
        header=header,
        capability_info=capability_info,
        status_code=status_code,
        association_id=association_id,
        station_info=station_info,
    )


def parse_beacon(frame_control, data):
    """Parse a beacon frame body."""
    header, rest = parse_management_header(frame_control, data)
    (timestamp, beacon_interval, capability_info), rest = _read("QHH", rest)
    station_info, _ = parse_station_info(rest)
    return Beacon(
        header=header,
        timestamp=timestamp,
        beacon_interval=beacon_interval,
        capability_info=capability_info,
        station_info=station_info,
    )


def parse_probe_request(frame_control, data):
    """Parse a probe request frame body."""
    header, rest = parse_management_header(frame_control, data)
    station_info, _ = parse_station_info(rest)
    return ProbeRequest(header=header, station_info=station_info)


def parse_probe_response(frame_control, data):
    """Parse a probe response frame body."""
    header, rest = parse_management_header(frame_control, data)
    (timestamp, beacon_interval, capability_info), rest = _read("QHH", rest)
    station_info, _ = parse_station_info(rest)
    return ProbeResponse(
        header=header,
        timestamp=timestamp,
        beacon_interval=beacon_interval,
        capability_info=capability_info,
        station_info=station_info,
    )