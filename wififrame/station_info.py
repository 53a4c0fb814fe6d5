"""Tagged information elements carried by management frames."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import ParseFailure

_EOF_MESSAGE = "An error occurred while parsing the data: Eof"

_VENDOR_SPECIFIC = 221
_EXTENDED_TAG = 255

_RATES = {
    0x82: 1.0,
    0x84: 2.0,
    0x8B: 5.5,
    0x0C: 6.0,
    0x12: 9.0,
    0x96: 11.0,
    0x18: 12.0,
    0x24: 18.0,
    0x2C: 22.0,
    0x30: 24.0,
    0x42: 33.0,
    0x48: 36.0,
    0x60: 48.0,
    0x6C: 54.0,
}


@dataclass
class StationInfo:
    """The variable length elements sent with management frames.

    Elements with a dedicated field are stored there; every other element
    is kept in ``data`` as ``(element_id, payload)`` in the order received.
    """

    tagged_parameters: list[str] = field(default_factory=list)
    supported_rates: list[float] = field(default_factory=list)
    ssid: str | None = None
    ht_capabilities_info: str | None = None
    ht_a_mpdu_parameters: str | None = None
    ht_rx_mcs: str | None = None
    vht_capabilities_info: str | None = None
    vht_rx_mcs: str | None = None
    vht_tx_mcs: str | None = None
    transmitting_power: str | None = None
    extended_capabilities: str | None = None
    wps: str | None = None
    data: list[tuple[int, bytes]] = field(default_factory=list)


def _take(data, count):
    if len(data) < count:
        raise ParseFailure(_EOF_MESSAGE, data)
    return data[:count], data[count:]


def _require(element, count):
    if len(element) < count:
        raise ParseFailure(
            f"An error occurred while parsing the data: element needs {count} bytes",
            element,
        )


def _network_endian(data):
    return "0x" + bytes(reversed(data)).hex()


def parse_supported_rates(data):
    """Map supported-rate octets to rates in Mbps, skipping unknown ones."""
    return [_RATES[rate] for rate in data if rate in _RATES]


def parse_station_info(data):
    """Parse tagged elements until at most four bytes are left.

    Returns the collected information and the bytes that were not read.
    """
    rest = bytes(data)
    info = StationInfo()

    while True:
        (element_id, length), rest = _take(rest, 2)
        element, rest = _take(rest, length)

        if element_id == _VENDOR_SPECIFIC:
            _require(element, 4)
            oui = "0x" + element[:3].hex()
            info.tagged_parameters.append(f"{element_id}(0x{oui},{element[3]})")
        elif element_id != _EXTENDED_TAG:
            info.tagged_parameters.append(str(element_id))

        if element_id == 0:
            ssid = element.decode("utf-8", errors="replace")
            info.ssid = ssid.replace("\0", " ")
        elif element_id == 1:
            info.supported_rates = parse_supported_rates(element)
        elif element_id == 33:
            _require(element, 2)
            info.transmitting_power = "0x" + element[:2].hex()
        elif element_id == 45:
            _require(element, 7)
            info.ht_capabilities_info = _network_endian(element[0:2])
            info.ht_a_mpdu_parameters = _network_endian(element[2:3])
            info.ht_rx_mcs = _network_endian(element[3:7])
        elif element_id == 127:
            info.extended_capabilities = "0x" + element.hex()
        elif element_id == 191:
            _require(element, 10)
            info.vht_capabilities_info = _network_endian(element[0:4])
            info.vht_rx_mcs = _network_endian(element[4:6])
            info.vht_tx_mcs = _network_endian(element[8:10])
        else:
            info.data.append((element_id, element))

        if len(rest) <= 4:
            break

    return info, rest