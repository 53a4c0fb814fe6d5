"""MAC addresses."""

from __future__ import annotations

import re
from dataclasses import dataclass

_OCTET = re.compile(r"\+?[0-9A-Fa-f]+")


class MacParseError(ValueError):
    """A MAC address string could not be parsed.

    ``kind`` is ``"invalid_length"`` when the string does not have six
    colon separated parts, and ``"invalid_digit"`` when a part is not a
    hexadecimal octet.
    """

    INVALID_DIGIT = "invalid_digit"
    INVALID_LENGTH = "invalid_length"

    def __init__(self, kind):
        self.kind = kind
        super().__init__("Encountered an error while parsing a mac address.")


@dataclass(frozen=True)
class MacAddress:
    """A six byte MAC address."""

    octets: bytes

    def __post_init__(self):
        octets = bytes(self.octets)
        if len(octets) != 6:
            raise ValueError("a MAC address has exactly 6 octets")
        object.__setattr__(self, "octets", octets)

    def is_broadcast(self):
        """Whether this address addresses the whole network."""
        return self.octets == b"\xff" * 6

    def is_groupcast(self):
        """Whether this is a group address (01:80:c2::0/24)."""
        return self.octets[:3] == bytes([1, 128, 194])

    def is_ipv4_multicast(self):
        """Whether this is in the 01:00:5e::0/18 IPv4 multicast space."""
        return self.octets[:3] == bytes([1, 0, 94])

    def is_ipv6_neighborhood_discovery(self):
        """Whether this is the IPv6 neighbourhood discovery address."""
        return self.octets == bytes([51, 51, 0, 0, 0, 0])

    def is_ipv6_multicast(self):
        """Whether this is in the 33:33::0/24 IPv6 multicast space."""
        return self.octets[:2] == bytes([51, 51])

    def is_spanning_tree(self):
        """Whether this is in the 01:80:c2::0/18 spanning-tree space."""
        return self.octets[:3] == bytes([1, 128, 194])

    def is_real_device(self):
        """Whether this looks like an actual device rather than a meta address."""
        return not (
            self.is_ipv6_multicast()
            or self.is_broadcast()
            or self.is_ipv4_multicast()
            or self.is_groupcast()
            or self.is_spanning_tree()
        )

    def __str__(self):
        return ":".join(f"{octet:02x}" for octet in self.octets)


def parse_mac_address(text):
    """Parse a colon separated hexadecimal MAC address."""
    parts = text.split(":")
    if len(parts) != 6:
        raise MacParseError(MacParseError.INVALID_LENGTH)
    octets = []
    for part in parts:
        if not _OCTET.fullmatch(part):
            raise MacParseError(MacParseError.INVALID_DIGIT)
        value = int(part, 16)
        if value > 0xFF:
            raise MacParseError(MacParseError.INVALID_DIGIT)
        octets.append(value)
    return MacAddress(bytes(octets))