"""Exceptions raised while parsing IEEE 802.11 frames."""

from __future__ import annotations


class WifiError(Exception):
    """Base class for every error raised by this package."""


class UnhandledFrameSubtype(WifiError):
    """The frame control header was parsed, but its subtype has no parser.

    The parsed frame control header and the rest of the payload are kept
    on the exception so they can be inspected.
    """

    def __init__(self, frame_control, data):
        self.frame_control = frame_control
        self.data = bytes(data)
        super().__init__(
            "This frame subtype isn't handled yet: "
            f"{frame_control.frame_subtype} ({frame_control.frame_type})"
        )


class ParseFailure(WifiError):
    """The payload could not be parsed."""

    def __init__(self, message, data):
        self.message = message
        self.data = bytes(data)
        super().__init__(
            f"A parsing failure occurred: \n{message}\ndata: {list(self.data)}"
        )


class Incomplete(WifiError):
    """The payload ended before a parser had all the bytes it needed."""

    def __init__(self, needed=None):
        self.needed = needed
        if needed is None:
            self.message = ""
        else:
            self.message = f"At least {needed} bytes are missing"
        super().__init__(f"There wasn't enough data. {self.message}")


class UnhandledProtocol(WifiError):
    """The frame uses a protocol variant that cannot be handled yet."""

    def __init__(self, message):
        self.message = message
        super().__init__(f"Cannot handle this specific protocol yet: {message}")