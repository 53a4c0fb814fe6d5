"""Parsing of raw IEEE 802.11 frames into Python objects."""

__version__ = "0.1.0"