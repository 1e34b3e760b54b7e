"""Exceptions raised by the magic-packet codec, transport and device store."""

from __future__ import annotations


class WakeError(Exception):
    """Base class for errors raised by the wake core."""


class MalformedAddressError(WakeError, ValueError):
    """A hardware or source address given as text could not be parsed."""

    def __init__(self, field: str, value: str):
        super().__init__(f"invalid {field}: {value}")
        self.field = field
        self.value = value


class ShortWriteError(WakeError):
    """The socket accepted fewer bytes than the full magic packet."""

    def __init__(self, written: int, expected: int):
        super().__init__(f"short write: {written} of {expected} bytes sent")
        self.written = written
        self.expected = expected


class DeviceStoreError(Exception):
    """The device list file exists but cannot be decoded."""
