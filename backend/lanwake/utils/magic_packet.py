"""Magic packet codec.

A magic packet is 6 bytes of 0xFF followed by the target's 6-byte
hardware address repeated 16 times, 102 bytes in total.
"""

from __future__ import annotations

import re

from lanwake.exceptions import MalformedAddressError

SYNC_PREFIX = b"\xff" * 6
HW_ADDR_LEN = 6
REPEAT_COUNT = 16
PACKET_LEN = len(SYNC_PREFIX) + REPEAT_COUNT * HW_ADDR_LEN  # 102

_MAC_PATTERNS = (
    re.compile(r"(?i)^[0-9a-f]{2}(:[0-9a-f]{2}){5}$"),
    re.compile(r"(?i)^[0-9a-f]{2}(-[0-9a-f]{2}){5}$"),
    re.compile(r"(?i)^[0-9a-f]{4}(\.[0-9a-f]{4}){2}$"),
)


def encode(hw_addr: bytes) -> bytes:
    """
    Build the magic packet for a hardware address.

    Args:
        hw_addr: 6-byte hardware address (bytes, bytearray or memoryview)

    Raises:
        TypeError: hw_addr is not a bytes-like object
        ValueError: hw_addr is not exactly 6 bytes long
    """
    hw_addr = memoryview(hw_addr).tobytes()
    if len(hw_addr) != HW_ADDR_LEN:
        raise ValueError(f"Hardware address must be {HW_ADDR_LEN} bytes, got {len(hw_addr)}")

    packet = bytearray(PACKET_LEN)
    packet[: len(SYNC_PREFIX)] = SYNC_PREFIX
    for offset in range(len(SYNC_PREFIX), PACKET_LEN, HW_ADDR_LEN):
        packet[offset : offset + HW_ADDR_LEN] = hw_addr
    return bytes(packet)


def hardware_addr(packet: bytes) -> bytes:
    """Return a copy of the hardware address stored in the first block of a packet."""
    start = len(SYNC_PREFIX)
    if len(packet) < start + HW_ADDR_LEN:
        raise ValueError(f"Packet too short to hold a hardware address: {len(packet)} bytes")
    return bytes(packet[start : start + HW_ADDR_LEN])


def is_magic_packet(data: bytes) -> bool:
    """Report whether data is a complete, well-formed magic packet."""
    if len(data) != PACKET_LEN:
        return False
    if bytes(data[: len(SYNC_PREFIX)]) != SYNC_PREFIX:
        return False
    hw_addr = hardware_addr(data)
    return bytes(data[len(SYNC_PREFIX) :]) == hw_addr * REPEAT_COUNT


def parse_mac(text: str) -> bytes:
    """
    Parse a MAC address into its 6 bytes.

    Accepts "AA:BB:CC:DD:EE:FF", "AA-BB-CC-DD-EE-FF" and "aabb.ccdd.eeff".

    Raises:
        MalformedAddressError: text is not one of the accepted forms
    """
    candidate = text.strip()
    if not any(p.match(candidate) for p in _MAC_PATTERNS):
        raise MalformedAddressError("mac", text)
    return bytes.fromhex(re.sub(r"[:.\-]", "", candidate))


def format_mac(hw_addr: bytes) -> str:
    return ":".join(f"{b:02x}" for b in hw_addr)
