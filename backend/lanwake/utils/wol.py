"""Wake-on-LAN (WOL) transport — one magic packet per call over UDP broadcast."""

from __future__ import annotations

import contextlib
import socket
from ipaddress import AddressValueError, IPv4Address

from lanwake.exceptions import MalformedAddressError, ShortWriteError
from lanwake.utils.magic_packet import encode, parse_mac

BROADCAST_IP = "255.255.255.255"
WOL_PORT = 9


def wake(hw_addr: bytes, source: IPv4Address | str | None = None) -> None:
    """
    Send a Wake-on-LAN magic packet to the limited broadcast address.

    Args:
        hw_addr: 6-byte hardware address of the machine to wake
        source: Local IPv4 address to send from (default: chosen by the OS)

    Raises:
        OSError: the socket could not be opened, bound, connected or written
        ShortWriteError: fewer than all packet bytes were accepted
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        if source is not None:
            sock.bind((str(source), 0))
        sock.connect((BROADCAST_IP, WOL_PORT))

        packet = encode(hw_addr)
        written = sock.send(packet)
        if written < len(packet):
            raise ShortWriteError(written, len(packet))
    except BaseException:
        # The first failure is the one reported.
        with contextlib.suppress(OSError):
            sock.close()
        raise
    sock.close()


def wake_string(mac: str, source_ip: str = "") -> None:
    """
    Parse a MAC address (and optional source IPv4 address) and send a magic packet.

    Raises:
        MalformedAddressError: mac or source_ip could not be parsed
    """
    hw_addr = parse_mac(mac)
    source = parse_source_ip(source_ip) if source_ip else None
    wake(hw_addr, source)


def parse_source_ip(text: str) -> IPv4Address:
    """Parse a dotted-decimal IPv4 address used to pick the sending interface."""
    try:
        return IPv4Address(text.strip())
    except AddressValueError:
        raise MalformedAddressError("ip", text) from None
