"""Tests for the magic packet codec — layout, validation, MAC parsing."""

import pytest

from lanwake.exceptions import MalformedAddressError
from lanwake.utils.magic_packet import (
    PACKET_LEN,
    SYNC_PREFIX,
    encode,
    format_mac,
    hardware_addr,
    is_magic_packet,
    parse_mac,
)

HW = bytes.fromhex("aabbccddeeff")

SAMPLE_ADDRS = [
    HW,
    bytes(6),
    b"\xff" * 6,
    bytes.fromhex("001122334455"),
    bytes.fromhex("deadbeef0001"),
]


class TestEncode:
    def test_exact_layout(self):
        expected = bytes.fromhex("ff" * 6 + "aabbccddeeff" * 16)
        assert encode(HW) == expected

    def test_length(self):
        assert len(encode(HW)) == PACKET_LEN == 102

    def test_accepts_bytearray(self):
        assert encode(bytearray(HW)) == encode(HW)

    @pytest.mark.parametrize("bad", [b"", bytes(5), bytes(7), bytes(8)])
    def test_rejects_wrong_length(self, bad):
        with pytest.raises(ValueError):
            encode(bad)

    @pytest.mark.parametrize("hw", SAMPLE_ADDRS)
    def test_encoded_packet_validates(self, hw):
        assert is_magic_packet(encode(hw)) is True

    @pytest.mark.parametrize("hw", SAMPLE_ADDRS)
    def test_hardware_addr_recovered(self, hw):
        assert hardware_addr(encode(hw)) == hw


class TestHardwareAddr:
    def test_returns_independent_copy(self):
        packet = bytearray(encode(HW))
        hw = hardware_addr(packet)
        packet[6] = 0x00
        assert hw == HW

    def test_short_input_rejected(self):
        with pytest.raises(ValueError):
            hardware_addr(SYNC_PREFIX + b"\xaa\xbb")


class TestIsMagicPacket:
    def test_empty(self):
        assert is_magic_packet(b"") is False

    @pytest.mark.parametrize("length", [1, 12, 101, 103, 204])
    def test_wrong_length(self, length):
        assert is_magic_packet(b"\xff" * length) is False

    def test_all_zero_packet(self):
        assert is_magic_packet(bytes(102)) is False

    def test_bad_prefix(self):
        packet = bytearray(encode(HW))
        packet[3] = 0xFE
        assert is_magic_packet(bytes(packet)) is False

    @pytest.mark.parametrize("offset", [6, 11, 12, 50, 95, 101])
    def test_single_flipped_byte_rejected(self, offset):
        packet = bytearray(encode(HW))
        packet[offset] ^= 0x01
        assert is_magic_packet(bytes(packet)) is False

    def test_truncated_packet_rejected(self):
        assert is_magic_packet(encode(HW)[:-6]) is False

    def test_memoryview_accepted(self):
        assert is_magic_packet(memoryview(encode(HW))) is True


class TestParseMac:
    @pytest.mark.parametrize(
        "text",
        [
            "aa:bb:cc:dd:ee:ff",
            "AA:BB:CC:DD:EE:FF",
            "aa-bb-cc-dd-ee-ff",
            "aabb.ccdd.eeff",
            "  aa:bb:cc:dd:ee:ff\n",
        ],
    )
    def test_accepted_forms(self, text):
        assert parse_mac(text) == HW

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "invalid-mac",
            "aa:bb:cc:dd:ee",
            "aa:bb:cc:dd:ee:ff:00",
            "aa:bb-cc:dd:ee:ff",
            "aabbccddeeff",
            "gg:bb:cc:dd:ee:ff",
        ],
    )
    def test_rejected_forms(self, text):
        with pytest.raises(MalformedAddressError) as exc_info:
            parse_mac(text)
        assert exc_info.value.field == "mac"
        assert exc_info.value.value == text

    def test_error_is_value_error(self):
        with pytest.raises(ValueError, match="invalid mac: nope"):
            parse_mac("nope")


def test_format_mac():
    assert format_mac(HW) == "aa:bb:cc:dd:ee:ff"
    assert parse_mac(format_mac(HW)) == HW


@pytest.mark.parametrize("bad", [6, None, "aabbccddeeff"])
def test_encode_rejects_non_bytes(bad):
    with pytest.raises(TypeError):
        encode(bad)
