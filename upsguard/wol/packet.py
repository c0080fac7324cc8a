"""
Wake-on-LAN magic packet construction.

A magic packet is six 0xFF bytes followed by the target hardware address
repeated sixteen times, 102 bytes in total.
"""

import re

MAGIC_PACKET_SIZE = 102
SYNC_STREAM = b"\xff" * 6
MAC_REPETITIONS = 16

_OCTET_RE = re.compile(r"^[0-9A-Fa-f]{2}$")


class MagicPacketFormatError(ValueError):
    """The hardware address is not six colon-separated hex octets."""
    pass


def parse_mac_address(mac_address: str) -> bytes:
    """
    Convert ``aa:bb:cc:dd:ee:ff`` into its six raw bytes.

    Raises:
        MagicPacketFormatError: On a wrong octet count or non-hex octet.
    """
    octets = mac_address.strip().split(":")
    if len(octets) != 6:
        raise MagicPacketFormatError(
            f"Invalid MAC address '{mac_address}': expected 6 octets, got {len(octets)}"
        )
    for octet in octets:
        if not _OCTET_RE.match(octet):
            raise MagicPacketFormatError(f"Invalid MAC address '{mac_address}': bad octet '{octet}'")
    return bytes(int(octet, 16) for octet in octets)


def build_magic_packet(mac_address: str) -> bytes:
    """Build the 102-byte magic packet for a hardware address."""
    return SYNC_STREAM + parse_mac_address(mac_address) * MAC_REPETITIONS
