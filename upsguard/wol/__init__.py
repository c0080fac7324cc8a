"""
Wake-on-LAN support for waking the NAS.
"""

from upsguard.wol.packet import MagicPacketFormatError, build_magic_packet, parse_mac_address
from upsguard.wol.signaler import WakeResult, WakeSignaler

__all__ = ["MagicPacketFormatError", "build_magic_packet", "parse_mac_address", "WakeResult", "WakeSignaler"]
