"""
Wake-on-LAN broadcast sender.

The socket send is blocking, so it runs in a worker thread via
asyncio.to_thread to keep the event loop free.
"""

import asyncio
import logging
import socket
from dataclasses import dataclass
from typing import Optional

from ..config import settings
from .packet import MagicPacketFormatError, build_magic_packet

logger = logging.getLogger(__name__)


@dataclass
class WakeResult:
    """Result of a wake attempt."""

    mac_address: str
    success: bool
    bytes_sent: int = 0
    error_message: Optional[str] = None


class WakeSignaler:
    """
    Broadcasts magic packets to wake the NAS.
    """

    def __init__(
        self,
        broadcast_address: str = settings.WOL_BROADCAST_ADDRESS,
        port: int = settings.WOL_PORT,
        timeout: float = settings.WOL_TIMEOUT,
    ):
        self.broadcast_address = broadcast_address
        self.port = port
        self.timeout = timeout

    def _send(self, packet: bytes) -> int:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            sock.settimeout(self.timeout)
            return sock.sendto(packet, (self.broadcast_address, self.port))
        finally:
            sock.close()

    async def wake(self, mac_address: str) -> WakeResult:
        """
        Send a magic packet for the given hardware address.

        Args:
            mac_address: Colon-separated hex hardware address

        Returns:
            Wake result, never raises for format or network failures
        """
        logger.info(f"Attempting to wake NAS at {mac_address}")
        try:
            packet = build_magic_packet(mac_address)
        except MagicPacketFormatError as e:
            logger.error(f"Failed to send Wake-on-LAN packet: {e}")
            return WakeResult(mac_address=mac_address, success=False, error_message=str(e))

        try:
            sent = await asyncio.to_thread(self._send, packet)
        except Exception as e:
            logger.error(f"Failed to send Wake-on-LAN packet: {e}")
            return WakeResult(mac_address=mac_address, success=False, error_message=str(e))

        logger.info(
            f"Wake-on-LAN packet sent successfully to {self.broadcast_address}:{self.port}"
        )
        return WakeResult(mac_address=mac_address, success=True, bytes_sent=sent)
