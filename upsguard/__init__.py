"""
upsguard: UPS power monitor for a single NAS.

Watches the local UPS through the host battery status text, shuts the NAS
down over SSH when the battery runs low and wakes it again with a
Wake-on-LAN packet once AC power returns.
"""

__version__ = "0.1.0"
