"""
Battery status reading and parsing.
"""

from upsguard.status.models import BatteryReading
from upsguard.status.parser import StatusParseError, parse_status
from upsguard.status.provider import StatusProvider, StatusProviderError

__all__ = ["BatteryReading", "StatusParseError", "parse_status", "StatusProvider", "StatusProviderError"]
