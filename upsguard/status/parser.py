"""
Parser for the battery status text printed by ``pmset -g batt``.

Example input::

    Now drawing from 'AC Power'
     -InternalBattery-0 (id=34472035)	100%; charged; 0:00 remaining present: true
     -AVR750U          (id=716570624)	100%; AC attached; not charging present: true

Grammar of the UPS line:
- the line is the first one containing the UPS name as a substring
- battery level is the first integer immediately followed by ``%``
- ``AC attached`` anywhere on the line means line power, anything else battery
- ``present: true`` anywhere on the line marks the battery as present
"""

import logging
import re
from typing import Optional

from .models import BatteryReading

logger = logging.getLogger(__name__)

PERCENT_RE = re.compile(r"(\d+)%")
AC_ATTACHED_MARKER = "AC attached"
PRESENT_MARKER = "present: true"


class StatusParseError(Exception):
    """The UPS line was found but could not be parsed."""
    pass


def find_ups_line(output: str, ups_name: str) -> Optional[str]:
    """Return the first line mentioning the UPS, or None."""
    for line in output.splitlines():
        if ups_name in line:
            return line
    return None


def parse_status(output: str, ups_name: str) -> Optional[BatteryReading]:
    """
    Extract the reading of a UPS from battery status text.

    Args:
        output: Raw multi-line status text.
        ups_name: Device name to look for.

    Returns:
        The reading, or None when no line mentions the UPS.

    Raises:
        StatusParseError: If the UPS line has no usable percentage.
    """
    line = find_ups_line(output, ups_name)
    if line is None:
        logger.debug("No status line mentions UPS '%s'", ups_name)
        return None

    match = PERCENT_RE.search(line)
    if not match:
        raise StatusParseError(f"No battery percentage in status line for '{ups_name}': {line.strip()!r}")

    level = int(match.group(1))
    if level > 100:
        raise StatusParseError(f"Battery percentage {level}% out of range for '{ups_name}'")

    return BatteryReading(
        battery_level=level,
        ac_attached=AC_ATTACHED_MARKER in line,
        present=PRESENT_MARKER in line,
    )
