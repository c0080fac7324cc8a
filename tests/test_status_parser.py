"""
Tests for the battery status parser.
"""

import pytest

from upsguard.status.parser import StatusParseError, find_ups_line, parse_status

from .conftest import AC_STATUS, BATTERY_STATUS, MISSING_UPS_STATUS


class TestParseStatus:
    """Test parsing of pmset battery output."""

    def test_ups_on_ac_power(self):
        reading = parse_status(AC_STATUS, "AVR750U")

        assert reading.battery_level == 100
        assert reading.ac_attached is True
        assert reading.present is True

    def test_ups_on_battery_power(self):
        reading = parse_status(BATTERY_STATUS, "AVR750U")

        assert reading.battery_level == 75
        assert reading.ac_attached is False
        assert reading.present is True

    def test_ups_not_found(self):
        assert parse_status(MISSING_UPS_STATUS, "AVR750U") is None

    def test_empty_output(self):
        assert parse_status("", "AVR750U") is None

    def test_first_matching_line_wins(self):
        output = (
            "-AVR750U (id=1)\t40%; discharging present: true\n"
            "-AVR750U (id=2)\t90%; AC attached; charging present: true"
        )
        reading = parse_status(output, "AVR750U")

        assert reading.battery_level == 40
        assert reading.ac_attached is False

    def test_not_present(self):
        output = "-AVR750U (id=716570624)\t0%; AC attached; not charging present: false"
        reading = parse_status(output, "AVR750U")

        assert reading.battery_level == 0
        assert reading.ac_attached is True
        assert reading.present is False

    def test_missing_percentage(self):
        output = "-AVR750U (id=716570624)\tAC attached; not charging present: true"

        with pytest.raises(StatusParseError, match="No battery percentage"):
            parse_status(output, "AVR750U")

    def test_percentage_out_of_range(self):
        output = "-AVR750U (id=716570624)\t150%; AC attached present: true"

        with pytest.raises(StatusParseError, match="out of range"):
            parse_status(output, "AVR750U")

    def test_substring_match(self):
        assert find_ups_line(AC_STATUS, "AVR750") is not None
        assert find_ups_line(AC_STATUS, "CP1500") is None
