import json

import pytest
from click.testing import CliRunner

from upsguard.config import MonitorConfig

AC_STATUS = (
    "Now drawing from 'AC Power'\n"
    "-InternalBattery-0 (id=34472035)\t100%; charged; 0:00 remaining present: true\n"
    "-AVR750U          (id=716570624)\t100%; AC attached; not charging present: true"
)

BATTERY_STATUS = (
    "Now drawing from 'Battery Power'\n"
    "-InternalBattery-0 (id=34472035)\t100%; charged; 0:00 remaining present: true\n"
    "-AVR750U          (id=716570624)\t75%; discharging present: true"
)

MISSING_UPS_STATUS = (
    "Now drawing from 'AC Power'\n"
    "-InternalBattery-0 (id=34472035)\t100%; charged; 0:00 remaining present: true"
)


@pytest.fixture
def config_data():
    return {
        "nas": {
            "host": "192.168.1.100",
            "username": "admin",
            "ssh_key_path": "~/.ssh/nas_key",
            "mac_address": "00:11:22:33:44:55",
        },
        "ups": {
            "name": "AVR750U",
            "low_battery_threshold": 20,
        },
    }


@pytest.fixture
def monitor_config(config_data):
    return MonitorConfig.model_validate(config_data)


@pytest.fixture
def config_file(tmp_path, config_data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config_data))
    return path


@pytest.fixture
def cli_runner():
    return CliRunner()
