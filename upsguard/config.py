"""
Configuration management for upsguard.

Runtime settings (file locations, timeouts, status command) come from
environment variables through Pydantic's BaseSettings. The monitor
configuration describing the NAS and the UPS lives in a JSON file and is
validated with Pydantic models before any monitoring logic runs.
"""
import re
from pathlib import Path

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MAC_ADDRESS_RE = re.compile(r"^[0-9A-Fa-f]{2}(:[0-9A-Fa-f]{2}){5}$")


class Settings(BaseSettings):
    """
    Application settings.

    These settings are loaded from environment variables.
    """

    # Files
    CONFIG_PATH: str = "config.json"
    STATE_FILE: str = "last_state.txt"

    # Battery status source
    STATUS_COMMAND: str = "pmset -g batt"
    STATUS_TIMEOUT: float = 15.0  # seconds

    # SSH
    SSH_CONNECT_TIMEOUT: int = 10  # seconds, covers connect and login
    SSH_COMMAND_TIMEOUT: int = 30  # seconds
    SSH_KNOWN_HOSTS: str | None = None  # None uses ~/.ssh/known_hosts
    SSH_VERIFY_HOST_KEY: bool = True

    # Wake-on-LAN
    WOL_BROADCAST_ADDRESS: str = "255.255.255.255"
    WOL_PORT: int = Field(9, ge=1, le=65535)
    WOL_TIMEOUT: float = 5.0  # seconds

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        env_prefix="UPSGUARD_",
        extra="ignore",
    )


settings = Settings()


class ConfigError(Exception):
    """Raised when the monitor configuration is missing or invalid."""
    pass


class NASConfig(BaseModel):
    """Connection details of the managed NAS."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(min_length=1)
    username: str = Field(min_length=1)
    ssh_key_path: str = Field(min_length=1)
    mac_address: str
    port: int = Field(22, ge=1, le=65535)
    shutdown_command: str = Field("shutdown -h now", min_length=1)

    @field_validator("host", "username")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("ssh_key_path")
    @classmethod
    def _expand_key_path(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return str(Path(value.strip()).expanduser().absolute())

    @field_validator("mac_address")
    @classmethod
    def _check_mac(cls, value: str) -> str:
        value = value.strip()
        if not MAC_ADDRESS_RE.match(value):
            raise ValueError(f"'{value}' is not a colon-separated MAC address")
        return value


class UPSConfig(BaseModel):
    """The UPS to track in the battery status output."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    low_battery_threshold: int = Field(ge=0, le=100)

    @field_validator("name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class MonitorConfig(BaseModel):
    """
    The monitor configuration file.

    The ``nas`` section is also accepted under the legacy ``qnap`` key.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    nas: NASConfig = Field(validation_alias=AliasChoices("nas", "qnap"))
    ups: UPSConfig


def load_config(path: str | Path | None = None) -> MonitorConfig:
    """
    Load and validate the monitor configuration file.

    Args:
        path: JSON file to read (defaults to settings.CONFIG_PATH)

    Returns:
        Validated, immutable monitor configuration

    Raises:
        ConfigError: If the file is missing, unreadable or invalid
    """
    config_path = Path(path or settings.CONFIG_PATH).expanduser()
    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {config_path}: {e}") from e

    try:
        return MonitorConfig.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}:\n{e}") from e
