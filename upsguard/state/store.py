"""
Persistence of the last observed power source.

The state record is a small text file holding either ``ac`` or ``battery``.
A missing or unrecognised record means the prior state is unknown.
"""

import logging
import os
import tempfile
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from ..config import settings

logger = logging.getLogger(__name__)


class PowerState(str, Enum):
    """Power source of the UPS."""
    AC = "ac"
    BATTERY = "battery"


class StatePersistenceError(Exception):
    """The state record could not be written."""
    pass


class StateStore:
    """
    Reads and writes the persisted power state.

    This is the only component that touches the state file.
    """

    def __init__(self, path: Union[str, Path] = settings.STATE_FILE):
        self.path = Path(path).expanduser()

    def load(self) -> Optional[PowerState]:
        """
        Load the last persisted power state.

        Returns:
            The stored state, or None if the record is missing, unreadable
            or holds anything other than a known token.
        """
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read state file {self.path}: {e}")
            return None

        try:
            return PowerState(token)
        except ValueError:
            logger.warning(f"Ignoring unrecognised state '{token}' in {self.path}")
            return None

    def save(self, state: PowerState) -> None:
        """
        Persist the power state, replacing the whole record atomically.

        Raises:
            StatePersistenceError: If the record cannot be written.
        """
        directory = self.path.parent
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=directory)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(PowerState(state).value)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
            tmp_path = None
        except OSError as e:
            raise StatePersistenceError(f"Failed to write state file {self.path}: {e}") from e
        finally:
            if tmp_path is not None:
                try:
                    os.unlink(tmp_path)
                except OSError as e:
                    logger.debug(f"Could not remove temporary state file {tmp_path}: {e}")
        logger.debug(f"Saved power state '{PowerState(state).value}' to {self.path}")
