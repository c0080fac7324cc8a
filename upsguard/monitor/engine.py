"""
Power state engine.

Runs one monitoring pass: read the UPS, compare with the persisted power
state, wake or shut down the NAS as needed, persist the new state and pick
the process exit code.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from upsguard.config import MonitorConfig
from upsguard.shutdown.executor import RemoteShutdowner, ShutdownResult
from upsguard.state.store import PowerState, StatePersistenceError, StateStore
from upsguard.status.models import BatteryReading
from upsguard.status.parser import parse_status
from upsguard.status.provider import StatusProvider
from upsguard.wol.signaler import WakeResult, WakeSignaler

from .events import PowerTransition, detect_transition

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ABNORMAL = 1


class RunOutcome(str, Enum):
    """How a monitoring pass ended."""
    NOMINAL = "nominal"
    UPS_NOT_FOUND = "ups_not_found"
    SHUTDOWN_ISSUED = "shutdown_issued"
    ON_BATTERY = "on_battery"
    LOW_BATTERY_ON_AC = "low_battery_on_ac"

    @property
    def exit_code(self) -> int:
        if self in (RunOutcome.NOMINAL, RunOutcome.UPS_NOT_FOUND, RunOutcome.SHUTDOWN_ISSUED):
            return EXIT_OK
        return EXIT_ABNORMAL


@dataclass
class RunResult:
    """Everything a monitoring pass observed and did."""

    outcome: RunOutcome
    reading: Optional[BatteryReading] = None
    previous_state: Optional[PowerState] = None
    current_state: Optional[PowerState] = None
    transition: Optional[PowerTransition] = None
    wake_result: Optional[WakeResult] = None
    shutdown_result: Optional[ShutdownResult] = None
    state_saved: bool = False

    @property
    def exit_code(self) -> int:
        return self.outcome.exit_code


class PowerStateEngine:
    """
    Edge-triggered power state machine for one UPS and one NAS.

    All collaborators are injected so a pass can run against fakes.
    """

    def __init__(
        self,
        config: MonitorConfig,
        provider: StatusProvider,
        store: StateStore,
        shutdowner: RemoteShutdowner,
        signaler: WakeSignaler,
    ):
        self.config = config
        self.provider = provider
        self.store = store
        self.shutdowner = shutdowner
        self.signaler = signaler

    async def read_battery(self) -> Optional[BatteryReading]:
        """Read and parse the UPS status, None when the UPS is not listed."""
        output = await self.provider.read()
        return parse_status(output, self.config.ups.name)

    async def run(self) -> RunResult:
        """
        Run one monitoring pass.

        Returns:
            The pass result; its exit_code is what the process should exit with.

        Raises:
            StatusProviderError: If the status command cannot be run.
            StatusParseError: If the UPS line is malformed.
        """
        logger.info("Running UPS status check")
        previous = self.store.load()

        reading = await self.read_battery()
        if reading is None:
            logger.warning(f"UPS '{self.config.ups.name}' not found in battery status output")
            return RunResult(outcome=RunOutcome.UPS_NOT_FOUND, previous_state=previous)

        current = PowerState.AC if reading.ac_attached else PowerState.BATTERY
        threshold = self.config.ups.low_battery_threshold
        logger.debug(
            f"UPS '{self.config.ups.name}': {reading.battery_level}% on {current.value} "
            f"(present={reading.present})"
        )

        result = RunResult(
            outcome=RunOutcome.NOMINAL,
            reading=reading,
            previous_state=previous,
            current_state=current,
        )

        transition = detect_transition(previous, current)
        if transition is not None:
            result.transition = transition
            await self._handle_transition(transition, result)

        if current == PowerState.BATTERY and reading.battery_level <= threshold:
            logger.warning(
                f"Battery at {reading.battery_level}% is at or below threshold {threshold}%"
            )
            result.shutdown_result = await self.shutdowner.shutdown(self.config)
            result.outcome = RunOutcome.SHUTDOWN_ISSUED
            return result

        if current == PowerState.AC and reading.battery_level > threshold:
            result.outcome = RunOutcome.NOMINAL
        elif current == PowerState.BATTERY:
            result.outcome = RunOutcome.ON_BATTERY
        else:
            result.outcome = RunOutcome.LOW_BATTERY_ON_AC

        return result

    async def _handle_transition(self, transition: PowerTransition, result: RunResult) -> None:
        previous = transition.previous.value if transition.previous else "unknown"
        logger.info(f"Power state changed from {previous} to {transition.current.value}")

        if transition.mains_returned:
            mac_address = self.config.nas.mac_address
            try:
                result.wake_result = await self.signaler.wake(mac_address)
            except Exception as e:
                logger.error(f"Wake-on-LAN failed: {e}")
                result.wake_result = WakeResult(mac_address=mac_address, success=False, error_message=str(e))

        try:
            self.store.save(transition.current)
            result.state_saved = True
        except StatePersistenceError as e:
            logger.error(f"Failed to persist power state: {e}")
