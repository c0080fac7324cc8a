"""
Power transition detection.

Transitions are edge-triggered: an event is produced only when the power
source differs from the one recorded on the previous run.
"""

from dataclasses import dataclass
from typing import Optional

from ..state.store import PowerState

EVENT_MAINS_LOST = "MAINS_LOST"
EVENT_MAINS_RETURNED = "MAINS_RETURNED"
EVENT_STATE_INITIALISED = "STATE_INITIALISED"


@dataclass(frozen=True)
class PowerTransition:
    """A change of power source between two runs."""

    previous: Optional[PowerState]
    current: PowerState
    event: str

    @property
    def mains_returned(self) -> bool:
        return self.event == EVENT_MAINS_RETURNED


def detect_transition(previous: Optional[PowerState], current: PowerState) -> Optional[PowerTransition]:
    """
    Compare the persisted power state with the current one.

    Args:
        previous: State from the last run, None when unknown.
        current: State derived from this run's reading.

    Returns:
        The transition, or None when the state is unchanged.
    """
    if previous == current:
        return None

    if previous is None:
        event = EVENT_STATE_INITIALISED
    elif current == PowerState.AC:
        event = EVENT_MAINS_RETURNED
    else:
        event = EVENT_MAINS_LOST

    return PowerTransition(previous=previous, current=current, event=event)
