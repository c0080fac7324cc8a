"""
Power monitoring: transition detection and the run engine.
"""

from upsguard.monitor.engine import PowerStateEngine, RunOutcome, RunResult
from upsguard.monitor.events import PowerTransition, detect_transition

__all__ = ["PowerStateEngine", "RunOutcome", "RunResult", "PowerTransition", "detect_transition"]
