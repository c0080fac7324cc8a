"""
Persisted power state between runs.
"""

from upsguard.state.store import PowerState, StatePersistenceError, StateStore

__all__ = ["PowerState", "StatePersistenceError", "StateStore"]
