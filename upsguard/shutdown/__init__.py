"""
Remote shutdown of the NAS.
"""

from upsguard.shutdown.executor import RemoteShutdowner, ShutdownResult, ShutdownStatus

__all__ = ["RemoteShutdowner", "ShutdownResult", "ShutdownStatus"]
