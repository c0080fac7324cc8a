"""
SSH module for upsguard.

Provides the key-authenticated SSH session used to power off the NAS.
"""

from upsguard.ssh.client import SSHClient, SSHCommandResult, SSHConnectionConfig

__all__ = ["SSHClient", "SSHCommandResult", "SSHConnectionConfig"]
