"""
Shutdown command execution for the NAS.

Issues a single power-off command over SSH. Every failure is captured in
the returned ShutdownResult so a broken network or a rejected key never
takes the monitor down with it.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from upsguard.config import MonitorConfig
from upsguard.ssh.client import SSHClient, SSHConnectionConfig

logger = logging.getLogger(__name__)


class ShutdownStatus(Enum):
    """Shutdown operation status."""
    SUCCESS = "success"
    FAILED = "failed"
    TIMEOUT = "timeout"


@dataclass
class ShutdownResult:
    """Result of a shutdown operation."""

    hostname: str
    status: ShutdownStatus
    command: str
    exit_code: Optional[int] = None
    stdout: Optional[str] = None
    stderr: Optional[str] = None
    execution_time: Optional[float] = None
    error_message: Optional[str] = None
    timestamp: Optional[datetime] = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now(timezone.utc)

    @property
    def success(self) -> bool:
        """Whether shutdown was successful."""
        return self.status == ShutdownStatus.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            'hostname': self.hostname,
            'status': self.status.value,
            'command': self.command,
            'exit_code': self.exit_code,
            'stdout': self.stdout,
            'stderr': self.stderr,
            'execution_time': self.execution_time,
            'error_message': self.error_message,
            'timestamp': self.timestamp.isoformat() if self.timestamp else None,
            'success': self.success,
        }


class RemoteShutdowner:
    """
    Powers off the NAS over SSH.

    Exactly one attempt is made per call; retrying is left to the next
    scheduled run.
    """

    def __init__(self, ssh_client: Optional[SSHClient] = None):
        self.ssh_client = ssh_client or SSHClient()

    async def shutdown(self, config: MonitorConfig, dry_run: bool = False) -> ShutdownResult:
        """
        Execute the shutdown command on the NAS.

        Args:
            config: Monitor configuration holding the NAS connection details
            dry_run: If True, log the command without connecting

        Returns:
            Shutdown operation result, never raises for remote failures
        """
        nas = config.nas
        command = nas.shutdown_command
        start_time = datetime.now(timezone.utc)

        if dry_run:
            logger.info(f"DRY RUN: Would execute '{command}' on {nas.host}")
            return ShutdownResult(
                hostname=nas.host,
                status=ShutdownStatus.SUCCESS,
                command=f"DRY RUN: {command}",
                exit_code=0,
                stdout="Dry run - command not executed",
                execution_time=0.0,
                timestamp=start_time,
            )

        logger.info(f"Initiating NAS shutdown on {nas.host}")
        ssh_config = SSHConnectionConfig.from_nas(nas)

        try:
            ssh_result = await self.ssh_client.execute_command(ssh_config, command)
        except asyncio.TimeoutError:
            logger.error(f"Shutdown command timed out on {nas.host}")
            return ShutdownResult(
                hostname=nas.host,
                status=ShutdownStatus.TIMEOUT,
                command=command,
                error_message="Command timed out",
                timestamp=start_time,
            )
        except Exception as e:
            logger.error(f"Failed to shutdown NAS {nas.host}: {e}")
            return ShutdownResult(
                hostname=nas.host,
                status=ShutdownStatus.FAILED,
                command=command,
                error_message=str(e) or e.__class__.__name__,
                timestamp=start_time,
            )

        if ssh_result.success:
            logger.info(f"NAS shutdown command sent successfully to {nas.host}")
            status = ShutdownStatus.SUCCESS
            error_message = None
        else:
            logger.error(
                f"Shutdown command returned non-zero exit code on {nas.host}: "
                f"{ssh_result.exit_code} {ssh_result.output}"
            )
            status = ShutdownStatus.FAILED
            error_message = f"Exit code {ssh_result.exit_code}"
            if ssh_result.output:
                error_message = f"{error_message}: {ssh_result.output}"

        return ShutdownResult(
            hostname=nas.host,
            status=status,
            command=command,
            exit_code=ssh_result.exit_code,
            stdout=ssh_result.stdout,
            stderr=ssh_result.stderr,
            execution_time=ssh_result.execution_time,
            error_message=error_message,
            timestamp=start_time,
        )
