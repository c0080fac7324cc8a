"""
Async SSH client for the remote NAS.

Opens one key-authenticated, non-interactive session per call and runs a
command with bounded connect, login and command timeouts.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import asyncssh

from upsguard.config import NASConfig, settings

logger = logging.getLogger(__name__)


@dataclass
class SSHConnectionConfig:
    """Configuration for SSH connections."""

    hostname: str
    username: str
    private_key_path: str
    port: int = 22
    connect_timeout: int = 10
    command_timeout: int = 30
    known_hosts: Optional[str] = None
    verify_host_key: bool = True

    @classmethod
    def from_nas(cls, nas: NASConfig, **kwargs) -> "SSHConnectionConfig":
        """Build a connection config for the configured NAS."""
        values = {
            'hostname': nas.host,
            'username': nas.username,
            'private_key_path': nas.ssh_key_path,
            'port': nas.port,
            'connect_timeout': settings.SSH_CONNECT_TIMEOUT,
            'command_timeout': settings.SSH_COMMAND_TIMEOUT,
            'known_hosts': settings.SSH_KNOWN_HOSTS,
            'verify_host_key': settings.SSH_VERIFY_HOST_KEY,
        }
        values.update(kwargs)
        return cls(**values)


@dataclass
class SSHCommandResult:
    """Result of SSH command execution."""

    command: str
    exit_code: int
    stdout: str
    stderr: str
    execution_time: float
    success: bool

    @property
    def output(self) -> str:
        """Combined stdout and stderr."""
        if self.stderr:
            return f"{self.stdout}\n{self.stderr}".strip()
        return self.stdout.strip()


class SSHClient:
    """
    Async SSH client for remote command execution.

    Authentication is public-key only, so a rejected key fails immediately
    instead of falling back to a password prompt.
    """

    def _connect_kwargs(self, config: SSHConnectionConfig) -> Dict[str, Any]:
        key_path = Path(config.private_key_path).expanduser()
        if not key_path.exists():
            raise FileNotFoundError(f"SSH private key not found: {key_path}")

        connect_kwargs: Dict[str, Any] = {
            'host': config.hostname,
            'port': config.port,
            'username': config.username,
            'client_keys': [str(key_path)],
            'preferred_auth': 'publickey',
            'agent_path': None,
            'connect_timeout': config.connect_timeout,
            'login_timeout': config.connect_timeout,
        }

        if not config.verify_host_key:
            connect_kwargs['known_hosts'] = None
        elif config.known_hosts:
            connect_kwargs['known_hosts'] = str(Path(config.known_hosts).expanduser())

        return connect_kwargs

    @asynccontextmanager
    async def connection(self, config: SSHConnectionConfig):
        """
        Context manager for SSH connections.

        Args:
            config: SSH connection configuration

        Yields:
            SSH connection, closed on exit
        """
        logger.debug(f"Opening SSH connection to {config.username}@{config.hostname}:{config.port}")
        conn = await asyncssh.connect(**self._connect_kwargs(config))
        try:
            yield conn
        finally:
            conn.close()
            try:
                await asyncio.wait_for(conn.wait_closed(), timeout=config.connect_timeout)
            except asyncio.TimeoutError:
                logger.warning(f"SSH connection to {config.hostname} did not close within {config.connect_timeout}s")

    async def execute_command(
        self,
        config: SSHConnectionConfig,
        command: str,
        timeout: Optional[int] = None,
    ) -> SSHCommandResult:
        """
        Execute command on remote host.

        Args:
            config: SSH connection configuration
            command: Command to execute
            timeout: Command timeout (uses config default if None)

        Returns:
            Command execution result

        Raises:
            asyncssh.Error: If SSH operation fails
            asyncio.TimeoutError: If command times out
            OSError: If the host is unreachable or the key is missing
        """
        timeout = timeout or config.command_timeout
        loop = asyncio.get_running_loop()
        start_time = loop.time()

        logger.debug(f"Executing SSH command on {config.hostname}: {command}")

        try:
            async with self.connection(config) as conn:
                result = await asyncio.wait_for(
                    conn.run(command, check=False),
                    timeout=timeout
                )

                execution_time = loop.time() - start_time
                exit_code = result.exit_status if result.exit_status is not None else -1

                return SSHCommandResult(
                    command=command,
                    exit_code=exit_code,
                    stdout=result.stdout or "",
                    stderr=result.stderr or "",
                    execution_time=execution_time,
                    success=exit_code == 0,
                )

        except asyncio.TimeoutError:
            logger.error(f"SSH command timed out after {timeout}s: {command}")
            raise

        except Exception as e:
            logger.error(f"SSH command failed: {command} - {e}")
            raise

