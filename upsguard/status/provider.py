"""
Battery status provider.

Runs the host's battery status command once and hands its output to the
parser. The command is ``pmset -g batt`` by default.
"""

import asyncio
import logging
import shlex

from ..config import settings

logger = logging.getLogger(__name__)


class StatusProviderError(Exception):
    """The battery status command could not be run."""
    pass


class StatusProvider:
    """
    Reads raw battery status text from an external command.
    """

    def __init__(self, command: str = settings.STATUS_COMMAND, timeout: float = settings.STATUS_TIMEOUT):
        self.command = command
        self.timeout = timeout

    async def read(self) -> str:
        """
        Run the status command and return its standard output.

        Raises:
            StatusProviderError: If the command is missing, fails or times out.
        """
        args = shlex.split(self.command)
        logger.debug("Running status command: %s", self.command)
        try:
            proc = await asyncio.create_subprocess_exec(
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise StatusProviderError(f"Cannot run status command '{self.command}': {e}") from e

        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            proc.kill()
            await proc.wait()
            raise StatusProviderError(
                f"Status command '{self.command}' timed out after {self.timeout}s"
            ) from e

        if proc.returncode != 0:
            err = stderr.decode("utf-8", errors="ignore").strip()
            raise StatusProviderError(
                f"Status command '{self.command}' exited with {proc.returncode}: {err}"
            )

        return stdout.decode("utf-8", errors="ignore")
