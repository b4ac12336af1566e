"""Shell command execution for pre- and post-deploy steps"""

import asyncio
import logging
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Optional, Union

from rich.console import Console

from ..api.exceptions import CommandFailedError
from ..constants import MSG_RUNNING_COMMAND, MSG_COMMAND_SUCCESS, MSG_COMMAND_FAILED
from ..utils.output import console as default_console

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 4096


class CommandExecutor(ABC):
    """Executes a command string and waits for it to finish"""

    @abstractmethod
    async def run(self, command: str, cwd: Union[str, Path]) -> None:
        """Run command in cwd

        Raises:
            CommandFailedError: If the command cannot start or exits non-zero
        """


class ShellCommandExecutor(CommandExecutor):
    """Runs commands through the platform shell, streaming their output"""

    def __init__(self, console: Optional[Console] = None,
                 stdout: Optional[IO] = None,
                 stderr: Optional[IO] = None):
        """Initialize executor

        Args:
            console: Console for the command start/finish lines
            stdout: Stream receiving the command's stdout (default sys.stdout)
            stderr: Stream receiving the command's stderr (default sys.stderr)
        """
        self.console = console or default_console
        self._stdout = stdout
        self._stderr = stderr

    async def run(self, command: str, cwd: Union[str, Path]) -> None:
        self.console.print(MSG_RUNNING_COMMAND.format(command=command), markup=False, highlight=False)
        logger.debug(f"Spawning shell command in {cwd}: {command}")

        try:
            process = await asyncio.create_subprocess_shell(
                command,
                cwd=str(cwd),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE
            )
        except OSError as e:
            self.console.print(f'> Command "{command}" could not be started: {e}',
                               style="red", markup=False, highlight=False)
            raise CommandFailedError(command, cause=e) from e

        await asyncio.gather(
            self._forward(process.stdout, self._stdout or sys.stdout),
            self._forward(process.stderr, self._stderr or sys.stderr),
        )
        exit_code = await process.wait()

        if exit_code != 0:
            self.console.print(MSG_COMMAND_FAILED.format(command=command, code=exit_code),
                               style="red", markup=False, highlight=False)
            raise CommandFailedError(command, exit_code=exit_code)

        self.console.print(MSG_COMMAND_SUCCESS.format(command=command), markup=False, highlight=False)

    @staticmethod
    async def _forward(reader: asyncio.StreamReader, stream: IO) -> None:
        """Copy a child pipe to one of our streams as data arrives"""
        buffer = getattr(stream, "buffer", None)

        while True:
            chunk = await reader.read(READ_CHUNK_SIZE)
            if not chunk:
                break

            if buffer is not None:
                stream.flush()
                buffer.write(chunk)
                buffer.flush()
            else:
                stream.write(chunk.decode(errors="replace"))
                stream.flush()
