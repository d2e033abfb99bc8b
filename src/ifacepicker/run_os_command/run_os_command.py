"""
This module provides functionality to execute an OS command and stream its
output line by line. The command runs without a shell and its stdout is read
to exhaustion, then the process is waited for and its pipe closed.

Functions:
    read_command_lines: Runs a command and yields its output lines.
"""
import logging
import subprocess
from typing import Iterator, List, Optional

logger = logging.getLogger(__name__)

# Command listing the interfaces and their addresses
COMMAND_IP = ["ip", "a"]


class CommandLaunchError(OSError):
    """Raised when the external command could not be started."""

    def __init__(self, command: List[str], reason: Optional[BaseException] = None):
        self.command = list(command)
        self.reason = reason
        super().__init__(f"Error opening pipe for command: {' '.join(self.command)}")


def read_command_lines(command: Optional[List[str]] = None) -> Iterator[str]:
    """
    Run an OS command and yield each line of its standard output.

    The process is started on first iteration. Its stdout is closed and the
    process is waited for on every exit path, including when the caller stops
    iterating early.

    Args:
        command (list[str]): The command and its arguments. Defaults to COMMAND_IP.

    Yields:
        str: One line of output, without the trailing newline.

    Raises:
        CommandLaunchError: If the command is empty or could not be started.
    """
    command = list(COMMAND_IP if command is None else command)
    if not command:
        logger.error("No command to run")
        raise CommandLaunchError(command)

    logger.info("Running command: %s", " ".join(command))
    try:
        process = subprocess.Popen(
            command,
            stdout=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace"
            )
    except OSError as e:
        logger.error("Could not start %s: %s", command[0], e)
        raise CommandLaunchError(command, e) from e

    with process:
        for line in process.stdout:
            yield line.rstrip("\r\n")

    if process.returncode:
        # Output already read is still used, only the launch is fatal
        logger.warning("Command %s exited with status %d", " ".join(command), process.returncode)
    else:
        logger.info("Command %s finished", " ".join(command))
