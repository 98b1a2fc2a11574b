"""
A concrete CommandRunner that spawns real processes. This is the only
module in hwspec that touches the process boundary.
"""
import subprocess
from typing import Sequence

from hwspec.internal.logging import get_logger
from hwspec.kernel.contracts import CommandResult, CommandRunner

logger = get_logger(__name__)


class SubprocessCommandRunner(CommandRunner):
    """
    Runs a command to completion and captures its output as text.

    stdin is /dev/null so a tool that wants input sees EOF. There is no
    timeout: an interactive sudo password prompt on the terminal blocks the run.
    """

    def run(self, args: Sequence[str]) -> CommandResult:
        args = tuple(args)
        logger.debug("Running command", args=list(args))
        completed = subprocess.run(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
        if completed.returncode != 0:
            logger.debug(
                "Command exited non-zero",
                command=args[0],
                returncode=completed.returncode,
                stderr=completed.stderr.strip(),
            )
        return CommandResult(
            args=args,
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
