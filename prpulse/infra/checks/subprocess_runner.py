import subprocess
from typing import Sequence

from prpulse.core.exceptions import CheckError
from prpulse.core.ports.checks import CheckRunner
from prpulse.core.schema.report import CommandResult


class SubprocessCheckRunner(CheckRunner):
    def __init__(self, cwd: str | None = None) -> None:
        self._cwd = cwd

    def run(self, command: Sequence[str], *, timeout: float) -> CommandResult:
        display = " ".join(command)
        if not command:
            raise CheckError("Empty check command", display)
        try:
            completed = subprocess.run(
                list(command),
                capture_output=True,
                text=True,
                timeout=timeout,
                cwd=self._cwd,
                check=False,
            )
        except FileNotFoundError as error:
            raise CheckError(f"Command not found: {command[0]}", display) from error
        except subprocess.TimeoutExpired as error:
            raise CheckError(
                f"Command timed out after {timeout:g}s", display
            ) from error
        output = completed.stdout
        if completed.stderr:
            output = f"{output}\n{completed.stderr}" if output else completed.stderr
        return CommandResult(returncode=completed.returncode, output=output)
