"""Subprocess execution with Result-based error handling.

Usage:
    result = run_attached(["node", "--version"], cwd=Path("."))
    match result:
        case Ok(None):
            pass
        case Err(error):
            print(error)
"""

from __future__ import annotations

import subprocess
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from munir_release.core.result import Err, Ok, Result

__all__ = ["ProcessError", "run_attached"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: The exit code of the process, -1 if it could not start.
        detail: OS error text when the process could not start.
    """

    command: tuple[str, ...]
    returncode: int
    detail: str = ""

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:2])
        if len(self.command) > 2:
            cmd_str += " ..."
        if self.returncode == -1:
            return f"{cmd_str} could not be started: {self.detail}"
        return f"{cmd_str} failed (exit {self.returncode})"


def run_attached(
    cmd: list[str],
    cwd: Path,
    env: Mapping[str, str] | None = None,
) -> Result[None, ProcessError]:
    """Execute a command with stdout/stderr attached to the terminal.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Environment variables (uses current env if None).

    Returns:
        Ok(None) on exit code 0, Err(ProcessError) otherwise.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=dict(env) if env is not None else None,
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, detail=str(e)))

    if proc.returncode != 0:
        return Err(ProcessError(command=tuple(cmd), returncode=proc.returncode))

    return Ok(None)
