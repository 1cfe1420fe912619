"""Exit codes for the munir-release CLI.

Bad input, an unknown command, a failed write and a failed release all exit
with 1, so there is a single failure code.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes. These values are part of the CLI contract."""

    OK = 0
    ERROR = 1
