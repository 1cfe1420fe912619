"""Error types for release configuration and execution."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal


@dataclass(frozen=True, slots=True)
class ConfigError:
    """`.releaserc` could not be read, parsed or written."""

    kind: Literal["not_found", "unreadable", "invalid_json", "invalid_shape", "write_failed"]
    message: str
    path: Path | None = None
    hint: str | None = None

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message


@dataclass(frozen=True, slots=True)
class EngineError:
    """The release engine could not be started or reported a failure."""

    message: str
    returncode: int
    hint: str | None = None

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message
