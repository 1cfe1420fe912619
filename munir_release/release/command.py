"""Translate CLI options into the release engine invocation."""

from __future__ import annotations

from dataclasses import dataclass, replace

from munir_release.core.structured import StrDict
from munir_release.release.config_store import ConfigStore
from munir_release.release.model import ReleaseConfig

__all__ = ["ReleaseOptions", "InvocationPayload", "CommandFacade", "ENGINE_COMMAND"]

ENGINE_COMMAND = "semantic-release"


@dataclass(frozen=True, slots=True)
class ReleaseOptions:
    ci: bool = False
    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class InvocationPayload:
    """Everything handed to the release engine for one run."""

    config: ReleaseConfig
    ci: bool
    dry_run: bool

    def to_json(self) -> StrDict:
        return {**self.config.to_json(), "ci": self.ci, "dryRun": self.dry_run}


class CommandFacade:
    def __init__(self, store: ConfigStore, options: ReleaseOptions | None = None) -> None:
        self._store = store
        self._options = options if options is not None else ReleaseOptions()

    @property
    def options(self) -> ReleaseOptions:
        return self._options

    def set_options(self, *, ci: bool | None = None, dry_run: bool | None = None) -> None:
        """Merge the given flags; flags left as None keep their value."""
        if ci is not None:
            self._options = replace(self._options, ci=ci)
        if dry_run is not None:
            self._options = replace(self._options, dry_run=dry_run)

    def describe_command(self) -> str:
        """Shell form of the equivalent engine call, for display only."""
        flags: list[str] = []
        if self._options.ci:
            flags.append("--ci")
        if self._options.dry_run:
            flags.append("--dry-run")
        return f"{ENGINE_COMMAND} {' '.join(flags)}".strip()

    def build_invocation_payload(self) -> InvocationPayload:
        return InvocationPayload(
            config=self._store.get_config(),
            ci=self._options.ci,
            dry_run=self._options.dry_run,
        )
