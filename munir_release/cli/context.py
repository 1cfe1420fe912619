from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from munir_release.output.console import ConsoleProtocol, RichConsole
from munir_release.release.command import CommandFacade
from munir_release.release.config_store import ConfigStore
from munir_release.release.defaults import CONFIG_FILE_NAME
from munir_release.release.engine import ReleaseEngine, SemanticReleaseEngine


@dataclass(frozen=True, slots=True)
class CLIContext:
    store: ConfigStore
    facade: CommandFacade
    engine: ReleaseEngine
    console: ConsoleProtocol


def build_context(cwd: Path | None = None) -> CLIContext:
    root = cwd if cwd is not None else Path.cwd()
    console = RichConsole()
    store = ConfigStore(console=console, path=root / CONFIG_FILE_NAME)
    return CLIContext(
        store=store,
        facade=CommandFacade(store),
        engine=SemanticReleaseEngine(cwd=root),
        console=console,
    )
