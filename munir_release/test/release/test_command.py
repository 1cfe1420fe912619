from __future__ import annotations

from pathlib import Path

import pytest

from munir_release.output.console import MockConsole
from munir_release.release.command import CommandFacade, ReleaseOptions
from munir_release.release.config_store import ConfigStore
from munir_release.release.defaults import default_config


def _facade(tmp_path: Path) -> CommandFacade:
    store = ConfigStore(
        console=MockConsole(), path=tmp_path / ".releaserc", config=default_config()
    )
    return CommandFacade(store)


@pytest.mark.parametrize(
    ("ci", "dry_run", "expected"),
    [
        (False, False, "semantic-release"),
        (True, False, "semantic-release --ci"),
        (False, True, "semantic-release --dry-run"),
        (True, True, "semantic-release --ci --dry-run"),
    ],
)
def test_describe_command(tmp_path: Path, ci: bool, dry_run: bool, expected: str) -> None:
    facade = _facade(tmp_path)
    facade.set_options(ci=ci, dry_run=dry_run)

    assert facade.describe_command() == expected


def test_set_options_merges_partial_updates(tmp_path: Path) -> None:
    facade = _facade(tmp_path)

    facade.set_options(ci=True)
    facade.set_options(dry_run=True)
    assert facade.options == ReleaseOptions(ci=True, dry_run=True)

    facade.set_options(ci=False)
    assert facade.options == ReleaseOptions(ci=False, dry_run=True)

    facade.set_options()
    assert facade.options == ReleaseOptions(ci=False, dry_run=True)


def test_payload_carries_current_config_and_flags(tmp_path: Path) -> None:
    facade = _facade(tmp_path)
    facade.set_options(ci=True)

    payload = facade.build_invocation_payload()

    assert payload.config == default_config()
    assert payload.ci is True
    assert payload.dry_run is False


def test_payload_reflects_store_mutations(tmp_path: Path) -> None:
    store = ConfigStore(
        console=MockConsole(), path=tmp_path / ".releaserc", config=default_config()
    )
    facade = CommandFacade(store)

    store.add_branch("release/1.x")

    assert facade.build_invocation_payload().config.branches[-1] == "release/1.x"


def test_payload_wire_form(tmp_path: Path) -> None:
    facade = _facade(tmp_path)
    facade.set_options(dry_run=True)

    data = facade.build_invocation_payload().to_json()

    assert list(data) == ["branches", "plugins", "ci", "dryRun"]
    assert data["branches"] == ["main", "develop", {"name": "feature/*"}]
    assert data["ci"] is False
    assert data["dryRun"] is True
