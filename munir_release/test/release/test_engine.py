from __future__ import annotations

import json
from pathlib import Path

import pytest

from munir_release.core.result import Err, Ok, Result
from munir_release.platform.process import ProcessError
from munir_release.release import engine as engine_mod
from munir_release.release.command import InvocationPayload
from munir_release.release.defaults import default_config
from munir_release.release.engine import (
    NODE_ENV_VAR,
    PAYLOAD_ENV_VAR,
    SemanticReleaseEngine,
    engine_script,
)


def _payload() -> InvocationPayload:
    return InvocationPayload(config=default_config(), ci=True, dry_run=True)


def test_engine_script_imports_semantic_release() -> None:
    script = engine_script()
    assert 'import semanticRelease from "semantic-release";' in script
    assert f"process.env.{PAYLOAD_ENV_VAR}" in script


def test_release_passes_payload_through_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    seen: dict[str, object] = {}

    def fake_run_attached(
        cmd: list[str],
        cwd: Path,
        env: dict[str, str] | None = None,
    ) -> Result[None, ProcessError]:
        seen["cmd"] = cmd
        seen["cwd"] = cwd
        seen["env"] = env
        return Ok(None)

    monkeypatch.setattr(engine_mod, "run_attached", fake_run_attached)

    engine = SemanticReleaseEngine(cwd=tmp_path, env={"HOME": "/home/ci"})
    result = engine.release(_payload())

    assert isinstance(result, Ok)
    assert seen["cwd"] == tmp_path
    cmd = seen["cmd"]
    assert isinstance(cmd, list)
    assert cmd[:3] == ["node", "--input-type=module", "-e"]
    env = seen["env"]
    assert isinstance(env, dict)
    assert env["HOME"] == "/home/ci"
    sent = json.loads(env[PAYLOAD_ENV_VAR])
    assert sent["ci"] is True
    assert sent["dryRun"] is True
    assert sent["branches"] == ["main", "develop", {"name": "feature/*"}]
    assert sent["plugins"][1] == "@semantic-release/release-notes-generator"


def test_node_binary_from_env(tmp_path: Path) -> None:
    engine = SemanticReleaseEngine(cwd=tmp_path, env={NODE_ENV_VAR: "/opt/node/bin/node"})
    assert engine.command()[0] == "/opt/node/bin/node"


def test_explicit_node_wins(tmp_path: Path) -> None:
    engine = SemanticReleaseEngine(
        cwd=tmp_path, node="nodejs", env={NODE_ENV_VAR: "/opt/node/bin/node"}
    )
    assert engine.command()[0] == "nodejs"


def test_engine_failure_is_reported(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run_attached(
        cmd: list[str],
        cwd: Path,
        env: dict[str, str] | None = None,
    ) -> Result[None, ProcessError]:
        return Err(ProcessError(command=tuple(cmd), returncode=1))

    monkeypatch.setattr(engine_mod, "run_attached", fake_run_attached)

    result = SemanticReleaseEngine(cwd=tmp_path, env={}).release(_payload())

    assert isinstance(result, Err)
    assert result.error.returncode == 1
    assert result.error.message == "semantic-release failed (exit 1)"


def test_missing_node_is_reported(tmp_path: Path) -> None:
    engine = SemanticReleaseEngine(cwd=tmp_path, node="nonexistent_node_12345", env={})

    result = engine.release(_payload())

    assert isinstance(result, Err)
    assert result.error.returncode == -1
    assert "could not start nonexistent_node_12345" in result.error.message
    assert result.error.hint is not None
    assert NODE_ENV_VAR in result.error.hint
