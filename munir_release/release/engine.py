"""Hand-off to the external release engine (semantic-release).

The engine is a Node.js library. It is called once with the invocation
payload; commit analysis, changelog, tagging and publishing all happen on the
Node side. Its output streams straight to the terminal and its failures are
reported back without interpretation.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from munir_release.core.result import Err, Ok, Result
from munir_release.platform.process import run_attached
from munir_release.release.command import InvocationPayload
from munir_release.release.errors import EngineError

__all__ = [
    "NODE_ENV_VAR",
    "PAYLOAD_ENV_VAR",
    "ReleaseEngine",
    "SemanticReleaseEngine",
    "engine_script",
]

NODE_ENV_VAR = "MUNIR_RELEASE_NODE"
PAYLOAD_ENV_VAR = "MUNIR_RELEASE_PAYLOAD"


class ReleaseEngine(Protocol):
    def release(self, payload: InvocationPayload) -> Result[None, EngineError]:
        """Run one release with the given payload."""
        ...


def engine_script() -> str:
    return "\n".join(
        [
            'import semanticRelease from "semantic-release";',
            f"const payload = JSON.parse(process.env.{PAYLOAD_ENV_VAR});",
            "const result = await semanticRelease(payload);",
            "if (!result) {",
            '  console.log("No release published");',
            "}",
        ]
    )


class SemanticReleaseEngine:
    """Runs semantic-release through ``node`` in ``cwd``.

    ``semantic-release`` must be resolvable from ``cwd`` (installed in the
    project's node_modules).
    """

    def __init__(
        self,
        *,
        cwd: Path,
        node: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        base_env = dict(env) if env is not None else dict(os.environ)
        self._cwd = cwd
        self._node = node or base_env.get(NODE_ENV_VAR) or "node"
        self._env = base_env

    def command(self) -> list[str]:
        return [self._node, "--input-type=module", "-e", engine_script()]

    def release(self, payload: InvocationPayload) -> Result[None, EngineError]:
        env = {**self._env, PAYLOAD_ENV_VAR: json.dumps(payload.to_json())}
        result = run_attached(self.command(), cwd=self._cwd, env=env)
        if isinstance(result, Ok):
            return Ok(None)

        error = result.error
        if error.returncode == -1:
            return Err(
                EngineError(
                    message=f"could not start {self._node}: {error.detail}",
                    returncode=error.returncode,
                    hint=f"install Node.js or set {NODE_ENV_VAR}",
                )
            )
        return Err(
            EngineError(
                message=f"semantic-release failed (exit {error.returncode})",
                returncode=error.returncode,
            )
        )
