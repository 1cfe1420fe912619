"""Release configuration model.

A ``.releaserc`` holds two ordered lists:

- branches: plain names (``"main"``) or descriptors (``{"name": "feature/*"}``)
- plugins: bare identifiers or ``[identifier, {options}]`` pairs

Two branches are the same branch when their effective names match, whatever
form each one takes.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from munir_release.core.structured import StrDict

__all__ = [
    "Branch",
    "BranchSpec",
    "Plugin",
    "PluginSpec",
    "ReleaseConfig",
    "branch_name",
    "plugin_id",
    "plugin_options",
    "same_branch",
]


@dataclass(frozen=True, slots=True)
class BranchSpec:
    """Structured branch entry.

    Only ``name`` takes part in equality checks between branches. The other
    fields are semantic-release branch keys that are carried through as-is.
    """

    name: str
    channel: str | bool | None = None
    range: str | None = None
    prerelease: str | bool | None = None

    def to_json(self) -> StrDict:
        out: StrDict = {"name": self.name}
        if self.channel is not None:
            out["channel"] = self.channel
        if self.range is not None:
            out["range"] = self.range
        if self.prerelease is not None:
            out["prerelease"] = self.prerelease
        return out


@dataclass(frozen=True, slots=True)
class PluginSpec:
    """Plugin entry in list form.

    Persisted as ``[id, options]``, or as ``[id]`` when ``options`` is None.
    """

    id: str
    options: StrDict | None = None

    def to_json(self) -> list[object]:
        if self.options is None:
            return [self.id]
        return [self.id, dict(self.options)]


type Branch = str | BranchSpec
type Plugin = str | PluginSpec


def branch_name(branch: Branch) -> str:
    """Effective name of a branch entry."""
    if isinstance(branch, BranchSpec):
        return branch.name
    return branch


def same_branch(a: Branch, b: Branch) -> bool:
    return branch_name(a) == branch_name(b)


def plugin_id(plugin: Plugin) -> str:
    """Identifier of a plugin entry."""
    if isinstance(plugin, PluginSpec):
        return plugin.id
    return plugin


def plugin_options(plugin: Plugin) -> Mapping[str, object]:
    if isinstance(plugin, PluginSpec) and plugin.options is not None:
        return plugin.options
    return {}


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """The persisted release configuration.

    Instances are immutable; ConfigStore swaps in a new value on every change.
    """

    branches: tuple[Branch, ...] = ()
    plugins: tuple[Plugin, ...] = ()

    def to_json(self) -> StrDict:
        """JSON-ready form, keys in persisted order."""
        return {
            "branches": [b.to_json() if isinstance(b, BranchSpec) else b for b in self.branches],
            "plugins": [p.to_json() if isinstance(p, PluginSpec) else p for p in self.plugins],
        }
