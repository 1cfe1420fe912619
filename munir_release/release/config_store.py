"""Reading, changing and writing `.releaserc`.

``ConfigStore`` is the only writer of the file. Loading is best effort: a
missing or broken file is replaced by the built-in default and reported as a
warning, never raised.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from munir_release.core.result import Err, Ok, Result
from munir_release.core.structured import (
    StrDict,
    as_obj_list,
    as_str_dict,
    get_list,
    get_str,
)
from munir_release.output.console import ConsoleProtocol
from munir_release.platform.files import atomic_write_text
from munir_release.release.defaults import default_config, default_config_path
from munir_release.release.errors import ConfigError
from munir_release.release.model import (
    Branch,
    BranchSpec,
    Plugin,
    PluginSpec,
    ReleaseConfig,
    branch_name,
    plugin_id,
    plugin_options,
    same_branch,
)

__all__ = [
    "ConfigStore",
    "SUPPORTED_KEYS",
    "read_config",
    "render_config",
    "unsupported_keys",
]

SUPPORTED_KEYS = ("branches", "plugins")


def _parse_branch(item: object) -> Branch | None:
    if isinstance(item, str):
        return item if item.strip() else None

    data = as_str_dict(item)
    if data is None:
        return None
    name = get_str(data, "name")
    if name is None:
        return None

    channel = data.get("channel")
    range_ = data.get("range")
    prerelease = data.get("prerelease")
    if channel is not None and not isinstance(channel, (str, bool)):
        return None
    if range_ is not None and not isinstance(range_, str):
        return None
    if prerelease is not None and not isinstance(prerelease, (str, bool)):
        return None
    return BranchSpec(name=name, channel=channel, range=range_, prerelease=prerelease)


def _parse_plugin(item: object) -> Plugin | None:
    if isinstance(item, str):
        return item if item.strip() else None

    pair = as_obj_list(item)
    if pair is None or not 1 <= len(pair) <= 2:
        return None
    ident = pair[0]
    if not isinstance(ident, str) or not ident.strip():
        return None
    if len(pair) == 1:
        return PluginSpec(id=ident)
    options = as_str_dict(pair[1])
    if options is None:
        return None
    return PluginSpec(id=ident, options=options)


def parse_config(data: StrDict, *, path: Path | None = None) -> Result[ReleaseConfig, ConfigError]:
    """Build a ReleaseConfig from decoded JSON.

    A missing ``branches`` or ``plugins`` key takes the built-in default for
    that key. Present keys must be well formed.
    """
    fallback = default_config()

    branches: tuple[Branch, ...] = fallback.branches
    if "branches" in data:
        items = get_list(data, "branches")
        if items is None:
            return Err(ConfigError("invalid_shape", "branches must be a list", path=path))
        parsed_branches: list[Branch] = []
        for index, item in enumerate(items):
            branch = _parse_branch(item)
            if branch is None:
                return Err(
                    ConfigError(
                        "invalid_shape",
                        f"invalid branch entry at index {index}",
                        path=path,
                        hint='use "name" or {"name": "pattern/*"}',
                    )
                )
            if any(same_branch(branch, seen) for seen in parsed_branches):
                return Err(
                    ConfigError(
                        "invalid_shape",
                        f"duplicate branch: {branch_name(branch)}",
                        path=path,
                    )
                )
            parsed_branches.append(branch)
        branches = tuple(parsed_branches)

    plugins: tuple[Plugin, ...] = fallback.plugins
    if "plugins" in data:
        items = get_list(data, "plugins")
        if items is None:
            return Err(ConfigError("invalid_shape", "plugins must be a list", path=path))
        parsed_plugins: list[Plugin] = []
        for index, item in enumerate(items):
            plugin = _parse_plugin(item)
            if plugin is None:
                return Err(
                    ConfigError(
                        "invalid_shape",
                        f"invalid plugin entry at index {index}",
                        path=path,
                        hint='use "id" or ["id", {options}]',
                    )
                )
            parsed_plugins.append(plugin)
        plugins = tuple(parsed_plugins)

    return Ok(ReleaseConfig(branches=branches, plugins=plugins))


def _read_json(path: Path) -> Result[StrDict, ConfigError]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Err(ConfigError("not_found", f"No {path.name} file found", path=path))
    except (OSError, UnicodeDecodeError) as e:
        return Err(ConfigError("unreadable", f"failed to read {path.name}: {e}", path=path))

    try:
        obj: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(ConfigError("invalid_json", f"invalid JSON in {path.name}: {e}", path=path))

    data = as_str_dict(obj)
    if data is None:
        return Err(
            ConfigError("invalid_shape", f"{path.name} root must be a JSON object", path=path)
        )

    return Ok(data)


def unsupported_keys(data: StrDict) -> list[str]:
    """Top-level keys that are not kept when the file is rewritten."""
    return [key for key in data if key not in SUPPORTED_KEYS]


def read_config(path: Path) -> Result[ReleaseConfig, ConfigError]:
    """Read and parse a `.releaserc` file.

    Returns:
        Ok(ReleaseConfig) on success, Err(ConfigError) describing why the file
        could not be used.
    """
    result = _read_json(path)
    if isinstance(result, Err):
        return result
    return parse_config(result.value, path=path)


def render_config(config: ReleaseConfig) -> str:
    """Serialize a ReleaseConfig the way it is written to disk."""
    return json.dumps(config.to_json(), indent=2, ensure_ascii=False) + "\n"


class ConfigStore:
    """Owner of the release configuration for one process run.

    The configuration is either supplied by the caller or loaded from
    ``path`` the first time it is needed. Callers read it through
    :meth:`get_config` and change it only through the mutation methods.
    """

    def __init__(
        self,
        *,
        console: ConsoleProtocol,
        path: Path | None = None,
        config: ReleaseConfig | None = None,
    ) -> None:
        self._console = console
        self._path = path if path is not None else default_config_path()
        self._config = config
        self.load_error: ConfigError | None = None

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> ReleaseConfig:
        """Load the configuration from disk, falling back to the default.

        Never raises. When the file cannot be used, the reason is kept in
        ``load_error`` and reported as a console warning.
        """
        result: Result[ReleaseConfig, ConfigError]
        raw = _read_json(self._path)
        if isinstance(raw, Err):
            result = raw
        else:
            dropped = unsupported_keys(raw.value)
            if dropped:
                self._console.warning(
                    f"ignoring unsupported keys in {self._path.name}: {', '.join(dropped)}"
                    " (they are not kept when the file is saved)"
                )
            result = parse_config(raw.value, path=self._path)
        if isinstance(result, Err):
            self.load_error = result.error
            if result.error.kind == "not_found":
                self._console.warning(
                    f"No {self._path.name} file found, using default configuration"
                )
            else:
                self._console.warning(f"{result.error.pretty()}; using default configuration")
            self._config = default_config()
        else:
            self.load_error = None
            self._config = result.value
        return self._config

    def get_config(self) -> ReleaseConfig:
        if self._config is None:
            return self.load()
        return self._config

    def add_branch(self, branch: Branch) -> bool:
        """Append ``branch`` unless one with the same name exists.

        Returns:
            True if the branch was added.
        """
        config = self.get_config()
        if any(same_branch(existing, branch) for existing in config.branches):
            return False
        self._config = ReleaseConfig(branches=(*config.branches, branch), plugins=config.plugins)
        return True

    def remove_branch(self, name: str) -> bool:
        """Remove every branch whose effective name is ``name``.

        Returns:
            True if at least one entry was removed.
        """
        config = self.get_config()
        kept = tuple(b for b in config.branches if branch_name(b) != name)
        if len(kept) == len(config.branches):
            return False
        self._config = ReleaseConfig(branches=kept, plugins=config.plugins)
        return True

    def update_plugin_config(self, ident: str, patch: Mapping[str, object]) -> int:
        """Shallow-merge ``patch`` into the options of every plugin named ``ident``.

        A bare plugin identifier becomes an ``[ident, options]`` entry.

        Returns:
            Number of plugin entries updated.
        """
        config = self.get_config()
        updated = 0
        plugins: list[Plugin] = []
        for plugin in config.plugins:
            if plugin_id(plugin) != ident:
                plugins.append(plugin)
                continue
            plugins.append(PluginSpec(id=ident, options={**plugin_options(plugin), **patch}))
            updated += 1
        if updated:
            self._config = ReleaseConfig(branches=config.branches, plugins=tuple(plugins))
        return updated

    def persist(self) -> Result[Path, ConfigError]:
        """Write the configuration to ``path``, replacing the whole file."""
        content = render_config(self.get_config())
        try:
            atomic_write_text(self._path, content, encoding="utf-8")
        except OSError as e:
            return Err(
                ConfigError(
                    "write_failed",
                    f"failed to write {self._path.name}: {e}",
                    path=self._path,
                    hint=str(self._path),
                )
            )
        return Ok(self._path)
