"""Release configuration and hand-off to semantic-release."""

from __future__ import annotations

from .command import CommandFacade, InvocationPayload, ReleaseOptions
from .config_store import ConfigStore, read_config, render_config
from .defaults import CONFIG_FILE_NAME, default_config, default_config_path
from .engine import ReleaseEngine, SemanticReleaseEngine
from .errors import ConfigError, EngineError
from .model import (
    Branch,
    BranchSpec,
    Plugin,
    PluginSpec,
    ReleaseConfig,
    branch_name,
    plugin_id,
    same_branch,
)

__all__ = [
    # command
    "CommandFacade",
    "InvocationPayload",
    "ReleaseOptions",
    # config_store
    "ConfigStore",
    "read_config",
    "render_config",
    # defaults
    "CONFIG_FILE_NAME",
    "default_config",
    "default_config_path",
    # engine
    "ReleaseEngine",
    "SemanticReleaseEngine",
    # errors
    "ConfigError",
    "EngineError",
    # model
    "Branch",
    "BranchSpec",
    "Plugin",
    "PluginSpec",
    "ReleaseConfig",
    "branch_name",
    "plugin_id",
    "same_branch",
]
