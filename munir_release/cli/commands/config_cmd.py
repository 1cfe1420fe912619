"""Commands that change `.releaserc`: init, add-branch, remove-branch, plugin-config."""

from __future__ import annotations

import typer

from munir_release.cli.commands._helpers import exit_on_error, fail, parse_assignments, require_arg
from munir_release.cli.context import build_context


def init() -> None:
    """Initialize release configuration."""
    ctx = build_context()
    ctx.store.get_config()
    exit_on_error(ctx.store.persist(), ctx.console)
    ctx.console.success("Release configuration initialized")


def add_branch(
    name: str | None = typer.Argument(None, help="Branch name or pattern (e.g. release/*)"),
) -> None:
    """Add a branch to release configuration."""
    branch = require_arg(name, "Branch name")
    ctx = build_context()
    if not ctx.store.add_branch(branch):
        ctx.console.info(f"branch already configured: {branch}")
    exit_on_error(ctx.store.persist(), ctx.console)
    ctx.console.success(f"Added branch: {branch}")


def remove_branch(
    name: str | None = typer.Argument(None, help="Branch name or pattern to remove"),
) -> None:
    """Remove a branch from release configuration."""
    branch = require_arg(name, "Branch name")
    ctx = build_context()
    if not ctx.store.remove_branch(branch):
        ctx.console.info(f"branch not configured: {branch}")
    exit_on_error(ctx.store.persist(), ctx.console)
    ctx.console.success(f"Removed branch: {branch}")


def plugin_config(
    plugin: str | None = typer.Argument(None, help="Plugin identifier"),
    options: list[str] | None = typer.Argument(None, help="Options as key=value"),
) -> None:
    """Set options of a configured plugin."""
    ident = require_arg(plugin, "Plugin identifier")
    patch = parse_assignments(options or [])
    if not patch:
        fail("at least one key=value option is required")

    ctx = build_context()
    if ctx.store.update_plugin_config(ident, patch) == 0:
        fail(f"plugin not configured: {ident}")
    exit_on_error(ctx.store.persist(), ctx.console)
    ctx.console.success(f"Updated plugin: {ident} ({', '.join(patch)})")
