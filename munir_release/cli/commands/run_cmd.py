from __future__ import annotations

import typer

from munir_release.cli.commands._helpers import exit_on_error
from munir_release.cli.context import build_context


def run(
    ci: bool = typer.Option(False, "--ci", help="Run in CI mode"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Run in dry-run mode"),
) -> None:
    """Run the release process."""
    ctx = build_context()
    ctx.facade.set_options(ci=ci, dry_run=dry_run)
    ctx.console.print(f"Executing: {ctx.facade.describe_command()}")
    exit_on_error(ctx.engine.release(ctx.facade.build_invocation_payload()), ctx.console)
