from __future__ import annotations

import click
import typer
from typer.core import TyperGroup

from munir_release import __version__
from munir_release.cli.commands.config_cmd import add_branch, init, plugin_config, remove_branch
from munir_release.cli.commands.run_cmd import run
from munir_release.core.errors import ErrorCode


class ReleaseGroup(TyperGroup):
    """Command group whose usage errors exit with 1 instead of click's 2."""

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            e.exit_code = int(ErrorCode.ERROR)
            raise


app = typer.Typer(
    cls=ReleaseGroup,
    add_completion=False,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Manage .releaserc and run semantic-release.",
)


# Commands
app.command()(init)
app.command()(run)
app.command("add-branch")(add_branch)
app.command("remove-branch")(remove_branch)
app.command("plugin-config")(plugin_config)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"munir-release v{__version__}")
        raise typer.Exit(code=0)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=int(ErrorCode.ERROR))


def main() -> None:
    try:
        app()
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(int(ErrorCode.ERROR)) from e
