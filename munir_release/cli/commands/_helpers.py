"""Shared helpers for CLI commands."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, NoReturn

import typer

from munir_release.core.errors import ErrorCode
from munir_release.core.result import Err, Result
from munir_release.output.console import Style

if TYPE_CHECKING:
    from munir_release.output.console import ConsoleProtocol


def exit_on_error[T, E](result: Result[T, E], console: ConsoleProtocol) -> None:
    """Report an Err result and exit 1; return normally on Ok.

    Expects error objects to have 'message' and optional 'hint' attributes.
    """
    if isinstance(result, Err):
        error = result.error
        message: str = getattr(error, "message", str(error))
        hint: str | None = getattr(error, "hint", None)
        console.error(message)
        if hint:
            console.print(f"hint: {hint}", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.ERROR))


def fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=int(ErrorCode.ERROR))


def require_arg(value: str | None, what: str) -> str:
    if value is None or not value.strip():
        fail(f"{what} is required")
    return value


def parse_assignments(items: list[str]) -> dict[str, object]:
    """Parse ``key=value`` items into a patch mapping.

    Values are decoded as JSON when they parse (``true``, ``3``, ``["a"]``),
    otherwise kept as plain strings.
    """
    out: dict[str, object] = {}
    for item in items:
        if "=" not in item:
            fail(f"invalid option (expected key=value): {item}")
        k, v = item.split("=", 1)
        k = k.strip()
        if not k:
            fail(f"invalid option (expected key=value): {item}")
        try:
            out[k] = json.loads(v)
        except json.JSONDecodeError:
            out[k] = v
    return out
