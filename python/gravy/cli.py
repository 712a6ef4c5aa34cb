"""CLI commands for Gravy key-case conversion."""

import json
import sys
from pathlib import Path
from typing import Any

import typer

from gravy.serialization.case import CaseMode, to_camel, to_snake, to_wire

app = typer.Typer(
    name="gravy",
    help="Gravy - object/JSON serialization tools",
    no_args_is_help=True,
)

_CASES = {"snake": CaseMode.TO_SNAKE, "camel": CaseMode.TO_CAMEL}


def _recase(value: Any, mode: CaseMode) -> Any:
    if isinstance(value, dict):
        return {to_wire(key, mode): _recase(item, mode) for key, item in value.items()}
    if isinstance(value, list):
        return [_recase(item, mode) for item in value]
    return value


def _case_mode(to: str) -> CaseMode:
    try:
        return _CASES[to]
    except KeyError:
        typer.secho(
            f"❌ Unknown case {to!r}; expected one of: {', '.join(_CASES)}",
            fg=typer.colors.RED,
        )
        raise typer.Exit(2)


@app.command()
def case(
    keys: list[str] = typer.Argument(..., help="Keys to convert"),
    to: str = typer.Option("snake", help="Target case (snake, camel)"),
):
    """
    Convert keys between camelCase and snake_case.

    The word "id" in snake_case corresponds to "identifier" in camelCase.
    """
    convert = to_snake if _case_mode(to) is CaseMode.TO_SNAKE else to_camel
    for key in keys:
        typer.echo(convert(key))


@app.command()
def recase(
    path: str = typer.Argument("-", help="JSON file to read ('-' for stdin)"),
    to: str = typer.Option("snake", help="Target case (snake, camel)"),
    indent: int | None = typer.Option(None, help="Indentation of the output"),
    output: str | None = typer.Option(None, help="Write to this file instead of stdout"),
):
    """
    Rewrite every mapping key of a JSON document in the target case.

    Values are left untouched; only keys are converted.
    """
    mode = _case_mode(to)
    try:
        text = sys.stdin.read() if path == "-" else Path(path).read_text(encoding="utf-8")
    except OSError as e:
        typer.secho(f"❌ Cannot read {path}: {e}", fg=typer.colors.RED)
        raise typer.Exit(1)

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        typer.secho(f"❌ Invalid JSON in {path}: {e}", fg=typer.colors.RED)
        raise typer.Exit(1)

    result = json.dumps(_recase(document, mode), indent=indent, ensure_ascii=False)
    if output is None:
        typer.echo(result)
        return
    Path(output).write_text(result + "\n", encoding="utf-8")
    typer.secho(f"✅ Wrote {output}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
