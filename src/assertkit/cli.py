# src/assertkit/cli.py
"""assertkit Command Line Interface.

Generates GraphQL selections from an SDL schema file:

    # Field tree as JSON
    assertkit fields schema.graphql Dog --nesting 2

    # Selection text, ready to paste into a query
    assertkit document schema.graphql Dog --nesting 4

    # Wrapped in braces, with an argument spliced into a nested field
    assertkit document schema.graphql Dog --wrap --override 'owner.pets=pets(first: 2)'
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from graphql import GraphQLError
from pydantic import ValidationError

from assertkit import __version__
from assertkit.contracts.errors import SchemaLookupError
from assertkit.contracts.fields import tree_to_data
from assertkit.core.config import AssertkitSettings, get_settings, load_settings
from assertkit.graphql.adapter import GraphQLCoreSchema
from assertkit.graphql.formatter import document_for, selection_for
from assertkit.graphql.resolver import fields_for

__all__ = ["app"]

app = typer.Typer(
    name="assertkit",
    help="assertkit: Generate GraphQL selections for tests.",
    no_args_is_help=True,
)

SchemaArg = Annotated[
    Path,
    typer.Argument(
        help="Path to a GraphQL SDL schema file.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
]
TypeArg = Annotated[str, typer.Argument(help="Object, interface or union type to select from.")]
NestingOpt = Annotated[
    int | None,
    typer.Option(
        "--nesting",
        "-n",
        help="Maximum depth of nested object selections (default from settings).",
        min=0,
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"assertkit version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to settings YAML file.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose/debug logging.",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Output structured JSON logs (for machine processing).",
    ),
) -> None:
    """assertkit: Generate GraphQL selections for tests."""
    from assertkit.core.logging import configure_logging

    settings = _load_cli_settings(config)
    configure_logging(json_output=json_logs, level="DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


def _load_cli_settings(config: Path | None) -> AssertkitSettings:
    if config is None:
        return get_settings()
    try:
        return load_settings(config)
    except FileNotFoundError:
        typer.echo(f"Error: Settings file not found: {config}", err=True)
        raise typer.Exit(1) from None
    except ValidationError as e:
        typer.echo("Configuration errors:", err=True)
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            typer.echo(f"  - {loc}: {error['msg']}", err=True)
        raise typer.Exit(1) from None


def _load_schema(schema_path: Path) -> GraphQLCoreSchema:
    try:
        return GraphQLCoreSchema.from_file(schema_path)
    except (GraphQLError, TypeError) as e:
        typer.echo(f"Error: Invalid schema {schema_path}: {e}", err=True)
        raise typer.Exit(1) from None


def _parse_overrides(raw: list[str]) -> list[tuple[str, str]]:
    overrides = []
    for item in raw:
        key, sep, text = item.partition("=")
        if not sep or not key:
            typer.echo(f"Error: Override must look like KEY=TEXT, got {item!r}", err=True)
            raise typer.Exit(1)
        overrides.append((key, text))
    return overrides


@app.command()
def fields(ctx: typer.Context, schema: SchemaArg, type_name: TypeArg, nesting: NestingOpt = None) -> None:
    """Print the selectable fields of a type as JSON."""
    settings: AssertkitSettings = ctx.obj
    graphql_schema = _load_schema(schema)
    try:
        tree = fields_for(graphql_schema, type_name, settings.default_nesting if nesting is None else nesting)
    except (SchemaLookupError, ValueError, TypeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None
    typer.echo(json.dumps(tree_to_data(tree), indent=2))


@app.command()
def document(
    ctx: typer.Context,
    schema: SchemaArg,
    type_name: TypeArg,
    nesting: NestingOpt = None,
    wrap: Annotated[
        bool,
        typer.Option("--wrap", "-w", help="Wrap the fields in one { ... } block."),
    ] = False,
    override: Annotated[
        list[str] | None,
        typer.Option(
            "--override",
            "-o",
            help="Render a field as TEXT. KEY is a field name or dotted path. Repeatable.",
        ),
    ] = None,
) -> None:
    """Print selection text for every field of a type."""
    settings: AssertkitSettings = ctx.obj
    graphql_schema = _load_schema(schema)
    overrides = _parse_overrides(override or [])
    depth = settings.default_nesting if nesting is None else nesting
    try:
        if wrap:
            text = selection_for(graphql_schema, type_name, depth, overrides, width=settings.indent_width)
        else:
            text = document_for(graphql_schema, type_name, depth, overrides, width=settings.indent_width)
    except (SchemaLookupError, ValueError, TypeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None
    typer.echo(text, nl=False)


if __name__ == "__main__":
    app()
