"""Typer CLI — check tool output before handing it to the graph loader."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from graphseed import __version__

if TYPE_CHECKING:
    from graphseed.config import Settings

app = typer.Typer(
    name="graphseed",
    help="graphseed — order and validate discovery output for graph loading",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool = False, config_level: str | None = None) -> None:
    if verbose:
        level = logging.DEBUG
    elif config_level:
        level = getattr(logging, config_level.upper(), logging.INFO)
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _load_payload(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        return yaml.safe_load(text)
    return json.loads(text)


def _load_settings(config: str | None) -> Settings:
    from graphseed.config import Settings

    try:
        return Settings.load(config)
    except (ValidationError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid config {config}:[/]\n{escape(str(e))}")
        raise typer.Exit(1) from None


@app.command()
def validate(
    file: Path = typer.Argument(help="Tool output (JSON or YAML) carrying a discovery result"),
    config: str | None = typer.Option(None, help="Path to config YAML"),
    verbose: bool = typer.Option(False, "-v", "--verbose"),
):
    """Show the storage order of a discovery result and validate every node."""
    from graphseed.graph.discovery import extract_discovery
    from graphseed.graph.errors import NodeValidationError, TaxonomyLoadError
    from graphseed.graph.validation import NodeValidator

    settings = _load_settings(config)
    _setup_logging(verbose, config_level=settings.log_level)

    try:
        payload = _load_payload(file)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        console.print(f"[red]Cannot read {file}: {escape(str(e))}[/]")
        raise typer.Exit(1) from None

    try:
        result = extract_discovery(payload)
    except (ValidationError, ValueError) as e:
        console.print(f"[red]Malformed discovery data in {file}:[/]\n{escape(str(e))}")
        raise typer.Exit(1) from None
    if result is None:
        console.print(f"[yellow]No discovery data found in {file}[/]")
        raise typer.Exit(1)

    try:
        validator = NodeValidator(settings.requirement_table())
    except TaxonomyLoadError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(1) from None

    table = Table(title=f"Discovery: {result.node_count()} nodes")
    table.add_column("#", justify="right")
    table.add_column("Type", style="cyan")
    table.add_column("Key")
    table.add_column("Parent")
    table.add_column("Relationship", style="magenta")
    table.add_column("Status")

    failures = 0
    for i, node in enumerate(result.all_nodes(), start=1):
        try:
            validator.validate(node)
            status = "[green]ok[/]"
        except NodeValidationError as e:
            failures += 1
            status = f"[red]{escape(str(e))}[/]"
        ref = node.parent_ref()
        key = ", ".join(f"{k}={v}" for k, v in node.identifying_properties().items())
        table.add_row(
            str(i), escape(node.node_type()), escape(key),
            ref.node_type if ref else "-", node.relationship_type() or "-", status,
        )
    console.print(table)

    if failures:
        console.print(f"[bold red]{failures} node(s) failed validation[/]")
        raise typer.Exit(1)
    console.print("[bold green]All nodes valid[/]")


@app.command()
def taxonomy(
    children_only: bool = typer.Option(
        False, "--children-only", help="Only list types that require a parent",
    ),
    config: str | None = typer.Option(None, help="Path to config YAML"),
):
    """List node types and whether they require a parent."""
    from graphseed.graph.errors import TaxonomyLoadError

    settings = _load_settings(config)
    try:
        requirements = settings.requirement_table()
    except TaxonomyLoadError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(1) from None

    table = Table(title=f"Taxonomy v{requirements.version}")
    table.add_column("Node type", style="cyan")
    table.add_column("Requires parent")
    for node_type in sorted(requirements):
        required = requirements[node_type]
        if children_only and not required:
            continue
        table.add_row(node_type, "[yellow]yes[/]" if required else "no")
    console.print(table)


@app.command()
def version():
    """Show version."""
    console.print(f"graphseed v{__version__}")
