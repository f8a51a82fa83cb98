"""Seam CLI entry point: Click group with subcommands."""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from seam import __version__
from seam.engine import read_class_expression, update_class
from seam.parser import ParseError, dialect_for_path


def _read(path: Path) -> str:
    # Bytes in, bytes out: keeps CRLF line endings intact.
    return path.read_bytes().decode("utf-8")


@click.group()
@click.version_option(version=__version__, prog_name="seam")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Seam - edit JSX/TSX className attributes without reformatting the file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option(
    "--project",
    required=True,
    type=click.Path(exists=True, file_okay=False),
    help="Path to your app",
)
@click.option("--file", "source_file", default=None, help="Source file to update (auto-discovered if omitted)")
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5175, type=int, help="Port to bind to")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(project: str, source_file: str | None, host: str, port: int, debug: bool) -> None:
    """Start the Seam API server for a project."""
    from seam.config import SeamConfig
    from seam.web.app import create_app
    from seam.workspace import Workspace, WorkspaceError

    config = SeamConfig(project=project, file=source_file, host=host, port=port)
    try:
        workspace = Workspace.from_config(config)
    except WorkspaceError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    app = create_app(workspace)
    click.echo(f"Seam server running at http://{host}:{port}")
    click.echo(f"  Project: {workspace.root}")
    click.echo(f"  File: {workspace.relative(workspace.default_file)}")
    app.run(host=host, port=port, debug=debug)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.argument("tag")
@click.option("--index", "ordinal", type=int, default=None, help="Zero-based occurrence of TAG")
@click.option("--attribute", default="className", show_default=True)
def get(file: str, tag: str, ordinal: int | None, attribute: str) -> None:
    """Print the class value of an element (empty when it has none)."""
    path = Path(file)
    try:
        value = read_class_expression(
            _read(path), tag, ordinal, attribute, dialect_for_path(path)
        )
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    click.echo(value or "")


@cli.command("set")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.argument("tag")
@click.argument("value")
@click.option("--index", "ordinal", type=int, default=None, help="Zero-based occurrence of TAG")
@click.option("--attribute", default="className", show_default=True)
@click.option("--dry-run", is_flag=True, help="Print the new source instead of writing it")
def set_(
    file: str, tag: str, value: str, ordinal: int | None, attribute: str, dry_run: bool
) -> None:
    """Set the class value of an element, rewriting FILE in place."""
    path = Path(file)
    source = _read(path)
    try:
        updated = update_class(
            source, tag, value, ordinal, attribute, dialect_for_path(path)
        )
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    if dry_run:
        click.echo(updated, nl=False)
        return
    if updated == source:
        click.echo("No changes made")
        return
    path.write_bytes(updated.encode("utf-8"))
    click.echo(f"Updated {path.name}")


# Import and register subcommands
from seam.cli.inspect import discover, list_elements  # noqa: E402

cli.add_command(discover)
cli.add_command(list_elements)
