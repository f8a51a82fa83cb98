"""CLI commands: seam list / seam discover -- find what can be addressed."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from seam.engine import outline, read_class_attribute
from seam.parser import ParseError, dialect_for_path, parse_source
from seam.workspace import COMMON_ENTRY_PATTERNS, discover_entry_file


@click.command("list")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--tag", default=None, help="Only show elements with this tag name")
@click.option("--attribute", default="className", show_default=True)
def list_elements(file: str, tag: str | None, attribute: str) -> None:
    """List the elements in FILE with the address of each.

    One line per element: line number, tag[ordinal], and the current
    class value when there is one.
    """
    path = Path(file)
    try:
        tree = parse_source(path.read_bytes().decode("utf-8"), dialect_for_path(path))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    for element in outline(tree):
        if tag is not None and element.tag_name != tag:
            continue
        parts = [f"{element.line:>5}", f"{element.tag_name}[{element.ordinal}]"]
        value = read_class_attribute(tree, element, attribute)
        if value is not None:
            parts.append(f"{attribute}={value}")
        click.echo("  ".join(parts))


@click.command()
@click.argument("project", type=click.Path(exists=True, file_okay=False))
def discover(project: str) -> None:
    """Print the entry file Seam would edit in PROJECT."""
    found = discover_entry_file(project)
    if found is None:
        click.echo(
            f"No entry file found. Tried: {', '.join(COMMON_ENTRY_PATTERNS)}",
            err=True,
        )
        sys.exit(1)
    click.echo(found)
