"""CLI command: objkit area -- print a rectangle's area."""

from __future__ import annotations

import click

from objkit.shapes import make_rectangle


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    result = make_rectangle(width, height).get_area()
    click.echo(int(result) if result.is_integer() else result)
