"""CLI command: objkit reencode -- decode JSON into a record and write it back."""

from __future__ import annotations

import dataclasses
import sys
from typing import TextIO

import click

from objkit.codec import EncodeError, ParseError, decode, encode
from objkit.config import ObjkitConfig


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=None,
    envvar="OBJKIT_JSON_INDENT",
    help="Indent nested output by this many spaces.",
)
@click.option(
    "--sort-keys/--no-sort-keys",
    default=False,
    envvar="OBJKIT_SORT_KEYS",
    help="Write object keys in sorted order.",
)
@click.pass_obj
def reencode(
    config: ObjkitConfig | None, source: TextIO, indent: int | None, sort_keys: bool
) -> None:
    """Read a JSON object from SOURCE (default stdin) and print it re-encoded.

    Exits with code 1 if the input is not a well-formed JSON object.
    """
    config = dataclasses.replace(
        config or ObjkitConfig(), json_indent=indent, sort_keys=sort_keys
    )

    try:
        record = decode(None, source.read())
    except ParseError as exc:
        location = f" (line {exc.line}, column {exc.column})" if exc.line else ""
        click.echo(f"Parse error: {exc}{location}", err=True)
        sys.exit(1)

    try:
        text = encode(record, indent=config.json_indent, sort_keys=config.sort_keys)
    except EncodeError as exc:
        click.echo(f"Encode error: {exc}", err=True)
        sys.exit(1)
    click.echo(text)
