"""CLI command: selectorkit rectangle -- print a rectangle's area or JSON."""

from __future__ import annotations

import sys

import click

from selectorkit.config import SelectorKitConfig
from selectorkit.errors import SerializationError
from selectorkit.model import Rectangle
from selectorkit.serialization import to_json


def _number(value: float) -> int | float:
    return int(value) if value.is_integer() else value


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON")
@click.option("--indent", type=int, default=None, help="Indent JSON output")
def rectangle(width: float, height: float, as_json: bool, indent: int | None) -> None:
    """Print the area of a WIDTH by HEIGHT rectangle."""
    rect = Rectangle(_number(width), _number(height))
    if as_json:
        try:
            output = to_json(rect, SelectorKitConfig(indent=indent))
        except SerializationError as exc:
            click.echo(f"Serialization error: {exc}", err=True)
            sys.exit(1)
        click.echo(output)
        return
    click.echo(_number(float(rect.area)))
