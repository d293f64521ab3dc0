"""CLI commands: selectorkit area / rectangle-json."""

from __future__ import annotations

import sys

import click

from selectorkit.config import SelectorkitConfig
from selectorkit.errors import SerializationError
from selectorkit.serialize import to_json
from selectorkit.shapes import Rectangle


class NumberParamType(click.ParamType):
    """Whole numbers stay ``int``; anything else is parsed as ``float``."""

    name = "number"

    def convert(self, value, param, ctx):
        if isinstance(value, (int, float)):
            return value
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            self.fail(f"{value!r} is not a valid number", param, ctx)


NUMBER = NumberParamType()


@click.command()
@click.argument("width", type=NUMBER)
@click.argument("height", type=NUMBER)
def area(width: int | float, height: int | float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    click.echo(str(Rectangle(width, height).area()))


@click.command("rectangle-json")
@click.argument("width", type=NUMBER)
@click.argument("height", type=NUMBER)
@click.option("--indent", type=int, default=None, help="Indent the JSON output")
@click.pass_obj
def rectangle_json(
    config: SelectorkitConfig, width: int | float, height: int | float, indent: int | None
) -> None:
    """Print a WIDTH x HEIGHT rectangle as JSON."""
    if indent is None:
        indent = config.json_indent
    try:
        text = to_json(Rectangle(width, height), indent=indent)
    except SerializationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(text)
