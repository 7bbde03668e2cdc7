"""CLI command: cssbuilder rect -- rectangle area and JSON form."""

from __future__ import annotations

from dataclasses import asdict
from decimal import Decimal

import click

from cssbuilder.config import CssBuilderConfig
from cssbuilder.serialization import to_json
from cssbuilder.shapes import Rectangle, area


def format_number(value: float) -> str:
    """Render *value* in plain positional notation, without a trailing ``.0``."""
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON")
@click.pass_obj
def rect(config: CssBuilderConfig | None, width: float, height: float, as_json: bool) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rectangle = Rectangle(width=width, height=height)
    if not as_json:
        click.echo(format_number(area(rectangle)))
        return
    indent = config.json_indent if config else None
    click.echo(to_json({**asdict(rectangle), "area": area(rectangle)}, indent=indent))
