"""selectorkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
import sys

import click

from selectorkit import __version__
from selectorkit.config import SelectorKitConfig
from selectorkit.errors import SelectorError
from selectorkit.objects import Rectangle, get_json
from selectorkit.selector import css_selector_builder

_DEFAULTS = SelectorKitConfig()


class NumberType(click.ParamType):
    """Number argument that stays an int unless it needs a fraction."""

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


NUMBER = NumberType()


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    default=_DEFAULTS.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level for the selectorkit logger",
)
def cli(log_level: str) -> None:
    """selectorkit - build CSS selectors and play with plain objects."""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("selectorkit").setLevel(log_level.upper())


@cli.command()
@click.option("--element", "elements", multiple=True, help="Element (type) selector")
@click.option("--id", "ids", multiple=True, help="Id selector, without '#'")
@click.option("--class", "classes", multiple=True, help="Class selector, repeatable")
@click.option("--attr", "attrs", multiple=True, help="Attribute expression, repeatable")
@click.option(
    "--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class, repeatable"
)
@click.option("--pseudo-element", "pseudo_elements", multiple=True, help="Pseudo-element")
def build(
    elements: tuple[str, ...],
    ids: tuple[str, ...],
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_elements: tuple[str, ...],
) -> None:
    """Build a simple selector and print it.

    Parts are applied in grammar order: element, id, class, attribute,
    pseudo-class, pseudo-element. Repeating --element, --id or
    --pseudo-element is an error.
    """
    builder = css_selector_builder
    try:
        for value in elements:
            builder = builder.element(value)
        for value in ids:
            builder = builder.id(value)
        for value in classes:
            builder = builder.class_(value)
        for value in attrs:
            builder = builder.attr(value)
        for value in pseudo_classes:
            builder = builder.pseudo_class(value)
        for value in pseudo_elements:
            builder = builder.pseudo_element(value)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(builder.stringify())


@cli.command()
@click.argument("width", type=NUMBER)
@click.argument("height", type=NUMBER)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    click.echo(Rectangle(width, height).get_area())


@cli.command("to-json")
@click.argument("width", type=NUMBER)
@click.argument("height", type=NUMBER)
@click.option("--indent", default=None, type=int, help="Indent the JSON output")
def to_json(width: float, height: float, indent: int | None) -> None:
    """Print a WIDTH x HEIGHT rectangle as JSON."""
    config = SelectorKitConfig(json_indent=indent)
    click.echo(get_json(Rectangle(width, height), config=config))
