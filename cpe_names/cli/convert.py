"""Parse and re-bind commands.

Both commands accept either binding: a ``cpe:2.3:`` formatted string or a
``cpe:/`` URI.
"""

from __future__ import annotations

import click

from ..exceptions import CPEError
from ..grammar.model import WellFormedName
from ..grammar.types import LogicalValue
from ..naming import bind_to_fs, bind_to_uri, unbind


def load_name(text: str) -> WellFormedName:
    """Unbind ``text`` or exit with status 1 and the parse error."""
    try:
        return unbind(text)
    except CPEError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


@click.command("parse")
@click.argument("name")
def parse_cmd(name: str):
    """Print every attribute of NAME."""
    wfn = load_name(name)
    for attribute, value in wfn.items():
        rendered = str(value) if isinstance(value, LogicalValue) else f'"{value}"'
        click.echo(f"{attribute} = {rendered}")


@click.command("bind")
@click.argument("name")
@click.option(
    "--to",
    "target",
    type=click.Choice(["uri", "fs"], case_sensitive=False),
    default="fs",
    show_default=True,
    help="Binding to produce: 2.2 URI or 2.3 formatted string.",
)
def bind_cmd(name: str, target: str):
    """Re-bind NAME to the chosen form."""
    wfn = load_name(name)
    if target.lower() == "uri":
        click.echo(bind_to_uri(wfn))
    else:
        click.echo(bind_to_fs(wfn))


__all__ = ["bind_cmd", "load_name", "parse_cmd"]
