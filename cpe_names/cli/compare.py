"""Compare command: relation of a source name to a target name."""

from __future__ import annotations

import click

from ..matching import MatchReport
from .convert import load_name


@click.command("compare")
@click.argument("source")
@click.argument("target")
@click.option("--json", "as_json", is_flag=True, help="Emit the report as JSON.")
def compare_cmd(source: str, target: str, as_json: bool):
    """Compare SOURCE against TARGET attribute by attribute."""
    report = MatchReport.from_names(load_name(source), load_name(target))
    if as_json:
        click.echo(report.model_dump_json(indent=2))
        return
    for attribute, relation in report.relations.items():
        click.echo(f"{attribute:<11} {relation.name}")
    click.echo("")
    click.echo(f"disjoint: {report.disjoint}")
    click.echo(f"equal: {report.equal}")
    click.echo(f"subset: {report.subset}")
    click.echo(f"superset: {report.superset}")


__all__ = ["compare_cmd"]
