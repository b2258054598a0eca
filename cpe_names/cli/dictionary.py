"""Dictionary fixture commands.

`build` reads a local copy of the official CPE dictionary and writes YAML
round-trip fixtures; `check` replays them against the current codecs.
"""

from __future__ import annotations

from pathlib import Path

import click

from ..dictionary import check_cases, generate_cases, load_cases, read_dictionary, write_cases


@click.group("dictionary")
def dictionary_cmd():  # pragma: no cover - thin group wrapper
    """Official CPE dictionary fixture tools."""


@dictionary_cmd.command("build")
@click.argument("feed", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--limit", type=int, default=None, help="Keep at most this many items.")
@click.option("--shuffle/--no-shuffle", default=False, help="Shuffle items before limiting.")
@click.option("--seed", type=int, default=None, help="Seed used when shuffling.")
def build_cmd(feed: Path, output: Path, limit: int | None, shuffle: bool, seed: int | None):
    """Build round-trip fixtures from FEED (XML, optionally .gz) into OUTPUT."""
    items = read_dictionary(feed)
    cases = generate_cases(items, limit=limit, shuffle=shuffle, seed=seed)
    write_cases(cases, output)
    failures = sum(1 for case in cases if case.error)
    click.echo(f"Wrote {len(cases)} cases ({failures} unbind errors) -> {output}")


@dictionary_cmd.command("check")
@click.argument("fixtures", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check_cmd(fixtures: Path):
    """Replay FIXTURES and report any regressions."""
    cases = load_cases(fixtures)
    issues = check_cases(cases)
    if issues:
        click.echo("Regressions found:")
        for issue in issues:
            click.echo(f" - {issue}")
        raise SystemExit(1)
    click.echo(f"All {len(cases)} cases PASSED.")


__all__ = ["dictionary_cmd"]
