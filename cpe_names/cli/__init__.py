"""CLI command group for CPE names.

This module exposes the root Click command group `cpe_names` which
aggregates subcommands implemented in sibling modules.

Example usage:

        cpe-names parse "cpe:/a:microsoft:internet_explorer:8.0.6001:beta"
        cpe-names bind "cpe:/a:adobe:reader:9.3.2" --to fs
        cpe-names compare "cpe:2.3:a:adobe:*:9.*:*:*:*:*:*:*:*" "cpe:/a:adobe:reader:9.3.2"
        cpe-names dictionary build official-cpe-dictionary_v2.3.xml.gz fixtures.yml
"""

from __future__ import annotations

import click

from ..config import configure_logging
from .compare import compare_cmd
from .convert import bind_cmd, parse_cmd
from .dictionary import dictionary_cmd


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (defaults to $CPE_NAMES_LOG_LEVEL or WARNING).",
)
def cpe_names(log_level: str | None):  # pragma: no cover - thin group wrapper
    """CPE name parsing, binding and matching commands."""
    configure_logging(log_level)


# Register subcommands
cpe_names.add_command(parse_cmd)
cpe_names.add_command(bind_cmd)
cpe_names.add_command(compare_cmd)
cpe_names.add_command(dictionary_cmd)

__all__ = ["cpe_names"]
