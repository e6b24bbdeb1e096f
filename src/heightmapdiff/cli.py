"""Heightmap Diff - CLI Entry Point."""

import logging
import sys
from typing import Tuple

import click

from heightmapdiff.colors import format_color
from heightmapdiff.config import DEFAULTS, HELP_ALIASES, OPTION_ALIASES, resolve_args
from heightmapdiff.exceptions import HeightmapDiffError, HelpRequested
from heightmapdiff.pipeline import run_diff
from heightmapdiff.settings import settings
from heightmapdiff.writer import IMAGE_SUFFIX, STATS_SUFFIX

PROG_NAME = "heightmap-diff"

USAGE_TEMPLATE = """
  Usage: {prog} <input1> <input2> [options]

  Positional Arguments:
    input1                  First heightmap screenshot filename (e.g. start.png).
    input2                  Second heightmap screenshot filename (e.g. end.png).

  Optional Arguments:
    {output_keys}
                            Output filename (extension can be omitted, always PNG).
                            Generated automatically, if not specified.

    {raised_keys}
                            RGB color for raised land.
                            Format: R,G,B or (R,G,B). Default: {raised_default}

    {lowered_keys}
                            RGB color for lowered land.
                            Format: R,G,B or (R,G,B). Default: {lowered_default}

    {stats_keys}
                            Whether to save statistical output into a TXT file.
                            Filename taken from <output>. Default: {stats_default}

    {help_keys}
                            Show this help message and exit.


    Examples:
      {prog} example/start.png end.png
          -- Run the comparison with default settings.
          -- 'start.png' in subfolder 'example'.

      {prog} start.png end.png o=diff
          -- Save output to 'diff.png' and statistics to 'diff.txt'.

      {prog} start.png end.png high=(0,255,255) low=255,100,100
          -- Customize raised and lowered land colors.

      {prog} start.png end.png statistics=false
          -- Disable saving of statistics.
"""


def _format_keywords(keywords: Tuple[str, ...], value_hint: str = "") -> str:
    suffix = f"={value_hint}" if value_hint else ""
    return ", ".join(f"{key}{suffix}" for key in keywords)


def usage_text(prog: str = PROG_NAME) -> str:
    return USAGE_TEMPLATE.format(
        prog=prog,
        output_keys=_format_keywords(OPTION_ALIASES["output"], "<output>"),
        raised_keys=_format_keywords(OPTION_ALIASES["raised_color"], "<R,G,B>"),
        raised_default=format_color(DEFAULTS.raised_color),
        lowered_keys=_format_keywords(OPTION_ALIASES["lowered_color"], "<R,G,B>"),
        lowered_default=format_color(DEFAULTS.lowered_color),
        stats_keys=_format_keywords(OPTION_ALIASES["save_stats"], "<true|false>"),
        stats_default=str(DEFAULTS.save_stats).lower(),
        help_keys=_format_keywords(HELP_ALIASES),
    )


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
        "help_option_names": [],
    },
    add_help_option=False,
)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def cli(tokens: Tuple[str, ...]):
    """Compare two heightmaps and highlight raised and lowered terrain."""
    logging.basicConfig(level=settings.log_level, format="%(message)s")

    try:
        config = resolve_args(tokens)
    except HelpRequested:
        click.echo(usage_text())
        sys.exit(1)
    except HeightmapDiffError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    try:
        outcome = run_diff(config)
    except HeightmapDiffError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    click.echo("")
    click.echo(outcome.report.text)
    click.echo(f'\nOutput saved as : "{outcome.output_base}{IMAGE_SUFFIX}"')
    if outcome.stats_path is not None:
        click.echo(f'Stats saved as  : "{outcome.output_base}{STATS_SUFFIX}"')


if __name__ == "__main__":
    cli()
