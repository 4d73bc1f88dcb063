# topmark:header:start
#
#   project      : UrlParams
#   file         : version.py
#   file_relpath : src/urlparams/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UrlParams `version` command.

Prints the current UrlParams version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from urlparams.cli.cli_types import EnumChoiceParam, OutputFormat
from urlparams.constants import URLPARAMS_VERSION

if TYPE_CHECKING:
    from urlparams.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of UrlParams.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of UrlParams.

    Args:
        output_format (OutputFormat | None): Optional output format (plain text or json).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": URLPARAMS_VERSION}))
    else:
        console.print(console.styled(URLPARAMS_VERSION, bold=True))
