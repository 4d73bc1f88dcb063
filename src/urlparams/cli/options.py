# topmark:header:start
#
#   project      : UrlParams
#   file         : options.py
#   file_relpath : src/urlparams/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared ``-v/-q`` and ``--color/--no-color`` options of the ``urlparams`` group."""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, Final, TypeVar

import click

from urlparams.cli.errors import UrlParamsUsageError
from urlparams.config.logging import TRACE_LEVEL

F = TypeVar("F", bound=Callable[..., object])

# Program-output level per number of -v flags (the last entry caps -vvv and beyond)
VERBOSITY_LADDER: Final[tuple[int, ...]] = (
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
    TRACE_LEVEL,
)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Map ``-v`` / ``-q`` counts to a logging level for program output.

    Raises:
        UrlParamsUsageError: If both flags are given.
    """
    if verbose_count and quiet_count:
        raise UrlParamsUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count:
        return logging.ERROR
    return VERBOSITY_LADDER[min(verbose_count, len(VERBOSITY_LADDER) - 1)]


def common_verbose_options(f: F) -> F:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` flags."""
    f = click.option("-v", "--verbose", count=True, help="More program output (up to -vvv).")(f)
    return click.option("-q", "--quiet", count=True, help="Only report errors.")(f)


class ColorMode(str, Enum):
    """Value of ``--color``."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Decide whether styled output is enabled.

    An explicit ``always``/``never`` wins; in ``auto`` mode ``FORCE_COLOR`` (non-zero)
    enables and ``NO_COLOR`` disables color, otherwise color follows the TTY check.
    """
    if cli_mode is ColorMode.ALWAYS or cli_mode is ColorMode.NEVER:
        return cli_mode is ColorMode.ALWAYS
    if os.getenv("FORCE_COLOR", "0") not in ("", "0"):
        return True
    if "NO_COLOR" in os.environ:
        return False
    return sys.stdout.isatty() if stdout_isatty is None else stdout_isatty


def common_color_options(f: F) -> F:
    """Add ``--color {auto,always,never}`` and its ``--no-color`` shorthand."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output (default: auto).",
    )(f)
    return click.option("--no-color", "no_color", is_flag=True, help="Same as --color=never.")(f)
