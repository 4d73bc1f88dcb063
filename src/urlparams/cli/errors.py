# topmark:header:start
#
#   project      : UrlParams
#   file         : errors.py
#   file_relpath : src/urlparams/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the UrlParams CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from urlparams.cli.exit_codes import ExitCode


class UrlParamsCliError(click.ClickException):
    """Base class for all UrlParams CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (no color)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        console = None
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class UrlParamsUsageError(UrlParamsCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class UrlParamsDataError(UrlParamsCliError):
    """Error for input that cannot be parsed or encoded as URL parameters."""

    exit_code = ExitCode.DATA_ERROR


class UrlParamsFileNotFoundError(UrlParamsCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class UrlParamsIOError(UrlParamsCliError):
    """Error for I/O errors reading the input."""

    exit_code = ExitCode.IO_ERROR
