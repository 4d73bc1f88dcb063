# topmark:header:start
#
#   project      : UrlParams
#   file         : io.py
#   file_relpath : src/urlparams/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input helpers for the ``encode`` command.

Reads a JSON or TOML document from a path or STDIN (``-``) and turns it into
plain Python values. JSON is parsed with the standard library; TOML with
`tomlkit`, unwrapped into plain ``dict``/``list`` structures.

Errors are raised as CLI exceptions carrying sysexits-aligned exit codes.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from urlparams.cli.cli_types import InputFormat
from urlparams.cli.errors import (
    UrlParamsDataError,
    UrlParamsFileNotFoundError,
    UrlParamsIOError,
)
from urlparams.config.logging import get_logger
from urlparams.core.shapes import Flatten

if TYPE_CHECKING:
    from collections.abc import Iterable

    from urlparams.config.logging import UrlParamsLogger

logger: UrlParamsLogger = get_logger(__name__)

STDIN_PATH: str = "-"


def infer_input_format(path: str) -> InputFormat:
    """Infer the document format from the file suffix (``.toml`` -> TOML, else JSON)."""
    if path != STDIN_PATH and Path(path).suffix.lower() == ".toml":
        return InputFormat.TOML
    return InputFormat.JSON


def read_input_text(path: str) -> str:
    """Read the document text from ``path`` (UTF-8) or from STDIN when ``path`` is ``-``.

    Args:
        path (str): File path or ``-``.

    Returns:
        str: The document text.

    Raises:
        UrlParamsFileNotFoundError: If the file does not exist.
        UrlParamsDataError: If the file is not valid UTF-8.
        UrlParamsIOError: For other read failures.
    """
    if path == STDIN_PATH:
        return click.get_text_stream("stdin").read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise UrlParamsFileNotFoundError(f"Input file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise UrlParamsDataError(f"Input file is not valid UTF-8: {path} ({exc})") from exc
    except OSError as exc:
        raise UrlParamsIOError(f"Cannot read input file {path}: {exc}") from exc


def parse_document(text: str, fmt: InputFormat, *, source: str = STDIN_PATH) -> Any:
    """Parse ``text`` into plain Python values.

    Args:
        text (str): Document text.
        fmt (InputFormat): Document format.
        source (str): Path used in error messages.

    Returns:
        Any: The parsed document (a ``dict`` for well-formed inputs, but JSON may
        also yield lists or scalars; the encoder reports those).

    Raises:
        UrlParamsDataError: If the document cannot be parsed.
    """
    if fmt is InputFormat.TOML:
        try:
            doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        except TomlkitParseError as exc:
            raise UrlParamsDataError(f"Error decoding TOML from {source}: {exc}") from exc
        return doc.unwrap()
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise UrlParamsDataError(f"Error decoding JSON from {source}: {exc}") from exc


def apply_flatten(document: Any, keys: Iterable[str]) -> list[str]:
    """Wrap the values of ``keys`` in `Flatten`, in place.

    Args:
        document (Any): Parsed document; only ``dict`` roots are modified.
        keys (Iterable[str]): Top-level keys whose tables are spliced into the root.

    Returns:
        list[str]: The keys that were not found in the document.
    """
    missing: list[str] = []
    for key in keys:
        if isinstance(document, dict) and key in document:
            logger.debug("flattening key %r", key)
            document[key] = Flatten(document[key])
        else:
            missing.append(key)
    return missing
