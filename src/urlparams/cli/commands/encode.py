# topmark:header:start
#
#   project      : UrlParams
#   file         : encode.py
#   file_relpath : src/urlparams/cli/commands/encode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UrlParams `encode` command.

Reads a JSON or TOML document and prints it as a URL query string.

Examples:
    ```console
    $ echo '{"id": "some_id", "filter": ["a", "b"]}' | urlparams encode -
    ?id=some_id&filter=a,b
    $ urlparams encode request.toml --flatten page --base-url https://example.org/search
    https://example.org/search?q=rust&size=20&offset=0
    ```
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlsplit, urlunsplit

import click

from urlparams.api import serialize_to_string
from urlparams.cli.cli_types import EnumChoiceParam, InputFormat
from urlparams.cli.errors import UrlParamsDataError
from urlparams.cli.io import (
    STDIN_PATH,
    apply_flatten,
    infer_input_format,
    parse_document,
    read_input_text,
)
from urlparams.config.logging import get_logger
from urlparams.constants import PAIR_SEPARATOR, QUERY_START
from urlparams.core.errors import QueryParamsError

if TYPE_CHECKING:
    from urllib.parse import SplitResult

    from urlparams.cli.console import ConsoleLike
    from urlparams.config.logging import UrlParamsLogger

logger: UrlParamsLogger = get_logger(__name__)


def join_base_url(base_url: str, query: str) -> str:
    """Merge ``query`` into the query component of ``base_url``.

    Existing parameters are kept and the new pairs follow them; a fragment stays last.

    Examples:
        ``("https://x/p?q=1#top", "?a=1")`` -> ``https://x/p?q=1&a=1#top``
    """
    if not query:
        return base_url
    parts: SplitResult = urlsplit(base_url)
    pairs: str = query.removeprefix(QUERY_START)
    merged: str = parts.query + PAIR_SEPARATOR + pairs if parts.query else pairs
    return urlunsplit(parts._replace(query=merged))


@click.command(
    name="encode",
    help="Encode a JSON or TOML document (PATH, or '-' for STDIN) as URL query parameters.",
)
@click.argument("path", type=str, default=STDIN_PATH, required=False)
@click.option(
    "--input-format",
    "input_format",
    type=EnumChoiceParam(InputFormat),
    default=None,
    help=(
        f"Input format ({', '.join(v.value for v in InputFormat)}). "
        "Defaults to toml for '*.toml' paths, json otherwise."
    ),
)
@click.option(
    "--flatten",
    "flatten_keys",
    multiple=True,
    help="Splice the fields of this top-level table into the query string (repeatable).",
)
@click.option(
    "--base-url",
    "base_url",
    type=str,
    default=None,
    help="Prefix the output with this URL.",
)
def encode_command(
    *,
    path: str,
    input_format: InputFormat | None,
    flatten_keys: tuple[str, ...],
    base_url: str | None,
) -> None:
    """Encode a document as URL query parameters.

    Args:
        path (str): Input path, or ``-`` for STDIN.
        input_format (InputFormat | None): Explicit input format; inferred from ``path`` if None.
        flatten_keys (tuple[str, ...]): Top-level keys whose tables are flattened.
        base_url (str | None): Optional URL the query string is appended to.

    Raises:
        UrlParamsDataError: If the document cannot be encoded.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    level: int = ctx.obj.get("verbosity_level", logging.WARNING)

    fmt: InputFormat = input_format or infer_input_format(path)
    if level <= logging.INFO:
        console.info(f"Reading {fmt.value} from {'STDIN' if path == STDIN_PATH else path}")

    document = parse_document(read_input_text(path), fmt, source=path)

    missing: list[str] = apply_flatten(document, flatten_keys)
    if missing and level <= logging.WARNING:
        console.warn(f"Warning: --flatten key(s) not found: {', '.join(missing)}")

    try:
        query: str = serialize_to_string(document)
    except QueryParamsError as exc:
        logger.debug("encoding failed: %r", exc)
        raise UrlParamsDataError(str(exc)) from exc

    if level <= logging.INFO:
        console.info(f"Encoded {len(query)} character(s)")
    console.print(join_base_url(base_url, query) if base_url else query)
