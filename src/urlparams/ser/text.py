# topmark:header:start
#
#   project      : UrlParams
#   file         : text.py
#   file_relpath : src/urlparams/ser/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Textual rendering of scalar tokens.

- Text is percent-encoded with the `application/x-www-form-urlencoded` byte
  serializer: ``A-Z a-z 0-9 * - . _`` are kept, space becomes ``+``, every other
  UTF-8 byte becomes ``%XX``.
- Booleans render as ``true`` / ``false``.
- Floats render with the shortest round-trip digits, never in exponent notation,
  and without a trailing ``.0``.
"""

from __future__ import annotations

import math
from decimal import Decimal
from urllib.parse import quote_plus

from urlparams.core.errors import ExternError


def form_urlencode(text: str) -> str:
    """Percent-encode ``text`` for use as a query-string key or value.

    Args:
        text (str): Text to encode.

    Returns:
        str: ASCII-only encoded text.

    Raises:
        ExternError: If ``text`` cannot be encoded as UTF-8 (lone surrogates).
    """
    try:
        encoded: str = quote_plus(text, safe="*")
    except UnicodeEncodeError as exc:
        raise ExternError(exc) from exc
    # quote_plus keeps "~" unreserved; the form-urlencoded set does not
    return encoded.replace("~", "%7E")


def format_bool(v: bool) -> str:
    """Render a boolean as ``true`` or ``false``."""
    return "true" if v else "false"


def format_int(v: int) -> str:
    """Render an integer in decimal."""
    return str(int(v))


def format_float(v: float) -> str:
    """Render a float without exponent notation.

    Examples:
        ``0.0`` -> ``0``, ``3.15`` -> ``3.15``, ``1e20`` -> ``100000000000000000000``,
        ``1e-07`` -> ``0.0000001``, ``nan`` -> ``NaN``.
    """
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "inf" if v > 0 else "-inf"
    text: str = format(Decimal(repr(float(v))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
