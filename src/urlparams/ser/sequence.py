# topmark:header:start
#
#   project      : UrlParams
#   file         : sequence.py
#   file_relpath : src/urlparams/ser/sequence.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sequence encoder: comma-joined bare element tokens.

The caller has already written ``key=`` (or nothing, for map keys). Each element
goes through a `ScalarSerializer` in ``ELEMENT`` mode, so an element that is itself
a sequence, tuple, bytes or key-value shape fails with
`UnsupportedNestedStructError`. An empty sequence writes nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from urlparams.config.logging import get_logger
from urlparams.constants import ELEMENT_SEPARATOR
from urlparams.core import dispatch

if TYPE_CHECKING:
    from collections.abc import Iterable

    from urlparams.config.logging import UrlParamsLogger
    from urlparams.ser.sink import OutputSink

logger: UrlParamsLogger = get_logger(__name__)


class SequenceEncoder:
    """Separator state for one sequence context.

    Attributes:
        first (bool): True until the first element has been written; never reset.
    """

    __slots__ = ("_out", "first")

    def __init__(self, out: OutputSink) -> None:
        self._out: OutputSink = out
        self.first: bool = True

    def encode_element(self, value: object) -> None:
        """Write ``value`` as the next element, preceded by ``,`` unless first."""
        # Imported here: scalar.py builds SequenceEncoder for its own sequences.
        from urlparams.ser.scalar import ScalarSerializer

        if not self.first:
            self._out.write(ELEMENT_SEPARATOR)
        dispatch.serialize(value, ScalarSerializer.element(self._out))
        self.first = False

    def encode_all(self, items: Iterable[object]) -> None:
        """Write every element of ``items`` in iteration order."""
        count = 0
        for item in items:
            self.encode_element(item)
            count += 1
        logger.trace("encoded sequence of %d element(s)", count)
