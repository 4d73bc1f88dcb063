# topmark:header:start
#
#   project      : UrlParams
#   file         : __init__.py
#   file_relpath : src/urlparams/ser/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Query-string encoders, one per structural position.

Control flow for one call:

1. [`TopLevelSerializer`][urlparams.ser.toplevel.TopLevelSerializer] receives the
   root value and accepts only key-value shapes (or unit/none).
2. [`AggregateEncoder`][urlparams.ser.aggregate.AggregateEncoder] walks the fields
   or entries, writing ``?``/``&`` through a shared `PairWriter`, and splices at
   most one level of flattened records.
3. [`ScalarSerializer`][urlparams.ser.scalar.ScalarSerializer] renders each value as
   ``key=token``; sequences go through
   [`SequenceEncoder`][urlparams.ser.sequence.SequenceEncoder] as comma-joined
   bare tokens.

All encoders write to the same [`OutputSink`][urlparams.ser.sink.OutputSink]
incrementally, left to right.
"""

from __future__ import annotations

from urlparams.ser.aggregate import AggregateEncoder, Depth, FlattenSerializer, PairWriter
from urlparams.ser.scalar import ScalarMode, ScalarSerializer
from urlparams.ser.sequence import SequenceEncoder
from urlparams.ser.sink import BinaryWriter, OutputSink
from urlparams.ser.toplevel import TopLevelSerializer

__all__ = [
    "AggregateEncoder",
    "BinaryWriter",
    "Depth",
    "FlattenSerializer",
    "OutputSink",
    "PairWriter",
    "ScalarMode",
    "ScalarSerializer",
    "SequenceEncoder",
    "TopLevelSerializer",
]
