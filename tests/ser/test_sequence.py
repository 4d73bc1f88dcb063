# topmark:header:start
#
#   project      : UrlParams
#   file         : test_sequence.py
#   file_relpath : tests/ser/test_sequence.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `SequenceEncoder`."""

from __future__ import annotations

import io

import pytest

from urlparams import UnsupportedNestedStructError
from urlparams.ser.sequence import SequenceEncoder
from urlparams.ser.sink import OutputSink


def _encoder() -> tuple[SequenceEncoder, io.BytesIO]:
    buffer = io.BytesIO()
    return SequenceEncoder(OutputSink(buffer)), buffer


def test_elements_are_comma_joined() -> None:
    """It should write a comma before every element but the first."""
    enc, buffer = _encoder()
    enc.encode_all([42, "hello", 3.15])
    assert buffer.getvalue() == b"42,hello,3.15"


def test_empty_sequence_writes_nothing() -> None:
    """It should write nothing for an empty sequence."""
    enc, buffer = _encoder()
    enc.encode_all([])
    assert buffer.getvalue() == b""
    assert enc.first


def test_first_flag_is_positional() -> None:
    """It should count an empty first element as written."""
    enc, buffer = _encoder()
    enc.encode_all(["", None, "x"])
    assert buffer.getvalue() == b",,x"
    assert not enc.first


def test_elements_are_percent_encoded() -> None:
    """It should percent-encode commas inside elements."""
    enc, buffer = _encoder()
    enc.encode_all(["a,b", "c"])
    assert buffer.getvalue() == b"a%2Cb,c"


def test_nested_sequence_fails_after_prefix() -> None:
    """It should refuse a nested sequence, leaving earlier elements written."""
    enc, buffer = _encoder()
    with pytest.raises(UnsupportedNestedStructError, match="Tried to serialize a sequence"):
        enc.encode_all([1, [2, 3]])
    assert buffer.getvalue() == b"1,"
