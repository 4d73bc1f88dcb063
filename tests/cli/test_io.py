# topmark:header:start
#
#   project      : UrlParams
#   file         : test_io.py
#   file_relpath : tests/cli/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the input helpers of the ``encode`` command."""

from __future__ import annotations

import pytest

from tests.conftest import parametrize
from urlparams import Flatten
from urlparams.cli.cli_types import InputFormat
from urlparams.cli.errors import UrlParamsDataError
from urlparams.cli.exit_codes import ExitCode
from urlparams.cli.io import apply_flatten, infer_input_format, parse_document


@parametrize(
    "path, fmt",
    [
        ("-", InputFormat.JSON),
        ("a.json", InputFormat.JSON),
        ("a.TOML", InputFormat.TOML),
        ("dir/pyproject.toml", InputFormat.TOML),
        ("noext", InputFormat.JSON),
    ],
)
def test_infer_input_format(path: str, fmt: InputFormat) -> None:
    """It should infer TOML from the suffix and default to JSON."""
    assert infer_input_format(path) is fmt


def test_parse_toml_unwraps_to_plain_values() -> None:
    """It should return plain dicts and lists for TOML documents."""
    doc = parse_document('a = 1\nb = ["x"]\n[t]\nc = true\n', InputFormat.TOML)
    assert doc == {"a": 1, "b": ["x"], "t": {"c": True}}
    assert type(doc) is dict
    assert type(doc["t"]) is dict


def test_parse_error_carries_exit_code() -> None:
    """It should raise a DATA_ERROR CLI exception naming the source."""
    with pytest.raises(UrlParamsDataError) as excinfo:
        parse_document("{", InputFormat.JSON, source="in.json")
    assert excinfo.value.exit_code == ExitCode.DATA_ERROR
    assert "in.json" in excinfo.value.format_message()


def test_apply_flatten() -> None:
    """It should wrap present keys and report missing ones."""
    doc: dict[str, object] = {"a": 1, "t": {"c": 2}}
    missing = apply_flatten(doc, ["t", "zz"])
    assert missing == ["zz"]
    assert doc["t"] == Flatten({"c": 2})
    assert doc["a"] == 1


def test_apply_flatten_non_mapping() -> None:
    """It should report every key as missing for non-mapping documents."""
    assert apply_flatten([1, 2], ["a"]) == ["a"]
