# topmark:header:start
#
#   project      : UrlParams
#   file         : cli_types.py
#   file_relpath : src/urlparams/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enum-valued parameter types for the UrlParams commands."""

from __future__ import annotations

from enum import Enum
from typing import Any

import click


class InputFormat(str, Enum):
    """Document formats accepted by ``urlparams encode``."""

    JSON = "json"
    TOML = "toml"


class OutputFormat(str, Enum):
    """Output formats of ``urlparams version``."""

    TEXT = "text"
    JSON = "json"


class EnumChoiceParam(click.Choice):
    """Case-insensitive `click.Choice` over an Enum's values, converting to the member."""

    def __init__(self, enum_cls: type[Enum]) -> None:
        self.enum_cls: type[Enum] = enum_cls
        super().__init__([str(member.value) for member in enum_cls], case_sensitive=False)
        self.name = enum_cls.__name__.lower()

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        """Return the Enum member whose value matches ``value``."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        return self.enum_cls(super().convert(value, param, ctx))
