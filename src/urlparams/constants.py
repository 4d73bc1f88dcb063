# topmark:header:start
#
#   project      : UrlParams
#   file         : constants.py
#   file_relpath : src/urlparams/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UrlParams Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

URLPARAMS_VERSION: str = get_version("urlparams")

# Environment variable consulted by `urlparams.config.logging.resolve_env_log_level`
LOG_LEVEL_ENV_VAR: Final[str] = "URLPARAMS_LOG_LEVEL"

# Query string punctuation
QUERY_START: Final[str] = "?"
PAIR_SEPARATOR: Final[str] = "&"
KEY_VALUE_SEPARATOR: Final[str] = "="
ELEMENT_SEPARATOR: Final[str] = ","

# Attribute names recognized on user classes
SERIALIZE_HOOK: Final[str] = "__query_serialize__"
TRANSPARENT_ATTR: Final[str] = "__query_transparent__"
VARIANT_ATTR: Final[str] = "__query_variant__"

# Key under which per-field options live in `dataclasses.Field.metadata`
FIELD_METADATA_KEY: Final[str] = "urlparams"
