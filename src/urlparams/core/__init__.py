# topmark:header:start
#
#   project      : UrlParams
#   file         : __init__.py
#   file_relpath : src/urlparams/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core primitives shared by every encoder.

- [`urlparams.core.errors`][urlparams.core.errors]: error taxonomy.
- [`urlparams.core.shapes`][urlparams.core.shapes]: shape kinds and field descriptors.
- [`urlparams.core.visitor`][urlparams.core.visitor]: the `Serializer` capability interface.
- [`urlparams.core.fields`][urlparams.core.fields]: dataclass decorators and field options.
- [`urlparams.core.dispatch`][urlparams.core.dispatch]: classification of Python values.
"""
