# topmark:header:start
#
#   project      : UrlParams
#   file         : fields.py
#   file_relpath : src/urlparams/core/fields.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dataclass decorators and per-field options.

Provided:
    - ``query_field(*, flatten=False, rename=None, skip=False, **kwargs)``:
        drop-in replacement for `dataclasses.field` carrying encoder options.
    - ``@transparent``: a single-field dataclass encodes as its only field.
    - ``@variant``: a dataclass encodes as an enum variant (struct variant, or
        unit variant when it has no fields).

Example:
    ```python
    @dataclass
    class Complex:
        real: float
        imag: float


    @dataclass
    class Params:
        x: int
        z: Complex | None = query_field(flatten=True, default=None)
        page_size: int = query_field(rename="page-size", default=20)
    ```
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, TypeVar, overload

from urlparams.constants import FIELD_METADATA_KEY, TRANSPARENT_ATTR, VARIANT_ATTR
from urlparams.core.shapes import StructField

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

_T = TypeVar("_T", bound=type)


@dataclass(frozen=True, slots=True)
class FieldOptions:
    """Encoder options attached to one dataclass field.

    Attributes:
        flatten: Splice the field's own fields into the parent.
        rename: Key emitted instead of the attribute name.
        skip: Leave the field out of the output entirely.
    """

    flatten: bool = False
    rename: str | None = None
    skip: bool = False


DEFAULT_FIELD_OPTIONS: Final[FieldOptions] = FieldOptions()


def query_field(
    *,
    flatten: bool = False,
    rename: str | None = None,
    skip: bool = False,
    **kwargs: Any,
) -> Any:
    """Declare a dataclass field with encoder options.

    Args:
        flatten (bool): Splice the nested record's fields into the parent pair list.
        rename (str | None): Key to emit instead of the attribute name.
        skip (bool): Omit the field from the query string.
        **kwargs (Any): Forwarded to `dataclasses.field` (``default``, ``default_factory``,
            ``metadata``, ...).

    Returns:
        Any: The `dataclasses.Field` object (typed ``Any`` like `dataclasses.field`).
    """
    metadata: dict[str, object] = dict(kwargs.pop("metadata", None) or {})
    metadata[FIELD_METADATA_KEY] = FieldOptions(flatten=flatten, rename=rename, skip=skip)
    return dataclasses.field(metadata=metadata, **kwargs)


def field_options(f: dataclasses.Field[Any]) -> FieldOptions:
    """Return the encoder options declared for dataclass field ``f``."""
    opts = f.metadata.get(FIELD_METADATA_KEY)
    if isinstance(opts, FieldOptions):
        return opts
    return DEFAULT_FIELD_OPTIONS


def encoded_fields(cls_or_obj: object) -> list[dataclasses.Field[Any]]:
    """Return the dataclass fields that take part in encoding (``skip`` removed)."""
    return [f for f in dataclasses.fields(cls_or_obj) if not field_options(f).skip]  # type: ignore[arg-type]


def iter_struct_fields(obj: object) -> Iterator[StructField]:
    """Yield the `StructField` descriptors of dataclass instance ``obj`` in declaration order.

    Args:
        obj (object): A dataclass instance.

    Yields:
        StructField: One descriptor per encoded field, values read lazily.
    """
    for f in encoded_fields(obj):
        opts = field_options(f)
        yield StructField(
            name=opts.rename if opts.rename is not None else f.name,
            value=getattr(obj, f.name),
            flatten=opts.flatten,
        )


def _require_dataclass(cls: type, decorator: str) -> None:
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise TypeError(
            f"@{decorator} must be applied to a dataclass "
            f"(place it above @dataclass); got {cls!r}"
        )


def transparent(cls: _T) -> _T:
    """Mark a single-field dataclass as transparent.

    A transparent instance is encoded exactly like its only field's value.

    Args:
        cls (_T): Dataclass to mark.

    Returns:
        _T: The same class.

    Raises:
        TypeError: If ``cls`` is not a dataclass or does not have exactly one encoded field.
    """
    _require_dataclass(cls, "transparent")
    count: int = len(encoded_fields(cls))
    if count != 1:
        raise TypeError(
            f"@transparent requires exactly one field, {cls.__name__} has {count}"
        )
    setattr(cls, TRANSPARENT_ATTR, True)
    return cls


@overload
def variant(cls: _T, /) -> _T: ...


@overload
def variant(*, enum: str | None = None) -> Callable[[_T], _T]: ...


def variant(cls: _T | None = None, /, *, enum: str | None = None) -> _T | Callable[[_T], _T]:
    """Mark a dataclass as a variant of a tagged union.

    The variant tag is never emitted: a variant with fields encodes like a record,
    a variant without fields encodes as its class name.

    Args:
        cls (_T | None): Dataclass to mark when used as ``@variant``.
        enum (str | None): Name of the union; defaults to the first base class
            name, or the class name itself.

    Returns:
        _T | Callable[[_T], _T]: The class, or a decorator when called with arguments.
    """

    def _apply(target: _T) -> _T:
        _require_dataclass(target, "variant")
        union_name: str = enum or _default_union_name(target)
        setattr(target, VARIANT_ATTR, union_name)
        return target

    if cls is None:
        return _apply
    return _apply(cls)


def _default_union_name(cls: type) -> str:
    base: type = cls.__mro__[1]
    return cls.__name__ if base is object else base.__name__


def is_transparent(cls: type) -> bool:
    """Return True if ``cls`` was decorated with `transparent`."""
    return bool(cls.__dict__.get(TRANSPARENT_ATTR, False))


def variant_union_name(cls: type) -> str | None:
    """Return the union name of a `variant` class, or None for ordinary classes."""
    return cls.__dict__.get(VARIANT_ATTR)
