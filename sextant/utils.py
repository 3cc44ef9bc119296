"""
Sextant utilities (internal helpers).

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None.
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like ""/0/None.

- readonly("attr")
  • Property factory exposing a private backing field (self._attr) as an immutable view
    (tuple / MappingProxyType / frozenset) so declarations cannot be mutated after build.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> coalesce("", "fallback")
    ''
"""
import functools
from collections.abc import Sequence, Mapping, Set
from types import MappingProxyType
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and "".
    - Printable: repr(Unset) -> "Unset" for friendly diagnostics.
    - Non-subclassable and a singleton per process.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __reduce__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Return `default` when `object` is Unset; otherwise return `object` unchanged.

    Falsey values such as "", 0 or None are preserved: only the sentinel is replaced.
    """
    return object if object is not Unset else default


def readonly(name, /):
    """
    Define a read-only property that mirrors the backing attribute "_{name}".

    Containers are exposed as immutable views:
    - Sequence (non-str) → tuple
    - Mapping            → MappingProxyType
    - Set                → frozenset
    - other types        → returned as-is
    """
    if not isinstance(name, str):
        raise TypeError("readonly() argument must be a string")

    def getter(self):
        value = getattr(self, "_" + name)
        if isinstance(value, Sequence) and not isinstance(value, str):
            return tuple(value)
        if isinstance(value, Mapping):
            return MappingProxyType(value)
        if isinstance(value, Set):
            return frozenset(value)
        return value

    getter.__qualname__ = getter.__name__ = name
    return property(getter)


Unset = UnsetType()
"""
Internal sentinel for “not provided”.

Use Unset as a default when an empty string or None is a meaningful value but the
API still needs to distinguish “no input” from it. Materialize with coalesce().
"""


__all__ = (
    "UnsetType",
    "Unset",
    "coalesce",
    "readonly",
)
