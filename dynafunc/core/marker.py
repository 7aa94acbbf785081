# dynafunc/core/marker.py
"""
Wildcard type marker and type descriptor naming.

A "type descriptor" is anything Python accepts as an annotation: a class, a
parameterized generic (tuple[int, ...]), a typing construct (Optional[int], Any)
or, for annotations that could not be resolved, the annotation string.

GENERIC is the single "accept any type here" marker. It is an enum member, so it
is unique per process, compared with `is`, and never produced by resolving an
ordinary annotation.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Final


class GenericType(Enum):
    """Marker type: matches any declared or expected type at its position."""
    ANY = "GenericType"

    def __repr__(self) -> str:
        return "GenericType"

    __str__ = __repr__


GENERIC: Final = GenericType.ANY


def is_generic(descriptor: Any) -> bool:
    return descriptor is GENERIC


def type_name(descriptor: Any) -> str:
    """
    Human-readable name for a type descriptor, used in error messages.

    Builtins and typing classes render bare (int, Any), other classes with
    their module, generics as written in source (tuple[int, ...]).
    """
    if descriptor is GENERIC:
        return "GenericType"
    if descriptor is None or descriptor is type(None):
        return "None"
    if isinstance(descriptor, str):
        return descriptor
    if isinstance(descriptor, type) and not hasattr(descriptor, "__origin__"):
        qualname = getattr(descriptor, "__qualname__", descriptor.__name__)
        module = getattr(descriptor, "__module__", "builtins")
        if module in ("builtins", "typing"):
            return qualname
        return f"{module}.{qualname}"
    text = repr(descriptor)
    if text.startswith("typing."):
        text = text[len("typing."):]
    return text


__all__ = ["GenericType", "GENERIC", "is_generic", "type_name"]
