# dynafunc/core/errors/__init__.py
"""
Core error types for dynafunc.

This package defines the components responsible for:
- Representing errors (one class per failure kind)
- Categorizing errors (stable codes)

No side effects on import.
"""

from . import codes
from .exceptions import (
    Side,
    DynaFuncError,
    NotAFunctionError,
    ArityMismatchError,
    TypeMismatchError,
    NotConvertibleError,
    ConfigError,
)

__all__ = [
    "codes",
    "Side",
    "DynaFuncError",
    "NotAFunctionError",
    "ArityMismatchError",
    "TypeMismatchError",
    "NotConvertibleError",
    "ConfigError",
]
