# dynafunc/core/invoke/__init__.py
"""
Invocation of validated callables.

This package defines the components responsible for:
- Converting loosely-typed arguments to declared types (Converter)
- Calling the wrapped function and boxing its results (GenericFunc)

No side effects on import.
"""

from .convert import Converter, ConversionError
from .invoker import GenericFunc

__all__ = [
    "Converter",
    "ConversionError",
    "GenericFunc",
]
