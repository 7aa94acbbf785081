# dynafunc/core/__init__.py
"""
Core components: wildcard marker, errors, signature handling, invocation.
"""

from .marker import GenericType, GENERIC, is_generic, type_name
from .errors import (
    Side,
    DynaFuncError,
    NotAFunctionError,
    ArityMismatchError,
    TypeMismatchError,
    NotConvertibleError,
    ConfigError,
)
from .signature import FunctionCache, Validator, extract, simple_param_validator, elem_types
from .invoke import Converter, ConversionError, GenericFunc

__all__ = [
    "GenericType",
    "GENERIC",
    "is_generic",
    "type_name",
    "Side",
    "DynaFuncError",
    "NotAFunctionError",
    "ArityMismatchError",
    "TypeMismatchError",
    "NotConvertibleError",
    "ConfigError",
    "FunctionCache",
    "Validator",
    "extract",
    "simple_param_validator",
    "elem_types",
    "Converter",
    "ConversionError",
    "GenericFunc",
]
