"""
dynafunc - Validated, type-checked calls to dynamic functions

Wrap any callable once, validate its signature against what the caller expects,
then call it with loosely-typed arguments that are checked and converted on
every call.

User-facing API:
- GenericFunc.new(): wrap + validate a callable
- GenericFunc.call(): checked call, results returned as a list
- simple_param_validator(): validator for expected parameter / result types
- elem_types(): expected types from samples or types
- GENERIC: wildcard, matches any type at its position

Basic usage:

    >>> from dynafunc import GenericFunc, simple_param_validator, elem_types
    >>> def is_big(item: int) -> bool:
    ...     return item > 10
    >>> fn = GenericFunc.new(is_big, simple_param_validator(elem_types(int), elem_types(bool)))
    >>> fn.call(15)
    [True]

Wildcards:

    >>> from dynafunc import GENERIC
    >>> def triple(i: int) -> int:
    ...     return i * 3
    >>> fn = GenericFunc.new(triple, simple_param_validator(elem_types(GENERIC), None))
    >>> fn.call(3)
    [9]

Configuration (optional):

    >>> from dynafunc import load_config
    >>> fn = GenericFunc.new(triple, simple_param_validator(), config=load_config("dynafunc.yml"))
"""

__version__ = "0.1.0"

from .core import (
    GenericType,
    GENERIC,
    is_generic,
    type_name,
    Side,
    DynaFuncError,
    NotAFunctionError,
    ArityMismatchError,
    TypeMismatchError,
    NotConvertibleError,
    ConfigError,
    FunctionCache,
    Validator,
    extract,
    simple_param_validator,
    elem_types,
    Converter,
    ConversionError,
    GenericFunc,
)
from .config import ConversionConfig, DynaFuncConfig, load_config

__all__ = [
    # Wrapper
    "GenericFunc",
    "FunctionCache",
    "extract",
    # Validation
    "Validator",
    "simple_param_validator",
    "elem_types",
    # Wildcard
    "GenericType",
    "GENERIC",
    "is_generic",
    "type_name",
    # Conversion
    "Converter",
    "ConversionError",
    # Errors
    "Side",
    "DynaFuncError",
    "NotAFunctionError",
    "ArityMismatchError",
    "TypeMismatchError",
    "NotConvertibleError",
    "ConfigError",
    # Config
    "ConversionConfig",
    "DynaFuncConfig",
    "load_config",
]
