# dynafunc/core/signature/__init__.py
"""
Signature extraction and validation.

This package defines the components responsible for:
- Reading a callable's parameter and result types (FunctionCache)
- Checking them against an expected signature (simple_param_validator)
- Deriving expected types from samples (elem_types)

No side effects on import.
"""

from .extractor import FunctionCache, extract
from .validator import Validator, simple_param_validator, elem_types

__all__ = [
    "FunctionCache",
    "extract",
    "Validator",
    "simple_param_validator",
    "elem_types",
]
