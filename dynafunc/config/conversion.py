# dynafunc/config/conversion.py
"""
Conversion Configuration

Controls which argument conversions GenericFunc.call may apply.
Exact instances of the declared type and GENERIC positions are always accepted;
every other rule can be switched off here.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict


@dataclass(frozen=True)
class ConversionConfig:
    """
    Argument conversion rules.

    numeric: int/float/Fraction/Decimal convert to each other, numbers to complex
    binary: bytes/bytearray/memoryview convert to bytes or bytearray
    collections: list/tuple/set/frozenset convert to each other, mappings to dict
    check_elements: parameterized collections convert every element too
    models: mappings convert to pydantic models
    """

    numeric: bool = True
    binary: bool = True
    collections: bool = True
    check_elements: bool = True
    models: bool = True

    @classmethod
    def default(cls) -> "ConversionConfig":
        return cls()

    @classmethod
    def strict(cls) -> "ConversionConfig":
        """Only exact instances (and GENERIC / Any positions) are accepted."""
        return cls(numeric=False, binary=False, collections=False, models=False)

    @classmethod
    def field_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.field_names()}
