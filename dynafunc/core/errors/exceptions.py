# dynafunc/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from . import codes
from ..marker import type_name


class Side(str, Enum):
    """
    Which half of a signature an error refers to.

    - IN: declared parameters (construction time)
    - OUT: declared results
    - CALL: arguments supplied to GenericFunc.call
    """
    IN = "In"
    OUT = "Out"
    CALL = "Call"


def _normalize_error_code(code: Any) -> str:
    """
    Keep error_code stable and finite.
    """
    c = str(code or codes.UNKNOWN).strip() or codes.UNKNOWN
    if c in codes.KNOWN_CODES:
        return c
    return codes.UNKNOWN


@dataclass(eq=False)
class DynaFuncError(Exception):
    """
    Base exception for everything dynafunc raises itself.

    Faults raised by a wrapped callable are never converted into this type.
    """
    message: str
    error_code: str = codes.UNKNOWN
    error_type: str = "DYNAFUNC_ERROR"  # e.g. VALIDATION_ERROR / CALL_ERROR
    phase: str = "unknown"              # construct / validate / call / config
    details: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.error_code = _normalize_error_code(self.error_code)
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.error_type,
            "error_code": self.error_code,
            "message": self.message,
            "phase": self.phase,
            "details": self.details,
        }


class NotAFunctionError(DynaFuncError, TypeError):
    """The value handed to GenericFunc.new cannot be introspected as a function."""

    def __init__(self, value: Any, reason: Optional[str] = None):
        self.value_type = type(value)
        details: Dict[str, Any] = {"value_type": type_name(self.value_type)}
        if reason:
            details["reason"] = reason
        super().__init__(
            message="GenericFunc.New: fn is not a function",
            error_code=codes.NOT_A_FUNCTION,
            error_type="CONSTRUCTION_ERROR",
            phase="construct",
            details=details,
        )


class ArityMismatchError(DynaFuncError):
    """
    Expected and actual counts disagree.

    side=IN/OUT is raised by a validator, side=CALL by GenericFunc.call when the
    number of arguments differs from the number of declared parameters.
    """

    def __init__(
        self,
        side: Side,
        expected: int,
        actual: int,
        message: Optional[str] = None,
        phase: Optional[str] = None,
    ):
        self.side = Side(side)
        self.expected = expected
        self.actual = actual
        if phase is None:
            phase = "call" if self.side is Side.CALL else "validate"
        if message is None:
            if self.side is Side.CALL:
                message = f"GenericFunc.Call: Number of parameters expected: {expected}, actual: {actual}"
            else:
                message = (
                    f"SimpleParamValidator: Number of parameters {self.side.value} "
                    f"expected: {expected}, actual: {actual}"
                )
        super().__init__(
            message=message,
            error_code=codes.ARITY_MISMATCH,
            error_type="CALL_ERROR" if phase == "call" else "VALIDATION_ERROR",
            phase=phase,
            details={"side": self.side.value, "expected": expected, "actual": actual},
        )


class TypeMismatchError(DynaFuncError, TypeError):
    """A non-wildcard expected type differs from the declared one."""

    def __init__(self, side: Side, index: int, expected: Any, actual: Any):
        self.side = Side(side)
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(
            message=(
                f"SimpleParamValidator: parameter {self.side.value}[{index}] "
                f"expected type: {type_name(expected)}, actual type: {type_name(actual)}"
            ),
            error_code=codes.TYPE_MISMATCH,
            error_type="VALIDATION_ERROR",
            phase="validate",
            details={
                "side": self.side.value,
                "index": index,
                "expected": type_name(expected),
                "actual": type_name(actual),
            },
        )


class NotConvertibleError(DynaFuncError, TypeError):
    """
    An argument cannot be converted to its declared parameter type.

    actual_type and declared_type are display names; the descriptors themselves
    are kept on value_type and declared.
    """

    def __init__(self, index: int, value_type: Any, declared: Any, reason: Optional[str] = None):
        self.index = index
        self.value_type = value_type
        self.declared = declared
        self.actual_type = type_name(value_type)
        self.declared_type = type_name(declared)
        details: Dict[str, Any] = {
            "index": index,
            "actual_type": self.actual_type,
            "declared_type": self.declared_type,
        }
        if reason:
            details["reason"] = reason
        super().__init__(
            message=(
                f"GenericFunc.Call: params[{index}] '{self.actual_type}' "
                f"is not convertible to '{self.declared_type}'"
            ),
            error_code=codes.NOT_CONVERTIBLE,
            error_type="CALL_ERROR",
            phase="call",
            details=details,
        )


class ConfigError(DynaFuncError, ValueError):
    """Configuration file or mapping could not be applied."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=codes.INVALID_CONFIG,
            error_type="CONFIG_ERROR",
            phase="config",
            details=details or {},
        )
