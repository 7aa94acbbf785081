# dynafunc/core/signature/validator.py
"""
Signature Validator - checks a FunctionCache against an expected signature

Expected signatures are plain sequences of type descriptors, usually built with
elem_types(). GENERIC at a position accepts whatever the function declares there.
"""

from __future__ import annotations

from typing import Any, Callable, ForwardRef, Optional, Sequence, Tuple, get_origin

from ..errors import ArityMismatchError, Side, TypeMismatchError
from ..marker import GENERIC
from .extractor import FunctionCache

Validator = Callable[[FunctionCache], None]


def _check_side(side: Side, expected: Tuple[Any, ...], actual: Tuple[Any, ...]) -> None:
    # Arity first: a length mismatch is never reported as a type error
    if len(expected) != len(actual):
        raise ArityMismatchError(side, expected=len(expected), actual=len(actual))
    for i, want in enumerate(expected):
        if want is GENERIC:
            continue
        if want != actual[i]:
            raise TypeMismatchError(side, index=i, expected=want, actual=actual[i])


def simple_param_validator(
    types_in: Optional[Sequence[Any]] = None,
    types_out: Optional[Sequence[Any]] = None,
) -> Validator:
    """
    Create a validator comparing declared parameter and result types.

    Args:
        types_in: Expected parameter descriptors; None skips the check,
            an empty sequence requires a function without parameters
        types_out: Expected result descriptors, same rules

    Returns:
        validate(cache) raising ArityMismatchError or TypeMismatchError on the
        first mismatch (inputs before outputs), returning None otherwise

    Example:
        >>> def is_big(item: int) -> bool:
        ...     return item > 10
        >>> validate = simple_param_validator(elem_types(int), elem_types(bool))
        >>> fn = GenericFunc.new(is_big, validate)
    """
    expected_in = tuple(types_in) if types_in is not None else None
    expected_out = tuple(types_out) if types_out is not None else None

    def validate(cache: FunctionCache) -> None:
        if expected_in is not None:
            _check_side(Side.IN, expected_in, cache.types_in)
        if expected_out is not None:
            _check_side(Side.OUT, expected_out, cache.types_out)

    return validate


def _is_descriptor(sample: Any) -> bool:
    if sample is GENERIC or isinstance(sample, type):
        return True
    if get_origin(sample) is not None:
        return True
    # Any, NoReturn, TypeVar, NewType and friends
    return type(sample).__module__ == "typing"


def elem_types(*samples: Any) -> Tuple[Any, ...]:
    """
    Derive type descriptors from samples, one per sample.

    A sample that already is a type descriptor stands for itself
    (int, tuple[bool, ...], Optional[str], GENERIC). Any other sample stands
    for its own type, so elem_types(int) == elem_types(0) == (int,).
    ForwardRef("Name") stands for an annotation that could not be resolved.
    """
    types = []
    for sample in samples:
        if isinstance(sample, ForwardRef):
            types.append(sample.__forward_arg__)
        elif _is_descriptor(sample):
            types.append(sample)
        else:
            types.append(type(sample))
    return tuple(types)


__all__ = ["Validator", "simple_param_validator", "elem_types"]
