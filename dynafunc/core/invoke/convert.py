# dynafunc/core/invoke/convert.py
"""
Argument conversion for GenericFunc.call

A value is "convertible" to a declared type when one of these rules applies,
tried in order:

1. GENERIC, Any, object           -> accepted as-is
2. Optional / Union               -> exact member first, then first convertible member
3. isinstance(value, declared)    -> accepted as-is
4. numbers (config.numeric)       -> int <-> float <-> Fraction <-> Decimal, any number -> complex
5. binary (config.binary)         -> bytes / bytearray / memoryview -> bytes / bytearray
6. collections (config.collections)
                                  -> list / tuple / set / frozenset between each other,
                                     any Mapping -> dict; elements converted when the
                                     declared type is parameterized (config.check_elements)
7. pydantic models (config.models)-> Mapping -> Model.model_validate(...)
8. unresolved annotation strings  -> matched against the value's class name
9. other typing constructs        -> strict pydantic TypeAdapter (Literal, Annotated, TypedDict...)

Strings never convert to numbers.
"""

from __future__ import annotations

import functools
import math
import types
from collections.abc import Mapping
from decimal import Decimal
from fractions import Fraction
from typing import Annotated, Any, Optional, Tuple, Union, get_args, get_origin

from pydantic import BaseModel, PydanticUserError, TypeAdapter, ValidationError

from dynafunc.config import ConversionConfig

from ..marker import GENERIC

_REALS = (int, float, Fraction, Decimal)
_BINARY = (bytes, bytearray, memoryview)
_SEQUENCES = (list, tuple, set, frozenset)
_NONE = type(None)

class ConversionError(Exception):
    """A value cannot be converted to a declared type. Carries the reason."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)

@functools.lru_cache(maxsize=256)
def _cached_adapter(declared: Any) -> TypeAdapter:
    return TypeAdapter(declared)

def _adapter(declared: Any) -> TypeAdapter:
    try:
        hash(declared)
    except TypeError:
        return TypeAdapter(declared)
    return _cached_adapter(declared)

def _safe_isinstance(value: Any, declared: Any) -> Optional[bool]:
    """isinstance, or None for types that refuse instance checks (TypedDict, Protocol)."""
    try:
        return isinstance(value, declared)
    except TypeError:
        return None

def _is_model(declared: Any) -> bool:
    return isinstance(declared, type) and issubclass(declared, BaseModel)

class Converter:
    """
    Converts call arguments to declared parameter types.

    Stateless apart from its frozen config; safe to share between threads.
    """

    def __init__(self, config: Optional[ConversionConfig] = None):
        self.config = config or ConversionConfig.default()

    def convert(self, value: Any, declared: Any) -> Any:
        """
        Return value converted to declared.

        Raises:
            ConversionError: no rule accepts the value
        """
        if declared is GENERIC or declared is Any or declared is object:
            return value
        if declared is None:
            declared = _NONE
        if isinstance(declared, str):
            return self._convert_named(value, declared)

        origin = get_origin(declared)
        if origin is Annotated:
            return self._convert_with_adapter(value, declared)
        if origin is Union or origin is types.UnionType:
            return self._convert_union(value, get_args(declared))
        if origin in _SEQUENCES or origin is dict:
            return self._convert_collection(value, origin, get_args(declared))

        if origin is None and isinstance(declared, type):
            matched = _safe_isinstance(value, declared)
            if matched:
                return value
            if matched is not None:
                return self._convert_class(value, declared)

        if origin is not None and isinstance(origin, type):
            # Abstract or user generics (Sequence[int], Callable[..., int], type[X])
            if _safe_isinstance(value, origin):
                return value
            raise ConversionError(f"expected an instance of {origin.__qualname__}")

        return self._convert_with_adapter(value, declared)

    # ---- rules ----

    def _convert_class(self, value: Any, declared: type) -> Any:
        cfg = self.config
        if cfg.numeric and (declared in _REALS or declared is complex):
            return self._convert_number(value, declared)
        if cfg.binary and declared in (bytes, bytearray) and isinstance(value, _BINARY):
            return declared(value)
        if cfg.collections and declared in _SEQUENCES and isinstance(value, _SEQUENCES):
            return declared(value)
        if cfg.collections and declared is dict and isinstance(value, Mapping):
            return dict(value)
        if cfg.models and _is_model(declared) and isinstance(value, Mapping):
            try:
                return declared.model_validate(value)
            except ValidationError as e:
                raise ConversionError(f"model validation failed: {e.error_count()} error(s)") from e
        raise ConversionError("no conversion rule applies")

    def _convert_number(self, value: Any, declared: type) -> Any:
        if not isinstance(value, (*_REALS, complex)):
            raise ConversionError("not a number")
        if isinstance(value, complex) and declared is not complex:
            raise ConversionError("complex numbers only convert to complex")
        try:
            if declared in (int, Fraction) and isinstance(value, (float, Decimal)) and not math.isfinite(value):
                raise ConversionError(f"non-finite value {value!r}")
            if declared is Decimal and isinstance(value, Fraction):
                return Decimal(value.numerator) / Decimal(value.denominator)
            return declared(value)
        except (ArithmeticError, TypeError, ValueError) as e:
            raise ConversionError(str(e)) from e

    def _convert_union(self, value: Any, members: Tuple[Any, ...]) -> Any:
        for member in members:
            if isinstance(member, type) and get_origin(member) is None and _safe_isinstance(value, member):
                return value
        reasons = []
        for member in members:
            try:
                return self.convert(value, member)
            except ConversionError as e:
                reasons.append(e.reason)
        raise ConversionError("no union member accepts the value: " + "; ".join(reasons))

    def _convert_collection(self, value: Any, origin: type, args: Tuple[Any, ...]) -> Any:
        cfg = self.config
        if origin is dict:
            if not isinstance(value, Mapping):
                raise ConversionError("expected a mapping")
        elif not isinstance(value, _SEQUENCES):
            raise ConversionError("expected one of list, tuple, set, frozenset")

        same = isinstance(value, origin)
        if not same and not cfg.collections:
            raise ConversionError(f"expected an instance of {origin.__qualname__}")
        if not args or not cfg.check_elements:
            return value if same else origin(value)

        if origin is dict:
            key_type, value_type = args
            return {
                self._element(k, key_type, f"key {k!r}"): self._element(v, value_type, f"[{k!r}]")
                for k, v in value.items()
            }
        if origin is tuple:
            return self._convert_tuple(value, args)
        return origin(self._element(v, args[0], f"element {i}") for i, v in enumerate(value))

    def _convert_tuple(self, value: Any, args: Tuple[Any, ...]) -> tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(self._element(v, args[0], f"element {i}") for i, v in enumerate(value))
        if args == ((),):
            args = ()
        items = list(value)
        if len(items) != len(args):
            raise ConversionError(f"expected {len(args)} elements, got {len(items)}")
        return tuple(self._element(v, t, f"element {i}") for i, (v, t) in enumerate(zip(items, args)))

    def _element(self, value: Any, declared: Any, where: str) -> Any:
        try:
            return self.convert(value, declared)
        except ConversionError as e:
            raise ConversionError(f"{where}: {e.reason}") from e

    def _convert_named(self, value: Any, declared: str) -> Any:
        cls = type(value)
        names = {cls.__name__, cls.__qualname__, f"{cls.__module__}.{cls.__qualname__}"}
        if declared in names:
            return value
        raise ConversionError(f"unresolved annotation {declared!r} does not name {cls.__qualname__}")

    def _convert_with_adapter(self, value: Any, declared: Any) -> Any:
        try:
            return _adapter(declared).validate_python(value, strict=True)
        except ValidationError as e:
            raise ConversionError(f"validation failed: {e.error_count()} error(s)") from e
        except PydanticUserError as e:
            raise ConversionError(f"unsupported type: {e}") from e


__all__ = ["Converter", "ConversionError"]
