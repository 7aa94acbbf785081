# dynafunc/core/invoke/invoker.py
"""
GenericFunc - validated, type-checked wrapper around a callable

Lifecycle:
1. GenericFunc.new(fn, validator): extract signature -> validate -> wrapper
2. wrapper.call(*params): check arity -> convert arguments -> call -> box results

Nothing here catches exceptions raised by the wrapped callable; they reach the
caller unchanged.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from dynafunc.config import DynaFuncConfig

from ..errors import ArityMismatchError, DynaFuncError, NotConvertibleError, Side
from ..marker import GENERIC, type_name
from ..signature import FunctionCache, Validator, extract
from .convert import ConversionError, Converter

logger = logging.getLogger(__name__)

_P = inspect.Parameter


@dataclass(frozen=True)
class GenericFunc:
    """
    Ready-to-call handle for one validated callable.

    Create it with GenericFunc.new(); the signature is read and validated once
    and cached on `cache`. Instances hold no mutable state, so one wrapper can be
    called repeatedly and from several threads.

    The dataclass constructor is internal: GenericFunc(cache=...) skips
    validation and is only called by new().

    Example:
        >>> def triple(i: int) -> int:
        ...     return i * 3
        >>> fn = GenericFunc.new(triple, simple_param_validator(elem_types(GENERIC), elem_types(int)))
        >>> fn.call(3)
        [9]
    """
    cache: FunctionCache
    config: DynaFuncConfig = field(default_factory=DynaFuncConfig.default)
    _converter: Converter = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_converter", Converter(self.config.conversion))

    @classmethod
    def new(
        cls,
        fn: Any,
        validator: Validator,
        config: Optional[DynaFuncConfig] = None,
    ) -> "GenericFunc":
        """
        Wrap fn after validating its signature.

        Args:
            fn: Any callable (function, method, class, callable instance, partial)
            validator: Called with the FunctionCache; raises to reject fn
            config: Conversion settings used by call(); defaults when omitted

        Raises:
            NotAFunctionError: fn is not a callable with a readable signature
            ArityMismatchError / TypeMismatchError: raised by the validator
        """
        cache = extract(fn)
        try:
            validator(cache)
        except DynaFuncError as e:
            logger.debug("Rejected %s: %s", cache.name, e)
            raise

        logger.debug(
            "Wrapped %s: in=(%s) out=(%s)",
            cache.name,
            ", ".join(type_name(t) for t in cache.types_in),
            ", ".join(type_name(t) for t in cache.types_out),
        )
        return cls(cache=cache, config=config or DynaFuncConfig.default())

    def call(self, *params: Any) -> List[Any]:
        """
        Call the wrapped function with one argument per declared parameter.

        A *args parameter takes one sequence argument, a **kwargs parameter one
        mapping argument; keyword-only parameters are passed by name.

        Returns:
            One value per declared result: [] for `-> None`, [value] for a single
            result, the unpacked items for `-> tuple[A, B, ...]`

        Raises:
            ArityMismatchError: wrong number of arguments (side=CALL), or a
                tuple result of the wrong length (side=OUT)
            NotConvertibleError: an argument does not convert to its declared type;
                the wrapped function is not called
        """
        cache = self.cache
        if len(params) != cache.num_in:
            raise ArityMismatchError(Side.CALL, expected=cache.num_in, actual=len(params))

        converted = [
            self._convert(i, value, declared)
            for i, (value, declared) in enumerate(zip(params, cache.types_in))
        ]
        args, kwargs = self._bind(converted)
        result = cache.fn_value(*args, **kwargs)
        return self._box(result)

    __call__ = call

    # ---- helpers ----

    def _convert(self, index: int, value: Any, declared: Any) -> Any:
        if declared is GENERIC:
            return value
        try:
            return self._converter.convert(value, declared)
        except ConversionError as e:
            raise NotConvertibleError(index, type(value), declared, reason=e.reason) from e

    def _bind(self, values: Sequence[Any]) -> Tuple[List[Any], Dict[str, Any]]:
        args: List[Any] = []
        kwargs: Dict[str, Any] = {}
        for kind, name, value in zip(self.cache.kinds, self.cache.names, values):
            if kind is _P.VAR_POSITIONAL:
                args.extend(value)
            elif kind is _P.VAR_KEYWORD:
                kwargs.update(value)
            elif kind is _P.KEYWORD_ONLY:
                kwargs[name] = value
            else:
                args.append(value)
        return args, kwargs

    def _box(self, result: Any) -> List[Any]:
        num_out = self.cache.num_out
        if num_out == 0:
            return []
        if num_out == 1:
            return [result]

        try:
            values = list(result)
        except TypeError:
            values = [result]
        if len(values) != num_out:
            raise ArityMismatchError(
                Side.OUT,
                expected=num_out,
                actual=len(values),
                message=f"GenericFunc.Call: Number of results expected: {num_out}, actual: {len(values)}",
                phase="call",
            )
        return values


__all__ = ["GenericFunc"]
