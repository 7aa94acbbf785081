# dynafunc/core/signature/extractor.py
"""
Signature Extractor - builds the cached signature of a callable

The record is built once, when a GenericFunc is created, and never mutated:
- types_in:  one descriptor per parameter, in declaration order
- types_out: one descriptor per result

Parameter descriptors:
    x: T          -> T
    x             -> typing.Any
    *args: T      -> tuple[T, ...]
    **kwargs: T   -> dict[str, T]

Result descriptors:
    -> None           -> ()
    -> tuple[A, B]    -> (A, B)       (fixed length only)
    -> T              -> (T,)
    (no annotation)   -> (typing.Any,)
"""

from __future__ import annotations

import functools
import inspect
import logging
import sys
from dataclasses import dataclass
from typing import Any, Callable, Tuple, get_args, get_origin

from ..errors import NotAFunctionError

logger = logging.getLogger(__name__)

_P = inspect.Parameter

# Raised while evaluating an annotation string ("Missing", "int | 'Node'")
_UNRESOLVED = (NameError, SyntaxError, AttributeError, TypeError)


@dataclass(frozen=True)
class FunctionCache:
    """
    Immutable signature record of one callable.

    Attributes:
        fn_value: The callable itself
        fn_type: Its inspect.Signature (the overall type descriptor)
        types_in: Parameter descriptors, declaration order
        types_out: Result descriptors
        kinds: inspect.Parameter kind per entry of types_in
        names: Parameter name per entry of types_in
        name: Qualified name, for diagnostics
    """
    fn_value: Callable[..., Any]
    fn_type: inspect.Signature
    types_in: Tuple[Any, ...]
    types_out: Tuple[Any, ...]
    kinds: Tuple[Any, ...]
    names: Tuple[str, ...]
    name: str

    @property
    def num_in(self) -> int:
        return len(self.types_in)

    @property
    def num_out(self) -> int:
        return len(self.types_out)


def _callable_name(fn: Any) -> str:
    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    if name is None:
        name = type(fn).__qualname__
    return name


def _namespace(fn: Any) -> dict:
    target = inspect.unwrap(fn) if not isinstance(fn, functools.partial) else fn.func
    globalns = getattr(target, "__globals__", None)
    if globalns is None:
        module = sys.modules.get(getattr(target, "__module__", None) or "")
        globalns = vars(module) if module is not None else {}
    return globalns


def _resolve(annotation: Any, globalns: dict) -> Any:
    if not isinstance(annotation, str):
        return annotation
    try:
        return eval(annotation, globalns, None)
    except _UNRESOLVED:
        # Left as the annotation string; compared by name at call time
        return annotation


def _read_signature(fn: Callable[..., Any]) -> inspect.Signature:
    try:
        return inspect.signature(fn, eval_str=True)
    except _UNRESOLVED:
        logger.debug("Unresolved annotations on %s, resolving one by one", _callable_name(fn))

    signature = inspect.signature(fn)
    globalns = _namespace(fn)
    params = [
        p.replace(annotation=_resolve(p.annotation, globalns))
        for p in signature.parameters.values()
    ]
    return signature.replace(
        parameters=params,
        return_annotation=_resolve(signature.return_annotation, globalns),
    )


def _param_descriptor(param: inspect.Parameter) -> Any:
    annotation = Any if param.annotation is _P.empty else param.annotation
    if annotation is None:
        annotation = type(None)
    if param.kind is _P.VAR_POSITIONAL:
        return tuple[annotation, ...]
    if param.kind is _P.VAR_KEYWORD:
        return dict[str, annotation]
    return annotation


def _result_descriptors(fn: Any, signature: inspect.Signature) -> Tuple[Any, ...]:
    # A class "returns" an instance of itself, whatever __init__ declares
    if inspect.isclass(fn):
        return (fn,)
    annotation = signature.return_annotation
    if annotation is inspect.Signature.empty:
        return (Any,)
    if annotation is None or annotation is type(None):
        return ()
    if get_origin(annotation) is tuple:
        args = get_args(annotation)
        if args and Ellipsis not in args and args != ((),):
            return tuple(args)
    return (annotation,)


def extract(fn: Any) -> FunctionCache:
    """
    Build the signature record for fn.

    Raises:
        NotAFunctionError: fn is not callable, or its signature cannot be read
    """
    if not callable(fn):
        raise NotAFunctionError(fn)

    try:
        signature = _read_signature(fn)
    except (TypeError, ValueError) as e:
        raise NotAFunctionError(fn, reason=f"Unable to inspect signature: {e}") from e

    params = list(signature.parameters.values())
    return FunctionCache(
        fn_value=fn,
        fn_type=signature,
        types_in=tuple(_param_descriptor(p) for p in params),
        types_out=_result_descriptors(fn, signature),
        kinds=tuple(p.kind for p in params),
        names=tuple(p.name for p in params),
        name=_callable_name(fn),
    )


__all__ = ["FunctionCache", "extract"]
