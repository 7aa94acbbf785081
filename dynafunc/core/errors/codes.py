# dynafunc/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"
INVALID_CONFIG: Final[str] = "INVALID_CONFIG"

# construction
NOT_A_FUNCTION: Final[str] = "NOT_A_FUNCTION"

# signature validation / call
ARITY_MISMATCH: Final[str] = "ARITY_MISMATCH"
TYPE_MISMATCH: Final[str] = "TYPE_MISMATCH"
NOT_CONVERTIBLE: Final[str] = "NOT_CONVERTIBLE"


# ---- semantic groups (internal helpers) ----

# Raised while building a wrapper; no wrapper exists afterwards.
CONSTRUCTION_CODES: Final[set[str]] = {
    NOT_A_FUNCTION,
    ARITY_MISMATCH,
    TYPE_MISMATCH,
}

# Raised by GenericFunc.call before the wrapped callable runs.
CALL_CODES: Final[set[str]] = {
    ARITY_MISMATCH,
    NOT_CONVERTIBLE,
}

KNOWN_CODES: Final[set[str]] = {
    UNKNOWN,
    INVALID_CONFIG,
    *CONSTRUCTION_CODES,
    *CALL_CODES,
}
