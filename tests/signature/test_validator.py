# tests/signature/test_validator.py
"""
Signature validation tests

Tests cover:
1. Arity checks (inputs, outputs, skipped sides)
2. Exact type checks and the GENERIC wildcard
3. Check order (arity before types, inputs before outputs)
4. elem_types() sample derivation
"""

from typing import Any, ForwardRef, Optional

import pytest

from dynafunc import (
    GENERIC,
    ArityMismatchError,
    Side,
    TypeMismatchError,
    elem_types,
    extract,
    simple_param_validator,
)
from dynafunc.core.errors import codes


def is_big(item: int) -> bool:
    return item > 10


def pair(idx: int, item: int) -> None:
    pass


def any_of(*items: int) -> bool:
    return False


def describe(values: list[int], label: str) -> str:
    return f"{label}: {values}"


class TestArity:
    def test_matching_signature_passes(self):
        validate = simple_param_validator(elem_types(int), elem_types(bool))

        assert validate(extract(is_big)) is None

    def test_too_few_expected_inputs(self):
        validate = simple_param_validator(elem_types(int), [])

        with pytest.raises(ArityMismatchError) as exc_info:
            validate(extract(pair))

        err = exc_info.value
        assert err.side is Side.IN
        assert err.expected == 1
        assert err.actual == 2
        assert err.error_code == codes.ARITY_MISMATCH
        assert err.message == "SimpleParamValidator: Number of parameters In expected: 1, actual: 2"

    def test_output_count_mismatch(self):
        validate = simple_param_validator(elem_types(int), [])

        with pytest.raises(ArityMismatchError) as exc_info:
            validate(extract(is_big))

        err = exc_info.value
        assert err.side is Side.OUT
        assert err.expected == 0
        assert err.actual == 1
        assert err.message == "SimpleParamValidator: Number of parameters Out expected: 0, actual: 1"

    def test_none_skips_a_side(self):
        # Outputs unchecked, inputs checked
        assert simple_param_validator(elem_types(int, int), None)(extract(pair)) is None
        assert simple_param_validator(None, elem_types(bool))(extract(is_big)) is None
        assert simple_param_validator()(extract(describe)) is None

    def test_empty_sequence_means_zero(self):
        def nothing() -> None:
            pass

        assert simple_param_validator([], [])(extract(nothing)) is None

    def test_arity_reported_before_type(self):
        # Position 0 also disagrees, but the count is reported
        validate = simple_param_validator(elem_types(str), None)

        with pytest.raises(ArityMismatchError):
            validate(extract(pair))


class TestTypes:
    def test_variadic_element_type_mismatch(self):
        validate = simple_param_validator(elem_types(tuple[bool, ...]), elem_types(bool))

        with pytest.raises(TypeMismatchError) as exc_info:
            validate(extract(any_of))

        err = exc_info.value
        assert err.side is Side.IN
        assert err.index == 0
        assert err.expected == tuple[bool, ...]
        assert err.actual == tuple[int, ...]
        assert err.error_code == codes.TYPE_MISMATCH
        assert err.message == (
            "SimpleParamValidator: parameter In[0] expected type: tuple[bool, ...], "
            "actual type: tuple[int, ...]"
        )

    def test_output_type_mismatch(self):
        validate = simple_param_validator(elem_types(tuple[int, ...]), elem_types(float))

        with pytest.raises(TypeMismatchError) as exc_info:
            validate(extract(any_of))

        err = exc_info.value
        assert err.side is Side.OUT
        assert err.index == 0
        assert err.expected is float
        assert err.actual is bool

    def test_exact_identity_required(self):
        # bool is a subclass of int and int converts to float; neither is accepted here
        with pytest.raises(TypeMismatchError):
            simple_param_validator(elem_types(float), None)(extract(is_big))
        with pytest.raises(TypeMismatchError):
            simple_param_validator(elem_types(int, bool), None)(extract(pair))

    def test_reports_first_mismatching_position(self):
        validate = simple_param_validator(elem_types(list[int], int), None)

        with pytest.raises(TypeMismatchError) as exc_info:
            validate(extract(describe))

        assert exc_info.value.index == 1

    def test_inputs_checked_before_outputs(self):
        validate = simple_param_validator(elem_types(str), elem_types(str))

        with pytest.raises(TypeMismatchError) as exc_info:
            validate(extract(is_big))

        assert exc_info.value.side is Side.IN

    def test_validator_is_reusable(self):
        validate = simple_param_validator(elem_types(int), elem_types(bool))

        def is_small(item: int) -> bool:
            return item < 10

        validate(extract(is_big))
        validate(extract(is_small))
        with pytest.raises(ArityMismatchError):
            validate(extract(pair))


class TestWildcard:
    def test_wildcard_matches_any_declared_type(self):
        validate = simple_param_validator(elem_types(GENERIC, str), elem_types(GENERIC))

        assert validate(extract(describe)) is None

    @pytest.mark.parametrize("fn", [is_big, any_of, lambda x: x])
    def test_wildcard_matches_every_single_parameter_function(self, fn):
        assert simple_param_validator(elem_types(GENERIC), None)(extract(fn)) is None

    def test_wildcard_does_not_relax_other_positions(self):
        validate = simple_param_validator(elem_types(GENERIC, int), None)

        with pytest.raises(TypeMismatchError) as exc_info:
            validate(extract(describe))

        assert exc_info.value.index == 1


class TestElemTypes:
    def test_types_stand_for_themselves(self):
        assert elem_types(int, bool) == (int, bool)
        assert elem_types(tuple[int, ...]) == (tuple[int, ...],)
        assert elem_types(Optional[int], Any) == (Optional[int], Any)

    def test_values_stand_for_their_type(self):
        assert elem_types(3, "x", 1.5, [1]) == (int, str, float, list)

    def test_none_sample(self):
        assert elem_types(None) == (type(None),)

    def test_wildcard_sample(self):
        types = elem_types(GENERIC)

        assert types[0] is GENERIC

    def test_forward_ref_sample(self):
        assert elem_types(ForwardRef("MissingType")) == ("MissingType",)

    def test_no_samples(self):
        assert elem_types() == ()


class TestNoneAnnotation:
    def test_none_parameter_matches_none_sample(self):
        def takes_none(value: None) -> None:
            pass

        validate = simple_param_validator(elem_types(None), [])

        assert validate(extract(takes_none)) is None

    def test_none_parameter_mismatch_names_both_types(self):
        def takes_none(value: None) -> None:
            pass

        with pytest.raises(TypeMismatchError) as exc_info:
            simple_param_validator(elem_types(int), None)(extract(takes_none))

        assert exc_info.value.message.endswith("expected type: int, actual type: None")
