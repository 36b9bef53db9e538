"""
Tests for range proofs.

Covers completeness, prover-side range enforcement, upper-bound binding,
the tagged-result entry point and the documented lower-bound limitation.
"""

from unittest import mock

import pytest

from .. import range_proof as range_proof_module
from ..exceptions import OutOfRangeError
from ..range_proof import (
    create_range_proof,
    try_create_range_proof,
    verify_range_proof,
)
from ..types import Proof


# ============================================================================
# COMPLETENESS
# ============================================================================


def test_salary_scenario(params, randomness):
    """75000 in [50000, 100000] verifies."""
    proof = create_range_proof(75000, 50000, 100000, params, randomness)
    assert verify_range_proof(proof, 50000, 100000, params) is True


@pytest.mark.parametrize(
    "value,lower,upper",
    [
        (50000, 50000, 100000),
        (100000, 50000, 100000),
        (0, 0, 0),
        (-10, -20, -5),
        (2**100, 0, 2**128),
    ],
)
def test_completeness_including_bounds(params, randomness, value, lower, upper):
    proof = create_range_proof(value, lower, upper, params, randomness)
    assert verify_range_proof(proof, lower, upper, params)


def test_uses_default_parameters():
    proof = create_range_proof(5, 0, 10)
    assert verify_range_proof(proof, 0, 10)


# ============================================================================
# RANGE ENFORCEMENT
# ============================================================================


@pytest.mark.parametrize(
    "value,lower,upper",
    [
        (40000, 50000, 100000),
        (100001, 50000, 100000),
        (5, 10, 0),
    ],
)
def test_out_of_range_raises(params, value, lower, upper):
    with pytest.raises(OutOfRangeError) as exc_info:
        create_range_proof(value, lower, upper, params)

    assert exc_info.value.lower_bound == lower
    assert exc_info.value.upper_bound == upper


def test_out_of_range_message_hides_value(params):
    with pytest.raises(OutOfRangeError) as exc_info:
        create_range_proof(40000, 50000, 100000, params)
    assert "40000" not in str(exc_info.value)
    assert "Value out of range" in str(exc_info.value)


def test_out_of_range_produces_no_crypto(params):
    """The bound check runs before any proof material is generated."""
    with mock.patch.object(range_proof_module, "generate_proof") as gen:
        with pytest.raises(OutOfRangeError):
            create_range_proof(40000, 50000, 100000, params)
    gen.assert_not_called()


@pytest.mark.parametrize("args", [(1.5, 0, 10), (1, "0", 10), (1, 0, None)])
def test_non_int_arguments_raise(params, args):
    with pytest.raises(TypeError):
        create_range_proof(*args, params=params)


# ============================================================================
# SOUNDNESS
# ============================================================================


def test_different_upper_bound_fails(params, randomness):
    proof = create_range_proof(75000, 50000, 100000, params, randomness)
    assert not verify_range_proof(proof, 50000, 100001, params)
    assert not verify_range_proof(proof, 50000, 99999, params)


def test_lower_bound_not_bound(params, randomness):
    """
    Documented limitation: the lower bound never enters the transcript,
    so a verifier with a different lower bound still accepts.
    """
    proof = create_range_proof(75000, 50000, 100000, params, randomness)
    assert verify_range_proof(proof, 90000, 100000, params)


def test_verify_never_raises(params):
    assert verify_range_proof(None, 0, 10, params) is False
    assert verify_range_proof("proof", 0, 10, params) is False


def test_verify_non_int_upper_bound(params, randomness):
    proof = create_range_proof(5, 0, 10, params, randomness)
    assert verify_range_proof(proof, 0, "10", params) is False


# ============================================================================
# TAGGED RESULT
# ============================================================================


def test_try_create_ok(params, randomness):
    result = try_create_range_proof(75000, 50000, 100000, params, randomness)
    assert result.ok
    assert isinstance(result.proof, Proof)
    assert verify_range_proof(result.unwrap(), 50000, 100000, params)


def test_try_create_out_of_range(params, randomness):
    result = try_create_range_proof(40000, 50000, 100000, params, randomness)
    assert not result.ok
    assert result.proof is None
    assert isinstance(result.error, OutOfRangeError)
    assert result.error.lower_bound == 50000


def test_try_create_still_raises_type_errors(params):
    with pytest.raises(TypeError):
        try_create_range_proof(1.5, 0, 10, params)
