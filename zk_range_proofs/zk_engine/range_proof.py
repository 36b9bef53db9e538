"""
⚠️ DRAFT - requires crypto review before production use

Range proofs built on the sigma protocol.

A range proof for value in [lower, upper] is a knowledge proof over
    Statement(public_value=upper, commitment=commit(value))

⚠️ KNOWN LIMITATION
    The bound check runs only on the prover's machine. The verifier hashes
    upper into the challenge, so a proof made for one upper bound fails
    against another, but lower never enters the transcript and nothing
    cryptographically forces value <= upper. Verifiers are trusting that
    create_range_proof refused out-of-range values. Treat this as an open
    issue for any security-critical deployment.
"""

from typing import Optional

from .exceptions import OutOfRangeError
from .parameters import ProofParameters, get_proof_parameters
from .security import RandomnessSource
from .sigma import generate_proof, verify_proof
from .commitments import compute_commitment
from .types import Proof, RangeProofResult, Statement, Witness


def _require_int(value, name: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be int, got {type(value)}")


def create_range_proof(
    value: int,
    lower_bound: int,
    upper_bound: int,
    params: Optional[ProofParameters] = None,
    randomness_source: Optional[RandomnessSource] = None,
) -> Proof:
    """
    Prove that a secret value lies in [lower_bound, upper_bound].

    The bound check happens before any cryptographic material exists, so
    an out-of-range value produces no commitment and no proof.

    Args:
        value: Secret value
        lower_bound: Inclusive lower bound
        upper_bound: Inclusive upper bound (hashed into the challenge)
        params: Group parameters (resolved if None)
        randomness_source: Source for randomness (created if None)

    Returns:
        Proof carrying its own commitment

    Raises:
        TypeError: If an argument is not an int
        OutOfRangeError: If value < lower_bound or value > upper_bound

    Example:
        >>> proof = create_range_proof(75000, 50000, 100000)
        >>> verify_range_proof(proof, 50000, 100000)
        True
    """
    _require_int(value, "value")
    _require_int(lower_bound, "lower_bound")
    _require_int(upper_bound, "upper_bound")

    if value < lower_bound or value > upper_bound:
        raise OutOfRangeError(lower_bound, upper_bound)

    if params is None:
        params = get_proof_parameters()

    if randomness_source is None:
        randomness_source = RandomnessSource()

    witness = Witness(
        secret_value=value,
        randomness=randomness_source.get_random_bits(),
    )

    statement = Statement(
        public_value=upper_bound,
        commitment=compute_commitment(witness, params),
    )

    return generate_proof(statement, witness, params, randomness_source)


def try_create_range_proof(
    value: int,
    lower_bound: int,
    upper_bound: int,
    params: Optional[ProofParameters] = None,
    randomness_source: Optional[RandomnessSource] = None,
) -> RangeProofResult:
    """
    Like create_range_proof, but returns the out-of-range outcome as a
    RangeProofResult instead of raising it.

    Type errors and programmer errors still raise.
    """
    try:
        proof = create_range_proof(
            value, lower_bound, upper_bound, params, randomness_source
        )
    except OutOfRangeError as e:
        return RangeProofResult(error=e)
    return RangeProofResult(proof=proof)


def verify_range_proof(
    proof: Proof,
    lower_bound: int,
    upper_bound: int,
    params: Optional[ProofParameters] = None,
) -> bool:
    """
    Verify a range proof.

    lower_bound is accepted for API symmetry but is NOT bound into the
    statement; only upper_bound is checked cryptographically.

    Returns:
        True if proof is valid for upper_bound, False otherwise
    """
    if not isinstance(proof, Proof):
        return False

    if not isinstance(upper_bound, int) or isinstance(upper_bound, bool):
        return False

    statement = Statement(
        public_value=upper_bound,
        commitment=proof.commitment,
    )

    return verify_proof(statement, proof, params)
