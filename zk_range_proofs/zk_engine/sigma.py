"""
⚠️ DRAFT - requires crypto review before production use

Schnorr-style sigma protocol, made non-interactive with Fiat-Shamir.

This is a PROTOTYPE implementation for testing and validation.
DO NOT use in production without security audit.

Protocol (Non-Interactive via Fiat-Shamir):
    Prover knows a witness (value, randomness) such that
        C = G^value * G^randomness = G^x mod P,   x = value + randomness

    1. Check the witness reproduces the statement's commitment C
    2. Generate random blinding k (>= 256 bits)
    3. Compute announcement T = G^k mod P
    4. Compute challenge c = SHA256(public_value || C || T) (hex digest)
    5. Compute response z = (k + c*x) mod (P - 1)
    6. Proof = (c, z, C)

    Verifier:
    1. left  = G^z mod P
    2. right = C^c mod P
    3. T' = left * right^-1 mod P
    4. Accept iff SHA256(public_value || C || T') == c

Security Notes:
    - The response uses the full commitment exponent x. With a single
      generator G the verifier only ever sees G^x, so x is the witness the
      protocol actually proves knowledge of (see commitments.py).
    - The transcript is hashed as plain concatenation of decimal strings,
      no length prefixes. Deployed verifiers recompute exactly this hash.
    - Blinding MUST be fresh per proof; reusing k across two challenges
      reveals x.
"""

import hashlib
from typing import Optional

from .arithmetic import mod_inverse, mod_pow
from .commitments import commitment_exponent, compute_commitment
from .config import CHALLENGE_HEX_LENGTH
from .exceptions import (
    InvalidCommitmentError,
    ProofGenerationError,
    RandomnessError,
)
from .parameters import ProofParameters, get_proof_parameters
from .security import RandomnessSource, constant_time_compare
from .types import Proof, Statement, Witness


# ============================================================================
# CHALLENGE COMPUTATION (Fiat-Shamir Transform)
# ============================================================================


def compute_challenge(
    public_value: int, commitment: str, temp_commitment: int
) -> str:
    """
    Compute the Fiat-Shamir challenge.

    Challenge = SHA-256(str(public_value) || commitment || str(temp_commitment))

    Binds the challenge to:
    - The public bound (a proof for one bound fails against another)
    - The commitment being proven
    - The prover's announcement

    Returns:
        64-char lowercase hex digest
    """
    h = hashlib.sha256()
    h.update(str(public_value).encode("utf-8"))
    h.update(commitment.encode("utf-8"))
    h.update(str(temp_commitment).encode("utf-8"))
    return h.hexdigest()


# ============================================================================
# PROOF GENERATION
# ============================================================================


def generate_proof(
    statement: Statement,
    witness: Witness,
    params: Optional[ProofParameters] = None,
    randomness_source: Optional[RandomnessSource] = None,
) -> Proof:
    """
    Generate a non-interactive proof of knowledge for a statement.

    ⚠️ SECURITY CRITICAL

    Args:
        statement: Public statement (bound + commitment)
        witness: Opening of statement.commitment (kept secret)
        params: Group parameters (resolved if None)
        randomness_source: Source for the blinding (created if None)

    Returns:
        Proof with challenge, response and commitment

    Raises:
        TypeError: If statement or witness have the wrong type
        InvalidCommitmentError: If witness does not open statement.commitment
        RandomnessError: If no secure randomness is available
        ProofGenerationError: For other proof generation failures

    Example:
        >>> commitment, witness = create_commitment(42)
        >>> statement = Statement(public_value=100, commitment=commitment)
        >>> proof = generate_proof(statement, witness)
        >>> assert verify_proof(statement, proof)
    """
    if not isinstance(statement, Statement):
        raise TypeError(f"statement must be Statement, got {type(statement)}")

    if not isinstance(witness, Witness):
        raise TypeError(f"witness must be Witness, got {type(witness)}")

    if params is None:
        params = get_proof_parameters()

    if randomness_source is None:
        randomness_source = RandomnessSource()

    computed_commitment = compute_commitment(witness, params)
    if not constant_time_compare(computed_commitment, statement.commitment):
        raise InvalidCommitmentError("Invalid commitment")

    try:
        # Zero blinding makes z = c*x and leaks the witness
        blinding = randomness_source.get_random_bits()
        while blinding == 0:
            blinding = randomness_source.get_random_bits()

        temp_commitment = mod_pow(params.generator, blinding, params.modulus)

        challenge = compute_challenge(
            statement.public_value, statement.commitment, temp_commitment
        )

        response = (
            blinding + int(challenge, 16) * commitment_exponent(witness, params)
        ) % params.group_order

    except RandomnessError:
        raise
    except (ValueError, ArithmeticError) as e:
        raise ProofGenerationError(
            f"Proof generation failed: {type(e).__name__}"
        ) from e

    return Proof(
        challenge=challenge,
        response=response,
        commitment=statement.commitment,
    )


# ============================================================================
# PROOF VERIFICATION
# ============================================================================


def verify_proof(
    statement: Statement,
    proof: Proof,
    params: Optional[ProofParameters] = None,
) -> bool:
    """
    Verify a proof against a statement.

    Untrusted input never raises: malformed proofs, out-of-group
    commitments and mismatching challenges all return False.

    Args:
        statement: Public statement the proof claims
        proof: Proof to check
        params: Group parameters (resolved if None)

    Returns:
        True if proof is valid, False otherwise
    """
    if not isinstance(statement, Statement) or not isinstance(proof, Proof):
        return False

    if params is None:
        params = get_proof_parameters()

    try:
        # A proof only speaks for the commitment it carries
        if not constant_time_compare(proof.commitment, statement.commitment):
            return False

        if not proof.commitment.isdigit():
            return False
        commitment_int = int(proof.commitment)
        if not (0 < commitment_int < params.modulus):
            return False

        if len(proof.challenge) != CHALLENGE_HEX_LENGTH:
            return False
        challenge_int = int(proof.challenge, 16)

        response = proof.response
        if not isinstance(response, int) or isinstance(response, bool):
            return False
        if not (0 <= response < params.group_order):
            return False

        left_side = mod_pow(params.generator, response, params.modulus)
        right_side = mod_pow(commitment_int, challenge_int, params.modulus)

        computed_temp_commitment = (
            left_side * mod_inverse(right_side, params.modulus)
        ) % params.modulus

        expected_challenge = compute_challenge(
            statement.public_value, statement.commitment, computed_temp_commitment
        )

        return constant_time_compare(expected_challenge, proof.challenge)

    except (TypeError, ValueError, ArithmeticError, AttributeError):
        return False
