"""
⚠️ DRAFT - requires crypto review before production use

Commitments over Z*_P.

This is a PROTOTYPE implementation for testing and validation.
DO NOT use in production without security audit.

Commitment:
    C = G^value * G^randomness mod P

⚠️ KNOWN DEVIATION FROM PEDERSEN
    Both factors use the SAME generator G. A textbook Pedersen commitment
    is G^value * H^randomness with an independent H whose discrete log
    relative to G is unknown. With a single generator, C only fixes the
    sum (value + randomness) mod (P - 1), so the commitment is not binding
    on value alone. The construction is kept as-is because provers and
    verifiers already in deployment compute exactly this group element;
    switching to two generators changes every commitment and proof.
"""

from typing import Optional, Tuple

from .arithmetic import mod_pow
from .exceptions import CryptographicError
from .parameters import ProofParameters, get_proof_parameters
from .security import RandomnessSource, constant_time_compare
from .types import Witness


# ============================================================================
# COMMITMENT OPERATIONS
# ============================================================================


def commitment_exponent(witness: Witness, params: ProofParameters) -> int:
    """
    Discrete log of the commitment to base G, i.e. (value + randomness)
    reduced mod P - 1.
    """
    return (witness.secret_value + witness.randomness) % params.group_order


def compute_commitment(
    witness: Witness, params: Optional[ProofParameters] = None
) -> str:
    """
    Compute the commitment for a witness.

    Exponents are reduced mod P - 1 before exponentiation (G^(P-1) = 1),
    so negative values such as pre-1970 timestamps commit fine.

    Args:
        witness: Opening (secret_value, randomness)
        params: Group parameters (resolved if None)

    Returns:
        Decimal string of the group element

    Raises:
        TypeError: If the witness fields are not ints
    """
    if params is None:
        params = get_proof_parameters()

    if not isinstance(witness, Witness):
        raise TypeError(f"witness must be Witness, got {type(witness)}")

    for name in ("secret_value", "randomness"):
        value = getattr(witness, name)
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{name} must be int, got {type(value)}")

    order = params.group_order
    part1 = mod_pow(params.generator, witness.secret_value % order, params.modulus)
    part2 = mod_pow(params.generator, witness.randomness % order, params.modulus)

    return str((part1 * part2) % params.modulus)


def create_commitment(
    secret_value: int,
    params: Optional[ProofParameters] = None,
    randomness_source: Optional[RandomnessSource] = None,
) -> Tuple[str, Witness]:
    """
    Commit to a secret value with fresh randomness.

    ⚠️ SECURITY CRITICAL

    The randomness MUST be:
    - Drawn from the OS CSPRNG (>= 256 bits)
    - Fresh for each commitment
    - Kept secret by the prover

    Args:
        secret_value: Integer to commit to
        params: Group parameters (resolved if None)
        randomness_source: Source for the randomness (created if None)

    Returns:
        Tuple of (commitment, witness):
            - commitment: Decimal string of the group element
            - witness: Opening to keep on the prover side

    Raises:
        TypeError: If secret_value is not an int
        RandomnessError: If no secure randomness is available

    Example:
        >>> commitment, witness = create_commitment(42)
        >>> assert compute_commitment(witness) == commitment
    """
    if not isinstance(secret_value, int) or isinstance(secret_value, bool):
        raise TypeError(f"secret_value must be int, got {type(secret_value)}")

    if params is None:
        params = get_proof_parameters()

    if randomness_source is None:
        randomness_source = RandomnessSource()

    witness = Witness(
        secret_value=secret_value,
        randomness=randomness_source.get_random_bits(),
    )

    commitment = compute_commitment(witness, params)
    if commitment == "0":
        # Impossible for a prime modulus; guards against bad parameters
        raise CryptographicError("Commitment collapsed to zero")

    return commitment, witness


def verify_commitment(
    commitment: str,
    witness: Witness,
    params: Optional[ProofParameters] = None,
) -> bool:
    """
    Check that a witness opens a commitment (constant-time comparison).

    Returns False rather than raising for malformed witnesses.
    """
    try:
        expected = compute_commitment(witness, params)
    except TypeError:
        return False
    if not isinstance(commitment, str):
        return False
    return constant_time_compare(expected, commitment)
