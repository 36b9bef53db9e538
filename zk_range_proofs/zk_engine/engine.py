"""
WARNING: DRAFT - requires cryptographic review before production use.

Proof engine facade bound to one set of group parameters.

The engine composes:
- Single-generator commitments for value hiding
- Fiat-Shamir sigma proofs of knowledge of the commitment exponent
- Range proofs on top of the knowledge proofs

Parameters are injected once at construction. Everything that has to
interoperate (provers, verifiers, application wrappers) should share the
same engine, or at least engines built from the same ProofParameters.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple, Union

from .commitments import create_commitment
from .parameters import ProofParameters, get_proof_parameters
from .range_proof import (
    create_range_proof,
    try_create_range_proof,
    verify_range_proof,
)
from .security import RandomnessSource
from .sigma import generate_proof, verify_proof
from .types import Proof, RangeProofResult, Statement, Witness


class ZKProofEngine:
    """
    Stateless prover/verifier over fixed ProofParameters.

    Safe to share across threads: the only state is the immutable
    parameters and a randomness source backed by the OS CSPRNG.

    Example:
        >>> engine = ZKProofEngine()
        >>> proof = engine.create_range_proof(75000, 50000, 100000)
        >>> assert engine.verify_range_proof(proof, 50000, 100000)
    """

    _ENGINE_NAME = "Schnorr+FiatShamir"
    _ENGINE_VERSION = "0.1.0"

    def __init__(
        self,
        parameters: Optional[ProofParameters] = None,
        randomness_source: Optional[RandomnessSource] = None,
    ) -> None:
        """Initialize engine with group parameters and randomness source."""
        if parameters is not None and not isinstance(parameters, ProofParameters):
            raise TypeError(
                f"parameters must be ProofParameters, got {type(parameters)}"
            )
        self.parameters: ProofParameters = parameters or get_proof_parameters()
        self.rng = randomness_source or RandomnessSource()

    @classmethod
    def from_config(
        cls, path: Optional[Union[str, Path]] = None
    ) -> "ZKProofEngine":
        """
        Build an engine from the resolved deployment parameters.

        Args:
            path: Optional YAML parameter file; otherwise the override,
                ZK_PROOF_PARAMS_FILE or built-in defaults apply.
        """
        return cls(parameters=get_proof_parameters(path))

    @property
    def engine_name(self) -> str:
        """Human-readable engine name."""
        return self._ENGINE_NAME

    @property
    def engine_version(self) -> str:
        """Engine implementation version."""
        return self._ENGINE_VERSION

    # ========================================================================
    # COMMITMENTS AND KNOWLEDGE PROOFS
    # ========================================================================

    def create_commitment(self, secret_value: int) -> Tuple[str, Witness]:
        """Commit to secret_value; returns (commitment, witness)."""
        return create_commitment(secret_value, self.parameters, self.rng)

    def generate_proof(self, statement: Statement, witness: Witness) -> Proof:
        """Prove knowledge of witness for statement."""
        return generate_proof(statement, witness, self.parameters, self.rng)

    def verify_proof(self, statement: Statement, proof: Proof) -> bool:
        """Check a proof against a statement; never raises."""
        return verify_proof(statement, proof, self.parameters)

    # ========================================================================
    # RANGE PROOFS
    # ========================================================================

    def create_range_proof(
        self, value: int, lower_bound: int, upper_bound: int
    ) -> Proof:
        """
        Prove value lies in [lower_bound, upper_bound].

        Raises:
            OutOfRangeError: If value is outside the bounds
        """
        return create_range_proof(
            value, lower_bound, upper_bound, self.parameters, self.rng
        )

    def try_create_range_proof(
        self, value: int, lower_bound: int, upper_bound: int
    ) -> RangeProofResult:
        """Range proof as a tagged result instead of OutOfRangeError."""
        return try_create_range_proof(
            value, lower_bound, upper_bound, self.parameters, self.rng
        )

    def verify_range_proof(
        self, proof: Proof, lower_bound: int, upper_bound: int
    ) -> bool:
        """Verify a range proof (only upper_bound is bound cryptographically)."""
        return verify_range_proof(proof, lower_bound, upper_bound, self.parameters)
