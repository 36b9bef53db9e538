"""Public API for the zero-knowledge proof engine.

Typical use:

    from zk_range_proofs.zk_engine import ZKProofEngine

    engine = ZKProofEngine()
    proof = engine.create_range_proof(75000, 50000, 100000)
    assert engine.verify_range_proof(proof, 50000, 100000)
"""
from __future__ import annotations

from .applications import (
    AgeVerification,
    CreditScoreProof,
    SalaryProof,
    VotingPowerProof,
    ZKApplications,
)
from .arithmetic import mod_inverse, mod_pow
from .commitments import compute_commitment, create_commitment
from .engine import ZKProofEngine
from .exceptions import (
    ConfigurationError,
    CryptographicError,
    InvalidCommitmentError,
    OutOfRangeError,
    ProofGenerationError,
    RandomnessError,
    SerializationError,
    ZKProofError,
)
from .parameters import (
    ProofParameters,
    dump_parameters,
    get_default_parameters,
    get_proof_parameters,
    load_parameters,
    set_parameters_override,
)
from .range_proof import (
    create_range_proof,
    try_create_range_proof,
    verify_range_proof,
)
from .sigma import generate_proof, verify_proof
from .types import Proof, RangeProofResult, Statement, Witness

__all__ = [
    "ZKProofEngine",
    "ZKApplications",
    "ProofParameters",
    "get_default_parameters",
    "get_proof_parameters",
    "load_parameters",
    "dump_parameters",
    "set_parameters_override",
    "Witness",
    "Statement",
    "Proof",
    "RangeProofResult",
    "SalaryProof",
    "AgeVerification",
    "CreditScoreProof",
    "VotingPowerProof",
    "mod_pow",
    "mod_inverse",
    "create_commitment",
    "compute_commitment",
    "generate_proof",
    "verify_proof",
    "create_range_proof",
    "try_create_range_proof",
    "verify_range_proof",
    "ZKProofError",
    "OutOfRangeError",
    "ProofGenerationError",
    "InvalidCommitmentError",
    "ConfigurationError",
    "CryptographicError",
    "RandomnessError",
    "SerializationError",
]
