"""
zk_range_proofs - zero-knowledge range proofs over Z*_P

Commitments, Fiat-Shamir sigma proofs and range proofs for proving numeric
facts (salary bracket, age threshold, credit score, balance minimum,
voting weight) without revealing the underlying value.

⚠️  PROTOTYPE - NOT AUDITED, NOT PRODUCTION READY
"""

import sys

from .zk_engine import (
    OutOfRangeError,
    Proof,
    ProofParameters,
    ZKApplications,
    ZKProofEngine,
)

__version__ = "0.1.0"

DISCLAIMER = (
    "⚠️  zk_range_proofs is a prototype. The commitment uses a single "
    "generator and range bounds are only enforced by the prover. "
    "Do not rely on it for security-critical decisions."
)


def print_disclaimer(file=None) -> None:
    """Print the prototype disclaimer (to stderr by default)."""
    print(DISCLAIMER, file=file or sys.stderr)


__all__ = [
    "ZKProofEngine",
    "ZKApplications",
    "ProofParameters",
    "Proof",
    "OutOfRangeError",
    "print_disclaimer",
    "__version__",
]
