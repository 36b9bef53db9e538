"""
⚠️ DRAFT - requires crypto review before production use

Common types for zero-knowledge proofs.

This module provides:
1. Witness - private opening of a commitment (prover only)
2. Statement - public claim about a witness
3. Proof - non-interactive proof artifact with JSON and CBOR encodings
4. RangeProofResult - tagged result for range-proof creation

Integers that cross a process boundary are written as decimal strings.
JSON numbers cannot carry more than 53 bits losslessly, and every group
element here is ~256 bits.
"""

import json
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

try:
    import cbor2
except ImportError:
    raise ImportError(
        "cbor2 is required for proof serialization. "
        "Install with: pip install cbor2"
    )

from .config import CHALLENGE_HEX_LENGTH, PROOF_VERSION
from .exceptions import OutOfRangeError, SerializationError


# ============================================================================
# ENCODING HELPERS
# ============================================================================

_INT_RE = re.compile(r"-?[0-9]+")
_DIGITS_RE = re.compile(r"[0-9]+")
_HEX_RE = re.compile(r"[0-9a-fA-F]{%d}" % CHALLENGE_HEX_LENGTH)


def _decode_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise SerializationError(f"{name} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_RE.fullmatch(value):
        return int(value)
    raise SerializationError(f"{name} must be a decimal integer string")


def _decode_commitment(value: Any) -> str:
    if not isinstance(value, str) or not _DIGITS_RE.fullmatch(value):
        raise SerializationError("commitment must be a decimal string")
    return value


def _decode_challenge(value: Any) -> str:
    if not isinstance(value, str) or not _HEX_RE.fullmatch(value):
        raise SerializationError(
            f"challenge must be a {CHALLENGE_HEX_LENGTH}-char hex string"
        )
    return value.lower()


# ============================================================================
# WITNESS / STATEMENT
# ============================================================================


@dataclass(frozen=True)
class Witness:
    """
    Private opening of a commitment. Never transmitted.

    Both fields are hidden from repr so witnesses don't end up in logs or
    tracebacks by accident.
    """

    secret_value: int = field(repr=False)
    randomness: int = field(repr=False)


@dataclass(frozen=True)
class Statement:
    """
    Public claim being proven about a witness.

    Attributes:
        public_value: Public bound hashed into the challenge
        commitment: Decimal string of the committed group element
    """

    public_value: int
    commitment: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "publicValue": str(self.public_value),
            "commitment": self.commitment,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Statement":
        if not isinstance(data, dict):
            raise SerializationError("statement must be a mapping")
        if "publicValue" not in data or "commitment" not in data:
            raise SerializationError("Invalid statement format: missing fields")
        return cls(
            public_value=_decode_int(data["publicValue"], "publicValue"),
            commitment=_decode_commitment(data["commitment"]),
        )


# ============================================================================
# PROOF
# ============================================================================


@dataclass(frozen=True)
class Proof:
    """
    Non-interactive (Fiat-Shamir) proof of knowledge.

    Attributes:
        challenge: SHA-256 hex digest of the transcript
        response: Prover response in [0, P-2]
        commitment: Decimal string of the committed group element

    Proofs are immutable; verification never mutates them.

    Example:
        >>> data = proof.to_json()
        >>> restored = Proof.from_json(data)
        >>> assert restored == proof
    """

    challenge: str
    response: int
    commitment: str

    @property
    def challenge_int(self) -> int:
        """Challenge as an integer (the hex digest read big-endian)."""
        return int(self.challenge, 16)

    # ========================================================================
    # JSON
    # ========================================================================

    def to_dict(self) -> Dict[str, str]:
        """
        Convert to a JSON-compatible dictionary.

        Returns:
            dict with challenge (hex), response and commitment (decimal)
        """
        return {
            "challenge": self.challenge,
            "response": str(self.response),
            "commitment": self.commitment,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Proof":
        """
        Build a proof from to_dict() output.

        Raises:
            SerializationError: If fields are missing or malformed
        """
        if not isinstance(data, dict):
            raise SerializationError("proof must be a mapping")

        required_keys = {"challenge", "response", "commitment"}
        if not required_keys.issubset(data.keys()):
            missing_keys = required_keys - data.keys()
            raise SerializationError(f"Missing proof keys: {sorted(missing_keys)}")

        response = _decode_int(data["response"], "response")
        if response < 0:
            raise SerializationError("response must be non-negative")

        return cls(
            challenge=_decode_challenge(data["challenge"]),
            response=response,
            commitment=_decode_commitment(data["commitment"]),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)

    @classmethod
    def from_json(cls, data: str) -> "Proof":
        try:
            obj = json.loads(data)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to decode proof JSON: {e}") from e
        return cls.from_dict(obj)

    # ========================================================================
    # SERIALIZATION (CBOR)
    # ========================================================================

    def serialize(self) -> bytes:
        """
        Serialize proof to bytes using CBOR.

        The response is stored as a native CBOR integer (bignum tag when
        it exceeds 64 bits); a version field guards format changes.

        Returns:
            bytes: CBOR-encoded proof
        """
        data = {
            "v": PROOF_VERSION,
            "ch": self.challenge,
            "r": self.response,
            "c": self.commitment,
        }
        return cbor2.dumps(data)

    @classmethod
    def deserialize(cls, data: bytes) -> "Proof":
        """
        Deserialize proof from CBOR bytes.

        Raises:
            SerializationError: If version is unsupported or data is invalid
        """
        try:
            obj = cbor2.loads(data)
        except Exception as e:
            raise SerializationError(f"Failed to deserialize proof: {e}") from e

        if not isinstance(obj, dict):
            raise SerializationError("Invalid proof format: expected a map")

        version = obj.get("v", PROOF_VERSION)
        if version != PROOF_VERSION:
            raise SerializationError(
                f"Unsupported proof version: {version} "
                f"(expected {PROOF_VERSION})"
            )

        if not {"ch", "r", "c"}.issubset(obj.keys()):
            raise SerializationError("Invalid proof format: missing required fields")

        return cls.from_dict(
            {"challenge": obj["ch"], "response": obj["r"], "commitment": obj["c"]}
        )


# ============================================================================
# RANGE PROOF RESULT
# ============================================================================


@dataclass(frozen=True)
class RangeProofResult:
    """
    Either a proof or the OutOfRangeError that prevented it.

    Lets callers branch on `ok` instead of catching exceptions for an
    expected business outcome.

    Example:
        >>> result = engine.try_create_range_proof(40000, 50000, 100000)
        >>> result.ok
        False
        >>> result.error.lower_bound
        50000
    """

    proof: Optional[Proof] = None
    error: Optional[OutOfRangeError] = None

    def __post_init__(self):
        if (self.proof is None) == (self.error is None):
            raise ValueError("exactly one of proof or error must be set")

    @property
    def ok(self) -> bool:
        return self.proof is not None

    def unwrap(self) -> Proof:
        """Return the proof or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.proof
