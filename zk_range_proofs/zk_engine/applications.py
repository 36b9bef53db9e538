"""
Business applications of range proofs.

Each wrapper turns a business predicate into a range proof with fixed
bounds and gives back a small typed record the caller can ship to a
verifier:

    salary bracket      value in [lower, upper]
    age threshold       birth timestamp in [now - min_age years, now]
    credit score        score in [threshold, 850]
    proof of funds      balance in [minimum, 2^53 - 1]
    voting power        vote amount in [minimum_power, available_power]
    performance score   score in [target, 100]

create_* raises OutOfRangeError when the real value does not satisfy the
claim. verify_* returns a bool and never raises.

⚠️ KNOWN LIMITATION (age threshold)
    The age window is [now - minimum_age years, now], which admits birth
    timestamps from the LAST minimum_age years. As written it proves a
    person is at most minimum_age years old, not at least.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .config import (
    CREDIT_SCORE_MAX,
    MAX_SAFE_INTEGER,
    PERFORMANCE_SCORE_MAX,
    SECONDS_PER_YEAR,
)
from .engine import ZKProofEngine
from .exceptions import SerializationError, ZKProofError
from .types import Proof

# verify_* swallow only these; anything else is a bug and propagates
_VERIFY_ERRORS = (ZKProofError, TypeError, ValueError, AttributeError)


def _int_field(data: Dict[str, Any], key: str) -> int:
    try:
        value = data[key]
    except KeyError as e:
        raise SerializationError(f"Missing field {key!r}") from e
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise SerializationError(f"{key} must be an integer")
    try:
        return int(value)
    except ValueError as e:
        raise SerializationError(f"{key} must be an integer") from e


def _proof_field(data: Dict[str, Any]) -> Proof:
    if not isinstance(data, dict) or "proof" not in data:
        raise SerializationError("Missing field 'proof'")
    return Proof.from_dict(data["proof"])


# ============================================================================
# PROOF RECORDS
# ============================================================================


@dataclass(frozen=True)
class SalaryProof:
    """Proof that a salary lies within [lower, upper]."""

    proof: Proof
    lower: int
    upper: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "proof": self.proof.to_dict(),
            "bounds": {"lower": str(self.lower), "upper": str(self.upper)},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SalaryProof":
        proof = _proof_field(data)
        bounds = data.get("bounds")
        if not isinstance(bounds, dict):
            raise SerializationError("Missing field 'bounds'")
        return cls(
            proof=proof,
            lower=_int_field(bounds, "lower"),
            upper=_int_field(bounds, "upper"),
        )


@dataclass(frozen=True)
class AgeVerification:
    """
    Proof that a birth timestamp satisfies a minimum age.

    `timestamp` is the creation time the bounds were derived from; the
    verifier rebuilds the same bounds from it.
    """

    proof: Proof
    minimum_age: int
    timestamp: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "proof": self.proof.to_dict(),
            "minimumAge": self.minimum_age,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AgeVerification":
        proof = _proof_field(data)
        return cls(
            proof=proof,
            minimum_age=_int_field(data, "minimumAge"),
            timestamp=_int_field(data, "timestamp"),
        )


@dataclass(frozen=True)
class CreditScoreProof:
    """Proof that a credit score is at least `threshold`."""

    proof: Proof
    threshold: int
    institution: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "proof": self.proof.to_dict(),
            "threshold": self.threshold,
            "institution": self.institution,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CreditScoreProof":
        proof = _proof_field(data)
        institution = data.get("institution")
        if not isinstance(institution, str):
            raise SerializationError("institution must be a string")
        return cls(
            proof=proof,
            threshold=_int_field(data, "threshold"),
            institution=institution,
        )


@dataclass(frozen=True)
class VotingPowerProof:
    """Proof that a vote amount is within the voter's allowed power."""

    proof: Proof
    minimum_power: int
    available_power: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "proof": self.proof.to_dict(),
            "minimumPower": str(self.minimum_power),
            "availablePower": str(self.available_power),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VotingPowerProof":
        proof = _proof_field(data)
        return cls(
            proof=proof,
            minimum_power=_int_field(data, "minimumPower"),
            available_power=_int_field(data, "availablePower"),
        )


# ============================================================================
# APPLICATIONS
# ============================================================================


class ZKApplications:
    """
    Typed range-proof wrappers for common business checks.

    Args:
        engine: Shared proof engine. Provers and verifiers must use
            engines built from the same ProofParameters.
        clock: Returns the current Unix time in seconds (injectable for
            tests).

    Example:
        >>> apps = ZKApplications()
        >>> sp = apps.create_salary_proof(75000, 50000, 100000)
        >>> apps.verify_salary_proof(sp)
        True
    """

    def __init__(
        self,
        engine: Optional[ZKProofEngine] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.engine = engine or ZKProofEngine()
        self._clock = clock

    def _now(self) -> int:
        return int(self._clock())

    # ========================================================================
    # SALARY
    # ========================================================================

    def create_salary_proof(
        self, actual_salary: int, lower_bound: int, upper_bound: int
    ) -> SalaryProof:
        """
        Prove a salary is within a bracket without revealing it.

        Raises:
            OutOfRangeError: If the salary is outside the bracket
        """
        proof = self.engine.create_range_proof(
            actual_salary, lower_bound, upper_bound
        )
        return SalaryProof(proof=proof, lower=lower_bound, upper=upper_bound)

    def verify_salary_proof(self, salary_proof: SalaryProof) -> bool:
        try:
            return self.engine.verify_range_proof(
                salary_proof.proof, salary_proof.lower, salary_proof.upper
            )
        except _VERIFY_ERRORS:
            return False

    # ========================================================================
    # AGE
    # ========================================================================

    def create_age_proof(
        self, actual_birth_timestamp: int, minimum_age: int
    ) -> AgeVerification:
        """
        Prove a birth timestamp falls inside the age window.

        Bounds are [now - minimum_age * 365 days, now]: the birth
        timestamp must be recent enough to fall in that window (see the
        module notes; this admits ages up to minimum_age, not above).

        Raises:
            OutOfRangeError: If the birth timestamp is outside the window
        """
        if not isinstance(minimum_age, int) or isinstance(minimum_age, bool):
            raise TypeError(f"minimum_age must be int, got {type(minimum_age)}")

        now = self._now()
        minimum_birth_timestamp = now - minimum_age * SECONDS_PER_YEAR

        proof = self.engine.create_range_proof(
            actual_birth_timestamp, minimum_birth_timestamp, now
        )
        return AgeVerification(proof=proof, minimum_age=minimum_age, timestamp=now)

    def verify_age_proof(
        self, age_proof: AgeVerification, max_proof_age: Optional[int] = None
    ) -> bool:
        """
        Verify an age proof.

        Args:
            age_proof: Proof record from create_age_proof
            max_proof_age: If set, reject proofs created more than this many
                seconds ago (or dated in the future).
        """
        try:
            created = age_proof.timestamp
            if max_proof_age is not None:
                age = self._now() - created
                if age < 0 or age > max_proof_age:
                    return False

            minimum_birth_timestamp = (
                created - age_proof.minimum_age * SECONDS_PER_YEAR
            )
            return self.engine.verify_range_proof(
                age_proof.proof, minimum_birth_timestamp, created
            )
        except _VERIFY_ERRORS:
            return False

    # ========================================================================
    # CREDIT SCORE
    # ========================================================================

    def create_credit_score_proof(
        self, actual_score: int, threshold: int, institution: str
    ) -> CreditScoreProof:
        """
        Prove a credit score is at least threshold (max 850).

        Raises:
            OutOfRangeError: If the score is below threshold or above 850
        """
        proof = self.engine.create_range_proof(
            actual_score, threshold, CREDIT_SCORE_MAX
        )
        return CreditScoreProof(
            proof=proof, threshold=threshold, institution=institution
        )

    def verify_credit_score_proof(self, credit_proof: CreditScoreProof) -> bool:
        try:
            return self.engine.verify_range_proof(
                credit_proof.proof, credit_proof.threshold, CREDIT_SCORE_MAX
            )
        except _VERIFY_ERRORS:
            return False

    # ========================================================================
    # PROOF OF FUNDS
    # ========================================================================

    def create_proof_of_funds(
        self, actual_balance: int, minimum_required: int
    ) -> Proof:
        """
        Prove a balance is at least minimum_required.

        Raises:
            OutOfRangeError: If the balance is below the minimum (or above
                MAX_SAFE_INTEGER)
        """
        return self.engine.create_range_proof(
            actual_balance, minimum_required, MAX_SAFE_INTEGER
        )

    def verify_proof_of_funds(self, proof: Proof, minimum_required: int) -> bool:
        try:
            return self.engine.verify_range_proof(
                proof, minimum_required, MAX_SAFE_INTEGER
            )
        except _VERIFY_ERRORS:
            return False

    # ========================================================================
    # VOTING POWER
    # ========================================================================

    def create_voting_power_proof(
        self, amount: int, minimum_power: int, available_power: int
    ) -> VotingPowerProof:
        """
        Prove a private vote amount is within the voter's allowance.

        Raises:
            OutOfRangeError: If amount < minimum_power or > available_power
        """
        proof = self.engine.create_range_proof(
            amount, minimum_power, available_power
        )
        return VotingPowerProof(
            proof=proof,
            minimum_power=minimum_power,
            available_power=available_power,
        )

    def verify_voting_power_proof(self, voting_proof: VotingPowerProof) -> bool:
        try:
            return self.engine.verify_range_proof(
                voting_proof.proof,
                voting_proof.minimum_power,
                voting_proof.available_power,
            )
        except _VERIFY_ERRORS:
            return False

    # ========================================================================
    # PERFORMANCE SCORE
    # ========================================================================

    def create_performance_proof(self, actual_score: int, target: int) -> Proof:
        """
        Prove a performance score (0-100) meets a target.

        Raises:
            OutOfRangeError: If the score is below target or above 100
        """
        return self.engine.create_range_proof(
            actual_score, target, PERFORMANCE_SCORE_MAX
        )

    def verify_performance_proof(self, proof: Proof, target: int) -> bool:
        try:
            return self.engine.verify_range_proof(
                proof, target, PERFORMANCE_SCORE_MAX
            )
        except _VERIFY_ERRORS:
            return False
