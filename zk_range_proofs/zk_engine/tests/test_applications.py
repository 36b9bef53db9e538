"""
Tests for the business application wrappers.
"""

import pytest

from ..applications import (
    AgeVerification,
    CreditScoreProof,
    SalaryProof,
    VotingPowerProof,
    ZKApplications,
)
from ..config import MAX_SAFE_INTEGER, SECONDS_PER_YEAR
from ..exceptions import OutOfRangeError, SerializationError
from ..types import Proof

NOW = 1_700_000_000


class FakeClock:
    def __init__(self, now=NOW):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def apps(engine, clock):
    return ZKApplications(engine=engine, clock=clock)


# ============================================================================
# SALARY
# ============================================================================


class TestSalary:
    def test_in_bracket(self, apps):
        sp = apps.create_salary_proof(75000, 50000, 100000)
        assert (sp.lower, sp.upper) == (50000, 100000)
        assert apps.verify_salary_proof(sp)

    def test_below_bracket_refused(self, apps):
        with pytest.raises(OutOfRangeError):
            apps.create_salary_proof(40000, 50000, 100000)

    def test_tampered_upper_rejected(self, apps):
        sp = apps.create_salary_proof(75000, 50000, 100000)
        forged = SalaryProof(proof=sp.proof, lower=50000, upper=80000)
        assert not apps.verify_salary_proof(forged)

    def test_dict_round_trip(self, apps):
        sp = apps.create_salary_proof(75000, 50000, 100000)
        data = sp.to_dict()
        assert data["bounds"] == {"lower": "50000", "upper": "100000"}
        assert SalaryProof.from_dict(data) == sp

    def test_from_dict_missing_bounds(self, apps):
        sp = apps.create_salary_proof(75000, 50000, 100000)
        with pytest.raises(SerializationError):
            SalaryProof.from_dict({"proof": sp.proof.to_dict()})


# ============================================================================
# AGE
# ============================================================================


class TestAge:
    """The window admits birth timestamps from the last minimum_age years."""

    def test_birth_inside_window_passes(self, apps):
        proof = apps.create_age_proof(NOW - 17 * SECONDS_PER_YEAR, 18)
        assert proof.minimum_age == 18
        assert proof.timestamp == NOW
        assert apps.verify_age_proof(proof)

    def test_birth_before_window_refused(self, apps):
        with pytest.raises(OutOfRangeError):
            apps.create_age_proof(NOW - 21 * SECONDS_PER_YEAR, 18)

    def test_window_edges(self, apps):
        assert apps.verify_age_proof(apps.create_age_proof(NOW, 18))
        assert apps.verify_age_proof(
            apps.create_age_proof(NOW - 18 * SECONDS_PER_YEAR, 18)
        )
        with pytest.raises(OutOfRangeError):
            apps.create_age_proof(NOW + 1, 18)

    def test_verifies_later(self, apps, clock):
        proof = apps.create_age_proof(NOW - 10 * SECONDS_PER_YEAR, 18)
        clock.now = NOW + 3600
        assert apps.verify_age_proof(proof)

    def test_max_proof_age(self, apps, clock):
        proof = apps.create_age_proof(NOW - 10 * SECONDS_PER_YEAR, 18)
        clock.now = NOW + 600
        assert apps.verify_age_proof(proof, max_proof_age=3600)
        assert not apps.verify_age_proof(proof, max_proof_age=60)

    def test_future_dated_proof_rejected_with_max_age(self, apps, clock):
        proof = apps.create_age_proof(NOW - 10 * SECONDS_PER_YEAR, 18)
        clock.now = NOW - 10
        assert not apps.verify_age_proof(proof, max_proof_age=3600)

    def test_tampered_timestamp_rejected(self, apps):
        proof = apps.create_age_proof(NOW - 10 * SECONDS_PER_YEAR, 18)
        forged = AgeVerification(
            proof=proof.proof, minimum_age=18, timestamp=NOW + 1
        )
        assert not apps.verify_age_proof(forged)

    def test_minimum_age_must_be_int(self, apps):
        with pytest.raises(TypeError):
            apps.create_age_proof(NOW - 10 * SECONDS_PER_YEAR, 18.0)

    def test_dict_round_trip(self, apps):
        proof = apps.create_age_proof(NOW - 10 * SECONDS_PER_YEAR, 18)
        data = proof.to_dict()
        assert data["minimumAge"] == 18
        assert data["timestamp"] == NOW
        assert AgeVerification.from_dict(data) == proof


# ============================================================================
# CREDIT SCORE
# ============================================================================


class TestCreditScore:
    def test_above_threshold(self, apps):
        cp = apps.create_credit_score_proof(750, 700, "Experian")
        assert cp.institution == "Experian"
        assert apps.verify_credit_score_proof(cp)

    def test_below_threshold_refused(self, apps):
        with pytest.raises(OutOfRangeError):
            apps.create_credit_score_proof(650, 700, "Experian")

    def test_above_max_refused(self, apps):
        with pytest.raises(OutOfRangeError):
            apps.create_credit_score_proof(851, 700, "Experian")

    def test_boundaries(self, apps):
        assert apps.verify_credit_score_proof(
            apps.create_credit_score_proof(700, 700, "Equifax")
        )
        assert apps.verify_credit_score_proof(
            apps.create_credit_score_proof(850, 700, "Equifax")
        )

    def test_dict_round_trip(self, apps):
        cp = apps.create_credit_score_proof(750, 700, "Experian")
        assert CreditScoreProof.from_dict(cp.to_dict()) == cp

    def test_from_dict_bad_institution(self, apps):
        data = apps.create_credit_score_proof(750, 700, "Experian").to_dict()
        data["institution"] = 7
        with pytest.raises(SerializationError):
            CreditScoreProof.from_dict(data)


# ============================================================================
# PROOF OF FUNDS
# ============================================================================


class TestProofOfFunds:
    def test_sufficient_balance(self, apps):
        proof = apps.create_proof_of_funds(100000, 50000)
        assert isinstance(proof, Proof)
        assert apps.verify_proof_of_funds(proof, 50000)

    def test_insufficient_balance_refused(self, apps):
        with pytest.raises(OutOfRangeError):
            apps.create_proof_of_funds(40000, 50000)

    def test_balance_at_safe_integer_limit(self, apps):
        proof = apps.create_proof_of_funds(MAX_SAFE_INTEGER, 50000)
        assert apps.verify_proof_of_funds(proof, 50000)

    def test_balance_above_safe_integer_refused(self, apps):
        with pytest.raises(OutOfRangeError):
            apps.create_proof_of_funds(MAX_SAFE_INTEGER + 1, 50000)


# ============================================================================
# VOTING POWER AND PERFORMANCE
# ============================================================================


class TestVotingPower:
    def test_within_allowance(self, apps):
        vp = apps.create_voting_power_proof(300, 1, 1000)
        assert apps.verify_voting_power_proof(vp)

    def test_exceeds_allowance_refused(self, apps):
        with pytest.raises(OutOfRangeError):
            apps.create_voting_power_proof(1001, 1, 1000)

    def test_different_allowance_rejected(self, apps):
        vp = apps.create_voting_power_proof(300, 1, 1000)
        forged = VotingPowerProof(proof=vp.proof, minimum_power=1, available_power=5000)
        assert not apps.verify_voting_power_proof(forged)

    def test_dict_round_trip(self, apps):
        vp = apps.create_voting_power_proof(300, 1, 1000)
        data = vp.to_dict()
        assert data["availablePower"] == "1000"
        assert VotingPowerProof.from_dict(data) == vp


class TestPerformance:
    def test_meets_target(self, apps):
        proof = apps.create_performance_proof(92, 80)
        assert apps.verify_performance_proof(proof, 80)

    def test_below_target_refused(self, apps):
        with pytest.raises(OutOfRangeError):
            apps.create_performance_proof(70, 80)

    def test_above_scale_refused(self, apps):
        with pytest.raises(OutOfRangeError):
            apps.create_performance_proof(101, 80)


# ============================================================================
# VERIFY NEVER RAISES
# ============================================================================


@pytest.mark.parametrize(
    "method,args",
    [
        ("verify_salary_proof", (None,)),
        ("verify_age_proof", ("not a proof",)),
        ("verify_credit_score_proof", (object(),)),
        ("verify_proof_of_funds", (None, 50000)),
        ("verify_voting_power_proof", ({},)),
        ("verify_performance_proof", ("garbage", "80")),
    ],
)
def test_verify_returns_false_on_garbage(apps, method, args):
    assert getattr(apps, method)(*args) is False


def test_default_engine():
    apps = ZKApplications(clock=FakeClock())
    sp = apps.create_salary_proof(75000, 50000, 100000)
    assert apps.verify_salary_proof(sp)
