"""Shared fixtures for proof engine tests."""

import pytest

from ..config import PARAMS_FILE_ENV_VAR
from ..engine import ZKProofEngine
from ..parameters import ProofParameters, get_default_parameters, set_parameters_override
from ..security import RandomnessSource


@pytest.fixture(autouse=True)
def _isolated_parameters(monkeypatch):
    """Keep every test on the built-in parameters unless it opts out."""
    monkeypatch.delenv(PARAMS_FILE_ENV_VAR, raising=False)
    set_parameters_override(None)
    yield
    set_parameters_override(None)


@pytest.fixture
def params() -> ProofParameters:
    """Default group parameters."""
    return get_default_parameters()


@pytest.fixture
def small_params() -> ProofParameters:
    """A different (Mersenne prime) group, for mismatch tests."""
    return ProofParameters(generator=3, modulus=2**127 - 1)


@pytest.fixture
def randomness():
    """Randomness source fixture."""
    return RandomnessSource()


@pytest.fixture
def engine(params) -> ZKProofEngine:
    """Engine bound to the default parameters."""
    return ZKProofEngine(parameters=params)
