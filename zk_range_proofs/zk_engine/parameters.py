"""
⚠️ DRAFT - requires crypto review before production use

Group parameters shared by every prover and verifier of a deployment.

Parameters are resolved in precedence order:
    1. An explicit ProofParameters / file path handed to the caller
    2. In-memory override (testing only, see set_parameters_override)
    3. YAML file named by the ZK_PROOF_PARAMS_FILE environment variable
    4. Built-in defaults from config.py

Mismatched parameters between prover and verifier do not raise; they just
make every verification fail. Publish one parameter file per deployment.

YAML format:

    modulus: "115792089237316195423570985008687907853269984665640564039457584007908834671663"
    generator: 2
"""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .arithmetic import is_probable_prime
from .config import DEFAULT_GENERATOR, DEFAULT_MODULUS, PARAMS_FILE_ENV_VAR
from .exceptions import ConfigurationError


# ============================================================================
# PROOF PARAMETERS
# ============================================================================


@dataclass(frozen=True)
class ProofParameters:
    """
    Multiplicative group Z*_P with a fixed generator G.

    Attributes:
        generator: G, with 1 < G < P
        modulus: P, a prime

    Group operations are mod P; exponent arithmetic is mod P - 1.

    Raises:
        ConfigurationError: If the invariants do not hold
    """

    generator: int
    modulus: int

    def __post_init__(self):
        for name in ("generator", "modulus"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(
                    f"{name} must be int, got {type(value)}"
                )

        if self.modulus <= 3:
            raise ConfigurationError(f"modulus too small: {self.modulus}")

        if not (1 < self.generator < self.modulus):
            raise ConfigurationError(
                f"generator must satisfy 1 < G < P, got G={self.generator}"
            )

        if not is_probable_prime(self.modulus):
            raise ConfigurationError("modulus is not prime")

    @property
    def group_order(self) -> int:
        """Exponent modulus (P - 1)."""
        return self.modulus - 1

    def to_dict(self) -> Dict[str, str]:
        """Decimal-string encoding, safe for JSON and YAML."""
        return {
            "generator": str(self.generator),
            "modulus": str(self.modulus),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProofParameters":
        """
        Build parameters from a mapping of ints or int strings.

        Strings may be decimal or 0x-prefixed hex.
        """
        if not isinstance(data, dict):
            raise ConfigurationError("parameters must be a mapping")

        missing = {"generator", "modulus"} - data.keys()
        if missing:
            raise ConfigurationError(f"Missing parameter keys: {sorted(missing)}")

        return cls(
            generator=_parse_int(data["generator"], "generator"),
            modulus=_parse_int(data["modulus"], "modulus"),
        )


def _parse_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip().replace("_", "")
        try:
            return int(text, 16) if text.lower().startswith("0x") else int(text)
        except ValueError as e:
            raise ConfigurationError(f"{name} is not an integer: {value!r}") from e
    raise ConfigurationError(f"{name} must be int or str, got {type(value)}")


# ============================================================================
# LOADING
# ============================================================================


def load_parameters(path: Union[str, Path]) -> ProofParameters:
    """
    Load parameters from a YAML file.

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except OSError as e:
        raise ConfigurationError(f"Cannot read parameter file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    return ProofParameters.from_dict(data)


def dump_parameters(params: ProofParameters, path: Union[str, Path]) -> None:
    """Write parameters to a YAML file in the format load_parameters reads."""
    with Path(path).open("w", encoding="utf-8") as fh:
        yaml.safe_dump(params.to_dict(), fh, sort_keys=True)


# ============================================================================
# RESOLUTION
# ============================================================================

_parameters_override: Optional[ProofParameters] = None

_DEFAULT_PARAMS_CACHE: Optional[ProofParameters] = None
_CACHE_LOCK = threading.Lock()


def get_default_parameters() -> ProofParameters:
    """
    Get cached built-in parameters (validated once per process).

    Thread-safe using double-checked locking.
    """
    global _DEFAULT_PARAMS_CACHE

    if _DEFAULT_PARAMS_CACHE is not None:
        return _DEFAULT_PARAMS_CACHE

    with _CACHE_LOCK:
        if _DEFAULT_PARAMS_CACHE is None:
            _DEFAULT_PARAMS_CACHE = ProofParameters(
                generator=DEFAULT_GENERATOR, modulus=DEFAULT_MODULUS
            )

    return _DEFAULT_PARAMS_CACHE


def get_proof_parameters(
    prefer: Optional[Union[ProofParameters, str, Path]] = None,
) -> ProofParameters:
    """
    Resolve parameters in precedence order.

    Args:
        prefer: Optional ProofParameters instance or YAML file path.

    Returns:
        ProofParameters for this deployment.

    Raises:
        ConfigurationError: If a provided source is invalid.
    """
    if isinstance(prefer, ProofParameters):
        return prefer

    if prefer is not None and prefer != "":
        return load_parameters(prefer)

    if _parameters_override is not None:
        return _parameters_override

    env_path = os.getenv(PARAMS_FILE_ENV_VAR)
    if env_path:
        return load_parameters(env_path)

    return get_default_parameters()


def set_parameters_override(value: Optional[ProofParameters]) -> None:
    """
    Set in-memory parameter override (testing only).

    Args:
        value: Parameters to force, or None to clear the override.
    """
    global _parameters_override

    if value is not None and not isinstance(value, ProofParameters):
        raise ConfigurationError(
            f"override must be ProofParameters, got {type(value)}"
        )
    _parameters_override = value
