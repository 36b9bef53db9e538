"""
⚠️ DRAFT - requires crypto review before production use

Cryptographic configuration for the proof engine.

This is a PROTOTYPE implementation for testing and validation.
DO NOT use in production without security audit.

Group arithmetic is done over the multiplicative group of integers mod a
256-bit prime. Parameters below are the deployment defaults; a deployment
may publish its own through parameters.py, but every prover and verifier
must then share them.
"""

# ============================================================================
# GROUP PARAMETERS
# ============================================================================

# P = 2^256 - 2^32 - 977 (the secp256k1 field prime, reused here as a
# plain multiplicative group modulus)
DEFAULT_MODULUS = (
    115792089237316195423570985008687907853269984665640564039457584007908834671663
)
DEFAULT_GENERATOR = 2
MODULUS_MIN_BITS = 256

# Miller-Rabin rounds used when validating a configured modulus
PRIMALITY_TEST_ROUNDS = 40

# ============================================================================
# HASH FUNCTIONS
# ============================================================================

# For Fiat-Shamir transform (challenge generation)
HASH_FUNCTION = "SHA256"
HASH_OUTPUT_BITS = 256
CHALLENGE_HEX_LENGTH = HASH_OUTPUT_BITS // 4

# ============================================================================
# SECURITY PARAMETERS
# ============================================================================

# Commitment randomness and proof blinding (>= 256 bits of entropy)
RANDOMNESS_BITS = 256

# ============================================================================
# PROOF SERIALIZATION
# ============================================================================

SERIALIZATION_FORMATS = ("json", "cbor")
PROOF_VERSION = 1  # Increment for breaking changes

# ============================================================================
# DOMAIN CONSTANTS
# ============================================================================

CREDIT_SCORE_MAX = 850
PERFORMANCE_SCORE_MAX = 100
MAX_SAFE_INTEGER = 2**53 - 1  # ceiling shared with JSON number consumers
SECONDS_PER_YEAR = 365 * 24 * 60 * 60

# ============================================================================
# ENVIRONMENT
# ============================================================================

PARAMS_FILE_ENV_VAR = "ZK_PROOF_PARAMS_FILE"

# ============================================================================
# VALIDATION
# ============================================================================


def validate_config() -> bool:
    """
    Validate configuration parameters.

    Returns:
        True if configuration is valid

    Raises:
        AssertionError: If configuration is invalid
    """
    assert RANDOMNESS_BITS >= 256, "Randomness too small"
    assert HASH_FUNCTION == "SHA256", "Invalid hash function"
    assert 1 < DEFAULT_GENERATOR < DEFAULT_MODULUS, "Generator outside group"
    assert DEFAULT_MODULUS.bit_length() >= MODULUS_MIN_BITS, "Modulus too small"
    assert CHALLENGE_HEX_LENGTH == 64, "SHA-256 hex digest must be 64 chars"
    assert CREDIT_SCORE_MAX > 0, "Invalid credit score ceiling"
    assert PERFORMANCE_SCORE_MAX > 0, "Invalid performance ceiling"

    return True


# Auto-validate on import
validate_config()
