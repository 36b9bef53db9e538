"""
⚠️ DRAFT - requires crypto review before production use

Custom exceptions for the proof engine.

Expected business failures (a value outside the claimed range) and
programmer errors (a witness that does not open the statement) get their
own types so callers can tell them apart. A proof that simply does not
verify is NOT an exception: verifiers return False.
"""


class ZKProofError(Exception):
    """Base exception for proof engine errors."""

    pass


class OutOfRangeError(ZKProofError):
    """
    Secret value violates the declared bounds at proof-creation time.

    Only the bounds are kept on the exception; the secret value is never
    echoed back in the message.
    """

    def __init__(self, lower_bound: int, upper_bound: int):
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound
        super().__init__(
            f"Value out of range [{lower_bound}, {upper_bound}]"
        )


class ProofGenerationError(ZKProofError):
    """Error during proof generation."""

    pass


class InvalidCommitmentError(ProofGenerationError):
    """Witness does not reproduce the statement's commitment."""

    pass


class ConfigurationError(ZKProofError):
    """Group parameters or configuration are invalid."""

    pass


class CryptographicError(ZKProofError):
    """Cryptographic operation error."""

    pass


class RandomnessError(CryptographicError):
    """No cryptographically secure randomness source is available."""

    pass


class SerializationError(ZKProofError):
    """Proof or statement could not be encoded or decoded."""

    pass
