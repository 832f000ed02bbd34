"""
Cryptographically attested random values.

This package generates random bytes from the operating system's secure
generator and binds them to a fresh salt through a SHA-256 commitment that is
signed with an Ed25519 key, so any holder of the public key can confirm the
value's provenance.
"""

__version__ = "0.1.0"

from .attester import (
    Attestation,
    AttestationVerifier,
    RngAttester,
    SALT_LENGTH,
    VerificationResult,
)
from .commitment import compute_commitment
from .errors import (
    AttesterError,
    ConfigError,
    EntropyUnavailableError,
    InvalidArgumentError,
    KeyGenerationError,
    SigningError,
    VerificationError,
)
from .random_source import RandomSource, generate

__all__ = [
    "Attestation",
    "AttestationVerifier",
    "RngAttester",
    "SALT_LENGTH",
    "VerificationResult",
    "compute_commitment",
    "RandomSource",
    "generate",
    "AttesterError",
    "ConfigError",
    "EntropyUnavailableError",
    "InvalidArgumentError",
    "KeyGenerationError",
    "SigningError",
    "VerificationError",
]
