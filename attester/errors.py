"""Exception types raised by the attestation core and its driver."""

from typing import Optional


class AttesterError(Exception):
    """Base class for all attester errors."""
    pass


class InvalidArgumentError(AttesterError, ValueError):
    """Caller supplied an out-of-range or wrongly typed parameter."""
    pass


class EntropyUnavailableError(AttesterError):
    """The operating system's secure random generator could not be read."""
    pass


class KeyGenerationError(AttesterError):
    """Signing keypair could not be generated; the attester is unusable."""
    pass


class SigningError(AttesterError):
    """The signing primitive failed on a valid key and message."""
    pass


class VerificationError(AttesterError):
    """Attestation signature did not validate."""

    def __init__(self, reason: Optional[str] = None):
        self.reason = reason or "invalid signature"
        super().__init__(f"Signature verification failed: {self.reason}")


class ConfigError(AttesterError):
    """Configuration validation error."""
    pass
