"""Attester: signs salted commitments to random values and verifies them."""

import hashlib
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional, Union

try:
    from cryptography.exceptions import InvalidSignature
    from cryptography.hazmat.primitives import serialization
    from cryptography.hazmat.primitives.asymmetric import ed25519
except ImportError as e:
    raise ImportError(
        "cryptography library not found. Install with: pip install cryptography>=41.0.0"
    ) from e

from .commitment import compute_commitment
from .errors import (
    InvalidArgumentError,
    KeyGenerationError,
    SigningError,
    VerificationError,
)
from .random_source import RandomSource

logger = logging.getLogger(__name__)

SALT_LENGTH = 32
SIGNATURE_LENGTH = 64
PUBLIC_KEY_LENGTH = 32
BYTES_TYPES = (bytes, bytearray, memoryview)

PublicKeyLike = Union[ed25519.Ed25519PublicKey, bytes]


@dataclass(frozen=True)
class Attestation:
    """Random value, its salt, and the signature over their commitment."""

    value: bytes
    salt: bytes
    signature: bytes

    def __iter__(self) -> Iterator[bytes]:
        """Unpack as ``(value, salt, signature)``."""
        return iter((self.value, self.salt, self.signature))


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of verifying an attestation."""

    valid: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.valid

    def raise_for_failure(self) -> None:
        """
        Raise if verification failed.

        Raises:
            VerificationError: With the failure reason
        """
        if not self.valid:
            raise VerificationError(self.reason)


def public_key_to_bytes(public_key: ed25519.Ed25519PublicKey) -> bytes:
    """Export an Ed25519 public key as 32 raw bytes."""
    return public_key.public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )


def compute_key_id(public_key: PublicKeyLike) -> str:
    """
    Compute a short key ID from a public key.

    Args:
        public_key: Ed25519 public key or its raw bytes

    Returns:
        First 16 hex chars of the SHA256 hash of the raw key bytes
    """
    if isinstance(public_key, ed25519.Ed25519PublicKey):
        public_key = public_key_to_bytes(public_key)
    return hashlib.sha256(public_key).hexdigest()[:16]


class AttestationVerifier(ABC):
    """Capabilities available without access to the signing key."""

    __slots__ = ()

    @abstractmethod
    def public_key(self) -> ed25519.Ed25519PublicKey:
        """Get the verification key."""
        pass

    @staticmethod
    @abstractmethod
    def verify(
        public_key: PublicKeyLike, value: bytes, salt: bytes, signature: bytes
    ) -> VerificationResult:
        """
        Verify an attestation against a public key.

        Args:
            public_key: Verification key (object or 32 raw bytes)
            value: Attested random value
            salt: Salt returned by attest
            signature: Signature returned by attest

        Returns:
            VerificationResult, truthy if the signature is valid
        """
        pass


class RngAttester(AttestationVerifier):
    """Holds an Ed25519 identity and attests random values with it.

    The signing key is created at construction, never changes, and has no
    accessor. Instances refuse to be copied or pickled.
    """

    __slots__ = ("__signing_key", "_public_key", "_random_source")

    def __init__(self, random_source: Optional[RandomSource] = None):
        """
        Generate a fresh signing keypair.

        Args:
            random_source: Source for salts (defaults to the OS-backed source)

        Raises:
            KeyGenerationError: If the keypair cannot be generated
        """
        try:
            signing_key = ed25519.Ed25519PrivateKey.generate()
        except Exception as e:
            raise KeyGenerationError(f"Failed to generate signing key: {e}") from e

        self.__signing_key = signing_key
        self._public_key = signing_key.public_key()
        self._random_source = random_source or RandomSource()

        logger.debug("Generated Ed25519 key %s", compute_key_id(self._public_key))

    def __repr__(self) -> str:
        return f"<RngAttester key_id={compute_key_id(self._public_key)}>"

    def __copy__(self):
        raise TypeError("RngAttester cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("RngAttester cannot be copied")

    def __reduce_ex__(self, protocol):
        raise TypeError("RngAttester cannot be serialized")

    def public_key(self) -> ed25519.Ed25519PublicKey:
        """Get the verification key."""
        return self._public_key

    def public_key_bytes(self) -> bytes:
        """Get the verification key as 32 raw bytes."""
        return public_key_to_bytes(self._public_key)

    def attest(self, value: bytes) -> Attestation:
        """
        Commit to a random value with a fresh salt and sign the commitment.

        Args:
            value: Random value to attest (non-empty bytes)

        Returns:
            Attestation holding the unchanged value, the salt and the signature

        Raises:
            InvalidArgumentError: If value is not non-empty bytes
            EntropyUnavailableError: If the salt cannot be generated
            SigningError: If the signing primitive fails
        """
        if not isinstance(value, BYTES_TYPES):
            raise InvalidArgumentError(
                f"Value must be bytes, got {type(value).__name__}"
            )
        if len(value) == 0:
            raise InvalidArgumentError("Value must not be empty.")

        salt = self._random_source.generate(SALT_LENGTH)
        commitment = compute_commitment(value, salt)

        try:
            signature = self.__signing_key.sign(commitment)
        except Exception as e:
            raise SigningError(f"Failed to sign commitment: {e}") from e

        logger.debug(
            "Attested %d-byte value with key %s",
            len(value),
            compute_key_id(self._public_key),
        )
        return Attestation(value=value, salt=salt, signature=signature)

    @staticmethod
    def verify(
        public_key: PublicKeyLike, value: bytes, salt: bytes, signature: bytes
    ) -> VerificationResult:
        """
        Verify an attestation against a public key.

        Recomputes ``sha256(value || salt)`` and checks the Ed25519 signature
        over it. Malformed keys and signatures yield a failed result rather
        than an exception.

        Args:
            public_key: Verification key (object or 32 raw bytes)
            value: Attested random value
            salt: Salt returned by attest
            signature: Signature returned by attest

        Returns:
            VerificationResult, truthy if the signature is valid
        """
        if not isinstance(public_key, ed25519.Ed25519PublicKey):
            if not isinstance(public_key, BYTES_TYPES):
                return VerificationResult(
                    False, f"invalid public key type: {type(public_key).__name__}"
                )
            try:
                public_key = ed25519.Ed25519PublicKey.from_public_bytes(
                    bytes(public_key)
                )
            except ValueError as e:
                return VerificationResult(False, f"invalid public key: {e}")

        for name, field in (("value", value), ("salt", salt), ("signature", signature)):
            if not isinstance(field, BYTES_TYPES):
                return VerificationResult(
                    False, f"invalid {name} type: {type(field).__name__}"
                )

        if len(signature) != SIGNATURE_LENGTH:
            return VerificationResult(
                False,
                f"invalid signature length: expected {SIGNATURE_LENGTH}, "
                f"got {len(signature)}",
            )

        commitment = compute_commitment(value, salt)

        try:
            public_key.verify(bytes(signature), commitment)
        except InvalidSignature as e:
            reason = str(e) or "invalid signature"
            logger.debug(
                "Verification failed for key %s: %s", compute_key_id(public_key), reason
            )
            return VerificationResult(False, reason)

        logger.debug("Verification succeeded for key %s", compute_key_id(public_key))
        return VerificationResult(True)
