"""Hash commitment binding a random value to its salt."""

import hashlib

HASH_ALGORITHM = "sha256"
DIGEST_SIZE = hashlib.sha256().digest_size


def compute_commitment(value: bytes, salt: bytes) -> bytes:
    """
    Compute the commitment digest ``sha256(value || salt)``.

    Signing and verification both go through this function, so the ordering
    of value and salt is the same on both paths.

    Args:
        value: Random value bytes
        salt: Salt bytes

    Returns:
        32-byte SHA-256 digest
    """
    digest = hashlib.sha256()
    digest.update(bytes(value))
    digest.update(bytes(salt))
    return digest.digest()
