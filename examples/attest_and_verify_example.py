#!/usr/bin/env python3
"""Example usage of attested random values."""

from attester import RngAttester, generate
from attester.encoding import to_hex

# Example 1: Attest a random value
print("=== Attestation Example ===")

rng_attester = RngAttester()
print(f"Public key: {to_hex(rng_attester.public_key_bytes())}")

value = generate(32)
attestation = rng_attester.attest(value)

print(f"Value: {to_hex(attestation.value)}")
print(f"Salt: {to_hex(attestation.salt)}")
print(f"Signature: {to_hex(attestation.signature)}")

# Example 2: Verify with the attester's public key
print("\n=== Verification Example ===")

result = RngAttester.verify(rng_attester.public_key(), *attestation)
print(f"Verified with attester key: {result.valid}")

# Example 3: Verification against an unrelated key fails
unrelated = RngAttester()
result = RngAttester.verify(unrelated.public_key(), *attestation)
print(f"Verified with unrelated key: {result.valid} ({result.reason})")
