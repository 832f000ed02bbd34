"""Shared pytest fixtures for all tests."""

import os

import pytest

from attester import RngAttester, generate


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: end-to-end tests")


@pytest.fixture
def rng_attester():
    """Create a fresh attester with its own keypair."""
    return RngAttester()


@pytest.fixture
def other_attester():
    """Create an unrelated attester."""
    return RngAttester()


@pytest.fixture
def random_value():
    """Generate a 32-byte random value."""
    return generate(32)


@pytest.fixture
def attestation(rng_attester, random_value):
    """Attest the sample random value."""
    return rng_attester.attest(random_value)


@pytest.fixture
def config_file(tmp_path):
    """Write a sample YAML configuration file."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "random:\n"
        "  length: 16\n"
        "run:\n"
        "  count: 2\n"
        "output:\n"
        "  format: text\n"
    )
    return path


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch):
    """Reset environment variables before each test."""
    for name in ("ATTESTER_RANDOM_LENGTH", "ATTESTER_RUN_COUNT", "ATTESTER_OUTPUT_FORMAT"):
        monkeypatch.delenv(name, raising=False)

    original_env = dict(os.environ)

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def flip_bit():
    """Return a helper that flips one bit in a copy of some bytes."""

    def _flip(data: bytes, index: int, bit: int = 0) -> bytes:
        mutated = bytearray(data)
        mutated[index] ^= 1 << bit
        return bytes(mutated)

    return _flip
