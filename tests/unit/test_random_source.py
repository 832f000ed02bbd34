"""Unit tests for random_source.py module."""

import pytest

from attester.errors import EntropyUnavailableError, InvalidArgumentError
from attester.random_source import RandomSource, generate


class TestGenerate:
    """Tests for random byte generation."""

    @pytest.mark.parametrize("length", [1, 32, 1024])
    def test_returns_exact_length(self, length):
        """Test generated value has exactly the requested length."""
        value = generate(length)

        assert isinstance(value, bytes)
        assert len(value) == length

    def test_zero_length_rejected(self):
        """Test zero-length request fails with InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="positive integer"):
            generate(0)

    def test_negative_length_rejected(self):
        """Test negative length fails with InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            generate(-5)

    @pytest.mark.parametrize("length", [1.5, "32", None, True])
    def test_non_integer_length_rejected(self, length):
        """Test non-integer lengths are rejected."""
        with pytest.raises(InvalidArgumentError, match="must be an integer"):
            generate(length)

    def test_invalid_argument_is_value_error(self):
        """Test InvalidArgumentError can be caught as ValueError."""
        with pytest.raises(ValueError):
            generate(0)

    def test_calls_do_not_collide(self):
        """Test repeated calls produce distinct values."""
        values = {generate(32) for _ in range(50)}

        assert len(values) == 50

    def test_uses_os_random_source(self, mocker):
        """Test bytes are read from os.urandom."""
        mock_urandom = mocker.patch(
            "attester.random_source.os.urandom", return_value=b"\x01" * 8
        )

        assert RandomSource().generate(8) == b"\x01" * 8
        mock_urandom.assert_called_once_with(8)

    def test_entropy_unavailable(self, mocker):
        """Test missing OS random source raises EntropyUnavailableError."""
        mocker.patch(
            "attester.random_source.os.urandom",
            side_effect=NotImplementedError("no source"),
        )

        with pytest.raises(EntropyUnavailableError, match="no source"):
            generate(16)

    def test_entropy_os_error(self, mocker):
        """Test OSError from the random source is wrapped."""
        mocker.patch(
            "attester.random_source.os.urandom", side_effect=OSError("read failed")
        )

        with pytest.raises(EntropyUnavailableError) as exc_info:
            RandomSource().generate(16)

        assert isinstance(exc_info.value.__cause__, OSError)
