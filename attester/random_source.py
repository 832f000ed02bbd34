"""Secure random byte generation backed by the operating system."""

import logging
import os

from .errors import EntropyUnavailableError, InvalidArgumentError

logger = logging.getLogger(__name__)


class RandomSource:
    """Produces unpredictable bytes suitable for security use.

    Holds no state; every call reads directly from the OS CSPRNG so there is
    nothing to inspect or seed from outside.
    """

    def generate(self, length: int) -> bytes:
        """
        Generate ``length`` cryptographically secure random bytes.

        Args:
            length: Number of bytes to produce (must be a positive integer)

        Returns:
            Random bytes of exactly ``length`` bytes

        Raises:
            InvalidArgumentError: If length is not a positive integer
            EntropyUnavailableError: If the OS random source cannot be read
        """
        if isinstance(length, bool) or not isinstance(length, int):
            raise InvalidArgumentError(
                f"Length must be an integer, got {type(length).__name__}"
            )
        if length <= 0:
            raise InvalidArgumentError("Length must be a positive integer.")

        try:
            data = os.urandom(length)
        except (NotImplementedError, OSError) as e:
            raise EntropyUnavailableError(
                f"Secure random source unavailable: {e}"
            ) from e

        logger.debug("Generated %d random bytes", length)
        return data


_default_source = RandomSource()


def generate(length: int) -> bytes:
    """Generate random bytes using the default source."""
    return _default_source.generate(length)
