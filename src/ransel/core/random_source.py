"""Random range generator for ransel.

One RandomRange is created per run by the CLI driver and handed to the
selector, so every draw in a run comes from a single generator that was
seeded exactly once.
"""

from __future__ import annotations

import logging
import random

from ransel.shared.constants import SelectionDefaults

logger = logging.getLogger(__name__)


class RandomRange:
    """Uniform integer source over inclusive ranges.

    Not suitable for anything security related.

    Args:
        seed: Explicit seed for reproducible runs. When omitted the generator
            is seeded from the operating system's entropy source.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = random.SystemRandom().getrandbits(64)
        self._generator = random.Random(seed)  # noqa: S311
        logger.debug("Random generator initialized")

    def urand(self, low: int, high: int) -> int:
        """Return an integer uniformly distributed over [low, high].

        Raises:
            ValueError: If low is greater than high
        """
        if low > high:
            error_msg = f"Empty range [{low}, {high}]"
            raise ValueError(error_msg)
        return self._generator.randint(low, high)

    def random_name(self, length: int = SelectionDefaults.DESTINATION_NAME_LENGTH) -> str:
        """Return a string of `length` random lowercase ASCII letters."""
        first = ord(SelectionDefaults.NAME_ALPHABET_FIRST)
        last = ord(SelectionDefaults.NAME_ALPHABET_LAST)
        return "".join(chr(self.urand(first, last)) for _ in range(length))
