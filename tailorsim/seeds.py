"""Source of random 32-bit seeds."""

from __future__ import annotations

import random
from typing import Optional

UINT_MAX = 2**32 - 1


class SeedGenerator:
    """Draws integers uniformly from the full unsigned 32-bit range."""

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = random.SystemRandom().getrandbits(64)
        self._rng = random.Random(seed)

    def get(self) -> int:
        return self._rng.randint(0, UINT_MAX)