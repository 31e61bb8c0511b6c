"""Random per-object identifiers.

Identifiers are version-4 UUID strings embedded in workspace and destination
paths. Passing a seeded :class:`random.Random` makes the sequence
reproducible; without one the operating system's entropy pool is used.
"""

from __future__ import annotations

import random
import uuid
from typing import Optional

__all__ = ["default_rng", "new_identifier"]


def default_rng() -> random.Random:
    """Return the random source used when callers do not inject one."""
    return random.SystemRandom()


def new_identifier(rng: Optional[random.Random] = None) -> str:
    """Return a fresh UUID4 string drawn from *rng*.

    Args:
        rng: Random source. ``None`` uses :func:`default_rng`.

    Returns:
        Canonical lower-case UUID string, e.g.
        ``"5f0c4c9e-7a3b-4c1d-9a52-0e6f3b8d2a11"``.
    """
    rng = rng or default_rng()
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))
