"""
core.rng
RNG helpers that do NOT rely on Python's built-in hash().

Goal:
- Same (base_seed + inputs) => same Random stream across platforms & runs.
- No seed => process-wide source (normal play).
"""

from __future__ import annotations

import hashlib
import json
import random
from typing import Any, Optional


def stable_int_seed(*parts: Any, salt: str = "number-guess") -> int:
    """Return a stable 32-bit integer seed derived from arbitrary inputs.

    Uses SHA-256 over a canonical JSON representation of `parts`.
    Output is 0..2**32-1 (works with random.Random).
    """
    payload = json.dumps(parts, sort_keys=True, ensure_ascii=False, separators=(",", ":"), default=str)
    h = hashlib.sha256((salt + "|" + payload).encode("utf-8")).digest()
    return int.from_bytes(h[:4], "big", signed=False)


def rng_from(*parts: Any, base_seed: int) -> random.Random:
    """Create a Random instance from (base_seed + parts)."""
    seed = stable_int_seed(base_seed, *parts)
    return random.Random(seed)


def make_rng(seed: Optional[int] = None) -> Any:
    """Seeded generator for reproducible runs, else the process-wide `random` source."""
    if seed is None:
        return random
    return rng_from("targets", base_seed=int(seed))
