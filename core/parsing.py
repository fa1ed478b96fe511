"""
core.parsing
Guess parsing.

Browser number inputs hand us whatever the player typed. We accept the same
inputs the web build did (leading-integer parse):
- skip leading whitespace, optional sign
- "0x"/"0X" prefix reads hex digits
- take the longest run of ASCII digits, ignore what follows ("3.7" -> 3, "12abc" -> 12)
- floats truncate toward zero
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional

_LEADING_INT_RE = re.compile(r"([+-]?)([0-9]+)")
_LEADING_HEX_RE = re.compile(r"([+-]?)0[xX]([0-9a-fA-F]*)")


def parse_guess(raw: Any) -> Optional[int]:
    """Return the integer the player meant, or None if there is none."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if math.isnan(raw) or math.isinf(raw):
            return None
        return math.trunc(raw)
    if not isinstance(raw, str):
        return None

    s = raw.strip()
    if not s:
        return None

    m = _LEADING_HEX_RE.match(s)
    if m:
        digits = m.group(2)
        if not digits:
            return None
        val = int(digits, 16)
        return -val if m.group(1) == "-" else val

    m = _LEADING_INT_RE.match(s)
    if not m:
        return None
    val = int(m.group(2))
    return -val if m.group(1) == "-" else val
