from __future__ import annotations

import math
import re
from typing import Optional

# Plain decimal literal as typed on a numeric keypad: sign, digits, optional
# fraction and exponent. No grouping, symbols, underscores, nan or inf.
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")


def parse_amount(text: Optional[str]) -> float:
    """Parse free text into a float, substituting 0.0 when it is not a number."""
    if text is None:
        return 0.0
    s = text.strip()
    if not _NUMBER_RE.match(s):
        return 0.0
    value = float(s)
    if math.isinf(value):
        return 0.0
    return value


def parse_percent(text: str) -> float:
    return parse_amount(text)
