"""
tokens.py — Number Token Normalizer
====================================
Turns user-typed tokens into numbers.  Two flavours:

  • parse_number_token    – strict integer parse for calculator tokens
                            ("42", "-0x1F", "+0b101", "7.9" → 7)
  • to_number_if_possible – lenient weight coercion for the graph parser
                            ("0x10" → 16, "2.5" → 2.5, 4 → 4)

Both signal failure with None rather than raising, so callers can decide
whether a bad token is fatal (calculator) or falls back to a default
(edge weight).
"""

import math
import re
from typing import Any, Optional, Union

Number = Union[int, float]

_HEX_RE = re.compile(r"^0x[0-9a-f]+$", re.IGNORECASE)
_BIN_RE = re.compile(r"^0b[01]+$", re.IGNORECASE)


def _decimal(text: str) -> Optional[Number]:
    """int if the text is integral, float otherwise, None if neither / not finite."""
    if "_" in text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_number_token(token: Any) -> Optional[int]:
    """Parse decimal, 0x-hex or 0b-binary with an optional sign.  Decimals truncate toward zero."""
    if token is None:
        return None
    s = str(token).strip()
    if not s:
        return None

    sign     = -1 if s[0] == "-" else 1
    unsigned = s[1:] if s[0] in "+-" else s
    if not unsigned:
        return 0                      # a lone sign reads as zero

    if _HEX_RE.match(unsigned):
        return sign * int(unsigned[2:], 16)
    if _BIN_RE.match(unsigned):
        return sign * int(unsigned[2:], 2)

    value = _decimal(unsigned)
    if value is None:
        return None
    return sign * int(value)          # int() truncates toward zero


def to_number_if_possible(value: Any) -> Optional[Number]:
    # bool is an int subclass, but `true` is not a weight
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, str):
        return None

    s = value.strip()
    if not s:
        return None
    if _HEX_RE.match(s):
        return int(s[2:], 16)
    if _BIN_RE.match(s):
        return int(s[2:], 2)
    return _decimal(s)
