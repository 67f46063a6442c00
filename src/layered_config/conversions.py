"""String to typed value conversion.

Parsers raise NumberFormatError on malformed input and leave the decision to
swallow or propagate it to the caller.
"""

import re

from layered_config.exceptions import NumberFormatError

# Signed base-10 digits only: no whitespace, underscores or radix prefixes.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Integers are 32-bit signed; anything wider is malformed.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# Decimal literal with optional exponent and float/double type suffix,
# or the special values NaN / Infinity.
_DECIMAL_RE = re.compile(
    r"[+-]?(?:NaN|Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?[fFdD]?)"
)

# Hexadecimal floating literal; the binary exponent is mandatory.
_HEX_DECIMAL_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+[fFdD]?"
)


def parse_int(text: str) -> int:
    """Parse a base-10 integer, optionally signed, within the 32-bit range."""
    if not _INTEGER_RE.fullmatch(text):
        raise NumberFormatError(text, "integer")
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise NumberFormatError(text, "integer")
    return value


def parse_decimal(text: str) -> float:
    """Parse a floating-point literal.

    Surrounding whitespace is ignored. ``"2.5f"``, ``"1e3"``, ``"0x1p3"``,
    ``"-Infinity"`` and ``"NaN"`` are accepted; ``"inf"`` and ``"1_000"`` are not.
    """
    candidate = text.strip()
    if _HEX_DECIMAL_RE.fullmatch(candidate):
        if candidate[-1] in "fFdD":
            candidate = candidate[:-1]
        return float.fromhex(candidate)
    if not _DECIMAL_RE.fullmatch(candidate):
        raise NumberFormatError(text, "decimal")
    if candidate[-1] in "fFdD":
        candidate = candidate[:-1]
    return float(candidate.replace("Infinity", "inf"))


def parse_bool(text: str) -> bool:
    """True only for a case-insensitive ``"true"``; never fails."""
    return text.lower() == "true"


__all__ = ["INT_MIN", "INT_MAX", "parse_int", "parse_decimal", "parse_bool"]
