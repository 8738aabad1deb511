## profargs — Copyright © 2017, Andrei Pangin.  Licensed under Apache 2.0; see http://www.apache.org/licenses/LICENSE-2.0 ⚘

import re


_INTEGER_RE = re.compile(r'\s*([+-]?)(0[xX][0-9a-fA-F]+|\d+)')
_DECIMAL_RE = re.compile(r'\s*[+-]?\d+')
_FLOAT_RE = re.compile(r'\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')

UNIT_MULTIPLIERS: dict[str, int] = {
    'k': 1_000, 'K': 1_000,
    'u': 1_000, 'U': 1_000,                      # microseconds
    'm': 1_000_000, 'M': 1_000_000,              # million, megabytes or milliseconds
    'g': 1_000_000_000, 'G': 1_000_000_000,
    's': 1_000_000_000, 'S': 1_000_000_000,      # seconds
}


def _leading_integer(text: str) -> tuple[int, str]:
    """Split off a decimal or 0x-prefixed integer; without digits the value is 0 and nothing is consumed."""
    if (m := _INTEGER_RE.match(text)) is None:
        return 0, text
    sign, digits = m.groups()
    value = int(digits, 16 if digits[:2] in ('0x', '0X') else 10)
    return (-value if sign == '-' else value), text[m.end():]


def parse_units(text: str) -> int:
    """Parse an integer followed by an optional unit letter, returning -1 for any unknown unit.

    Only the first character after the number is inspected, so `10ms` is ten million.
    """
    value, rest = _leading_integer(text)
    if not rest:
        return value
    if (multiplier := UNIT_MULTIPLIERS.get(rest[0])) is None:
        return -1
    return value * multiplier


def parse_int(text: str) -> int:
    """Lenient decimal prefix, the way C's `atoi` reads it; garbage yields 0."""
    m = _DECIMAL_RE.match(text)
    return int(m.group()) if m else 0


def parse_float(text: str) -> float:
    """Lenient floating-point prefix, the way C's `atof` reads it; garbage yields 0.0."""
    m = _FLOAT_RE.match(text)
    return float(m.group()) if m else 0.0
