"""Parsing of complex numbers and complex vectors written as text."""

from __future__ import annotations

import re

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class ParseError(ValueError):
    """Raised when input text does not describe what was expected."""


def remove_spaces(text: str) -> str:
    """Return ``text`` without any space characters."""
    return text.replace(" ", "")


def _leading_float(text: str) -> float:
    """Read the longest number at the start of ``text``; 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def parse_complex(text: str) -> complex:
    """Parse forms such as ``0.5``, ``i``, ``-i2``, ``1+i``, ``0.5-i10.5``."""
    plus = text.find("+")
    minus = text.find("-", 1) if text else -1
    sep = plus if plus >= 0 else minus

    if sep >= 0 and "i" in text[sep:]:
        sign = -1.0 if text[sep] == "-" else 1.0
        rest = text[sep + 1:]
        if rest.startswith("i"):
            imag = sign if rest == "i" else sign * _leading_float(rest[1:])
        else:
            imag = 0.0
        return complex(_leading_float(text[:sep]), imag)

    if "i" not in text:
        return complex(_leading_float(text), 0.0)

    if text == "i":
        imag = 1.0
    elif text == "-i":
        imag = -1.0
    elif text.startswith("i"):
        imag = _leading_float(text[1:])
    elif text.startswith("-i"):
        imag = -_leading_float(text[2:])
    else:
        imag = 0.0
    return complex(0.0, imag)


def parse_vector(text: str, size: int) -> list[complex]:
    """Parse comma separated complex numbers into a vector of length ``size``.

    Empty fields are skipped; missing trailing entries are zero.
    """
    tokens = [token for token in text.split(",") if token]
    if len(tokens) > size:
        raise ParseError(f"expected at most {size} entries, got {len(tokens)}")
    values = [parse_complex(token) for token in tokens]
    return values + [0j] * (size - len(values))