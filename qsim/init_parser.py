"""Reading the qubit count and the initial state from an init file."""

from __future__ import annotations

import os
import re

from .text import ParseError, remove_spaces

_NUMBER = r"\s*[+-]?(?i:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|inf(?:inity)?|nan)"
_AMPLITUDE = re.compile(rf"({_NUMBER})([+-])i({_NUMBER})")
_INTEGER = re.compile(r"[+-]?\d+")


def _lines(path: str | os.PathLike[str]):
    with open(path, encoding="utf-8") as handle:
        yield from handle


def parse_qubits(path: str | os.PathLike[str]) -> int:
    """Return the value given by the ``#qubits`` directive of ``path``."""
    for line in _lines(path):
        if not line.startswith("#qubits"):
            continue
        rest = line[len("#qubits"):].lstrip(" \t")
        count_text = re.split(r"[ \t\n]", rest, maxsplit=1)[0]
        if not count_text:
            return 0
        if not _INTEGER.fullmatch(count_text):
            raise ParseError(f"invalid qubit count: {count_text!r}")
        return int(count_text)
    raise ParseError("#qubits directive not found")


def _parse_amplitude(entry: str) -> complex:
    match = _AMPLITUDE.match(entry)
    if match is None:
        raise ParseError(f"invalid amplitude in #init directive: {entry!r}")
    real, sign, imag = match.groups()
    imag_value = float(imag)
    return complex(float(real), -imag_value if sign == "-" else imag_value)


def parse_init_vector(path: str | os.PathLike[str], size: int) -> list[complex]:
    """Return the state vector of the ``#init`` directive of ``path``.

    The directive must list exactly ``size`` amplitudes written as
    ``a+ib`` or ``a-ib`` between square brackets.
    """
    for line in _lines(path):
        if not line.startswith("#init"):
            continue
        start = line.find("[")
        end = line.find("]")
        if start < 0 or end < 0 or end < start:
            raise ParseError("#init directive is malformed")
        body = line[start + 1:end]
        if body.count(",") + 1 != size:
            raise ParseError(f"#init vector must have {size} entries")
        entries = [entry for entry in remove_spaces(body).split(",") if entry]
        values = [_parse_amplitude(entry) for entry in entries]
        return values + [0j] * (size - len(values))
    raise ParseError("#init directive not found")