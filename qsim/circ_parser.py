"""Reading the circuit and its gate matrices from a circuit file."""

from __future__ import annotations

import os
import re

from .linalg import Matrix
from .text import ParseError, parse_vector, remove_spaces

_TUPLE = re.compile(r"\(([^)]*)\)")


def _lines(path: str | os.PathLike[str]):
    with open(path, encoding="utf-8") as handle:
        yield from handle


def parse_circuit(path: str | os.PathLike[str]) -> str:
    """Return the gate names listed by the ``#circ`` directive, spaces removed."""
    for line in _lines(path):
        if line.startswith("#circ"):
            circuit = remove_spaces(line)[len("#circ"):]
            return circuit[:-1] if circuit.endswith("\n") else circuit
    raise ParseError("circuit not defined")


def _gate_rows(line: str, size: int) -> list[list[complex]]:
    start = line.find("[")
    end = line.find("]")
    if start < 0 or end < 0 or end < start:
        raise ParseError("gate definition is malformed")
    body = remove_spaces(line[start + 1:end])
    rows = []
    for match in _TUPLE.finditer(body):
        if len(rows) == size:
            break
        rows.append(parse_vector(match.group(1), size))
    return rows


def parse_gates(path: str | os.PathLike[str], size: int, circuit: str) -> list[Matrix]:
    """Return one ``size`` by ``size`` matrix per gate name in ``circuit``.

    Each gate ``G`` is defined by lines starting with ``#define G`` holding
    rows such as ``[(0,1)(1,0)]``. Rows not given are zero.
    """
    matrices = []
    for gate in circuit:
        directive = f"#define {gate}"
        rows: list[list[complex]] = []
        for line in _lines(path):
            if line.startswith(directive):
                rows.extend(_gate_rows(line, size))
        if len(rows) > size:
            raise ParseError(f"gate {gate!r} has more than {size} rows")
        rows.extend([0j] * size for _ in range(size - len(rows)))
        matrices.append(rows)
    return matrices