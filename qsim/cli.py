"""Command line entry point running a circuit on an initial state."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from .circ_parser import parse_circuit, parse_gates
from .init_parser import parse_init_vector, parse_qubits
from .linalg import Vector, format_matrix, format_vector, identity, matmul, matvec
from .text import ParseError


def simulate(
    gates: Sequence[Sequence[Sequence[complex]]],
    state: Sequence[complex],
    out: TextIO | None = None,
) -> Vector:
    """Apply ``gates`` in order to ``state``, reporting each step to ``out``."""
    out = sys.stdout if out is None else out
    product = identity(len(state))
    for index, gate in enumerate(gates):
        out.write(f"fattore1 {index}:\n{format_matrix(gate)}\n")
        out.write(f"fattore2 {index}:\n{format_matrix(product)}\n")
        product = matmul(gate, product)
        out.write(f"risultato {index}:\n{format_matrix(product)}")
    out.write(f"PRODOTTO:\n{format_matrix(product)}")
    final = matvec(product, state)
    out.write(f"STATO FINALE:\n{format_vector(final)}")
    return final


def main(argv: Sequence[str] | None = None) -> int:
    """Read the init and circuit files, run the circuit and print the states."""
    parser = argparse.ArgumentParser(prog="qsim", description=main.__doc__)
    parser.add_argument("init", nargs="?", default="init-ex.txt")
    parser.add_argument("circ", nargs="?", default="circ-ex.txt")
    args = parser.parse_args(argv)

    try:
        qubits = parse_qubits(args.init)
        if qubits < 0:
            raise ParseError(f"invalid qubit count: {qubits}")
        size = 2**qubits
        state = parse_init_vector(args.init, size)
        print(f"STATO INIZIALE:\n{format_vector(state)}")
        circuit = parse_circuit(args.circ)
        gates = parse_gates(args.circ, size, circuit)
        simulate(gates, state)
    except (OSError, ValueError) as error:
        print(f"qsim: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())