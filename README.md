# qsim

`qsim` simulates a quantum circuit on a small register of qubits. It reads
an initial state and a circuit from two plain-text files. It multiplies the
circuit's gate matrices together, applies the resulting matrix to the state,
and prints every intermediate step.

## Installation

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Input files

### Initial state (`init-ex.txt`)

```
#qubits 1
#init [0.7071+i0, 0.7071-i0]
```

- `#qubits n` gives the number of qubits. The state vector then has `2**n`
  amplitudes. A negative count is rejected.
- `#init [...]` lists the amplitudes, separated by commas.
  - Each amplitude must be written as `a+ib` or `a-ib`, with both numbers
    present (`1+i0`, not `1`).
  - Spaces are ignored.
  - The number of amplitudes must be exactly `2**n`.

### Circuit (`circ-ex.txt`)

```
#define X [(0, 1) (1, 0)]
#define H [(0.7071, 0.7071) (0.7071, -0.7071)]
#circ HX
```

- `#define G [...]` defines a gate named by the single character `G`.
  - Each parenthesised tuple is one row of the gate's matrix.
  - The entries of a row are complex numbers separated by commas.
  - An entry can take any of these forms: `0.5`, `-1`, `i`, `-i`, `i2`,
    `0.5+i0.5`, `1-i`.
  - Missing entries and missing rows are zero.
  - Rows from several `#define G` lines for the same gate are joined in
    order.
- `#circ` lists the gates to apply, one character per gate. Spaces are
  ignored. The first gate listed is applied to the state first.

## Running

Put `init-ex.txt` and `circ-ex.txt` in the current directory and run:

```
qsim
```

Other files can be given as positional arguments:

```
qsim my-init.txt my-circ.txt
```

The program prints, in this order:

1. `STATO INIZIALE:` followed by the initial state.
2. For each gate `k` in the circuit, three blocks:
   - `fattore1 k:` with the gate matrix.
   - `fattore2 k:` with the product accumulated so far, which starts as the
     identity.
   - `risultato k:` with the new product.
3. `PRODOTTO:` with the full circuit matrix.
4. `STATO FINALE:` with the final state.

Complex numbers are printed with two decimals, as in `0.71 + i0.00`.

If a file cannot be read or is malformed, the program prints `qsim: <reason>`
to standard error and exits with status 1.

## Library use

The parsers and the linear algebra can also be used from Python:

```python
import sys

from qsim.init_parser import parse_qubits, parse_init_vector
from qsim.circ_parser import parse_circuit, parse_gates
from qsim.cli import simulate

qubits = parse_qubits("init-ex.txt")
size = 2 ** qubits
state = parse_init_vector("init-ex.txt", size)

circuit = parse_circuit("circ-ex.txt")
gates = parse_gates("circ-ex.txt", size, circuit)

final_state = simulate(gates, state, sys.stdout)
```

`simulate` writes its report to the given stream, or to standard output when
none is given, and returns the final state as a list of `complex`.

`qsim.linalg` works on plain lists of `complex`:

- `identity(size)`
- `matmul(a, b)`
- `matvec(matrix, vector)`
- the formatting helpers `format_complex`, `format_vector` and
  `format_matrix`

`matmul` and `matvec` raise `ValueError` when the dimensions do not agree.

`qsim.text` provides `remove_spaces`, `parse_complex` and `parse_vector`.
`parse_complex` is lenient: text it cannot read as a number counts as zero.
`parse_vector` raises `qsim.text.ParseError`, a subclass of `ValueError`, when
it is given more entries than the requested size.

`qsim.init_parser` and `qsim.circ_parser` also raise `ParseError` when a
directive is missing or malformed.

## Limitations

- Gates are dense `2**n` by `2**n` matrices. The program does not check that
  they are unitary.
- Gate names are single characters.
- The program computes the final state vector only. It does not simulate
  measurement and does not report outcome probabilities.