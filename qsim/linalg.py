"""Complex vectors and square matrices stored as plain lists of ``complex``."""

from __future__ import annotations

from collections.abc import Sequence

Vector = list[complex]
Matrix = list[list[complex]]


def format_complex(value: complex) -> str:
    """Render a complex number as ``a + ib`` or ``a - ib`` with two decimals."""
    if value.imag < 0:
        return f"{value.real:.2f} - i{-value.imag:.2f}"
    return f"{value.real:.2f} + i{value.imag:.2f}"


def format_vector(vector: Sequence[complex]) -> str:
    """Render every element followed by a comma and a space."""
    return "".join(f"{format_complex(item)}, " for item in vector)


def format_matrix(matrix: Sequence[Sequence[complex]]) -> str:
    """Render a matrix one row per line."""
    return "".join(f"{format_vector(row)}\n" for row in matrix)


def identity(size: int) -> Matrix:
    """Return the ``size`` by ``size`` identity matrix."""
    if size < 0:
        raise ValueError("matrix size must not be negative")
    return [[1 + 0j if i == j else 0j for j in range(size)] for i in range(size)]


def matmul(a: Sequence[Sequence[complex]], b: Sequence[Sequence[complex]]) -> Matrix:
    """Return the matrix product ``a @ b``."""
    if any(len(row) != len(b) for row in a):
        raise ValueError("inner matrix dimensions do not agree")
    columns = list(zip(*b)) if b else []
    return [
        [sum((x * y for x, y in zip(row, column)), 0j) for column in columns]
        for row in a
    ]


def matvec(matrix: Sequence[Sequence[complex]], vector: Sequence[complex]) -> Vector:
    """Return the product of ``matrix`` with the column ``vector``."""
    if any(len(row) != len(vector) for row in matrix):
        raise ValueError("matrix width does not match vector length")
    return [sum((x * y for x, y in zip(row, vector)), 0j) for row in matrix]