"""Matrix-chain ordering and Strassen multiplication."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import count

Matrix = list[list[int]]


@dataclass(frozen=True)
class ChainOrder:
    """Cheapest way to multiply a chain of matrices."""

    cost: int
    parenthesization: str


def _names() -> Iterator[str]:
    return (chr(ord("A") + offset) for offset in count())


def _render(split: list[list[int]], i: int, j: int, names: Iterator[str]) -> str:
    if i + 1 == j:
        return next(names)
    k = split[i][j]
    left = _render(split, i, k, names)
    right = _render(split, k, j, names)
    return f"({left}{right})"


def matrix_chain_order(dimensions: Sequence[int]) -> ChainOrder:
    """Minimum scalar multiplications for matrices of sizes d[i] x d[i+1], with its bracketing."""
    n = len(dimensions)
    if n < 2:
        raise ValueError("at least two dimensions are needed")
    cost = [[0] * n for _ in range(n)]
    split = [[0] * n for _ in range(n)]
    for length in range(2, n):
        for i in range(n - length):
            j = i + length
            best = min(
                range(i + 1, j),
                key=lambda k: cost[i][k] + cost[k][j]
                + dimensions[i] * dimensions[k] * dimensions[j],
            )
            split[i][j] = best
            cost[i][j] = (
                cost[i][best] + cost[best][j]
                + dimensions[i] * dimensions[best] * dimensions[j]
            )
    return ChainOrder(cost[0][n - 1], _render(split, 0, n - 1, _names()))


def matrix_add(first: Sequence[Sequence[int]], second: Sequence[Sequence[int]], sign: int = 1) -> Matrix:
    """Return ``first + sign * second``."""
    if len(first) != len(second) or any(
        len(a) != len(b) for a, b in zip(first, second)
    ):
        raise ValueError("matrices must have the same shape")
    return [[a + sign * b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(first, second)]


def _quadrants(matrix: Sequence[Sequence[int]], half: int) -> tuple[Matrix, Matrix, Matrix, Matrix]:
    top, bottom = matrix[:half], matrix[half:]
    return (
        [list(row[:half]) for row in top],
        [list(row[half:]) for row in top],
        [list(row[:half]) for row in bottom],
        [list(row[half:]) for row in bottom],
    )


def _strassen(first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]) -> Matrix:
    n = len(first)
    if n == 1:
        return [[first[0][0] * second[0][0]]]
    half = n // 2
    a11, a12, a21, a22 = _quadrants(first, half)
    b11, b12, b21, b22 = _quadrants(second, half)

    p = _strassen(matrix_add(a11, a22), matrix_add(b11, b22))
    q = _strassen(matrix_add(a21, a22), b11)
    r = _strassen(a11, matrix_add(b12, b22, -1))
    s = _strassen(a22, matrix_add(b21, b11, -1))
    t = _strassen(matrix_add(a11, a12), b22)
    u = _strassen(matrix_add(a21, a11, -1), matrix_add(b11, b12))
    v = _strassen(matrix_add(a12, a22, -1), matrix_add(b21, b22))

    c11 = matrix_add(matrix_add(p, s), matrix_add(v, t, -1))
    c12 = matrix_add(r, t)
    c21 = matrix_add(q, s)
    c22 = matrix_add(matrix_add(p, r), matrix_add(u, q, -1))

    return [left + right for left, right in zip(c11, c12)] + [
        left + right for left, right in zip(c21, c22)
    ]


def strassen(first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]) -> Matrix:
    """Multiply two square matrices whose size is a power of two by Strassen's method."""
    n = len(first)
    if n == 0 or n & (n - 1):
        raise ValueError("matrix size must be a positive power of two")
    for matrix in (first, second):
        if len(matrix) != n or any(len(row) != n for row in matrix):
            raise ValueError("matrices must be square and of the same size")
    return _strassen(first, second)