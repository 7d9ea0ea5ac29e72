"""Integer matrices modulo 1e9+7 and floating-point linear algebra."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Sequence

MOD = 1_000_000_007
EPS = 1e-9


class Matrix:
    """A dense integer matrix whose arithmetic is carried out modulo ``MOD``."""

    __slots__ = ("rows", "n", "m")

    def __init__(self, rows: Iterable[Iterable[int]]) -> None:
        self.rows = [list(row) for row in rows]
        self.n = len(self.rows)
        self.m = len(self.rows[0]) if self.rows else 0
        if any(len(row) != self.m for row in self.rows):
            raise ValueError("all rows must have the same length")

    def __getitem__(self, index: int) -> list[int]:
        return self.rows[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.rows == other.rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self.rows!r})"

    def __str__(self) -> str:
        return "\n".join(" ".join(str(x) for x in row) for row in self.rows)

    @property
    def is_square(self) -> bool:
        return self.n == self.m

    def _check_same_shape(self, other: Matrix) -> None:
        if (self.n, self.m) != (other.n, other.m):
            raise ValueError("matrices must have the same shape")

    def __mul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.m != other.n:
            raise ValueError("inner dimensions do not match")
        columns = [[row[j] for row in other.rows] for j in range(other.m)]
        return Matrix(
            [sum(x * y for x, y in zip(row, column)) % MOD for column in columns]
            for row in self.rows
        )

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(
            [(x + y) % MOD for x, y in zip(r1, r2)] for r1, r2 in zip(self.rows, other.rows)
        )

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(
            [(x - y) % MOD for x, y in zip(r1, r2)] for r1, r2 in zip(self.rows, other.rows)
        )

    def power(self, p: int) -> Matrix:
        """The matrix raised to ``p``; the identity when ``p <= 0``."""
        if not self.is_square:
            raise ValueError("matrix must be square")
        result = identity(self.n)
        base = self
        while p > 0:
            if p & 1:
                result = result * base
            base = base * base
            p >>= 1
        return result

    def determinant(self) -> int:
        """Determinant modulo ``MOD``; zero for a non-square matrix."""
        if not self.is_square:
            return 0
        a = [[x % MOD for x in row] for row in self.rows]
        det = 1
        for i in range(self.n):
            pivot = next((r for r in range(i, self.n) if a[r][i]), None)
            if pivot is None:
                return 0
            if pivot != i:
                a[i], a[pivot] = a[pivot], a[i]
                det = -det % MOD
            det = det * a[i][i] % MOD
            inv = pow(a[i][i], MOD - 2, MOD)
            for j in range(i + 1, self.n):
                factor = a[j][i] * inv % MOD
                if factor:
                    a[j] = [(x - factor * y) % MOD for x, y in zip(a[j], a[i])]
        return det

    def inverse(self) -> Matrix:
        """Inverse modulo ``MOD``; ValueError if none exists."""
        if not self.is_square:
            raise ValueError("Matrix must be square")
        n = self.n
        aug = [
            [x % MOD for x in row] + [int(i == j) for j in range(n)]
            for i, row in enumerate(self.rows)
        ]
        for i in range(n):
            pivot = next((r for r in range(i, n) if aug[r][i]), None)
            if pivot is None:
                raise ValueError("Matrix is not invertible")
            aug[i], aug[pivot] = aug[pivot], aug[i]
            inv = pow(aug[i][i], MOD - 2, MOD)
            aug[i] = [x * inv % MOD for x in aug[i]]
            for j in range(n):
                if j != i and aug[j][i]:
                    factor = aug[j][i]
                    aug[j] = [(x - factor * y) % MOD for x, y in zip(aug[j], aug[i])]
        return Matrix(row[n:] for row in aug)

    def transpose(self) -> Matrix:
        """The transposed matrix."""
        return Matrix([row[j] for row in self.rows] for j in range(self.m))


def zeros(n: int, m: int) -> Matrix:
    """An ``n`` by ``m`` matrix of zeros."""
    return Matrix([0] * m for _ in range(n))


def identity(n: int) -> Matrix:
    """The ``n`` by ``n`` identity matrix."""
    return Matrix([int(i == j) for j in range(n)] for i in range(n))


class Solutions(enum.IntEnum):
    """How many solutions a linear system has."""

    NONE = 0
    UNIQUE = 1
    INFINITE = 2


def gaussian_elimination(
    a: Sequence[Sequence[float]], b: Sequence[float]
) -> tuple[Solutions, list[float]]:
    """Solve ``a x = b`` by Gauss-Jordan elimination with partial pivoting.

    Returns the kind of solution set and one solution (empty when there is
    none; free variables are set to zero).
    """
    if not a:
        raise ValueError("the system must have at least one equation")
    rows = [[float(x) for x in row] for row in a]
    rhs = [float(x) for x in b]
    n, m = len(rows), len(rows[0])
    if len(rhs) != n:
        raise ValueError("right-hand side length does not match the system")

    where = [-1] * m
    row = 0
    for col in range(m):
        if row >= n:
            break
        sel = max(range(row, n), key=lambda i: abs(rows[i][col]))
        if abs(rows[sel][col]) < EPS:
            continue
        rows[sel], rows[row] = rows[row], rows[sel]
        rhs[sel], rhs[row] = rhs[row], rhs[sel]
        where[col] = row
        for i in range(n):
            if i != row:
                c = rows[i][col] / rows[row][col]
                rows[i][col:] = [x - y * c for x, y in zip(rows[i][col:], rows[row][col:])]
                rhs[i] -= rhs[row] * c
        row += 1

    answer = [rhs[w] / rows[w][i] if w != -1 else 0.0 for i, w in enumerate(where)]
    for coefficients, value in zip(rows, rhs):
        if abs(sum(x * y for x, y in zip(answer, coefficients)) - value) > EPS:
            return Solutions.NONE, []
    if -1 in where:
        return Solutions.INFINITE, answer
    return Solutions.UNIQUE, answer


def matrix_rank(a: Sequence[Sequence[float]]) -> int:
    """Rank of a real matrix by forward elimination."""
    if not a:
        return 0
    rows = [[float(x) for x in row] for row in a]
    n, m = len(rows), len(rows[0])
    rank = 0
    for col in range(m):
        if rank >= n:
            break
        sel = max(range(rank, n), key=lambda i: abs(rows[i][col]))
        if abs(rows[sel][col]) < EPS:
            continue
        rows[sel], rows[rank] = rows[rank], rows[sel]
        for i in range(rank + 1, n):
            c = rows[i][col] / rows[rank][col]
            rows[i][col:] = [x - y * c for x, y in zip(rows[i][col:], rows[rank][col:])]
        rank += 1
    return rank


def lu_decomposition(matrix: Matrix) -> tuple[Matrix, Matrix]:
    """Doolittle decomposition modulo ``MOD``: ``(L, U)`` with unit-diagonal ``L``."""
    if not matrix.is_square:
        raise ValueError("matrix must be square")
    n = matrix.n
    a = [[x % MOD for x in row] for row in matrix.rows]
    lower = [[0] * n for _ in range(n)]
    upper = [[0] * n for _ in range(n)]
    for i in range(n):
        for k in range(i, n):
            s = sum(lower[i][j] * upper[j][k] for j in range(i)) % MOD
            upper[i][k] = (a[i][k] - s) % MOD
        for k in range(i, n):
            if k == i:
                lower[i][i] = 1
            elif upper[i][i]:
                s = sum(lower[k][j] * upper[j][i] for j in range(i)) % MOD
                lower[k][i] = (a[k][i] - s) * pow(upper[i][i], MOD - 2, MOD) % MOD
    return Matrix(lower), Matrix(upper)


def fibonacci_matrix() -> Matrix:
    """The matrix ``[[1, 1], [1, 0]]``."""
    return Matrix([[1, 1], [1, 0]])


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number modulo ``MOD``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n < 2:
        return n
    return fibonacci_matrix().power(n - 1)[0][0]


def rotation_matrix(angle: float) -> Matrix:
    """2D rotation matrix with entries scaled by one million and truncated."""
    cos_val = int(math.cos(angle) * 1_000_000)
    sin_val = int(math.sin(angle) * 1_000_000)
    return Matrix([[cos_val, -sin_val], [sin_val, cos_val]])