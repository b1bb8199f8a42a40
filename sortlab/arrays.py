"""Array helpers: filling, checksums, run counts, random matrices and traversals."""

from __future__ import annotations

import random
from collections.abc import Sequence

RAND_MAX = 2**31 - 1


def _source(rng):
    return rng if rng is not None else random


def fill_inc(n):
    """Return the increasing sequence 1..n."""
    return list(range(1, n + 1))


def fill_dec(n):
    """Return the decreasing sequence n..1."""
    return list(range(n, 0, -1))


def fill_rand(n, rng=None):
    """Return n random integers in the range 0..RAND_MAX."""
    source = _source(rng)
    return [source.randint(0, RAND_MAX) for _ in range(n)]


def check_sum(values):
    """Return the sum of the values."""
    return sum(values)


def run_numbers(values):
    """Return the number of non-decreasing runs in the values."""
    return 1 + sum(1 for prev, cur in zip(values, values[1:]) if cur < prev)


def format_array(values):
    """Return the values separated by single spaces."""
    return " ".join(str(v) for v in values)


def gen_rand_array(size, max_value, rng=None):
    """Return size random integers in the range 1..max_value."""
    if max_value < 1:
        raise ValueError("max_value must be positive")
    source = _source(rng)
    return [source.randint(1, max_value) for _ in range(size)]


def gen_rand_matrix(size, max_value, rng=None):
    """Return a size x size matrix of random integers in 1..max_value."""
    return [gen_rand_array(size, max_value, rng) for _ in range(size)]


def gen_jagged_matrix(size, max_value, rng=None):
    """Return size rows, each of random length 0..9, of integers in 1..max_value."""
    source = _source(rng)
    return [gen_rand_array(source.randrange(10), max_value, source) for _ in range(size)]


def format_jagged_matrix(rows):
    """Return the row count, then each row as 'length:' followed by tab-separated values."""
    lines = [str(len(rows))]
    for row in rows:
        lines.append(f"{len(row)}:\t" + "".join(f"{v}\t" for v in row))
    return "\n".join(lines) + "\n"


def _square_size(matrix: Sequence[Sequence]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def right_diagonals(matrix):
    """Read the matrix along its down-right diagonals, starting at the top-right corner."""
    size = _square_size(matrix)
    return [
        matrix[i][i + d]
        for d in range(size - 1, -size, -1)
        for i in range(size)
        if 0 <= i + d < size
    ]


def left_diagonals(matrix):
    """Read the matrix along its down-left diagonals, starting at the top-left corner."""
    size = _square_size(matrix)
    return [
        matrix[i][s - i]
        for s in range(2 * size - 1)
        for i in range(size)
        if 0 <= s - i < size
    ]


def spiral_from_center(matrix):
    """Read the matrix as a spiral that starts at the central element."""
    size = _square_size(matrix)
    total = size * size
    if total == 0:
        return []
    i = j = size // 2
    out = []
    step = 1
    while True:
        delta = 1 if step % 2 == 0 else -1
        for _ in range(step):
            out.append(matrix[i][j])
            if len(out) == total:
                return out
            j += delta
        for _ in range(step):
            out.append(matrix[i][j])
            i += delta
        step += 1


def spiral_from_corner(matrix):
    """Read the matrix as a clockwise spiral that starts at the top-left element."""
    size = _square_size(matrix)
    if size == 0:
        return []
    out = list(matrix[0])
    i, j = 0, size - 1
    for step in range(size - 1, 0, -1):
        sign = -1 if (step - size) % 2 == 0 else 1
        for _ in range(step):
            i += sign
            out.append(matrix[i][j])
        for _ in range(step):
            j -= sign
            out.append(matrix[i][j])
    return out