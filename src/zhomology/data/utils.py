# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
import numbers

import numpy as np

from .types import Size_t


def zeros(n_rows: Size_t, n_cols: Size_t) -> np.ndarray:
    return np.zeros((n_rows, n_cols), dtype=object)


def identity(n: Size_t) -> np.ndarray:
    m = zeros(n, n)
    for i in range(n):
        m[i, i] = 1
    return m


def as_integer_matrix(matrix) -> np.ndarray:
    """
    Copy `matrix` into a 2D object array of python ints so that row and
    column operations never overflow.
    """
    arr = np.asarray(matrix)
    if arr.ndim != 2:
        raise ValueError(f"Expected a 2D matrix, got an array with shape {arr.shape}")
    out = zeros(*arr.shape)
    for idx, value in np.ndenumerate(arr):
        if not isinstance(value, numbers.Integral):
            if isinstance(value, numbers.Real) and float(value).is_integer():
                value = int(value)
            else:
                raise ValueError(f"Entry {idx} = {value!r} is not an integer")
        out[idx] = int(value)
    return out


def is_zero(matrix: np.ndarray) -> bool:
    return all(v == 0 for v in matrix.flat)


def matrices_equal(a: np.ndarray, b: np.ndarray) -> bool:
    if a.shape != b.shape:
        return False
    return all(x == y for x, y in zip(a.flat, b.flat))


def int_matmul(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    if a.shape[1] != b.shape[0]:
        raise ValueError(f"Cannot multiply {a.shape} by {b.shape}")
    # object dtype dot with an empty inner dimension does not yield int zeros
    if a.shape[1] == 0:
        return zeros(a.shape[0], b.shape[1])
    return a.dot(b)


def truncated_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return (g, x, y) with x * a + y * b == g and g >= 0."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    if old_r < 0:
        return -old_r, -old_x, -old_y
    return old_r, old_x, old_y


def permutation_parity(source: tuple, target: tuple) -> int:
    """
    Sign (+1 or -1) of the permutation taking the vertex order of `source`
    to that of `target`. Both must hold the same vertices.
    """
    position = {v: i for i, v in enumerate(target)}
    perm = [position[v] for v in source]
    sign = 1
    for i in range(len(perm)):
        for j in range(i + 1, len(perm)):
            if perm[i] > perm[j]:
                sign = -sign
    return sign
