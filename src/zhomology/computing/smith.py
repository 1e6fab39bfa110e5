# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

import numpy as np
from loguru import logger

from ..data.constants import DEFAULT_VERIFY_DECOMPOSITION
from ..data.containers import SmithDecomposition
from ..data.types import Index_t
from ..data.utils import (
    as_integer_matrix,
    identity,
    int_matmul,
    is_zero,
    matrices_equal,
    truncated_div,
)
from ..errors import DegenerateMatrix, TransformNotInvertible


class _SmithState:
    """
    Working matrix plus the accumulated transforms. Every elementary
    operation keeps p @ original @ q == d, p @ p_inv == I and
    q_inv @ q == I.
    """

    def __init__(self, matrix: np.ndarray):
        n_rows, n_cols = matrix.shape
        self.d = matrix.copy()
        self.p = identity(n_rows)
        self.p_inv = identity(n_rows)
        self.q = identity(n_cols)
        self.q_inv = identity(n_cols)

    def swap_rows(self, i: Index_t, j: Index_t) -> None:
        if i == j:
            return
        self.d[[i, j]] = self.d[[j, i]]
        self.p[[i, j]] = self.p[[j, i]]
        self.p_inv[:, [i, j]] = self.p_inv[:, [j, i]]

    def swap_cols(self, i: Index_t, j: Index_t) -> None:
        if i == j:
            return
        self.d[:, [i, j]] = self.d[:, [j, i]]
        self.q[:, [i, j]] = self.q[:, [j, i]]
        self.q_inv[[i, j]] = self.q_inv[[j, i]]

    def negate_row(self, i: Index_t) -> None:
        self.d[i] *= -1
        self.p[i] *= -1
        self.p_inv[:, i] *= -1

    def add_row_multiple(self, target: Index_t, source: Index_t, c: int) -> None:
        # row_target += c * row_source; inverse is row_target -= c * row_source
        self.d[target] += c * self.d[source]
        self.p[target] += c * self.p[source]
        self.p_inv[:, source] -= c * self.p_inv[:, target]

    def add_col_multiple(self, target: Index_t, source: Index_t, c: int) -> None:
        self.d[:, target] += c * self.d[:, source]
        self.q[:, target] += c * self.q[:, source]
        self.q_inv[source] -= c * self.q_inv[target]


def find_pivot(block: np.ndarray) -> tuple[Index_t, Index_t]:
    """
    Position of the entry with the smallest nonzero absolute value.

    Raises
    ------
    DegenerateMatrix
        If `block` is empty or entirely zero.
    """
    best = None
    best_value = 0
    for idx, value in np.ndenumerate(block):
        if value != 0 and (best is None or abs(value) < best_value):
            best, best_value = idx, abs(value)
    if best is None:
        raise DegenerateMatrix(
            f"No nonzero pivot in a {block.shape[0]}x{block.shape[1]} block"
        )
    return best


def _find_indivisible(block: np.ndarray, pivot: int) -> tuple[Index_t, Index_t] | None:
    for idx, value in np.ndenumerate(block):
        if value % pivot != 0:
            return idx
    return None


def smith_normal_form(
    matrix, verify: bool = DEFAULT_VERIFY_DECOMPOSITION
) -> SmithDecomposition:
    """Diagonalize an integer matrix by unimodular row and column operations.

    Parameters
    ----------
    matrix : array-like
        Integer matrix A of shape (r, c); r or c may be zero.
    verify : bool
        Re-check p @ A @ q == d and both inverses before returning.

    Returns
    -------
    SmithDecomposition
        ``d`` is diagonal with d_0 | d_1 | ... | d_{rank-1} > 0 followed by
        zeros, and ``rank`` is the number of nonzero diagonal entries.
    """
    original = as_integer_matrix(matrix)
    n_rows, n_cols = original.shape
    state = _SmithState(original)

    for k in range(min(n_rows, n_cols)):
        if is_zero(state.d[k:, k:]):
            break
        while True:
            i, j = find_pivot(state.d[k:, k:])
            state.swap_rows(k, k + i)
            state.swap_cols(k, k + j)
            if state.d[k, k] < 0:
                state.negate_row(k)
            pivot = state.d[k, k]

            for i in range(k + 1, n_rows):
                c = truncated_div(state.d[i, k], pivot)
                if c:
                    state.add_row_multiple(i, k, -c)
            # remainders smaller than the pivot are left, pick a new pivot
            if not is_zero(state.d[k + 1 :, k]):
                continue

            for j in range(k + 1, n_cols):
                c = truncated_div(state.d[k, j], pivot)
                if c:
                    state.add_col_multiple(j, k, -c)
            if not is_zero(state.d[k, k + 1 :]):
                continue

            position = _find_indivisible(state.d[k + 1 :, k + 1 :], pivot)
            if position is None:
                break
            # pull the offending row into row k; the next row clearing leaves
            # a remainder smaller than the current pivot
            state.add_row_multiple(k, k + 1 + position[0], 1)

    rank = sum(1 for i in range(min(n_rows, n_cols)) if state.d[i, i] != 0)
    decomposition = SmithDecomposition(
        p=state.p,
        p_inv=state.p_inv,
        q=state.q,
        q_inv=state.q_inv,
        d=state.d,
        rank=rank,
    )
    logger.debug(f"Smith normal form of {n_rows}x{n_cols} matrix: rank {rank}")
    if verify:
        verify_decomposition(original, decomposition)
    return decomposition


def verify_decomposition(matrix, decomposition: SmithDecomposition) -> None:
    """
    Raises
    ------
    TransformNotInvertible
        If a transform does not multiply to the identity with its inverse,
        or if p @ matrix @ q differs from d.
    """
    original = as_integer_matrix(matrix)
    n_rows, n_cols = original.shape
    if not matrices_equal(
        int_matmul(decomposition.p, decomposition.p_inv), identity(n_rows)
    ):
        raise TransformNotInvertible(
            f"Row transform of a {n_rows}x{n_cols} matrix lost its inverse"
        )
    if not matrices_equal(
        int_matmul(decomposition.q_inv, decomposition.q), identity(n_cols)
    ):
        raise TransformNotInvertible(
            f"Column transform of a {n_rows}x{n_cols} matrix lost its inverse"
        )
    product = int_matmul(int_matmul(decomposition.p, original), decomposition.q)
    if not matrices_equal(product, decomposition.d):
        raise TransformNotInvertible(
            f"p @ A @ q does not reproduce d for a {n_rows}x{n_cols} matrix "
            f"(rank {decomposition.rank})"
        )
