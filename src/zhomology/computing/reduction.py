# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

from typing import Sequence

import numpy as np

from ..data.constants import DEFAULT_VERIFY_DECOMPOSITION
from ..data.containers import Summand
from ..data.types import Index_t
from ..data.utils import (
    as_integer_matrix,
    extended_gcd,
    int_matmul,
    is_zero,
    zeros,
)
from ..errors import TransformNotInvertible
from .smith import smith_normal_form


def pivot_rows(basis: np.ndarray) -> list[Index_t]:
    """Topmost nonzero row of every column (-1 for a zero column)."""
    rows = []
    for j in range(basis.shape[1]):
        nonzero = [i for i in range(basis.shape[0]) if basis[i, j] != 0]
        rows.append(nonzero[0] if nonzero else -1)
    return rows


def reduce_columns(basis) -> np.ndarray:
    """
    Column echelon (Hermite) form of the lattice spanned by the columns.

    Pivot rows strictly increase from left to right, each pivot is positive,
    and entries left of a pivot are reduced into [0, pivot). Only unimodular
    column operations are used, so the span is unchanged; dependent columns
    collapse to zero and are dropped. Reducing a reduced basis returns it
    unchanged.
    """
    reduced = as_integer_matrix(basis)
    n_rows, n_cols = reduced.shape
    pivot = 0
    for row in range(n_rows):
        if pivot == n_cols:
            break
        for col in range(pivot + 1, n_cols):
            b = reduced[row, col]
            if b == 0:
                continue
            a = reduced[row, pivot]
            g, x, y = extended_gcd(a, b)
            left = reduced[:, pivot].copy()
            right = reduced[:, col].copy()
            reduced[:, pivot] = x * left + y * right
            reduced[:, col] = (-b // g) * left + (a // g) * right
        if reduced[row, pivot] == 0:
            continue
        if reduced[row, pivot] < 0:
            reduced[:, pivot] *= -1
        for col in range(pivot):
            q = reduced[row, col] // reduced[row, pivot]
            if q:
                reduced[:, col] -= q * reduced[:, pivot]
        pivot += 1
    return reduced[:, :pivot].copy()


def reduce_columns_by_order(
    basis, orders: Sequence[int]
) -> tuple[np.ndarray, list[int]]:
    """
    Column reduction of a boundary basis whose i-th column carries order
    ``orders[i]``; the subgroup is spanned by ``orders[i] * basis[:, i]``.

    Columns are only combined with columns of the same order t, where
    gcd(t, t) = t keeps the order and the subgroup is preserved. Groups keep
    the order in which their first column appears.
    """
    basis = as_integer_matrix(basis)
    if basis.shape[1] != len(orders):
        raise ValueError(f"{basis.shape[1]} columns for {len(orders)} orders")
    groups: dict[int, list[Index_t]] = {}
    for j, order in enumerate(orders):
        groups.setdefault(int(order), []).append(j)
    blocks = []
    reduced_orders: list[int] = []
    for order, cols in groups.items():
        block = reduce_columns(basis[:, cols])
        blocks.append(block)
        reduced_orders.extend([order] * block.shape[1])
    if not blocks:
        return zeros(basis.shape[0], 0), []
    return np.hstack(blocks), reduced_orders


def express_in_basis(basis: np.ndarray, vectors: np.ndarray) -> np.ndarray:
    """
    Integer coordinates c with ``basis @ c == vectors``.

    `basis` must be in column echelon form (see `reduce_columns`).

    Raises
    ------
    TransformNotInvertible
        If some vector is not an integer combination of the basis columns.
    """
    pivots = pivot_rows(basis)
    if any(p < 0 for p in pivots) or any(
        a >= b for a, b in zip(pivots[:-1], pivots[1:])
    ):
        raise ValueError("basis is not in column echelon form")
    residual = as_integer_matrix(vectors)
    coords = zeros(basis.shape[1], residual.shape[1])
    for i, row in enumerate(pivots):
        lead = basis[row, i]
        for j in range(residual.shape[1]):
            value = residual[row, j]
            if value == 0:
                continue
            if value % lead != 0:
                raise TransformNotInvertible(
                    f"Column {j} has entry {value} at pivot row {row}, "
                    f"not a multiple of {lead}"
                )
            c = value // lead
            coords[i, j] = c
            residual[:, j] -= c * basis[:, i]
    if not is_zero(residual):
        raise TransformNotInvertible(
            "Boundary columns do not lie in the span of the cycle basis"
        )
    return coords


def match_summands(
    cycles: np.ndarray,
    boundaries: np.ndarray,
    orders: Sequence[int],
    verify: bool = DEFAULT_VERIFY_DECOMPOSITION,
) -> tuple[np.ndarray, list[Summand]]:
    """Pair the cycle basis against the boundary subgroup.

    Parameters
    ----------
    cycles : np.ndarray
        Cycle basis in column echelon form.
    boundaries : np.ndarray
        Boundary basis; column i generates the subgroup with ``orders[i]``.
    orders : Sequence[int]
        Orders of the boundary columns.

    Returns
    -------
    tuple[np.ndarray, list[Summand]]
        Generator columns and their summands: unmatched cycles are free,
        cycles matched with order 1 are dropped, cycles matched with order
        t > 1 are Z/t. Free summands come first, then torsion ascending.
        The columns are the aligned basis ``cycles @ p_inv``, which mixes
        the input cycles, so no enumeration order of `cycles` survives.
    """
    n_chains, n_cycles = cycles.shape
    if n_cycles == 0:
        return zeros(n_chains, 0), []

    coords = express_in_basis(cycles, boundaries)
    relations = coords.copy()
    for j, order in enumerate(orders):
        relations[:, j] *= int(order)

    if relations.shape[1] == 0 or is_zero(relations):
        aligned = cycles
        diagonal: list[int] = []
    else:
        snf = smith_normal_form(relations, verify=verify)
        # cycles @ p_inv has the relations d_i * column i
        aligned = int_matmul(cycles, snf.p_inv)
        diagonal = snf.diagonal

    free_cols = list(range(len(diagonal), n_cycles))
    torsion_cols = [(t, i) for i, t in enumerate(diagonal) if t > 1]
    torsion_cols.sort(key=lambda item: item[0])

    columns = [aligned[:, i] for i in free_cols] + [
        aligned[:, i] for _, i in torsion_cols
    ]
    summands = [Summand.free() for _ in free_cols] + [
        Summand.torsion(t) for t, _ in torsion_cols
    ]
    if not columns:
        return zeros(n_chains, 0), []
    return np.column_stack(columns), summands
