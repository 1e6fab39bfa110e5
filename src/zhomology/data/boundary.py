# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

from typing import Mapping, Sequence

import numpy as np
from loguru import logger
from pydantic import BaseModel, ValidationInfo, field_validator

from ..errors import MalformedComplex
from .complex import SimplicialComplex
from .types import COOData, Index_t, Simplex, Size_t
from .utils import int_matmul, is_zero, permutation_parity, zeros


class BoundaryMatrix(BaseModel):
    """
    Signed incidence matrix of the boundary operator from k-chains to
    (k-1)-chains. Rows follow the (k-1)-simplex basis, columns the k-simplex
    basis.
    """

    dimension: Index_t
    shape: tuple[Size_t, Size_t]
    data: COOData  # coo format (row indices, col indices, values)
    row_simplices: list[Simplex]
    col_simplices: list[Simplex]

    @field_validator("data", mode="after")
    @classmethod
    def validate_data(cls, v: COOData, info: ValidationInfo):
        shape = info.data.get("shape")
        assert shape
        rows, cols, vals = v
        if not len(rows) == len(cols) == len(vals):
            raise ValueError("COO rows, cols and values must have the same length")
        if any(i >= shape[0] for i in rows) or any(j >= shape[1] for j in cols):
            raise ValueError(f"COO index out of range for a matrix of shape {shape}")
        return v

    @field_validator("row_simplices", "col_simplices", mode="after")
    @classmethod
    def validate_simplices(cls, v: list[Simplex], info: ValidationInfo):
        shape = info.data.get("shape")
        assert shape
        if info.field_name == "row_simplices":
            if len(v) != shape[0]:
                raise ValueError(
                    f"Length of {info.field_name} does not match the number of rows of the matrix"
                )
        elif len(v) != shape[1]:
            raise ValueError(
                f"Length of {info.field_name} does not match the number of columns of the matrix"
            )
        return v

    @property
    def nnz(self) -> Size_t:
        return sum(1 for val in self.data[2] if val != 0)

    @property
    def is_zero(self) -> bool:
        return self.nnz == 0

    def to_dense(self) -> np.ndarray:
        dense = zeros(*self.shape)
        for i, j, val in zip(*self.data):
            dense[i, j] += val
        return dense


def permutation_sign(face: Sequence, stored: Sequence) -> int:
    """
    Orientation of `face` relative to the basis simplex `stored` with the
    same vertex set.
    """
    if len(face) <= 1:
        return 1
    return permutation_parity(tuple(face), tuple(stored))


def compute_boundary_matrix(
    lower: Sequence[Simplex],
    upper: Sequence[Simplex],
    dimension: Index_t,
    lookup: Mapping[frozenset, Index_t] | None = None,
) -> BoundaryMatrix:
    """
    Build the boundary operator from the ``dimension``-simplices in `upper`
    to the (``dimension`` - 1)-simplices in `lower`.

    `lookup` maps vertex sets of `lower` to their row index (see
    `SimplicialComplex.index_of`); it is built from `lower` when omitted.

    Raises
    ------
    MalformedComplex
        If a face of some simplex in `upper` is missing from `lower`.
    """
    if lookup is None:
        lookup = {frozenset(s): i for i, s in enumerate(lower)}
    rows, cols, vals = [], [], []
    for j, simplex in enumerate(upper):
        for i in range(len(simplex)):
            face = tuple(simplex[:i]) + tuple(simplex[i + 1 :])
            row = lookup.get(frozenset(face))
            if row is None:
                raise MalformedComplex(tuple(simplex), face, dimension)
            rows.append(row)
            cols.append(j)
            vals.append((-1) ** i * permutation_sign(face, lower[row]))
    return BoundaryMatrix(
        dimension=dimension,
        shape=(len(lower), len(upper)),
        data=(rows, cols, vals),
        row_simplices=[tuple(s) for s in lower],
        col_simplices=[tuple(s) for s in upper],
    )


def compute_boundary_matrices(
    simplicial_complex: SimplicialComplex,
) -> list[BoundaryMatrix]:
    """
    Boundary operators d_0, ..., d_{top + 1} of `simplicial_complex`.

    d_0 maps every vertex into a single empty row and d_{top + 1} has no
    columns, so both are zero maps and every dimension sees a pair
    (d_k, d_{k + 1}).
    """
    levels = simplicial_complex.simplices
    top = simplicial_complex.dimension
    matrices = [
        BoundaryMatrix(
            dimension=0,
            shape=(1, len(levels[0])),
            data=([], [], []),
            row_simplices=[()],
            col_simplices=list(levels[0]),
        )
    ]
    for k in range(1, top + 1):
        matrices.append(
            compute_boundary_matrix(
                levels[k - 1], levels[k], k, simplicial_complex.index_of(k - 1)
            )
        )
    matrices.append(
        BoundaryMatrix(
            dimension=top + 1,
            shape=(len(levels[top]), 0),
            data=([], [], []),
            row_simplices=list(levels[top]),
            col_simplices=[],
        )
    )
    for m in matrices:
        logger.debug(f"Boundary matrix d_{m.dimension}: shape {m.shape}, nnz {m.nnz}")
    return matrices


def check_boundary_condition(matrices: Sequence[BoundaryMatrix]) -> bool:
    """True when d_{k-1} @ d_k vanishes for every consecutive pair."""
    for lower, upper in zip(matrices[:-1], matrices[1:]):
        product = int_matmul(lower.to_dense(), upper.to_dense())
        if not is_zero(product):
            logger.warning(
                f"d_{lower.dimension} @ d_{upper.dimension} does not vanish"
            )
            return False
    return True
