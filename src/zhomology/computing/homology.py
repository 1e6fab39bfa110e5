# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

import numpy as np
from loguru import logger

from ..data.boundary import compute_boundary_matrices
from ..data.complex import SimplicialComplex
from ..data.constants import DEFAULT_VERIFY_DECOMPOSITION
from ..data.containers import HomologyGroup
from ..data.types import Index_t
from ..data.utils import as_integer_matrix, identity, is_zero, zeros
from .reduction import match_summands, reduce_columns, reduce_columns_by_order
from .smith import smith_normal_form


def compute_cycle_basis(
    boundary_k, verify: bool = DEFAULT_VERIFY_DECOMPOSITION
) -> np.ndarray:
    """
    Basis of the kernel of `boundary_k`: the columns of q past the rank.
    A zero map (d_0 included) has every chain as a cycle.
    """
    boundary_k = as_integer_matrix(boundary_k)
    if is_zero(boundary_k):
        return identity(boundary_k.shape[1])
    snf = smith_normal_form(boundary_k, verify=verify)
    return snf.q[:, snf.rank :].copy()


def compute_boundary_basis(
    boundary_k1, verify: bool = DEFAULT_VERIFY_DECOMPOSITION
) -> tuple[np.ndarray, list[int]]:
    """
    Basis of the image of `boundary_k1` up to the invariant factors.

    Returns the first rank columns of p^-1 and the diagonal entries of d:
    the image is spanned by ``orders[i] * basis[:, i]``.
    """
    boundary_k1 = as_integer_matrix(boundary_k1)
    n_chains, n_cols = boundary_k1.shape
    if n_cols == 0 or is_zero(boundary_k1):
        return zeros(n_chains, 0), []
    snf = smith_normal_form(boundary_k1, verify=verify)
    return snf.p_inv[:, : snf.rank].copy(), snf.diagonal


def compute_homology_group(
    boundary_k,
    boundary_k1,
    dimension: Index_t,
    verify: bool = DEFAULT_VERIFY_DECOMPOSITION,
) -> HomologyGroup:
    """Homology in one dimension from d_k and d_{k+1}.

    Parameters
    ----------
    boundary_k : array-like
        Boundary operator leaving the k-chains (k-chains index the columns).
    boundary_k1 : array-like
        Boundary operator arriving at the k-chains (k-chains index the rows).
    dimension : int
        k, recorded on the result.
    verify : bool
        Verify every Smith decomposition on the way.
    """
    boundary_k = as_integer_matrix(boundary_k)
    boundary_k1 = as_integer_matrix(boundary_k1)
    if boundary_k.shape[1] != boundary_k1.shape[0]:
        raise ValueError(
            f"d_{dimension} has {boundary_k.shape[1]} columns but "
            f"d_{dimension + 1} has {boundary_k1.shape[0]} rows"
        )

    cycles = reduce_columns(compute_cycle_basis(boundary_k, verify=verify))
    boundaries, orders = compute_boundary_basis(boundary_k1, verify=verify)
    boundaries, orders = reduce_columns_by_order(boundaries, orders)
    logger.debug(
        f"Dimension {dimension}: {cycles.shape[1]} cycles, "
        f"{boundaries.shape[1]} boundaries"
    )

    generators, summands = match_summands(cycles, boundaries, orders, verify=verify)
    group = HomologyGroup(dimension=dimension, generators=generators, summands=summands)
    logger.info(f"H_{dimension} = {group}")
    return group


def compute_homology_groups(
    simplicial_complex: SimplicialComplex,
    verify: bool = DEFAULT_VERIFY_DECOMPOSITION,
) -> list[HomologyGroup]:
    """One homology record per dimension, 0 up to the top dimension."""
    if not verify:
        logger.warning("Smith decompositions will not be verified")
    boundaries = [m.to_dense() for m in compute_boundary_matrices(simplicial_complex)]
    return [
        compute_homology_group(boundaries[k], boundaries[k + 1], k, verify=verify)
        for k in range(simplicial_complex.dimension + 1)
    ]
