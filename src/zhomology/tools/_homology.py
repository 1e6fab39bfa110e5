# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

from typing import Sequence

from ..computing.homology import compute_homology_groups
from ..data.complex import SimplicialComplex
from ..data.constants import DEFAULT_VERIFY_DECOMPOSITION
from ..data.containers import HomologyGroup
from ..data.types import Size_t

__all__ = ["homology", "betti_numbers", "torsion_coefficients"]


def _as_complex(simplices: SimplicialComplex | Sequence) -> SimplicialComplex:
    if isinstance(simplices, SimplicialComplex):
        return simplices
    return SimplicialComplex(simplices=simplices)


def homology(
    simplices: SimplicialComplex | Sequence,
    verify: bool = DEFAULT_VERIFY_DECOMPOSITION,
    verbose: bool = False,
) -> list[HomologyGroup]:
    """
    Integral homology of a simplicial complex, one record per dimension.

    `simplices` is a `SimplicialComplex` or its per-dimension simplex lists,
    e.g. ``[vertices, edges, triangles]``.
    """
    sc = _as_complex(simplices)
    groups = compute_homology_groups(sc, verify=verify)
    if verbose:
        from ..utils.display import print_homology

        print_homology(groups)
    return groups


def betti_numbers(
    simplices: SimplicialComplex | Sequence,
    verify: bool = DEFAULT_VERIFY_DECOMPOSITION,
) -> list[Size_t]:
    return [g.betti_number for g in homology(simplices, verify=verify)]


def torsion_coefficients(
    simplices: SimplicialComplex | Sequence,
    verify: bool = DEFAULT_VERIFY_DECOMPOSITION,
) -> list[list[int]]:
    return [g.torsion for g in homology(simplices, verify=verify)]
