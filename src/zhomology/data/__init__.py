from .boundary import (
    BoundaryMatrix,
    check_boundary_condition,
    compute_boundary_matrices,
    compute_boundary_matrix,
    permutation_sign,
)
from .complex import SimplicialComplex
from .containers import HomologyGroup, SmithDecomposition, Summand

__all__ = [
    "BoundaryMatrix",
    "HomologyGroup",
    "SimplicialComplex",
    "SmithDecomposition",
    "Summand",
    "check_boundary_condition",
    "compute_boundary_matrices",
    "compute_boundary_matrix",
    "permutation_sign",
]
