from . import tools as tl
from .computing import compute_homology_groups, smith_normal_form
from .data import HomologyGroup, SimplicialComplex, Summand
from .errors import (
    DegenerateMatrix,
    HomologyError,
    InvariantViolation,
    MalformedComplex,
    TransformNotInvertible,
)
from .tools import betti_numbers, homology, torsion_coefficients

__version__ = "0.1.0"

__all__ = [
    "tl",
    "compute_homology_groups",
    "smith_normal_form",
    "HomologyGroup",
    "SimplicialComplex",
    "Summand",
    "DegenerateMatrix",
    "HomologyError",
    "InvariantViolation",
    "MalformedComplex",
    "TransformNotInvertible",
    "betti_numbers",
    "homology",
    "torsion_coefficients",
]
