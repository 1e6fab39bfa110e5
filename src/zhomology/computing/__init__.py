"""Exact integer linear algebra behind the homology computation."""
# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)

from .homology import (
    compute_boundary_basis,
    compute_cycle_basis,
    compute_homology_group,
    compute_homology_groups,
)
from .reduction import (
    express_in_basis,
    match_summands,
    pivot_rows,
    reduce_columns,
    reduce_columns_by_order,
)
from .smith import find_pivot, smith_normal_form, verify_decomposition

__all__ = [
    "compute_boundary_basis",
    "compute_cycle_basis",
    "compute_homology_group",
    "compute_homology_groups",
    "express_in_basis",
    "match_summands",
    "pivot_rows",
    "reduce_columns",
    "reduce_columns_by_order",
    "find_pivot",
    "smith_normal_form",
    "verify_decomposition",
]
