from ._homology import betti_numbers, homology, torsion_coefficients

__all__ = ["betti_numbers", "homology", "torsion_coefficients"]
