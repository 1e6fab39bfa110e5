# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations


class HomologyError(Exception):
    """Base class for every error raised by zhomology."""


class MalformedComplex(HomologyError, ValueError):
    def __init__(self, simplex: tuple, face: tuple, dimension: int):
        self.simplex = simplex
        self.face = face
        self.dimension = dimension
        super().__init__(
            f"Face {face} of {dimension}-simplex {simplex} is not a "
            f"{dimension - 1}-simplex of the complex"
        )


class DegenerateMatrix(HomologyError, ValueError):
    pass


class InvariantViolation(HomologyError, RuntimeError):
    """Internal bookkeeping went wrong; the input is not to blame."""


class TransformNotInvertible(InvariantViolation):
    pass
