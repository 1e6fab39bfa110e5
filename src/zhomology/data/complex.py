# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

import numbers

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import Index_t, Simplex, SimplexLevel, Size_t


class SimplicialComplex(BaseModel):
    """Ordered simplex lists per dimension.

    Attributes
    ----------
    simplices : tuple[tuple[Simplex, ...], ...]
        ``simplices[k]`` is the ordered basis of the k-th chain group. The
        vertex order of each simplex fixes its orientation.
    """

    model_config = ConfigDict(frozen=True)

    simplices: tuple[SimplexLevel, ...] = Field(min_length=1)

    @field_validator("simplices", mode="before")
    @classmethod
    def wrap_bare_vertices(cls, v):
        levels = list(v)
        if levels and all(isinstance(s, numbers.Integral) for s in levels[0]):
            levels[0] = [(int(s),) for s in levels[0]]
        return levels

    @field_validator("simplices", mode="after")
    @classmethod
    def check_levels(cls, v: tuple[SimplexLevel, ...]):
        for dim, level in enumerate(v):
            seen: set[frozenset] = set()
            for simplex in level:
                if len(simplex) != dim + 1:
                    raise ValueError(
                        f"Simplex {simplex} at dimension {dim} must have {dim + 1} vertices"
                    )
                vertex_set = frozenset(simplex)
                if len(vertex_set) != len(simplex):
                    raise ValueError(f"Simplex {simplex} repeats a vertex")
                if vertex_set in seen:
                    raise ValueError(
                        f"Simplex {simplex} appears more than once at dimension {dim}"
                    )
                seen.add(vertex_set)
        return v

    @classmethod
    def from_simplices(cls, *levels) -> SimplicialComplex:
        return cls(simplices=levels)

    @property
    def dimension(self) -> Index_t:
        return len(self.simplices) - 1

    def n_simplices(self, k: Index_t) -> Size_t:
        if k > self.dimension:
            return 0
        return len(self.simplices[k])

    @property
    def chain_ranks(self) -> list[Size_t]:
        return [len(level) for level in self.simplices]

    @property
    def euler_characteristic(self) -> int:
        return sum((-1) ** k * n for k, n in enumerate(self.chain_ranks))

    def index_of(self, k: Index_t) -> dict[frozenset, Index_t]:
        """Vertex set -> basis index for the k-simplices."""
        return {frozenset(s): i for i, s in enumerate(self.simplices[k])}

    def __getitem__(self, k: Index_t) -> tuple[Simplex, ...]:
        return self.simplices[k]
