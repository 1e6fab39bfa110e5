# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

import numpy as np
from pydantic import ConfigDict, Field, model_validator
from pydantic.dataclasses import dataclass
from typing_extensions import Self

from .constants import (
    DIRECT_SUM_SEPARATOR,
    FREE_ORDER,
    FREE_SUMMAND_SYMBOL,
    TRIVIAL_GROUP_SYMBOL,
)
from .types import Index_t, Order_t, Size_t, SummandKind


@dataclass(frozen=True)
class Summand:
    kind: SummandKind
    order: Order_t | None = None

    @model_validator(mode="after")
    def check_order(self) -> Self:
        if self.kind == "free" and self.order is not None:
            raise ValueError("free summands have infinite order")
        if self.kind == "torsion" and self.order is None:
            raise ValueError("torsion summands need a finite order")
        return self

    @classmethod
    def free(cls) -> Summand:
        return cls(kind="free")

    @classmethod
    def torsion(cls, order: int) -> Summand:
        return cls(kind="torsion", order=order)

    @property
    def is_free(self) -> bool:
        return self.kind == "free"

    def __str__(self) -> str:
        if self.is_free:
            return FREE_SUMMAND_SYMBOL
        return f"{FREE_SUMMAND_SYMBOL}/{self.order}"


@dataclass(config=ConfigDict(arbitrary_types_allowed=True))
class HomologyGroup:
    """Homology of one dimension as a direct sum of cyclic summands.

    Attributes
    ----------
    dimension : int
        Dimension k of the chain group the generators live in.
    generators : np.ndarray
        Integer matrix whose columns are representative k-cycles, written in
        the k-simplex basis, one column per summand.
    summands : list[Summand]
        Summand generated by the matching column of `generators`.
    """

    dimension: Index_t
    generators: np.ndarray
    summands: list[Summand] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_generators(self) -> Self:
        if self.generators.ndim != 2:
            raise ValueError("generators must be a 2D matrix")
        if self.generators.shape[1] != len(self.summands):
            raise ValueError(
                f"{self.generators.shape[1]} generators for {len(self.summands)} summands"
            )
        return self

    @property
    def betti_number(self) -> Size_t:
        return sum(1 for s in self.summands if s.is_free)

    @property
    def torsion(self) -> list[int]:
        return [s.order for s in self.summands if not s.is_free]

    @property
    def orders(self) -> list[int]:
        return [FREE_ORDER if s.is_free else s.order for s in self.summands]

    @property
    def is_trivial(self) -> bool:
        return len(self.summands) == 0

    def __str__(self) -> str:
        if self.is_trivial:
            return TRIVIAL_GROUP_SYMBOL
        parts = []
        if self.betti_number == 1:
            parts.append(FREE_SUMMAND_SYMBOL)
        elif self.betti_number > 1:
            parts.append(f"{FREE_SUMMAND_SYMBOL}^{self.betti_number}")
        parts.extend(str(s) for s in self.summands if not s.is_free)
        return DIRECT_SUM_SEPARATOR.join(parts)


@dataclass(config=ConfigDict(arbitrary_types_allowed=True))
class SmithDecomposition:
    """p @ matrix @ q == d, with p_inv and q_inv the exact inverses."""

    p: np.ndarray
    p_inv: np.ndarray
    q: np.ndarray
    q_inv: np.ndarray
    d: np.ndarray
    rank: Size_t

    @property
    def shape(self) -> tuple[Size_t, Size_t]:
        return self.d.shape

    @property
    def diagonal(self) -> list[int]:
        return [self.d[i, i] for i in range(self.rank)]
