# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from typing import Annotated, Literal, TypeAlias

from pydantic import Field

SummandKind = Literal["free", "torsion"]

Index_t = Annotated[int, Field(ge=0)]
Size_t = Annotated[int, Field(ge=0)]
Vertex_t = Annotated[int, Field(ge=0)]
# order 1 summands are trivial and never stored
Order_t = Annotated[int, Field(ge=2)]

Simplex: TypeAlias = tuple[Vertex_t, ...]
SimplexLevel: TypeAlias = Annotated[
    tuple[Simplex, ...],
    Field(description="Ordered basis of one chain group"),
]
COOData: TypeAlias = tuple[list[Index_t], list[Index_t], list[int]]
