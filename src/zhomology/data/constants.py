# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

DEFAULT_VERIFY_DECOMPOSITION: bool = True

FREE_SUMMAND_SYMBOL: str = "Z"
TRIVIAL_GROUP_SYMBOL: str = "0"
DIRECT_SUM_SEPARATOR: str = " + "

# legacy encoding of a free summand in an orders list
FREE_ORDER: int = 1
