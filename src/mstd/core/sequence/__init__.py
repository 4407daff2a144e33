"""
Immutable sequences: core операции и combinators.

Sequence = tuple; входные sequences никогда не изменяются.
"""

from mstd.core.sequence.array import (
    array_get,
    array_set,
    average,
    create_array,
    seq_length,
    seq_sum,
)
from mstd.core.sequence.combinators import (
    seq_filter,
    seq_map,
    seq_reverse,
    seq_sort,
)

__all__ = [
    # Core
    "create_array",
    "array_get",
    "array_set",
    "seq_length",
    "seq_sum",
    "average",
    # Combinators
    "seq_map",
    "seq_filter",
    "seq_reverse",
    "seq_sort",
]
