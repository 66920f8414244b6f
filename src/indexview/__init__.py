"""indexview - Subscript resolution for array modeling languages.

Resolves 1-based index descriptors against vectors, matrices,
and nested lists, returning a scalar, a view sharing storage
with the base, or a materialized copy.
Contiguous selections are views; only non-contiguous ones are copied.
"""

from indexview.bounds import IndexOutOfRange, check_all, check_range
from indexview.holder import Holder, make_holder
from indexview.index import (
    Index,
    Max,
    Min,
    MinMax,
    Multi,
    Omni,
    Uni,
    format_subscript,
    index_at,
    index_size,
    positions,
)
from indexview.indexing import resolve, rvalue
from indexview.result import Resolution, ResultKind

__all__ = [
    "Holder",
    "Index",
    "IndexOutOfRange",
    "Max",
    "Min",
    "MinMax",
    "Multi",
    "Omni",
    "Resolution",
    "ResultKind",
    "Uni",
    "check_all",
    "check_range",
    "format_subscript",
    "index_at",
    "index_size",
    "make_holder",
    "positions",
    "resolve",
    "rvalue",
]
