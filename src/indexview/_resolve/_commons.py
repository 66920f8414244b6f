"""Types and helpers shared by the vector, matrix, and nested-list rules."""

from collections.abc import Callable, Sequence
from typing import Any

import jax
import numpy as np

from indexview.bounds import check_range
from indexview.index import Index, Max, Min, MinMax, Omni
from indexview.result import Resolution

Indices = tuple[Index, ...]
"""A subscript: one descriptor per axis or nesting level."""

ResolveFn = Callable[[Any, str, Indices, bool], Resolution]
"""Signature of ``resolve_dispatch``, passed as callback to break circular imports."""


# Container shapes


def is_array(value: object) -> bool:
    """Whether ``value`` is a numpy or JAX array."""
    return isinstance(value, (np.ndarray, jax.Array))


def ndim(value: object) -> int:
    """Rank of an array, 0 for anything that is not an array."""
    return value.ndim if is_array(value) else 0


def is_container(value: object) -> bool:
    """Whether ``value`` can be indexed further (list, vector, or matrix)."""
    return isinstance(value, list) or ndim(value) >= 1


def container_result(value: Any, owned: bool) -> Resolution:
    """Wrap a value handed back whole.

    A borrowed container is a view of the caller's storage;
    an owned one is handed over and is independent of any base.
    """
    if not is_container(value):
        return Resolution.scalar(value)
    return Resolution.materialized(value) if owned else Resolution.view(value)


# Positions


def label(prefix: str, axis: str = "", endpoint: str = "") -> str:
    """Build an operation label such as ``"matrix[min_max] max row indexing"``."""
    return " ".join(part for part in (prefix, endpoint, axis, "indexing") if part)


def zero_based(ns: Sequence[int]) -> np.ndarray:
    """Convert validated 1-based positions to a 0-based integer index array."""
    return np.asarray(ns, dtype=np.intp) - 1


def check_lower(
    prefix: str, name: str, extent: int, idx: Index, axis: str = ""
) -> None:
    """Validate only the lower endpoint of a ``Min`` or ``MinMax``."""
    match idx:
        case Min(min=lo):
            check_range(label(prefix, axis), name, extent, lo)
        case MinMax(min=lo):
            check_range(label(prefix, axis, "min"), name, extent, lo)


def span(prefix: str, name: str, extent: int, idx: Index, axis: str = "") -> slice:
    """Validate a range descriptor and return the 0-based slice it denotes.

    Only the endpoints that are actually used are checked:
    ``Max(<=0)`` checks nothing and
    ``MinMax`` with ``max < min`` checks only ``min``.
    Empty selections are anchored at their lower bound.
    """
    match idx:
        case Omni():
            return slice(None)
        case Min(min=lo):
            check_range(label(prefix, axis), name, extent, lo)
            return slice(lo - 1, extent)
        case Max(max=hi):
            if hi <= 0:
                return slice(0, 0)
            check_range(label(prefix, axis), name, extent, hi)
            return slice(0, hi)
        case MinMax(min=lo, max=hi):
            check_range(label(prefix, axis, "min"), name, extent, lo)
            if hi < lo:
                return slice(lo - 1, lo - 1)
            check_range(label(prefix, axis, "max"), name, extent, hi)
            return slice(lo - 1, hi)
    msg = f"{type(idx).__name__} does not select a contiguous span"
    raise TypeError(msg)


# Copies


def plain(value: Any) -> Any:
    """Deep-copy mutable storage so the result no longer aliases its source.

    JAX arrays and scalars are immutable and returned as is.
    """
    if isinstance(value, np.ndarray):
        return value.copy()
    if isinstance(value, list):
        return [plain(item) for item in value]
    return value
