"""Dispatch a subscript to the rule for its container shape.

Each container shape has a module of rules:
vectors apply one descriptor,
matrices apply a (row, column) pair,
and nested lists apply the head descriptor and recurse the rest
into the selected elements through ``resolve_dispatch``.

The main entry point is `resolve_dispatch`.
"""

from typing import Any

from indexview.index import Omni, is_index
from indexview.result import Resolution

from ._commons import Indices, container_result, ndim
from ._matrix import resolve_matrix, resolve_rows
from ._nested import resolve_nested
from ._vector import resolve_vector

__all__ = [
    "resolve_dispatch",
    "resolve_matrix",
    "resolve_nested",
    "resolve_rows",
    "resolve_vector",
]


def resolve_dispatch(
    base: Any, name: str, indices: Indices, owned: bool = False
) -> Resolution:
    """Resolve ``indices`` against ``base``.

    Args:
        base: A vector or matrix (numpy or JAX array),
            a nested list, or a scalar payload.
        name: Variable name for diagnostics.
        indices: One descriptor per axis or nesting level. May be empty.
        owned: Whether the caller hands ``base`` over.

    Returns:
        The resolution result.

    Raises:
        IndexOutOfRange: If any used position is out of range.
        TypeError: If the subscript does not fit the container's shape.
    """
    for idx in indices:
        if not is_index(idx):
            msg = f"Expected an index descriptor, got {type(idx).__name__}"
            raise TypeError(msg)

    # An empty or all-Omni subscript is the identity for every shape.
    if all(isinstance(idx, Omni) for idx in indices):
        return container_result(base, owned)
    if isinstance(base, list):
        return resolve_nested(base, name, indices, owned, resolve_dispatch)

    rank = ndim(base)
    if len(indices) > rank:
        msg = (
            f"Cannot index {name} with {len(indices)} "
            f"{'index' if len(indices) == 1 else 'indices'}: "
            f"{_shape_name(base)} accepts at most {rank}"
        )
        raise TypeError(msg)

    match rank, indices:
        case 1, (idx,):
            return resolve_vector(base, name, idx)
        case 2, (row_idx,):
            return resolve_matrix(base, name, row_idx)
        case 2, (row_idx, col_idx):
            return resolve_matrix(base, name, row_idx, col_idx)

    msg = f"Unsupported container for indexing: {_shape_name(base)}"
    raise TypeError(msg)


def _shape_name(value: Any) -> str:
    match ndim(value):
        case 0:
            return f"scalar of type {type(value).__name__}"
        case 1:
            return "a vector"
        case 2:
            return "a matrix"
        case rank:
            return f"an array of rank {rank}"
