"""Resolution rules for one-dimensional containers."""

from typing import Any

from indexview.bounds import check_all, check_range
from indexview.index import Index, Multi, Omni, Uni
from indexview.result import Resolution

from ._commons import label, span, zero_based


def resolve_vector(
    v: Any, name: str, idx: Index, *, op: str | None = None, axis: str = ""
) -> Resolution:
    """Apply one descriptor to a vector.

    Contiguous selections (``Omni``, ``Min``, ``Max``, ``MinMax``) are views
    of ``v``; a single position is a scalar;
    only ``Multi`` gathers into a new vector,
    since a reordering or repeating selection cannot be a strided view.

    Example: v = [10, 20, 30, 40]
        v[2:3]      -> view [20, 30]
        v[{3,1,3}]  -> copy [30, 10, 30]
        v[5:3]      -> empty view, no error

    Args:
        v: Vector being indexed, or a row/column of a matrix.
        name: Variable name for diagnostics.
        idx: The descriptor.
        op: Operation label prefix for diagnostics.
            Defaults to ``"vector[<kind>]"``;
            the matrix rules pass their own when resolving along a row or column.
        axis: Axis named in diagnostics (``"row"``, ``"column"``, or empty).

    Raises:
        IndexOutOfRange: If a used position is outside ``1..len(v)``.
    """
    extent = v.shape[0]
    if op is None:
        op = f"vector[{idx.kind}]"
    match idx:
        case Uni(n=n):
            check_range(label(op, axis), name, extent, n)
            return Resolution.scalar(v[n - 1])
        case Omni():
            return Resolution.view(v)
        case Multi(ns=ns):
            check_all(label(op, axis), name, extent, ns)
            return Resolution.materialized(v[zero_based(ns)])
        case _:
            return Resolution.view(v[span(op, name, extent, idx, axis)])
