"""Resolution rules for two-dimensional containers.

A matrix subscript is a (row, column) pair;
a single descriptor selects rows and keeps every column.
The pure cases below are shortcuts of one general rule:
select columns first, then apply the row descriptor to the result.
"""

from typing import Any

import numpy as np

from indexview.bounds import check_all, check_range
from indexview.holder import make_holder
from indexview.index import Index, Multi, Omni, Uni, is_range
from indexview.result import Resolution

from ._commons import check_lower, label, span, zero_based
from ._vector import resolve_vector


def resolve_matrix(
    x: Any, name: str, row_idx: Index, col_idx: Index | None = None
) -> Resolution:
    """Apply a row descriptor and an optional column descriptor to a matrix.

    Example: x with x[i, j] = 10*i + j, shape (4, 4)
        x[2:3, 2:3]      -> view  [[22, 23], [32, 33]]
        x[{3,1}, {2,2}]  -> copy  [[32, 32], [12, 12]]
        x[2, {4,1}]      -> copy  [24, 21]
        x[:, 3]          -> view  [13, 23, 33, 43]

    Raises:
        IndexOutOfRange: If a used row or column position is out of range.
            The operation label names the failing axis.
    """
    if col_idx is None or isinstance(col_idx, Omni):
        return resolve_rows(x, name, row_idx)

    n_rows, n_cols = x.shape
    match row_idx, col_idx:
        case Uni(n=i), Uni(n=j):
            op = "matrix[uni, uni]"
            check_range(label(op, "row"), name, n_rows, i)
            check_range(label(op, "column"), name, n_cols, j)
            return Resolution.scalar(x[i - 1, j - 1])
        case Uni(n=i), _:
            op = f"matrix[uni, {col_idx.kind}]"
            check_range(label(op, "row"), name, n_rows, i)
            return resolve_vector(x[i - 1], name, col_idx, op=op, axis="column")
        case _, Uni(n=j):
            op = f"matrix[{row_idx.kind}, uni]"
            check_range(label(op, "column"), name, n_cols, j)
            return resolve_vector(x[:, j - 1], name, row_idx, op=op, axis="row")
        case Multi(ns=rows), Multi(ns=cols):
            op = "matrix[multi, multi]"
            check_all(label(op, "row"), name, n_rows, rows)
            check_all(label(op, "column"), name, n_cols, cols)
            return Resolution.materialized(x[np.ix_(zero_based(rows), zero_based(cols))])
        case _ if is_range(row_idx) and is_range(col_idx):
            op = f"matrix[{row_idx.kind}, {col_idx.kind}]"
            # Both lower bounds are checked before either upper bound.
            check_lower(op, name, n_rows, row_idx, "row")
            check_lower(op, name, n_cols, col_idx, "column")
            row_span = span(op, name, n_rows, row_idx, "row")
            col_span = span(op, name, n_cols, col_idx, "column")
            return Resolution.view(x[row_span, col_span])
        case _:
            return _resolve_columns_then_rows(x, name, row_idx, col_idx)


def resolve_rows(x: Any, name: str, idx: Index) -> Resolution:
    """Select rows of a matrix, keeping every column."""
    n_rows = x.shape[0]
    op = f"matrix[{idx.kind}]"
    match idx:
        case Uni(n=i):
            check_range(label(op), name, n_rows, i)
            return Resolution.view(x[i - 1])
        case Omni():
            return Resolution.view(x)
        case Multi(ns=rows):
            check_all(label(op, "row"), name, n_rows, rows)
            return Resolution.materialized(x[zero_based(rows)])
        case _:
            return Resolution.view(x[span(op, name, n_rows, idx, "row")])


def _resolve_columns_then_rows(
    x: Any, name: str, row_idx: Index, col_idx: Index
) -> Resolution:
    """General rule: select columns against the full matrix, then rows.

    A contiguous column range is a view of ``x``,
    so the row selection borrows from the caller's base as well.
    A ``Multi`` column selection is a copy that only this call owns;
    a row view into it is returned together with a holder owning the copy.
    """
    n_cols = x.shape[1]
    op = f"matrix[..., {col_idx.kind}]"
    if not isinstance(col_idx, Multi):
        columns = x[:, span(op, name, n_cols, col_idx, "column")]
        return resolve_rows(columns, name, row_idx)

    check_all(label(op, "column"), name, n_cols, col_idx.ns)
    gathered = x[:, zero_based(col_idx.ns)]
    if isinstance(row_idx, Omni):
        return Resolution.materialized(gathered)
    holder = make_holder(_row_view, gathered, name, row_idx)
    return Resolution.held(holder)


def _row_view(owned: Any, name: str, row_idx: Index) -> Any:
    return resolve_rows(owned, name, row_idx).value
