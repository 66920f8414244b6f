"""Resolution rules for nested lists."""

from indexview.bounds import check_all, check_range
from indexview.index import (
    Index,
    Max,
    Min,
    MinMax,
    Multi,
    Uni,
    index_at,
    index_size,
)
from indexview.result import Resolution, ResultKind

from ._commons import Indices, ResolveFn, container_result, plain


def resolve_nested(
    v: list, name: str, indices: Indices, owned: bool, resolve_fn: ResolveFn
) -> Resolution:
    """Apply the head descriptor to a list and recurse the rest into its elements.

    Lists may hold scalars, vectors, matrices, or further lists,
    so each element is resolved through the top-level dispatcher.

    Example: v = [[1, 2], [3, 4, 5]]
        v[2, 3]    -> 5
        v[:, 1]    -> [1, 3]
        v[2, 2:]   -> [4, 5]
        v[5:3, 9]  -> []  (nothing is selected, so 9 is never checked)

    Args:
        v: The list.
        name: Variable name for diagnostics.
        indices: Non-empty subscript; ``indices[0]`` applies to ``v``.
        owned: Whether ``v`` is handed over by the caller.
            Elements of an owned list are moved into the result;
            elements of a borrowed list are returned by reference
            for a single position and copied into new lists otherwise.
        resolve_fn: Callback for resolving an element.

    Raises:
        IndexOutOfRange: If a used position is outside ``1..len(v)``.
    """
    head, tail = indices[0], indices[1:]
    size = len(v)

    if isinstance(head, Uni):
        check_range("array[uni, ...] index", name, size, head.n)
        element = v[head.n - 1]
        if tail:
            return resolve_fn(element, name, tail, owned)
        return container_result(element, owned)

    _check_head("array[..., ...] index", name, size, head)
    n_selected = index_size(head, size)
    if n_selected == 0 and isinstance(head, (Max, MinMax)):
        return Resolution.materialized([])

    # A Multi may select the same position twice, so its elements are never moved.
    move = owned and not isinstance(head, Multi)
    result = []
    for i in range(n_selected):
        element = v[index_at(i, head) - 1]
        if tail:
            inner = resolve_fn(element, name, tail, move)
        else:
            inner = container_result(element, move)
        if move or inner.kind is not ResultKind.VIEW:
            result.append(inner.value)
        else:
            result.append(plain(inner.value))
    return Resolution.materialized(result)


def _check_head(op: str, name: str, size: int, head: Index) -> None:
    """Validate every position the head descriptor uses, before any access.

    Only the endpoints a range actually reaches are checked.
    """
    match head:
        case Multi(ns=ns):
            check_all(op, name, size, ns)
        case Min(min=lo):
            check_range(op, name, size, lo)
        case Max(max=hi) if hi > 0:
            check_range(op, name, size, hi)
        case MinMax(min=lo, max=hi):
            check_range(op, name, size, lo)
            if hi >= lo:
                check_range(op, name, size, hi)
