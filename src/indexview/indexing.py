"""Public entry points for resolving subscripts."""

import logging
from typing import Any

from indexview._resolve import resolve_dispatch
from indexview.index import Index, format_subscript
from indexview.result import Resolution

logger = logging.getLogger(__name__)


def resolve(base: Any, name: str, *indices: Index, owned: bool = False) -> Resolution:
    """Resolve a subscript against a base container.

    The result says what was selected and how it is exposed:
    a single element (``SCALAR``),
    a window onto existing storage (``VIEW``),
    or a freshly allocated copy (``MATERIALIZED``).
    A view either borrows from ``base``
    or carries a ``Holder`` owning the copy it was taken from.

    Args:
        base: A vector or matrix (numpy or JAX array) or a nested list.
        name: Source-level name of ``base``, used only in error messages.
        *indices: One descriptor per axis (vectors, matrices)
            or nesting level (lists). No descriptors is the identity.
        owned: Set when the caller hands ``base`` over and will not use it again.
            Elements of an owned nested list are moved into the result
            instead of copied.

    Returns:
        The Resolution.

    Raises:
        IndexOutOfRange: If a used position is outside its axis.
            Nothing is accessed before validation.
        TypeError: If the subscript does not fit the shape of ``base``.
    """
    result = resolve_dispatch(base, name, indices, owned)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Resolved %s as %s%s",
            format_subscript(name, indices),
            result.kind.value,
            " (held)" if result.holder is not None else "",
        )
    return result


def rvalue(base: Any, name: str, *indices: Index, owned: bool = False) -> Any:
    """Resolve a subscript and return only the selected value.

    See `resolve` for arguments.
    A returned view stays valid while the value is referenced:
    numpy views keep their base array alive.
    """
    return resolve(base, name, *indices, owned=owned).value
