"""Index descriptors: the six ways a subscript can select positions along one axis.

All positions are 1-based.
Descriptors carry no upper bound;
they are checked against the extent of the axis they are applied to
at resolution time.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import ClassVar

import numpy as np


def _as_position(value: object, what: str) -> int:
    """Coerce an integer-like value to ``int``, rejecting bools and floats."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        msg = f"{what} must be an integer, got {type(value).__name__}"
        raise TypeError(msg)
    return int(value)


@dataclass(frozen=True)
class Uni:
    """A single position ``n``."""

    n: int
    kind: ClassVar[str] = "uni"

    def __post_init__(self) -> None:
        object.__setattr__(self, "n", _as_position(self.n, "Uni index"))

    def __str__(self) -> str:
        return str(self.n)


@dataclass(frozen=True)
class Multi:
    """An ordered sequence of positions.

    Duplicates and non-monotonic order are allowed;
    the selection follows ``ns`` exactly.
    """

    ns: tuple[int, ...] = field(default=())
    kind: ClassVar[str] = "multi"

    def __post_init__(self) -> None:
        ns = self.ns
        if not isinstance(ns, (list, tuple)):
            ns = np.asarray(ns).ravel().tolist()
        object.__setattr__(
            self, "ns", tuple(_as_position(n, "Multi index") for n in ns)
        )

    def __len__(self) -> int:
        return len(self.ns)

    def __str__(self) -> str:
        return "{" + ",".join(str(n) for n in self.ns) + "}"


@dataclass(frozen=True)
class Omni:
    """Every position, in order."""

    kind: ClassVar[str] = "omni"

    def __str__(self) -> str:
        return ":"


@dataclass(frozen=True)
class Min:
    """Positions ``min..extent``."""

    min: int
    kind: ClassVar[str] = "min"

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", _as_position(self.min, "Min bound"))

    def __str__(self) -> str:
        return f"{self.min}:"


@dataclass(frozen=True)
class Max:
    """Positions ``1..max``. ``max <= 0`` selects nothing."""

    max: int
    kind: ClassVar[str] = "max"

    def __post_init__(self) -> None:
        object.__setattr__(self, "max", _as_position(self.max, "Max bound"))

    def __str__(self) -> str:
        return f":{self.max}"


@dataclass(frozen=True)
class MinMax:
    """Positions ``min..max``. ``max < min`` selects nothing."""

    min: int
    max: int
    kind: ClassVar[str] = "min_max"

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", _as_position(self.min, "MinMax lower bound"))
        object.__setattr__(self, "max", _as_position(self.max, "MinMax upper bound"))

    def __str__(self) -> str:
        return f"{self.min}:{self.max}"


Index = Uni | Multi | Omni | Min | Max | MinMax
"""Any index descriptor."""

INDEX_TYPES: tuple[type, ...] = (Uni, Multi, Omni, Min, Max, MinMax)
RANGE_TYPES: tuple[type, ...] = (Omni, Min, Max, MinMax)


def is_index(value: object) -> bool:
    """Whether ``value`` is an index descriptor."""
    return isinstance(value, INDEX_TYPES)


def is_range(idx: Index) -> bool:
    """Whether ``idx`` selects a contiguous span (possibly empty)."""
    return isinstance(idx, RANGE_TYPES)


# Index-set arithmetic


def index_size(idx: Index, extent: int) -> int:
    """Number of positions ``idx`` selects along an axis of length ``extent``.

    Empty selections give 0, never a negative size.
    No bounds checking happens here.
    """
    match idx:
        case Uni():
            return 1
        case Multi(ns=ns):
            return len(ns)
        case Omni():
            return extent
        case Min(min=lo):
            return max(extent - lo + 1, 0)
        case Max(max=hi):
            return max(hi, 0)
        case MinMax(min=lo, max=hi):
            return hi - lo + 1 if hi >= lo else 0
    msg = f"Not an index descriptor: {idx!r}"
    raise TypeError(msg)


def index_at(i: int, idx: Index) -> int:
    """1-based position of the ``i``-th (0-based) element selected by ``idx``."""
    match idx:
        case Uni(n=n):
            return n
        case Multi(ns=ns):
            return ns[i]
        case Omni() | Max():
            return i + 1
        case Min(min=lo) | MinMax(min=lo):
            return lo + i
    msg = f"Not an index descriptor: {idx!r}"
    raise TypeError(msg)


def positions(idx: Index, extent: int) -> list[int]:
    """All 1-based positions ``idx`` selects, in selection order."""
    return [index_at(i, idx) for i in range(index_size(idx, extent))]


# Display


def format_subscript(name: str, indices: Iterable[Index]) -> str:
    """Render an indexing expression, e.g. ``x[2:5, {1,3}]``."""
    indices = list(indices)
    if not indices:
        return name
    return f"{name}[{', '.join(str(idx) for idx in indices)}]"

