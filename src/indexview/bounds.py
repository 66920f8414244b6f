"""Bounds validation for 1-based positions."""

from collections.abc import Iterable


class IndexOutOfRange(IndexError):
    """Raised when a position falls outside ``1..extent``.

    Raised before any element is accessed,
    so a failed resolution never leaves partial work behind.

    Attributes:
        operation: Label of the indexing rule and axis that failed,
            e.g. ``"matrix[uni, uni] column indexing"``.
        name: Source-level name of the indexed variable.
        extent: Number of valid positions along the axis.
        index: The attempted position.
    """

    def __init__(self, operation: str, name: str, extent: int, index: int):
        self.operation = operation
        self.name = name
        self.extent = extent
        self.index = index
        super().__init__(
            f"{operation}: accessing element out of range of {name}. "
            f"index {index} out of range; "
            f"expecting index to be between 1 and {extent}"
        )

    def __reduce__(self):
        return (type(self), (self.operation, self.name, self.extent, self.index))


def check_range(operation: str, name: str, extent: int, index: int) -> None:
    """Raise IndexOutOfRange unless ``1 <= index <= extent``."""
    if index < 1 or index > extent:
        raise IndexOutOfRange(operation, name, extent, index)


def check_all(operation: str, name: str, extent: int, ns: Iterable[int]) -> None:
    """Check every position in order; the first bad one is reported."""
    for n in ns:
        check_range(operation, name, extent, n)
