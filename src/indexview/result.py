"""Resolution results: what an indexing call selected and how it is exposed."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from indexview.holder import Holder


class ResultKind(str, Enum):
    SCALAR = "scalar"
    VIEW = "view"
    MATERIALIZED = "materialized"


@dataclass(frozen=True, eq=False)
class Resolution:
    """The outcome of resolving a subscript against a base container.

    Attributes:
        value: The selected scalar, array, or list.
        kind: Whether ``value`` is a single element,
            shares storage with its referent,
            or owns freshly allocated storage.
        holder: For views into a copy made during resolution,
            the holder that owns that copy.
            ``None`` when a view borrows from the caller's base.
    """

    value: Any
    kind: ResultKind
    holder: Holder | None = None

    def __post_init__(self) -> None:
        if self.holder is not None and self.kind is not ResultKind.VIEW:
            msg = f"Only views carry a holder, got a {self.kind.value} result"
            raise ValueError(msg)

    # Constructors

    @classmethod
    def scalar(cls, value: Any) -> Resolution:
        return cls(value, ResultKind.SCALAR)

    @classmethod
    def view(cls, value: Any) -> Resolution:
        return cls(value, ResultKind.VIEW)

    @classmethod
    def materialized(cls, value: Any) -> Resolution:
        return cls(value, ResultKind.MATERIALIZED)

    @classmethod
    def held(cls, holder: Holder) -> Resolution:
        """A view whose referent is owned by ``holder``."""
        return cls(holder.view, ResultKind.VIEW, holder)

    # Properties

    @property
    def is_view(self) -> bool:
        return self.kind is ResultKind.VIEW

    @property
    def referent(self) -> Any:
        """The storage a view refers to when the engine owns it, else ``None``."""
        return self.holder.owned if self.holder is not None else None
