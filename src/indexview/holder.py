"""Lifetime holder pairing an owned intermediate with a view into it.

Some indexing chains produce a view whose referent is a copy
made earlier in the same chain,
e.g. ``m[2:3, {4,1}]`` gathers columns into a new matrix
and then takes a row range of that copy.
The copy exists only inside the engine,
so it is bundled with the view it backs and returned as one unit.
"""

from collections.abc import Callable
from dataclasses import dataclass
from functools import cached_property
from typing import Any


@dataclass(frozen=True, eq=False)
class Holder:
    """An owned container plus the deferred computation of a view of it.

    Attributes:
        owned: The container the view refers to.
            The holder keeps it alive for as long as the holder is referenced.
        build: Called with ``owned`` to produce the view.
    """

    owned: Any
    build: Callable[[Any], Any]

    @cached_property
    def view(self) -> Any:
        """The view of ``owned``, computed on first access and cached."""
        return self.build(self.owned)

    def __repr__(self) -> str:
        owned = self.owned
        shape = getattr(owned, "shape", None)
        if shape is not None:
            return f"Holder({type(owned).__name__}, shape={tuple(shape)})"
        if isinstance(owned, list):
            return f"Holder(list, len={len(owned)})"
        return f"Holder({type(owned).__name__})"


def make_holder(func: Callable[..., Any], owned: Any, *args: Any) -> Holder:
    """Bundle ``owned`` with ``func(owned, *args)``.

    The view is evaluated immediately,
    so errors raised by ``func`` surface at the call site
    rather than on first use of the result.
    """
    holder = Holder(owned, _bind(func, args))
    holder.view  # noqa: B018
    return holder


def _bind(func: Callable[..., Any], args: tuple[Any, ...]) -> Callable[[Any], Any]:
    def build(owned: Any) -> Any:
        return func(owned, *args)

    return build
