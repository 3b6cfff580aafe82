from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NamedTuple, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from ._traverse import Traverse

type Consumer[T] = Callable[[T], bool | None]
"""Per-element callback of a traversal.

A truthy return value asks the producer to stop; `None` or `False` lets the traversal go on.
"""


class Enumerated[T](NamedTuple):
    """Represents an item with its associated index in an enumeration.

    See `Traverse.enumerate()` for details.
    """

    idx: int
    """The index of the item in the enumeration."""
    value: T
    """The value of the item."""

    def __repr__(self) -> str:
        return f"({self.idx}, {self.value.__repr__()})"


@runtime_checkable
class FromTraverse[T](Protocol):
    """Types that can be built from a complete push traversal.

    This is the capability used by `Traverse.collect()`.

    Implementors decide how the traversal is driven, typically to completion.
    """

    @classmethod
    def from_traverse(cls, source: Traverse[T]) -> Self: ...
