"""Concrete sources of push traversals."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import cytoolz as cz
import more_itertools as mit

from ._main import Traverse

if TYPE_CHECKING:
    from decimal import Decimal

    from .._types import Consumer


@dataclass(slots=True)
class FromIter[T](Traverse[T]):
    """Pushes the elements of a Python `Iterable`."""

    inner: Iterable[T]

    def traverse(self, consumer: Consumer[T]) -> None:
        for item in self.inner:
            if consumer(item):
                return


@dataclass(slots=True)
class FromFn[T](Traverse[T]):
    """Runs a user traversal function.

    The consumer handed to **func** keeps answering "stop" once a stop was requested, and drops any further element.
    """

    func: Callable[[Consumer[T]], object]

    def traverse(self, consumer: Consumer[T]) -> None:
        stopped = False

        def _guard(item: T) -> bool:
            nonlocal stopped
            if not stopped:
                stopped = bool(consumer(item))
            return stopped

        self.func(_guard)


@dataclass(slots=True)
class Empty[T](Traverse[T]):
    def traverse(self, consumer: Consumer[T]) -> None:  # noqa: ARG002
        return None


@dataclass(slots=True)
class Once[T](Traverse[T]):
    value: T

    def traverse(self, consumer: Consumer[T]) -> None:
        consumer(self.value)


@dataclass(slots=True)
class Successors[T](Traverse[T]):
    func: Callable[[T], T]
    value: T

    def traverse(self, consumer: Consumer[T]) -> None:
        for item in cz.itertoolz.iterate(self.func, self.value):
            if consumer(item):
                return


@dataclass(slots=True)
class Walk[T](Traverse[T]):
    """Pre-order, depth-first walk of a tree."""

    root: T
    children: Callable[[T], Iterable[T]]

    def traverse(self, consumer: Consumer[T]) -> None:
        self._visit(self.root, consumer)

    def _visit(self, node: T, consumer: Consumer[T]) -> bool:
        if consumer(node):
            return True
        return any(self._visit(child, consumer) for child in self.children(node))


def numeric_range(
    start: int | float | Decimal, stop: int | float | Decimal, step: int | float | Decimal
) -> FromIter[Any]:
    return FromIter(mit.numeric_range(start, stop, step))


def into_traverse[T](data: Traverse[T] | Iterable[T]) -> Traverse[T]:
    if isinstance(data, Traverse):
        return data
    return FromIter(data)
