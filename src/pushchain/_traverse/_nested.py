"""Adaptors driving more than one traversal."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ._main import Traverse
from ._producers import into_traverse

if TYPE_CHECKING:
    from .._types import Consumer


@dataclass(slots=True)
class Chain[T](Traverse[T]):
    one: Traverse[T]
    two: Traverse[T]

    def traverse(self, consumer: Consumer[T]) -> None:
        stopped = False

        def _first(item: T) -> bool:
            nonlocal stopped
            stopped = bool(consumer(item))
            return stopped

        self.one.traverse(_first)
        if not stopped:
            self.two.traverse(consumer)


@dataclass(slots=True)
class FlatMap[T, R](Traverse[R]):
    upstream: Traverse[T]
    func: Callable[[T], Traverse[R] | Iterable[R]]

    def traverse(self, consumer: Consumer[R]) -> None:
        func = self.func
        stopped = False

        def _forward(value: R) -> bool:
            nonlocal stopped
            stopped = bool(consumer(value))
            return stopped

        def _flat_map(item: T) -> bool:
            into_traverse(func(item)).traverse(_forward)
            return stopped

        self.upstream.traverse(_flat_map)
