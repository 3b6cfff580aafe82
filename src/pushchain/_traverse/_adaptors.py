"""Adaptors wrapping a single upstream traversal.

Each adaptor builds its own consumer around the downstream one, and hands it to the upstream `traverse`.

Counters and flags live in the closure of one `traverse` call, so nothing leaks from a traversal to the next.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .._types import Enumerated
from ._main import Traverse

if TYPE_CHECKING:
    from .._results import Option
    from .._types import Consumer


def _check_count(name: str, n: int) -> None:
    if n < 0:
        msg = f"{name}() count must be non-negative, got {n}"
        raise ValueError(msg)


@dataclass(slots=True)
class Map[T, R](Traverse[R]):
    upstream: Traverse[T]
    func: Callable[[T], R]

    def traverse(self, consumer: Consumer[R]) -> None:
        func = self.func

        def _map(item: T) -> bool | None:
            return consumer(func(item))

        self.upstream.traverse(_map)


@dataclass(slots=True)
class Filter[T](Traverse[T]):
    upstream: Traverse[T]
    predicate: Callable[[T], bool]

    def traverse(self, consumer: Consumer[T]) -> None:
        predicate = self.predicate

        def _filter(item: T) -> bool | None:
            if predicate(item):
                return consumer(item)
            return False

        self.upstream.traverse(_filter)


@dataclass(slots=True)
class FilterMap[T, R](Traverse[R]):
    upstream: Traverse[T]
    func: Callable[[T], Option[R]]

    def traverse(self, consumer: Consumer[R]) -> None:
        func = self.func

        def _filter_map(item: T) -> bool | None:
            res = func(item)
            if res.is_some():
                return consumer(res.unwrap())
            return False

        self.upstream.traverse(_filter_map)


@dataclass(slots=True)
class Enumerate[T](Traverse[Enumerated[T]]):
    upstream: Traverse[T]

    def traverse(self, consumer: Consumer[Enumerated[T]]) -> None:
        idx = 0

        def _enumerate(item: T) -> bool | None:
            nonlocal idx
            stop = consumer(Enumerated(idx, item))
            idx += 1
            return stop

        self.upstream.traverse(_enumerate)


@dataclass(slots=True)
class Skip[T](Traverse[T]):
    upstream: Traverse[T]
    n: int

    def __post_init__(self) -> None:
        _check_count("skip", self.n)

    def traverse(self, consumer: Consumer[T]) -> None:
        n = self.n
        skipped = 0

        def _skip(item: T) -> bool | None:
            nonlocal skipped
            if skipped != n:
                skipped += 1
                return False
            return consumer(item)

        self.upstream.traverse(_skip)


@dataclass(slots=True)
class Take[T](Traverse[T]):
    upstream: Traverse[T]
    n: int

    def __post_init__(self) -> None:
        _check_count("take", self.n)

    def traverse(self, consumer: Consumer[T]) -> None:
        n = self.n
        taken = 0

        def _take(item: T) -> bool | None:
            nonlocal taken
            if taken == n:
                return True
            taken += 1
            # Stop right after the last element, without waiting for the next one.
            return consumer(item) or taken == n

        self.upstream.traverse(_take)


@dataclass(slots=True)
class SkipWhile[T](Traverse[T]):
    upstream: Traverse[T]
    predicate: Callable[[T], bool]

    def traverse(self, consumer: Consumer[T]) -> None:
        predicate = self.predicate
        done = False

        def _skip_while(item: T) -> bool | None:
            nonlocal done
            if done:
                return consumer(item)
            if not predicate(item):
                # the boundary element is dropped too
                done = True
            return False

        self.upstream.traverse(_skip_while)


@dataclass(slots=True)
class TakeWhile[T](Traverse[T]):
    upstream: Traverse[T]
    predicate: Callable[[T], bool]

    def traverse(self, consumer: Consumer[T]) -> None:
        predicate = self.predicate

        def _take_while(item: T) -> bool | None:
            if predicate(item):
                return consumer(item)
            return True

        self.upstream.traverse(_take_while)


@dataclass(slots=True)
class Inspect[T](Traverse[T]):
    upstream: Traverse[T]
    func: Callable[[T], object]

    def traverse(self, consumer: Consumer[T]) -> None:
        func = self.func

        def _inspect(item: T) -> bool | None:
            func(item)
            return consumer(item)

        self.upstream.traverse(_inspect)


@dataclass(slots=True)
class StepBy[T](Traverse[T]):
    upstream: Traverse[T]
    step: int

    def __post_init__(self) -> None:
        if self.step < 1:
            msg = f"step_by() step must be at least 1, got {self.step}"
            raise ValueError(msg)

    def traverse(self, consumer: Consumer[T]) -> None:
        step = self.step
        position = 0

        def _step_by(item: T) -> bool | None:
            nonlocal position
            keep = position % step == 0
            position += 1
            return consumer(item) if keep else False

        self.upstream.traverse(_step_by)


@dataclass(slots=True)
class MapWhile[T, R](Traverse[R]):
    upstream: Traverse[T]
    func: Callable[[T], Option[R]]

    def traverse(self, consumer: Consumer[R]) -> None:
        func = self.func

        def _map_while(item: T) -> bool | None:
            res = func(item)
            if res.is_none():
                return True
            return consumer(res.unwrap())

        self.upstream.traverse(_map_while)
