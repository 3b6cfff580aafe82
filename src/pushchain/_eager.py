from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Self, overload

import cytoolz as cz

from ._core import get_config
from ._traverse import FromIter, Traverse
from ._types import Consumer, FromTraverse


def drain[T](source: Traverse[T]) -> list[T]:
    """Run **source** to completion and gather its elements in a list."""
    items: list[T] = []

    def _push(item: T) -> bool:
        items.append(item)
        return False

    source.traverse(_push)
    return items


def _convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)  # type: ignore[return-value]


class _Collection[I: Iterable[Any], T](Traverse[T]):
    """In-memory container that is also a push sequence.

    Subclasses set `_inner` and implement `from_traverse`.
    """

    _inner: I

    __slots__ = ("_inner",)

    def __init__(self, data: I) -> None:
        self._inner = data

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __len__(self) -> int:
        return len(self._inner)  # type: ignore[arg-type]

    def __contains__(self, item: object) -> bool:
        return item in self._inner

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def traverse(self, consumer: Consumer[T]) -> None:
        for item in self._inner:
            if consumer(item):
                return

    def inner(self) -> I:
        """Get the underlying data.

        This is a terminal operation that ends the chain.
        """
        return self._inner

    def iter(self) -> Traverse[T]:
        """Get a lazy producer over the underlying data, without copying it.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Seq((1, 2, 3)).iter().map(lambda x: x * 2).collect(pc.Vec)
        Vec(2, 4, 6)

        ```
        """
        return FromIter(self._inner)


class Seq[T](_Collection[tuple[T, ...], T]):
    """An immutable, in-memory sequence, backed by a `tuple`.

    This is the default container built by `Traverse.collect()`.

    As a `Traverse` itself, it can start a new chain right away.

    Args:
        data (tuple[T, ...]): The data to wrap, used as is.

    Example:
    ```python
    >>> import pushchain as pc
    >>> seq = pc.Seq((1, 2, 3))
    >>> seq.map(lambda x: x + 1).collect()
    Seq(2, 3, 4)
    >>> seq[0], len(seq), 3 in seq
    (1, 3, True)

    ```
    """

    __slots__ = ()

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...
    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        return self._inner[index]

    @classmethod
    def from_traverse(cls, source: Traverse[T]) -> Self:
        return cls(tuple(drain(source)))

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Seq[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Seq[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Seq[U]:
        """Create a `Seq` from an `Iterable` or unpacked values.

        Prefer using the standard constructor if you already have a tuple.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Seq.from_([1, 2])
        Seq(1, 2)
        >>> pc.Seq.from_(1, 2, 3)
        Seq(1, 2, 3)

        ```
        """
        return Seq(tuple(_convert_data(data, *more_data)))

    def eq(self, other: Iterable[T]) -> bool:
        """Check if **other** holds the same elements, in the same order.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Seq((1, 2)).eq([1, 2])
        True

        ```
        """
        return self._inner == tuple(other)


class Vec[T](_Collection[list[T], T]):
    """A mutable, in-memory sequence, backed by a `list`.

    Args:
        data (list[T]): The data to wrap, used as is.
    """

    __slots__ = ()

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> list[T]: ...
    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self._inner[index]

    @classmethod
    def from_traverse(cls, source: Traverse[T]) -> Self:
        return cls(drain(source))

    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Vec[U]:
        """Create a `Vec` from an `Iterable` or unpacked values."""
        return Vec(list(_convert_data(data, *more_data)))

    def push(self, value: T) -> None:
        """Append **value** at the end.

        Example:
        ```python
        >>> import pushchain as pc
        >>> vec = pc.Traverse.from_range(0, 2).collect(pc.Vec)
        >>> vec.push(2)
        >>> vec
        Vec(0, 1, 2)

        ```
        """
        self._inner.append(value)

    def extend(self, source: Traverse[T] | Iterable[T]) -> None:
        """Append every element of **source**, traversing it to completion.

        Example:
        ```python
        >>> import pushchain as pc
        >>> vec = pc.Vec([1])
        >>> vec.extend(pc.Traverse.from_range(2, 4))
        >>> vec.extend([4])
        >>> vec
        Vec(1, 2, 3, 4)

        ```
        """
        if isinstance(source, Traverse):
            self._inner.extend(drain(source))
        else:
            self._inner.extend(source)

    def eq(self, other: Iterable[T]) -> bool:
        """Check if **other** holds the same elements, in the same order."""
        return self._inner == list(other)


class Set[T](_Collection[frozenset[T], T]):
    """An immutable, in-memory **unordered** collection of **unique** elements, backed by a `frozenset`.

    Traversal order is the iteration order of the `frozenset`.

    Args:
        data (frozenset[T]): The data to wrap, used as is.

    Example:
    ```python
    >>> import pushchain as pc
    >>> pc.Traverse.from_([1, 2, 2, 1]).collect(pc.Set).count()
    2

    ```
    """

    __slots__ = ()

    @classmethod
    def from_traverse(cls, source: Traverse[T]) -> Self:
        return cls(frozenset(drain(source)))

    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Set[U]:
        """Create a `Set` from an `Iterable` or unpacked values."""
        return Set(frozenset(_convert_data(data, *more_data)))

    def eq(self, other: Iterable[T]) -> bool:
        """Check if **other** holds the same unique elements, in any order."""
        return self._inner == frozenset(other)


_BUILTIN_COLLECTORS: dict[type[Any], Callable[[list[Any]], Any]] = {
    list: list,
    tuple: tuple,
    set: set,
    frozenset: frozenset,
    dict: dict,
    str: "".join,
}


def collect_into(source: Traverse[Any], target: Any) -> Any:
    """Build **target** from the elements of **source**, as `Traverse.collect` does."""
    if target is None:
        return Seq.from_traverse(source)
    if isinstance(target, type) and isinstance(target, FromTraverse):
        return target.from_traverse(source)
    builder = _BUILTIN_COLLECTORS.get(target)
    if builder is None:
        msg = f"cannot collect into {target!r}: expected a FromTraverse type or one of {', '.join(t.__name__ for t in _BUILTIN_COLLECTORS)}"
        raise TypeError(msg)
    return builder(drain(source))
