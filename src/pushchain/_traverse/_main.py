from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from decimal import Decimal
from typing import TYPE_CHECKING, Any, overload

import cytoolz as cz

from .._core import Pipeable
from .._results import NONE, Option, Some

if TYPE_CHECKING:
    from .._eager import Seq
    from .._types import Consumer, Enumerated, FromTraverse

type Number = int | float | Decimal


class Traverse[T](ABC, Pipeable):
    """A sequence that pushes its elements into a consumer.

    This is the base capability of pushchain: implementors only provide `traverse`, and get every combinator and terminal operation for free.

    - `traverse(consumer)` calls **consumer** once per element, in order.
    - The consumer returns a stop flag. As soon as it is truthy, the producer must stop emitting.
    - `None` is falsy, so any side-effecting callable (like `print` or `list.append`) is a valid consumer.

    Combinators (`map`, `filter`, `take`...) are lazy: they only wrap the consumer, and nothing happens until a terminal operation (`count`, `collect`, `for_each`...) calls `traverse`.

    There is no pull-style iteration: `Traverse` is not an `Iterator`. Collect it into a `Seq` if you need one.

    Example:
    ```python
    >>> import pushchain as pc
    >>> class Countdown(pc.Traverse[int]):
    ...     def __init__(self, start: int) -> None:
    ...         self.start = start
    ...
    ...     def traverse(self, consumer: pc.Consumer[int]) -> None:
    ...         for n in range(self.start, 0, -1):
    ...             if consumer(n):
    ...                 return
    >>> Countdown(5).filter(lambda x: x % 2 == 1).map(str).collect(str)
    '531'

    ```
    """

    __slots__ = ()

    @abstractmethod
    def traverse(self, consumer: Consumer[T]) -> None:
        """Push every element into **consumer**, until it asks to stop.

        Args:
            consumer (Consumer[T]): Callback receiving each element. A truthy return value ends the traversal.
        """
        ...

    # producers -----------------------------------------------------------

    @overload
    @staticmethod
    def from_[U](data: Traverse[U]) -> Traverse[U]: ...
    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Traverse[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Traverse[U]: ...
    @staticmethod
    def from_[U](data: Traverse[U] | Iterable[U] | U, *more_data: U) -> Traverse[U]:
        """Create a `Traverse` from any `Iterable`, or from unpacked values.

        The iterable is only iterated when the traversal runs.

        Re-iterable sources (`list`, `range`, `str`...) can be traversed again, while one-shot sources (generators, iterators) are exhausted after the first traversal.

        A `Traverse` is returned as is.

        Args:
            data (Traverse[U] | Iterable[U] | U): Traverse or Iterable to push from, or a single value.
            *more_data (U): Additional values to include if **data** is not an Iterable.

        Returns:
            Traverse[U]: A producer pushing the provided data.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_([1, 2, 3]).collect()
        Seq(1, 2, 3)
        >>> pc.Traverse.from_(1, 2, 3).collect()
        Seq(1, 2, 3)
        >>> pc.Traverse.from_("ab").collect()
        Seq('a', 'b')

        ```
        """
        from ._producers import FromIter

        if isinstance(data, Traverse):
            return data
        if cz.itertoolz.isiterable(data):
            return FromIter(data)  # type: ignore[arg-type]
        return FromIter((data, *more_data))  # type: ignore[arg-type]

    @staticmethod
    def from_fn[U](func: Callable[[Consumer[U]], object]) -> Traverse[U]:
        """Create a `Traverse` from a traversal function.

        **func** receives the consumer and must call it once per element, returning as soon as the consumer returns a truthy value.

        Calls made by **func** after a stop has been requested are ignored.

        Args:
            func (Callable[[Consumer[U]], object]): The traversal function.

        Returns:
            Traverse[U]: A producer running **func** on each traversal.

        Example:
        ```python
        >>> import pushchain as pc
        >>> def countdown(consumer: pc.Consumer[int]) -> None:
        ...     for n in (3, 2, 1):
        ...         if consumer(n):
        ...             return
        >>> pc.Traverse.from_fn(countdown).collect()
        Seq(3, 2, 1)
        >>> pc.Traverse.from_fn(countdown).take(2).collect()
        Seq(3, 2)

        ```
        """
        from ._producers import FromFn

        return FromFn(func)

    @staticmethod
    def from_range(start: Number, stop: Number, step: Number = 1) -> Traverse[Any]:
        """Create a `Traverse` over evenly spaced numbers, from **start** (inclusive) to **stop** (exclusive).

        Unlike `range`, floats and `Decimal` are accepted.

        Args:
            start (Number): First value.
            stop (Number): Upper (or lower, for a negative **step**) bound, excluded.
            step (Number): Difference between consecutive values. Defaults to 1.

        Returns:
            Traverse[Any]: A producer of the numbers.

        Raises:
            ValueError: If **step** is zero.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_range(0, 5).collect()
        Seq(0, 1, 2, 3, 4)
        >>> pc.Traverse.from_range(0, 1, 0.25).collect()
        Seq(0.0, 0.25, 0.5, 0.75)
        >>> pc.Traverse.from_range(3, 0, -1).collect()
        Seq(3, 2, 1)

        ```
        """
        from ._producers import numeric_range

        return numeric_range(start, stop, step)

    @staticmethod
    def successors[U](func: Callable[[U], U], value: U) -> Traverse[U]:
        """Create an infinite `Traverse` by repeatedly applying **func** on an original value.

        **Warning** ⚠️
            This traversal never ends by itself.
            Be sure to use `take()`, `take_while()` or a short-circuiting terminal operation.

        Args:
            func (Callable[[U], U]): Function to apply repeatedly.
            value (U): First value of the sequence.

        Returns:
            Traverse[U]: A producer of `value, func(value), func(func(value))...`.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.successors(lambda x: x * 2, 1).take(5).collect()
        Seq(1, 2, 4, 8, 16)

        ```
        """
        from ._producers import Successors

        return Successors(func, value)

    @staticmethod
    def empty[U]() -> Traverse[U]:
        """Create a `Traverse` that pushes nothing.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.empty().count()
        0

        ```
        """
        from ._producers import Empty

        return Empty()

    @staticmethod
    def once[U](value: U) -> Traverse[U]:
        """Create a `Traverse` that pushes a single value.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.once(42).chain([43]).collect()
        Seq(42, 43)

        ```
        """
        from ._producers import Once

        return Once(value)

    @staticmethod
    def walk[U](root: U, children: Callable[[U], Iterable[U]]) -> Traverse[U]:
        """Create a `Traverse` walking a tree in pre-order, depth first.

        The walk is a plain recursion: there is no explicit stack of pending nodes to maintain, which is the point of push traversal.

        Stopping inside a subtree stops the whole walk.

        Args:
            root (U): The first node pushed.
            children (Callable[[U], Iterable[U]]): Function returning the children of a node, in order.

        Returns:
            Traverse[U]: A producer of every node reachable from **root**.

        Example:
        ```python
        >>> import pushchain as pc
        >>> tree = {"a": ["b", "c"], "b": ["d"]}
        >>> pc.Traverse.walk("a", lambda node: tree.get(node, [])).collect()
        Seq('a', 'b', 'd', 'c')
        >>> pc.Traverse.walk("a", lambda node: tree.get(node, [])).take(2).collect()
        Seq('a', 'b')

        ```
        """
        from ._producers import Walk

        return Walk(root, children)

    # adaptors ------------------------------------------------------------

    def map[R](self, func: Callable[[T], R]) -> Traverse[R]:
        """Apply a function to each element.

        **func** may carry state: it is the same object for the whole traversal.

        Args:
            func (Callable[[T], R]): Function to apply to each element.

        Returns:
            Traverse[R]: A traversal of transformed elements.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_([1, 2]).map(lambda x: x + 1).collect()
        Seq(2, 3)

        ```
        """
        from ._adaptors import Map

        return Map(self, func)

    def filter(self, predicate: Callable[[T], bool]) -> Traverse[T]:
        """Keep only the elements for which **predicate** returns `True`.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each element.

        Returns:
            Traverse[T]: A traversal of the elements satisfying the predicate.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_([1, 2, 3]).filter(lambda x: x > 1).collect()
        Seq(2, 3)

        ```
        """
        from ._adaptors import Filter

        return Filter(self, predicate)

    def filter_map[R](self, func: Callable[[T], Option[R]]) -> Traverse[R]:
        """Filter and map in a single pass.

        Only the values for which **func** returns `Some(value)` are pushed downstream.

        Args:
            func (Callable[[T], Option[R]]): Function to apply to each element.

        Returns:
            Traverse[R]: A traversal of the unwrapped `Some` values.

        Example:
        ```python
        >>> import pushchain as pc
        >>> def _parse(s: str) -> pc.Option[int]:
        ...     return pc.Some(int(s)) if s.isdigit() else pc.NONE
        >>> pc.Traverse.from_(["1", "two", "NaN", "5"]).filter_map(_parse).collect()
        Seq(1, 5)

        ```
        """
        from ._adaptors import FilterMap

        return FilterMap(self, func)

    def enumerate(self) -> Traverse[Enumerated[T]]:
        """Pair each element with its zero-based position.

        The pairs are `Enumerated` named tuples, so they unpack as `(idx, value)`.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_("ab").enumerate().collect()
        Seq((0, 'a'), (1, 'b'))
        >>> pc.Traverse.from_("ab").enumerate().map(lambda pair: pair.idx).collect()
        Seq(0, 1)

        ```
        """
        from ._adaptors import Enumerate

        return Enumerate(self)

    def skip(self, n: int) -> Traverse[T]:
        """Drop the first **n** elements.

        Args:
            n (int): Number of elements to skip.

        Returns:
            Traverse[T]: A traversal of the elements after the first **n**.

        Raises:
            ValueError: If **n** is negative.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_range(0, 5).skip(2).collect()
        Seq(2, 3, 4)
        >>> pc.Traverse.from_range(0, 5).skip(10).collect()
        Seq()

        ```
        """
        from ._adaptors import Skip

        return Skip(self, n)

    def take(self, n: int) -> Traverse[T]:
        """Push at most **n** elements, then stop the upstream traversal.

        The upstream is asked to stop as soon as the **n**-th element has been pushed, so infinite producers are fine.

        Args:
            n (int): Number of elements to take.

        Returns:
            Traverse[T]: A traversal of the first **n** elements.

        Raises:
            ValueError: If **n** is negative.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_([1, 2, 3]).take(2).collect()
        Seq(1, 2)
        >>> pc.Traverse.from_([1, 2, 3]).take(5).collect()
        Seq(1, 2, 3)

        ```
        """
        from ._adaptors import Take

        return Take(self, n)

    def skip_while(self, predicate: Callable[[T], bool]) -> Traverse[T]:
        """Drop elements while **predicate** holds.

        Note:
            The first element failing the predicate is dropped as well: only the elements **after** it are pushed.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each element.

        Returns:
            Traverse[T]: A traversal of the elements following the first failure of **predicate**.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_([1, 2, 3, 4, 5]).skip_while(lambda x: x < 3).collect()
        Seq(4, 5)

        ```
        """
        from ._adaptors import SkipWhile

        return SkipWhile(self, predicate)

    def take_while(self, predicate: Callable[[T], bool]) -> Traverse[T]:
        """Push elements while **predicate** holds, then stop the upstream traversal.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each element.

        Returns:
            Traverse[T]: A traversal of the leading elements satisfying **predicate**.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_((1, 2, 0, 3)).take_while(lambda x: x > 0).collect()
        Seq(1, 2)

        ```
        """
        from ._adaptors import TakeWhile

        return TakeWhile(self, predicate)

    def inspect(self, func: Callable[[T], object]) -> Traverse[T]:
        """Call **func** on each element reaching this point, then push it unchanged.

        This is very useful for debugging a chain without breaking it.

        Args:
            func (Callable[[T], object]): Function called for its side effect.

        Returns:
            Traverse[T]: The same elements.

        Example:
        ```python
        >>> import pushchain as pc
        >>> seen: list[int] = []
        >>> pc.Traverse.from_([1, 2, 3, 4]).inspect(seen.append).take(2).collect()
        Seq(1, 2)
        >>> seen
        [1, 2]

        ```
        """
        from ._adaptors import Inspect

        return Inspect(self, func)

    def step_by(self, step: int) -> Traverse[T]:
        """Push the first element, then every **step**-th one.

        Args:
            step (int): Distance between two pushed elements.

        Returns:
            Traverse[T]: A traversal of every **step**-th element.

        Raises:
            ValueError: If **step** is lower than 1.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_range(0, 6).step_by(2).collect()
        Seq(0, 2, 4)

        ```
        """
        from ._adaptors import StepBy

        return StepBy(self, step)

    def map_while[R](self, func: Callable[[T], Option[R]]) -> Traverse[R]:
        """Map elements while **func** returns `Some`, then stop the upstream traversal.

        Args:
            func (Callable[[T], Option[R]]): Function to apply to each element.

        Returns:
            Traverse[R]: A traversal of the unwrapped values, up to the first `NONE`.

        Example:
        ```python
        >>> import pushchain as pc
        >>> def _positive(x: int) -> pc.Option[int]:
        ...     return pc.Some(x * 10) if x > 0 else pc.NONE
        >>> pc.Traverse.from_([1, 2, -1, 3]).map_while(_positive).collect()
        Seq(10, 20)

        ```
        """
        from ._adaptors import MapWhile

        return MapWhile(self, func)

    def chain(self, other: Traverse[T] | Iterable[T]) -> Traverse[T]:
        """Push all the elements of **self**, then all the elements of **other**.

        **other** is never traversed if the traversal of **self** was stopped.

        Args:
            other (Traverse[T] | Iterable[T]): The sequence to push after **self**.

        Returns:
            Traverse[T]: The concatenation of both sequences.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_("abc").chain(pc.Traverse.from_("de")).collect(str)
        'abcde'
        >>> pc.Traverse.from_([1, 2]).chain([3]).collect()
        Seq(1, 2, 3)

        ```
        """
        from ._nested import Chain
        from ._producers import into_traverse

        return Chain(self, into_traverse(other))

    def flat_map[R](self, func: Callable[[T], Traverse[R] | Iterable[R]]) -> Traverse[R]:
        """Map each element to a sequence, and push the elements of each sequence in turn.

        Args:
            func (Callable[[T], Traverse[R] | Iterable[R]]): Function producing a sub-sequence from each element.

        Returns:
            Traverse[R]: The flattened traversal.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_range(1, 4).flat_map(lambda n: range(n)).collect()
        Seq(0, 0, 1, 0, 1, 2)
        >>> pc.Traverse.from_("ab").flat_map(lambda c: pc.Traverse.from_((c, c.upper()))).collect(str)
        'aAbB'

        ```
        """
        from ._nested import FlatMap

        return FlatMap(self, func)

    def flatten[U](self: Traverse[Traverse[U]] | Traverse[Iterable[U]]) -> Traverse[U]:
        """Flatten one level of nesting.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_([[1, 2], [], [3]]).flatten().collect()
        Seq(1, 2, 3)

        ```
        """
        from ._nested import FlatMap

        return FlatMap(self, lambda sub: sub)  # type: ignore[arg-type]

    # terminal operations -------------------------------------------------

    def count(self) -> int:
        """Count the elements, driving the traversal to completion.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_range(0, 10).filter(lambda x: x % 3 == 0).count()
        4

        ```
        """
        total = 0

        def _count(_: T) -> bool:
            nonlocal total
            total += 1
            return False

        self.traverse(_count)
        return total

    @overload
    def collect(self) -> Seq[T]: ...
    @overload
    def collect[C: FromTraverse[Any]](self, target: type[C]) -> C: ...
    @overload
    def collect(self, target: type[list[Any]]) -> list[T]: ...
    @overload
    def collect(self, target: type[tuple[Any, ...]]) -> tuple[T, ...]: ...
    @overload
    def collect(self, target: type[set[Any]]) -> set[T]: ...
    @overload
    def collect(self, target: type[frozenset[Any]]) -> frozenset[T]: ...
    @overload
    def collect(self, target: type[str]) -> str: ...
    @overload
    def collect(self, target: type[dict[Any, Any]]) -> dict[Any, Any]: ...
    def collect(self, target: Any = None) -> Any:
        """Build a container from the elements.

        This is a terminal operation that ends the chain.

        **target** may be:

        - any type implementing `FromTraverse` (`Seq`, `Vec`, `Set`, or your own), which drives the traversal itself.
        - one of the builtins `list`, `tuple`, `set`, `frozenset`, `dict` (from pairs) or `str` (concatenation).

        Args:
            target (Any): The container type. Defaults to `Seq`.

        Returns:
            Any: The built container.

        Raises:
            TypeError: If **target** is not supported.

        Example:
        ```python
        >>> import pushchain as pc
        >>> data = [1, 2, 3, 4, 5]
        >>> pc.Traverse.from_(data).filter(lambda x: x % 2 == 0).map(lambda x: x * 10).collect()
        Seq(20, 40)
        >>> pc.Traverse.from_(data).take(2).collect(pc.Vec)
        Vec(1, 2)
        >>> pc.Traverse.from_(data).take(2).collect(list)
        [1, 2]
        >>> pc.Traverse.from_("ab").enumerate().collect(dict)
        {0: 'a', 1: 'b'}

        ```
        """
        from .._eager import collect_into

        return collect_into(self, target)

    def for_each(self, func: Callable[[T], object]) -> None:
        """Call **func** on every element, driving the traversal to completion.

        The return value of **func** is ignored: it can't stop the traversal.

        Args:
            func (Callable[[T], object]): Function to call for each element.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_([1, 2]).for_each(print)
        1
        2

        ```
        """

        def _for_each(item: T) -> bool:
            func(item)
            return False

        self.traverse(_for_each)

    def fold[U](self, init: U, func: Callable[[U, T], U]) -> U:
        """Accumulate every element into a value, starting from **init**.

        Args:
            init (U): The initial accumulator.
            func (Callable[[U, T], U]): Function combining the accumulator and an element.

        Returns:
            U: The final accumulator.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_range(1, 5).fold(1, lambda acc, x: acc * x)
        24

        ```
        """
        acc = init

        def _fold(item: T) -> bool:
            nonlocal acc
            acc = func(acc, item)
            return False

        self.traverse(_fold)
        return acc

    def reduce(self, func: Callable[[T, T], T]) -> Option[T]:
        """Accumulate every element into a value, starting from the first element.

        Args:
            func (Callable[[T, T], T]): Function combining the accumulator and an element.

        Returns:
            Option[T]: The final accumulator, or `NONE` if there was no element.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_([3, 1, 2]).reduce(max)
        Some(3)
        >>> pc.Traverse.empty().reduce(max)
        NONE

        ```
        """
        acc: Option[T] = NONE

        def _reduce(item: T) -> bool:
            nonlocal acc
            acc = Some(func(acc.unwrap(), item)) if acc.is_some() else Some(item)
            return False

        self.traverse(_reduce)
        return acc

    def sum[U](self: Traverse[U], start: U = 0) -> U:  # type: ignore[assignment]
        """Add up the elements.

        Args:
            start (U): Value the elements are added to. Defaults to 0.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_range(0, 5).sum()
        10
        >>> pc.Traverse.from_([[1], [2]]).sum([])
        [1, 2]

        ```
        """
        return self.fold(start, lambda acc, item: acc + item)  # type: ignore[operator]

    def find(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Find the first element satisfying **predicate**, and stop there.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each element.

        Returns:
            Option[T]: The first matching element, or `NONE`.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_range(0, 10).find(lambda x: x > 4)
        Some(5)
        >>> pc.Traverse.from_range(0, 10).find(lambda x: x > 40)
        NONE

        ```
        """
        found: Option[T] = NONE

        def _find(item: T) -> bool:
            nonlocal found
            if predicate(item):
                found = Some(item)
                return True
            return False

        self.traverse(_find)
        return found

    def find_map[R](self, func: Callable[[T], Option[R]]) -> Option[R]:
        """Apply **func** to the elements and return the first `Some` result.

        Example:
        ```python
        >>> import pushchain as pc
        >>> def _parse(s: str) -> pc.Option[int]:
        ...     return pc.Some(int(s)) if s.isdigit() else pc.NONE
        >>> pc.Traverse.from_(["lol", "NaN", "2", "5"]).find_map(_parse)
        Some(2)

        ```
        """
        found: Option[R] = NONE

        def _find_map(item: T) -> bool:
            nonlocal found
            found = func(item)
            return found.is_some()

        self.traverse(_find_map)
        return found

    def any(self, predicate: Callable[[T], object] = bool) -> bool:
        """Check whether any element satisfies **predicate**, stopping at the first one.

        Args:
            predicate (Callable[[T], object]): Function to evaluate each element. Defaults to truthiness.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_([0, 0, 1]).any()
        True
        >>> pc.Traverse.from_range(0, 10).any(lambda x: x > 100)
        False

        ```
        """
        return self.find(lambda item: bool(predicate(item))).is_some()

    def all(self, predicate: Callable[[T], object] = bool) -> bool:
        """Check whether every element satisfies **predicate**, stopping at the first failure.

        Args:
            predicate (Callable[[T], object]): Function to evaluate each element. Defaults to truthiness.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_([1, 2, 3]).all()
        True
        >>> pc.Traverse.from_range(0, 10).all(lambda x: x < 5)
        False
        >>> pc.Traverse.empty().all()
        True

        ```
        """
        return self.find(lambda item: not predicate(item)).is_none()

    def nth(self, n: int) -> Option[T]:
        """Get the element at position **n**, and stop there.

        Args:
            n (int): Zero-based position.

        Returns:
            Option[T]: The element, or `NONE` if the sequence is shorter.

        Raises:
            ValueError: If **n** is negative.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_("abc").nth(1)
        Some('b')
        >>> pc.Traverse.from_("abc").nth(3)
        NONE

        ```
        """
        if n < 0:
            msg = f"nth() position must be non-negative, got {n}"
            raise ValueError(msg)
        return self.skip(n).find(lambda _: True)

    def last(self) -> Option[T]:
        """Get the last element, driving the traversal to completion.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Traverse.from_("abc").last()
        Some('c')
        >>> pc.Traverse.empty().last()
        NONE

        ```
        """
        return self.reduce(lambda _, item: item)
