from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """An optional value: either `Some(value)` or `NONE`.

    Returned by the terminal operations that may find nothing (`find`, `nth`, `last`, `reduce`...), and expected from the closures given to `filter_map` and `map_while`.

    Python's `None` can't play this role, since `None` is a perfectly valid element of a traversal.
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option is a `Some` value.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Some(2).is_some()
        True
        >>> pc.NONE.is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is `NONE`."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Some` value.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Some("car").unwrap()
        'car'
        >>> pc.NONE.unwrap()
        Traceback (most recent call last):
            ...
        pushchain._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Some` value, or raises with a provided message.

        Args:
            msg (str): The message to include in the exception if the option is `NONE`.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Some` value or a provided default.

        Args:
            default (T): The value to return if the option is `NONE`.

        Returns:
            T: The contained value or **default**.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Some("car").unwrap_or("bike")
        'car'
        >>> pc.NONE.unwrap_or("bike")
        'bike'

        ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, func: Callable[[], T]) -> T:
        """Returns the contained `Some` value or computes it from **func**."""
        return self.unwrap() if self.is_some() else func()

    def map[U](self, func: Callable[[T], U]) -> Option[U]:
        """Maps an `Option[T]` to `Option[U]` by applying **func** to a contained value.

        Args:
            func (Callable[[T], U]): The function to apply to the `Some` value.

        Returns:
            Option[U]: `Some` of the mapped value, or `NONE` untouched.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Some("Hello, World!").map(len)
        Some(13)
        >>> pc.NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(func(self.unwrap()))
        return NONE

    @staticmethod
    def from_[V](value: V | None) -> Option[V]:
        """Wrap a value that may be `None` into an `Option`.

        Args:
            value (V | None): The value to wrap.

        Returns:
            Option[V]: `NONE` if **value** is `None`, `Some(value)` otherwise.

        Example:
        ```python
        >>> import pushchain as pc
        >>> pc.Option.from_(3)
        Some(3)
        >>> pc.Option.from_(None)
        NONE

        ```
        """
        return NONE if value is None else Some(value)


@dataclass(slots=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
