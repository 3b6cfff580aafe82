from __future__ import annotations

import os
import warnings
from collections.abc import Iterable
from dataclasses import dataclass, replace

from ._format import iter_repr

ENV_MAX_ITEMS = "PUSHCHAIN_REPR_MAX_ITEMS"
DEFAULT_MAX_ITEMS = 20


@dataclass(slots=True, frozen=True)
class Config:
    """Runtime settings of pushchain.

    Args:
        max_items (int): Number of elements shown by container reprs before the `...` marker.
    """

    max_items: int = DEFAULT_MAX_ITEMS

    def __post_init__(self) -> None:
        if self.max_items < 0:
            msg = f"max_items must be non-negative, got {self.max_items}"
            raise ValueError(msg)

    def iter_repr(self, data: Iterable[object]) -> str:
        return iter_repr(data, self.max_items)


def _from_env() -> Config:
    raw = os.environ.get(ENV_MAX_ITEMS)
    if raw is None:
        return Config()
    try:
        return Config(max_items=int(raw))
    except ValueError:
        warnings.warn(
            f"Ignoring {ENV_MAX_ITEMS}={raw!r}: expected a non-negative integer.",
            RuntimeWarning,
            stacklevel=2,
        )
        return Config()


_config = _from_env()


def get_config() -> Config:
    """Get the current pushchain configuration.

    Returns:
        Config: The active settings.

    Example:
    ```python
    >>> import pushchain as pc
    >>> pc.get_config().max_items >= 0
    True

    ```
    """
    return _config


def set_config(**changes: int) -> Config:
    """Replace fields of the current configuration.

    Args:
        **changes (int): Fields of `Config` to update.

    Returns:
        Config: The previous configuration, so it can be restored later.

    Raises:
        ValueError: If a new value is invalid.

    Example:
    ```python
    >>> import pushchain as pc
    >>> previous = pc.set_config(max_items=2)
    >>> pc.Seq((1, 2, 3))
    Seq(1, 2, ...)
    >>> _ = pc.set_config(max_items=previous.max_items)

    ```
    """
    global _config
    previous = _config
    _config = replace(_config, **changes)
    return previous
