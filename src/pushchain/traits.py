"""Public traits for custom user implementations.

- Subclass `Traverse` and implement `traverse` to turn any structure into a push sequence with every combinator available.
- Implement `FromTraverse` (a single `from_traverse` classmethod) to make a type usable as a `collect()` target.
- `Pipeable` only depends on `Self`, so it can be added to any existing class.
"""

from ._core import Pipeable
from ._traverse import Traverse
from ._types import Consumer, FromTraverse

__all__ = ["Consumer", "FromTraverse", "Pipeable", "Traverse"]
