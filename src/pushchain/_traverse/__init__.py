from ._adaptors import (
    Enumerate,
    Filter,
    FilterMap,
    Inspect,
    Map,
    MapWhile,
    Skip,
    SkipWhile,
    StepBy,
    Take,
    TakeWhile,
)
from ._main import Traverse
from ._nested import Chain, FlatMap
from ._producers import Empty, FromFn, FromIter, Once, Successors, Walk, into_traverse

__all__ = [
    "Chain",
    "Empty",
    "Enumerate",
    "Filter",
    "FilterMap",
    "FlatMap",
    "FromFn",
    "FromIter",
    "Inspect",
    "Map",
    "MapWhile",
    "Once",
    "Skip",
    "SkipWhile",
    "StepBy",
    "Successors",
    "Take",
    "TakeWhile",
    "Traverse",
    "Walk",
    "into_traverse",
]
