from ._core import Config, get_config, set_config
from ._eager import Seq, Set, Vec
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._traverse import Traverse
from ._types import Consumer, Enumerated, FromTraverse

__all__ = [
    "NONE",
    "Config",
    "Consumer",
    "Enumerated",
    "FromTraverse",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Seq",
    "Set",
    "Some",
    "Traverse",
    "Vec",
    "get_config",
    "set_config",
]
