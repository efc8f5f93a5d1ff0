from .content import CopyFrom, Literal
from .core import Scaffold, ScaffoldState, create, with_scaffold
from .mixin import ScaffoldMixin

__version__ = "0.1.0"

__all__ = [
    "CopyFrom",
    "Literal",
    "Scaffold",
    "ScaffoldMixin",
    "ScaffoldState",
    "create",
    "with_scaffold",
]
