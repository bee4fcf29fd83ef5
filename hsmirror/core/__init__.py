"""
Core package providing the mirrored machine model, errors and settings.

Architecture:
- Leaf states and nested machines forming the source hierarchy
- Name-keyed transitions (plain, triggered, from-any)
- Error taxonomy shared by the runtime package
- Mirroring options
"""

from .config import GENERATED_PARAMETER, MirrorOptions
from .errors import ConfigurationError, MirrorError, ResolutionError
from .lookup import find_first
from .states import LeafState, NestedMachine, StateBase
from .transitions import Transition

__all__ = [
    "GENERATED_PARAMETER",
    "MirrorOptions",
    "ConfigurationError",
    "MirrorError",
    "ResolutionError",
    "find_first",
    "LeafState",
    "NestedMachine",
    "StateBase",
    "Transition",
]
