"""hsmirror: mirror hierarchical state machines into visualization graphs

This package keeps an externally owned graph structurally in sync with a
hierarchical finite state machine (HFSM), for viewing and debugging.

Responsibilities:
    - Reuse-or-create of mirrored states and nested machines by name
    - Default node assignment from declared start states
    - Full rebuild of transitions on every sync
    - Scoping of from-any transitions to the machine declaring them
    - Resolution of the active leaf state of a running machine

Cross-cutting Concerns:
    Thread Safety:
        - Synchronous and single-threaded; callers own exclusive access

    Error Handling:
        - Structured error hierarchy rooted at MirrorError
        - Configuration problems reported before the target is mutated

    Logging:
        - Standard library logging, one logger per module
"""

from .core import (
    GENERATED_PARAMETER,
    ConfigurationError,
    LeafState,
    MirrorError,
    MirrorOptions,
    NestedMachine,
    ResolutionError,
    Transition,
    find_first,
)
from .interfaces.types import ANY_STATE
from .runtime import (
    ActiveLeafResolver,
    GraphMirror,
    MirrorGraph,
    MirrorSubgraph,
    mirror_to_graph,
    resolve_active_leaf_name,
    tag_always_true,
)

__version__ = "0.1.0"

__all__ = [
    "ANY_STATE",
    "GENERATED_PARAMETER",
    "ConfigurationError",
    "LeafState",
    "MirrorError",
    "MirrorOptions",
    "NestedMachine",
    "ResolutionError",
    "Transition",
    "find_first",
    "ActiveLeafResolver",
    "GraphMirror",
    "MirrorGraph",
    "MirrorSubgraph",
    "mirror_to_graph",
    "resolve_active_leaf_name",
    "tag_always_true",
]
