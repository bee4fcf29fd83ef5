"""
Interfaces package describing both collaborators of the mirror.

Architecture:
- Source side: the hierarchical state machine being mirrored (read-only)
- Target side: the visualization graph receiving the mirror (read/write)
- Shared scalar types and enumerations
"""

from .protocols import SourceMachine, SourceState, TargetNode, TargetSubgraph
from .types import ANY_STATE, ConditionMode, ParameterType, PseudoSource, StateID, StateKind, TriggerKey

__all__ = [
    "SourceMachine",
    "SourceState",
    "TargetNode",
    "TargetSubgraph",
    "ANY_STATE",
    "ConditionMode",
    "ParameterType",
    "PseudoSource",
    "StateID",
    "StateKind",
    "TriggerKey",
]
