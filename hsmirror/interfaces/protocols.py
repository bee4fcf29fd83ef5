# hsmirror/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, List, Optional, Protocol, Sequence, Union, runtime_checkable

from hsmirror.interfaces.types import Destination, PseudoSource, StateID, StateKind, TriggerKey


@runtime_checkable
class SourceTransition(Protocol):
    """
    Transition protocol for the mirrored machine.

    Only connectivity is read: guards, actions and payloads are never consulted.
    """

    @property
    def source(self) -> Union[StateID, PseudoSource]: ...

    @property
    def to(self) -> Destination: ...

    @property
    def trigger(self) -> Optional[TriggerKey]: ...


@runtime_checkable
class SourceState(Protocol):
    """
    Any node of the mirrored hierarchy.

    Runtime Invariants:
    - The name is unique within the declaring machine.
    - The kind never changes after creation.
    """

    @property
    def name(self) -> StateID: ...

    @property
    def kind(self) -> StateKind: ...


@runtime_checkable
class SourceMachine(SourceState, Protocol):
    """
    A machine whose children may themselves be machines.

    Methods:
        get_children(): Direct children, in insertion order.
        get_transitions(name): Plain and triggered transitions leaving a direct child.
        get_transitions_from_any(): Plain and triggered from-any transitions of this scope.

    Runtime Invariants:
    - The hierarchy is not mutated while a mirror is being produced.
    """

    @property
    def start_state_name(self) -> Optional[StateID]: ...

    @property
    def active_state(self) -> Optional[SourceState]: ...

    @property
    def active_state_name(self) -> Optional[StateID]: ...

    def get_children(self) -> List[SourceState]: ...

    def get_transitions(self, name: StateID) -> List[SourceTransition]: ...

    def get_transitions_from_any(self) -> List[SourceTransition]: ...


@runtime_checkable
class TargetNode(Protocol):
    """A named leaf entity of the visualization graph with outgoing edges."""

    @property
    def name(self) -> str: ...

    @property
    def transitions(self) -> Sequence[Any]: ...

    def add_transition(self, destination: Any) -> Any: ...

    def remove_transitions(self) -> None: ...


@runtime_checkable
class TargetSubgraph(TargetNode, Protocol):
    """
    A container of nodes and nested subgraphs in the visualization graph.

    Error Handling:
    - Creating entities never validates names; uniqueness is the caller's concern.
    """

    default_node: Optional[Any]

    @property
    def nodes(self) -> Sequence[TargetNode]: ...

    @property
    def subgraphs(self) -> Sequence["TargetSubgraph"]: ...

    @property
    def any_state_transitions(self) -> Sequence[Any]: ...

    def add_node(self, name: str) -> TargetNode: ...

    def add_subgraph(self, name: str) -> "TargetSubgraph": ...

    def add_any_state_transition(self, destination: Any) -> Any: ...

    def remove_any_state_transitions(self) -> None: ...

    def remove_node(self, node: TargetNode) -> None: ...

    def remove_subgraph(self, subgraph: "TargetSubgraph") -> None: ...
