"""Visualization graph that receives the mirror of a state machine."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from ..interfaces.types import ANY_STATE, ConditionMode, ParameterType, PseudoSource


@dataclass(frozen=True)
class EdgeCondition:
    """A single condition on an edge: ``parameter`` compared against ``threshold``."""

    mode: ConditionMode
    threshold: float
    parameter: str


@dataclass(eq=False)
class MirrorEdge:
    """Directed edge between two mirror entities, or from the any-state of a subgraph."""

    source: Union["MirrorNode", "MirrorSubgraph", PseudoSource]
    destination: Union["MirrorNode", "MirrorSubgraph"]
    conditions: List[EdgeCondition] = field(default_factory=list)
    destroyed: bool = False

    def add_condition(self, mode: ConditionMode, threshold: float, parameter: str) -> EdgeCondition:
        condition = EdgeCondition(mode=mode, threshold=threshold, parameter=parameter)
        self.conditions.append(condition)
        return condition

    @property
    def source_name(self) -> str:
        if self.source is ANY_STATE:
            return repr(ANY_STATE)
        return self.source.name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source_name,
            "destination": self.destination.name,
            "conditions": [(c.mode.name, c.threshold, c.parameter) for c in self.conditions],
        }

    def __repr__(self) -> str:
        return f"MirrorEdge({self.source_name!r} -> {self.destination.name!r})"


class _EdgeOwner:
    """Shared bookkeeping for anything that can be the source of edges."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._transitions: List[MirrorEdge] = []

    @property
    def transitions(self) -> Tuple[MirrorEdge, ...]:
        return tuple(self._transitions)

    def add_transition(self, destination: Union["MirrorNode", "MirrorSubgraph"]) -> MirrorEdge:
        edge = MirrorEdge(source=self, destination=destination)
        self._transitions.append(edge)
        return edge

    def remove_transitions(self) -> None:
        """Destroy every outgoing edge."""
        _destroy(self._transitions)


class MirrorNode(_EdgeOwner):
    """A leaf entity of the graph."""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "transitions": [e.to_dict() for e in self._transitions]}

    def __repr__(self) -> str:
        return f"MirrorNode({self.name!r})"


class MirrorSubgraph(_EdgeOwner):
    """
    A container of nodes and nested subgraphs.

    Besides the edges leaving the subgraph itself, a subgraph owns a set of
    any-state edges: edges that may be taken from whichever of its nodes is
    active. Its default node is the entity entered when the subgraph is.
    """

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._nodes: List[MirrorNode] = []
        self._subgraphs: List["MirrorSubgraph"] = []
        self._any_state_transitions: List[MirrorEdge] = []
        self.default_node: Optional[Union[MirrorNode, "MirrorSubgraph"]] = None

    @property
    def nodes(self) -> Tuple[MirrorNode, ...]:
        return tuple(self._nodes)

    @property
    def subgraphs(self) -> Tuple["MirrorSubgraph", ...]:
        return tuple(self._subgraphs)

    @property
    def any_state_transitions(self) -> Tuple[MirrorEdge, ...]:
        return tuple(self._any_state_transitions)

    def add_node(self, name: str) -> MirrorNode:
        node = MirrorNode(name)
        self._nodes.append(node)
        return node

    def add_subgraph(self, name: str) -> "MirrorSubgraph":
        subgraph = MirrorSubgraph(name)
        self._subgraphs.append(subgraph)
        return subgraph

    def add_any_state_transition(self, destination: Union[MirrorNode, "MirrorSubgraph"]) -> MirrorEdge:
        edge = MirrorEdge(source=ANY_STATE, destination=destination)
        self._any_state_transitions.append(edge)
        return edge

    def remove_any_state_transitions(self) -> None:
        _destroy(self._any_state_transitions)

    def remove_node(self, node: MirrorNode) -> None:
        """
        Remove a direct child node and destroy its outgoing edges.

        :raises ValueError: If ``node`` is not a direct child of this subgraph.
        """
        if node not in self._nodes:
            raise ValueError(f"Node '{node.name}' is not part of subgraph '{self.name}'")
        node.remove_transitions()
        self._nodes.remove(node)
        if self.default_node is node:
            self.default_node = None

    def remove_subgraph(self, subgraph: "MirrorSubgraph") -> None:
        """
        Remove a direct child subgraph together with everything it contains.

        :raises ValueError: If ``subgraph`` is not a direct child of this subgraph.
        """
        if subgraph not in self._subgraphs:
            raise ValueError(f"Subgraph '{subgraph.name}' is not part of subgraph '{self.name}'")
        for nested in list(subgraph.walk()):
            for node in nested.nodes:
                node.remove_transitions()
            nested.remove_transitions()
            nested.remove_any_state_transitions()
        self._subgraphs.remove(subgraph)
        if self.default_node is subgraph:
            self.default_node = None

    def walk(self) -> Iterator["MirrorSubgraph"]:
        """Yield this subgraph and every nested subgraph, depth-first."""
        yield self
        for subgraph in self._subgraphs:
            yield from subgraph.walk()

    def edges(self) -> List[MirrorEdge]:
        """All live edges in this subgraph and below."""
        result: List[MirrorEdge] = []
        for subgraph in self.walk():
            result.extend(subgraph.any_state_transitions)
            result.extend(subgraph.transitions)
            for node in subgraph.nodes:
                result.extend(node.transitions)
        return result

    def to_dict(self) -> Dict[str, Any]:
        """Plain snapshot of the structure, used for debugging and comparisons."""
        return {
            "name": self.name,
            "default": self.default_node.name if self.default_node is not None else None,
            "nodes": [node.to_dict() for node in self._nodes],
            "subgraphs": [subgraph.to_dict() for subgraph in self._subgraphs],
            "transitions": [e.to_dict() for e in self._transitions],
            "any_state_transitions": [e.to_dict() for e in self._any_state_transitions],
        }

    def __repr__(self) -> str:
        return f"MirrorSubgraph({self.name!r}, nodes={len(self._nodes)}, subgraphs={len(self._subgraphs)})"


class MirrorGraph:
    """
    Owner of a mirrored hierarchy: the root subgraph plus the parameter table
    edge conditions refer to.
    """

    def __init__(self, name: str = "StateMachineDebugger") -> None:
        self.name = name
        self.root = MirrorSubgraph("Base Layer")
        self._parameters: Dict[str, ParameterType] = {}

    @property
    def parameters(self) -> Dict[str, ParameterType]:
        return dict(self._parameters)

    def add_parameter(self, name: str, parameter_type: ParameterType) -> None:
        if name in self._parameters:
            raise ValueError(f"Parameter '{name}' already exists in graph '{self.name}'")
        self._parameters[name] = parameter_type

    def clear_parameters(self) -> None:
        self._parameters.clear()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "parameters": {name: kind.name for name, kind in self._parameters.items()},
            "root": self.root.to_dict(),
        }


def _destroy(edges: List[MirrorEdge]) -> None:
    for edge in edges:
        edge.destroyed = True
    edges.clear()
