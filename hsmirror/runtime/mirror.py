"""
Mirroring of a hierarchical state machine into a visualization graph.

Architecture:
- Structural pass: walk the source hierarchy depth-first, reusing target
  nodes/subgraphs by name or creating them, and registering every entity
  in one registry shared by all nesting levels
- Edge plan: resolve every transition of every visited scope against the
  registry, only after the whole structural pass
- Swap: destroy existing edges and create the planned ones, each tagged
  with the always-true condition

Invariants:
- Names are unique over the whole mirrored tree
- After a sync, every edge of a mirrored scope was created by that sync
- Nodes and subgraphs are never removed unless pruning is enabled
- The source hierarchy is never mutated

Concurrency:
- Not thread-safe; a target must not be synced from several threads at once
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from ..core.config import MirrorOptions
from ..core.errors import ConfigurationError, ResolutionError
from ..core.lookup import find_first
from ..interfaces.protocols import SourceMachine, SourceState, SourceTransition
from ..interfaces.types import ParameterType, StateID, StateKind
from .conditions import tag_always_true
from .graph import MirrorGraph, MirrorNode, MirrorSubgraph

logger = logging.getLogger(__name__)

_Entity = Union[MirrorNode, MirrorSubgraph]


@dataclass
class _Registry:
    """Name lookup of every entity mirrored during one sync, across all levels."""

    nodes: Dict[StateID, MirrorNode] = field(default_factory=dict)
    subgraphs: Dict[StateID, MirrorSubgraph] = field(default_factory=dict)

    def resolve(self, destination: StateID, scope: StateID) -> _Entity:
        """States take precedence over machines; anything else is an error."""
        if destination in self.nodes:
            return self.nodes[destination]
        if destination in self.subgraphs:
            return self.subgraphs[destination]
        raise ResolutionError(
            f"Transition destination '{destination}' in '{scope}' is neither a mirrored state nor a mirrored machine",
            destination=destination,
            scope=scope,
        )

    def entity_for(self, state: SourceState) -> _Entity:
        if state.kind is StateKind.MACHINE:
            return self.subgraphs[state.name]
        return self.nodes[state.name]


@dataclass
class _EdgePlan:
    """Resolved replacement edge set for one owner, applied only once complete."""

    owner: _Entity
    destinations: List[_Entity]
    any_state: bool = False

    def apply(self, parameter: str) -> None:
        if self.any_state:
            self.owner.remove_any_state_transitions()
            add = self.owner.add_any_state_transition
        else:
            self.owner.remove_transitions()
            add = self.owner.add_transition
        for destination in self.destinations:
            tag_always_true(add(destination), parameter)


class GraphMirror:
    """
    Keeps a MirrorSubgraph structurally in sync with a hierarchical state machine.

    Existing target entities are reused by name, default nodes follow the
    declared start states, and every edge is rebuilt from scratch on each sync.
    From-any transitions become any-state edges of the subgraph mirroring the
    machine that declared them.
    """

    def __init__(self, options: Optional[MirrorOptions] = None) -> None:
        self._options = options or MirrorOptions()

    @property
    def options(self) -> MirrorOptions:
        return self._options

    def validate_source(self, source_root: SourceMachine) -> None:
        """
        Check that ``source_root`` can be mirrored, without touching any target.

        :raises ConfigurationError: If the root has no states, or a state name is
            used more than once anywhere below the root.
        """
        if not source_root.get_children():
            logger.error(
                f"Trying to mirror the empty machine '{source_root.name}'. "
                f"States and transitions must be added before mirroring."
            )
            raise ConfigurationError(
                f"Cannot mirror machine '{source_root.name}': it has no states",
                component=source_root.name,
                validation_errors={"states": []},
            )

        seen: Dict[StateID, StateID] = {}
        duplicates: List[Tuple[StateID, StateID, StateID]] = []
        pending: List[SourceMachine] = [source_root]
        while pending:
            machine = pending.pop()
            for child in machine.get_children():
                if child.name in seen:
                    duplicates.append((child.name, seen[child.name], machine.name))
                else:
                    seen[child.name] = machine.name
                if child.kind is StateKind.MACHINE:
                    pending.append(child)

        if duplicates:
            names = ", ".join(sorted({name for name, _, _ in duplicates}))
            raise ConfigurationError(
                f"State names must be unique across all nesting levels; duplicated: {names}",
                component=source_root.name,
                validation_errors={"duplicate_names": duplicates},
            )

    def sync(self, source_root: SourceMachine, target: MirrorSubgraph) -> MirrorSubgraph:
        """
        Mirror ``source_root`` into ``target`` in place.

        :param source_root: The root machine to mirror; must have at least one state.
        :param target: Empty subgraph, or one holding a previous mirror.
        :return: ``target``.
        :raises ConfigurationError: Before any mutation, if the source is empty or reuses names.
        :raises ResolutionError: If a transition destination cannot be found. Existing
            edges are left untouched in that case.
        """
        self.validate_source(source_root)

        registry = _Registry()
        scopes: List[Tuple[SourceMachine, MirrorSubgraph]] = []
        self._mirror_structure(source_root, target, registry, scopes)

        plans: List[_EdgePlan] = []
        for machine, subgraph in scopes:
            plans.extend(self._plan_edges(machine, subgraph, registry))

        for plan in plans:
            plan.apply(self._options.condition_parameter)

        for _, subgraph in scopes:
            self._clear_orphan_edges(subgraph, registry)

        if self._options.prune_orphans:
            for _, subgraph in scopes:
                self._prune(subgraph, registry)

        logger.info(
            f"Mirrored '{source_root.name}' into '{target.name}': {len(registry.nodes)} states, "
            f"{len(registry.subgraphs)} machines, {sum(len(p.destinations) for p in plans)} transitions"
        )
        return target

    def _mirror_structure(
        self,
        machine: SourceMachine,
        subgraph: MirrorSubgraph,
        registry: _Registry,
        scopes: List[Tuple[SourceMachine, MirrorSubgraph]],
    ) -> None:
        scopes.append((machine, subgraph))
        start = machine.start_state_name
        children = machine.get_children()

        if start is not None:
            found, _ = find_first(children, lambda state: state.name == start)
            if not found:
                logger.warning(
                    f"Start state '{start}' of machine '{machine.name}' is not one of its states; "
                    f"using the first state instead"
                )
                start = None

        for index, child in enumerate(children):
            if child.kind is StateKind.MACHINE:
                entity = self._reuse_or_create(subgraph.subgraphs, subgraph.add_subgraph, child.name, subgraph)
                registry.subgraphs[child.name] = entity
            elif child.kind is StateKind.LEAF:
                entity = self._reuse_or_create(subgraph.nodes, subgraph.add_node, child.name, subgraph)
                registry.nodes[child.name] = entity
            else:
                raise TypeError(f"Unsupported state kind {child.kind!r} for state '{child.name}'")

            if child.name == start or (start is None and index == 0):
                subgraph.default_node = entity

            if child.kind is StateKind.MACHINE:
                self._mirror_structure(child, entity, registry, scopes)

    @staticmethod
    def _reuse_or_create(existing, create, name: StateID, parent: MirrorSubgraph) -> _Entity:
        found, entity = find_first(existing, lambda candidate: candidate.name == name)
        if found:
            logger.debug(f"Reusing '{name}' in '{parent.name}'")
            return entity
        logger.debug(f"Creating '{name}' in '{parent.name}'")
        return create(name)

    def _plan_edges(self, machine: SourceMachine, subgraph: MirrorSubgraph, registry: _Registry) -> List[_EdgePlan]:
        plans = []
        for child in machine.get_children():
            plans.append(
                _EdgePlan(
                    owner=registry.entity_for(child),
                    destinations=self._resolve(machine.get_transitions(child.name), registry, machine.name),
                )
            )
        plans.append(
            _EdgePlan(
                owner=subgraph,
                destinations=self._resolve(machine.get_transitions_from_any(), registry, machine.name),
                any_state=True,
            )
        )
        return plans

    @staticmethod
    def _resolve(transitions: List[SourceTransition], registry: _Registry, scope: StateID) -> List[_Entity]:
        destinations = []
        for transition in transitions:
            if transition.to is None:
                logger.debug(f"Skipping unwired transition from {transition.source!r} in '{scope}'")
                continue
            destinations.append(registry.resolve(transition.to, scope))
        return destinations

    @staticmethod
    def _clear_orphan_edges(subgraph: MirrorSubgraph, registry: _Registry) -> None:
        """Destroy edges of entities left over from states that no longer exist."""
        for node in subgraph.nodes:
            if registry.nodes.get(node.name) is not node:
                node.remove_transitions()
        for nested in subgraph.subgraphs:
            if registry.subgraphs.get(nested.name) is not nested:
                logger.debug(f"Clearing edges of orphaned subgraph '{nested.name}' in '{subgraph.name}'")
                for orphan in nested.walk():
                    orphan.remove_transitions()
                    orphan.remove_any_state_transitions()
                    for node in orphan.nodes:
                        node.remove_transitions()

    @staticmethod
    def _prune(subgraph: MirrorSubgraph, registry: _Registry) -> None:
        for node in subgraph.nodes:
            if registry.nodes.get(node.name) is not node:
                logger.debug(f"Pruning orphaned node '{node.name}' from '{subgraph.name}'")
                subgraph.remove_node(node)
        for nested in subgraph.subgraphs:
            if registry.subgraphs.get(nested.name) is not nested:
                logger.debug(f"Pruning orphaned subgraph '{nested.name}' from '{subgraph.name}'")
                subgraph.remove_subgraph(nested)


def mirror_to_graph(
    machine: SourceMachine,
    graph: Optional[MirrorGraph] = None,
    options: Optional[MirrorOptions] = None,
) -> MirrorGraph:
    """
    Mirror ``machine`` into the root subgraph of ``graph``, creating the graph
    when none is given. The parameter table is reset to hold only the
    generated always-true parameter that every mirrored edge refers to.

    :raises ConfigurationError: If ``machine`` cannot be mirrored; ``graph`` is left untouched.
    :raises ResolutionError: If a transition destination cannot be found.
    """
    mirror = GraphMirror(options)
    mirror.validate_source(machine)

    if graph is None:
        graph = MirrorGraph()
    graph.clear_parameters()
    graph.add_parameter(mirror.options.condition_parameter, ParameterType.BOOL)

    mirror.sync(machine, graph.root)
    return graph
