# hsmirror/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional

from hsmirror.core.transitions import Transition
from hsmirror.interfaces.types import StateID, StateKind, TriggerKey


@dataclass(eq=False)
class StateBase(ABC):
    """Base class for state functionality"""

    name: StateID
    parent: Optional["NestedMachine"] = None

    @property
    @abstractmethod
    def kind(self) -> StateKind: ...

    def __hash__(self) -> int:
        return hash((self.name, id(self)))

    def __eq__(self, other: object) -> bool:
        """States are equal if they are the same object."""
        if not isinstance(other, StateBase):
            return NotImplemented
        return id(self) == id(other)


class LeafState(StateBase):
    """A state with no children of its own."""

    def __init__(self, name: StateID) -> None:
        super().__init__(name=name)

    @property
    def kind(self) -> StateKind:
        return StateKind.LEAF

    def __repr__(self) -> str:
        return f"LeafState({self.name!r})"


class NestedMachine(StateBase):
    """
    A state machine that can itself be used as a state of a parent machine.

    Children are kept in insertion order. Transitions are stored per source
    child, with triggered transitions grouped by trigger key, and from-any
    transitions are stored separately for this scope only. The machine tracks
    which child is active, which is all the mirror and the active leaf lookup
    need from an engine; there is no event dispatch here.
    """

    def __init__(self, name: StateID = "Root", start_state: Optional[StateID] = None) -> None:
        """
        :param name: Name of the machine, used when it is nested in a parent.
        :param start_state: Optional name of the child entered on start.
        """
        super().__init__(name=name)
        self._states: Dict[StateID, StateBase] = {}
        self._transitions: Dict[StateID, List[Transition]] = {}
        self._trigger_transitions: Dict[StateID, Dict[TriggerKey, List[Transition]]] = {}
        self._transitions_from_any: List[Transition] = []
        self._trigger_transitions_from_any: Dict[TriggerKey, List[Transition]] = {}
        self._start_state_name: Optional[StateID] = start_state
        self._active_state: Optional[StateBase] = None

    @property
    def kind(self) -> StateKind:
        return StateKind.MACHINE

    @property
    def start_state_name(self) -> Optional[StateID]:
        """The declared start child, or None when nothing was declared."""
        return self._start_state_name

    @property
    def active_state(self) -> Optional[StateBase]:
        return self._active_state

    @property
    def active_state_name(self) -> Optional[StateID]:
        return self._active_state.name if self._active_state is not None else None

    def set_start_state(self, name: StateID) -> None:
        self._start_state_name = name

    def add_state(self, state: StateBase) -> StateBase:
        """
        Add a child state or machine.

        :raises ValueError: If the name is taken in this machine, the state already
            belongs to another machine, or adding it would create a cycle.
        """
        if state.name in self._states:
            raise ValueError(f"State '{state.name}' already exists in machine '{self.name}'")
        if state.parent is not None:
            raise ValueError(
                f"Cannot re-parent state '{state.name}' from '{state.parent.name}' to '{self.name}'. "
                f"Re-parenting is disallowed."
            )
        current: Optional[StateBase] = self
        while current is not None:
            if current is state:
                raise ValueError(f"Adding state '{state.name}' to machine '{self.name}' would create a cycle")
            current = current.parent

        state.parent = self
        self._states[state.name] = state
        return state

    def add_transition(self, transition: Transition) -> Transition:
        """Register a transition, routing it by source and trigger."""
        if transition.is_from_any:
            if transition.is_triggered:
                self._trigger_transitions_from_any.setdefault(transition.trigger, []).append(transition)
            else:
                self._transitions_from_any.append(transition)
        elif transition.is_triggered:
            by_trigger = self._trigger_transitions.setdefault(transition.source, {})
            by_trigger.setdefault(transition.trigger, []).append(transition)
        else:
            self._transitions.setdefault(transition.source, []).append(transition)
        return transition

    def get_state(self, name: StateID) -> Optional[StateBase]:
        return self._states.get(name)

    def get_children(self) -> List[StateBase]:
        return list(self._states.values())

    def get_transitions(self, name: StateID) -> List[Transition]:
        """Plain transitions leaving ``name`` followed by its triggered ones."""
        transitions = list(self._transitions.get(name, []))
        for triggered in self._trigger_transitions.get(name, {}).values():
            transitions.extend(triggered)
        return transitions

    def get_transitions_from_any(self) -> List[Transition]:
        """Plain from-any transitions of this scope followed by triggered ones."""
        transitions = list(self._transitions_from_any)
        for triggered in self._trigger_transitions_from_any.values():
            transitions.extend(triggered)
        return transitions

    def start(self) -> None:
        """
        Enter the start state, falling back to the first child when no start
        state was declared. Nested machines are started recursively.

        :raises ValueError: If the machine has no states or the start state is unknown.
        """
        if not self._states:
            raise ValueError(f"Machine '{self.name}' has no states")
        name = self._start_state_name
        if name is None:
            name = next(iter(self._states))
        self._enter(name)

    def stop(self) -> None:
        """Leave the active state, stopping nested machines on the way down."""
        if isinstance(self._active_state, NestedMachine):
            self._active_state.stop()
        self._active_state = None

    def change_state(self, name: StateID) -> None:
        """
        Switch the active child of this machine.

        :raises ValueError: If ``name`` is not a child of this machine.
        """
        if isinstance(self._active_state, NestedMachine):
            self._active_state.stop()
        self._enter(name)

    def _enter(self, name: StateID) -> None:
        state = self._states.get(name)
        if state is None:
            raise ValueError(f"State '{name}' not found in machine '{self.name}'")
        self._active_state = state
        if isinstance(state, NestedMachine):
            state.start()

    def __repr__(self) -> str:
        return f"NestedMachine({self.name!r}, states={list(self._states)!r})"
