# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from hsmirror.core.states import LeafState, NestedMachine
from hsmirror.core.transitions import Transition
from hsmirror.interfaces.types import ANY_STATE
from hsmirror.runtime.graph import MirrorGraph, MirrorSubgraph


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


@pytest.fixture
def combo_machine():
    """Combo: Punch (start), Kick, and a from-any transition back to Idle."""
    combo = NestedMachine("Combo")
    combo.add_state(LeafState("Punch"))
    combo.add_state(LeafState("Kick"))
    combo.set_start_state("Punch")
    combo.add_transition(Transition(ANY_STATE, "Idle"))
    return combo


@pytest.fixture
def scenario_machine(combo_machine):
    """Root: Idle (start), Run, Combo, with Idle -> Run on trigger 'go'."""
    root = NestedMachine("Root")
    root.add_state(LeafState("Idle"))
    root.add_state(LeafState("Run"))
    root.add_state(combo_machine)
    root.set_start_state("Idle")
    root.add_transition(Transition("Idle", "Run", trigger="go"))
    return root


@pytest.fixture
def flat_machine():
    """A single-level machine: A (start) -> B -> C."""
    root = NestedMachine("Flat")
    for name in ("A", "B", "C"):
        root.add_state(LeafState(name))
    root.set_start_state("A")
    root.add_transition(Transition("A", "B"))
    root.add_transition(Transition("B", "C"))
    return root


@pytest.fixture
def target():
    """An empty target subgraph."""
    return MirrorSubgraph("Base Layer")


@pytest.fixture
def graph():
    return MirrorGraph()


@pytest.fixture
def edge_names():
    """Returns a helper mapping edges to (source, destination) name pairs."""

    def _names(edges):
        return [(edge.source_name, edge.destination.name) for edge in edges]

    return _names
