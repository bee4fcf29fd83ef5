# tests/unit/test_graph.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from hsmirror.interfaces.protocols import TargetNode, TargetSubgraph
from hsmirror.interfaces.types import ANY_STATE, ConditionMode, ParameterType
from hsmirror.runtime.graph import MirrorGraph, MirrorSubgraph


def test_graph_entities_satisfy_protocols():
    subgraph = MirrorSubgraph("Root")
    node = subgraph.add_node("A")
    assert isinstance(node, TargetNode)
    assert isinstance(subgraph, TargetSubgraph)


def test_add_node_and_subgraph():
    root = MirrorSubgraph("Root")
    a = root.add_node("A")
    nested = root.add_subgraph("Nested")
    b = nested.add_node("B")

    assert root.nodes == (a,)
    assert root.subgraphs == (nested,)
    assert nested.nodes == (b,)
    assert list(root.walk()) == [root, nested]


def test_node_transitions_and_removal():
    root = MirrorSubgraph("Root")
    a, b = root.add_node("A"), root.add_node("B")
    edge = a.add_transition(b)

    assert edge.source is a and edge.destination is b
    assert a.transitions == (edge,)

    a.remove_transitions()
    assert a.transitions == ()
    assert edge.destroyed


def test_any_state_transitions():
    root = MirrorSubgraph("Root")
    a = root.add_node("A")
    edge = root.add_any_state_transition(a)

    assert edge.source is ANY_STATE
    assert edge.source_name == "ANY_STATE"
    assert root.any_state_transitions == (edge,)
    assert root.transitions == ()

    root.remove_any_state_transitions()
    assert root.any_state_transitions == ()
    assert edge.destroyed


def test_subgraph_outgoing_transitions():
    root = MirrorSubgraph("Root")
    nested = root.add_subgraph("Nested")
    a = root.add_node("A")
    edge = nested.add_transition(a)
    assert edge.source is nested
    assert nested.transitions == (edge,)


def test_edge_conditions():
    root = MirrorSubgraph("Root")
    a = root.add_node("A")
    edge = a.add_transition(a)
    condition = edge.add_condition(ConditionMode.IF, 1.0, "Flag")
    assert edge.conditions == [condition]
    assert condition.parameter == "Flag"


def test_remove_node_clears_default():
    root = MirrorSubgraph("Root")
    a = root.add_node("A")
    b = root.add_node("B")
    edge = a.add_transition(b)
    root.default_node = a

    root.remove_node(a)

    assert root.nodes == (b,)
    assert root.default_node is None
    assert edge.destroyed


def test_remove_foreign_node_raises():
    root = MirrorSubgraph("Root")
    other = MirrorSubgraph("Other").add_node("A")
    with pytest.raises(ValueError):
        root.remove_node(other)


def test_remove_subgraph_destroys_contents():
    root = MirrorSubgraph("Root")
    nested = root.add_subgraph("Nested")
    inner = nested.add_subgraph("Inner")
    x = inner.add_node("X")
    loop = x.add_transition(x)
    any_edge = nested.add_any_state_transition(x)

    root.remove_subgraph(nested)

    assert root.subgraphs == ()
    assert loop.destroyed and any_edge.destroyed


def test_edges_collects_live_edges_recursively(edge_names):
    root = MirrorSubgraph("Root")
    a = root.add_node("A")
    nested = root.add_subgraph("Nested")
    b = nested.add_node("B")
    a.add_transition(nested)
    nested.add_any_state_transition(a)
    b.add_transition(a)

    assert sorted(edge_names(root.edges())) == [("A", "Nested"), ("ANY_STATE", "A"), ("B", "A")]


def test_to_dict_snapshot():
    root = MirrorSubgraph("Root")
    a = root.add_node("A")
    root.default_node = a
    a.add_transition(a)

    snapshot = root.to_dict()

    assert snapshot["default"] == "A"
    assert snapshot["nodes"][0]["transitions"][0]["destination"] == "A"
    assert snapshot["subgraphs"] == []


def test_mirror_graph_parameters():
    graph = MirrorGraph()
    graph.add_parameter("Flag", ParameterType.BOOL)
    assert graph.parameters == {"Flag": ParameterType.BOOL}

    with pytest.raises(ValueError):
        graph.add_parameter("Flag", ParameterType.BOOL)

    graph.clear_parameters()
    assert graph.parameters == {}
    assert graph.to_dict()["root"]["name"] == graph.root.name
