"""
Runtime package for producing and inspecting mirrors.

Architecture:
- Visualization graph model receiving the mirror
- GraphMirror synchronization algorithm
- Always-true edge condition tagging
- Active leaf resolution for live machines
"""

from .conditions import tag_always_true
from .graph import EdgeCondition, MirrorEdge, MirrorGraph, MirrorNode, MirrorSubgraph
from .mirror import GraphMirror, mirror_to_graph
from .resolver import ActiveLeafResolver, resolve_active_leaf_name

__all__ = [
    "tag_always_true",
    "EdgeCondition",
    "MirrorEdge",
    "MirrorGraph",
    "MirrorNode",
    "MirrorSubgraph",
    "GraphMirror",
    "mirror_to_graph",
    "ActiveLeafResolver",
    "resolve_active_leaf_name",
]
