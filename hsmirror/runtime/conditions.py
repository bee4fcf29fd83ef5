# hsmirror/runtime/conditions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from hsmirror.core.config import GENERATED_PARAMETER
from hsmirror.interfaces.types import ConditionMode
from hsmirror.runtime.graph import MirrorEdge

ALWAYS_TRUE_THRESHOLD = 1.0


def tag_always_true(edge: MirrorEdge, parameter: str = GENERATED_PARAMETER) -> MirrorEdge:
    """
    Attach the always-true condition to a freshly created edge so the graph
    treats it as traversable rather than as a disabled fallthrough edge.

    :param edge: The edge to tag.
    :param parameter: Name of the generated boolean parameter.
    :return: The same edge, for chaining.
    """
    edge.add_condition(ConditionMode.IF, ALWAYS_TRUE_THRESHOLD, parameter)
    return edge
