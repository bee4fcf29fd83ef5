# hsmirror/core/config.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from dataclasses import dataclass

# Visualization graphs commonly ignore edges without any condition, so every
# mirrored edge carries a condition on this always-true parameter.
GENERATED_PARAMETER = "Generated Parameter"

DEFAULT_MAX_ACTIVE_DEPTH = 100


@dataclass(frozen=True)
class MirrorOptions:
    """
    Settings for a mirroring run.

    :param condition_parameter: Parameter name used for the always-true edge condition.
    :param max_active_depth: Upper bound on nested descents when resolving the active leaf.
    :param prune_orphans: Remove mirrored entities whose source state no longer exists.
    """

    condition_parameter: str = GENERATED_PARAMETER
    max_active_depth: int = DEFAULT_MAX_ACTIVE_DEPTH
    prune_orphans: bool = False

    def __post_init__(self) -> None:
        if not self.condition_parameter:
            raise ValueError("condition_parameter must be a non-empty string")
        if self.max_active_depth < 1:
            raise ValueError("max_active_depth must be at least 1")
