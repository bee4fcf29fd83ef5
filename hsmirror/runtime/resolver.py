# hsmirror/runtime/resolver.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
import logging
from typing import Optional

from hsmirror.core.config import DEFAULT_MAX_ACTIVE_DEPTH, MirrorOptions
from hsmirror.interfaces.protocols import SourceMachine
from hsmirror.interfaces.types import StateID, StateKind

logger = logging.getLogger(__name__)


def _active_machine(machine: SourceMachine) -> Optional[SourceMachine]:
    active = machine.active_state
    if active is not None and active.kind is StateKind.MACHINE:
        return active
    return None


def resolve_active_leaf_name(root: SourceMachine, max_depth: int = DEFAULT_MAX_ACTIVE_DEPTH) -> Optional[StateID]:
    """
    Get the name of the active state, even when it is nested below ``root``.

    Active nested machines are followed down at most ``max_depth`` times. The
    bound only guards against a cyclic active chain; when it is reached the
    deepest machine's active name is returned instead of raising.

    :param root: The outermost machine.
    :param max_depth: Maximum number of nested descents.
    :return: The active leaf name, or ``root.active_state_name`` when the root's
        active state is not a nested machine.
    """
    nested = _active_machine(root)
    remaining = max_depth
    while nested is not None and remaining > 0:
        deeper = _active_machine(nested)
        if deeper is None:
            return nested.active_state_name
        nested = deeper
        remaining -= 1

    if nested is not None:
        logger.warning(
            f"Stopped resolving the active state of '{root.name}' after {max_depth} nested machines; "
            f"returning the active state of '{nested.name}'"
        )
        return nested.active_state_name
    return root.active_state_name


class ActiveLeafResolver:
    """Resolves active leaf names using the bound configured in MirrorOptions."""

    def __init__(self, options: Optional[MirrorOptions] = None) -> None:
        self._options = options or MirrorOptions()

    def resolve(self, root: SourceMachine) -> Optional[StateID]:
        return resolve_active_leaf_name(root, self._options.max_active_depth)
