# hsmirror/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Optional, Union

from hsmirror.interfaces.types import ANY_STATE, PseudoSource, StateID, TriggerKey


class Transition:
    """
    Defines a path from one state to another inside a machine. A transition
    with a trigger only fires for that trigger; one without is checked on every
    update of its machine. Only connectivity is modelled here.
    """

    def __init__(
        self,
        source: Union[StateID, PseudoSource],
        to: Optional[StateID],
        trigger: Optional[TriggerKey] = None,
    ) -> None:
        """
        :param source: Name of the origin state, or ANY_STATE for a from-any transition.
        :param to: Name of the destination state; None leaves the transition unwired.
        :param trigger: Optional trigger key. None makes this a plain transition.
        """
        if source is None:
            raise ValueError("Transition source cannot be None; use ANY_STATE for from-any transitions")
        self._source = source
        self._to = to
        self._trigger = trigger

    @property
    def source(self) -> Union[StateID, PseudoSource]:
        """The origin state name, or ANY_STATE."""
        return self._source

    @property
    def to(self) -> Optional[StateID]:
        """The destination state name, or None when unwired."""
        return self._to

    @property
    def trigger(self) -> Optional[TriggerKey]:
        return self._trigger

    @property
    def is_from_any(self) -> bool:
        return self._source is ANY_STATE

    @property
    def is_triggered(self) -> bool:
        return self._trigger is not None

    def __repr__(self) -> str:
        trigger = f", trigger={self._trigger!r}" if self._trigger is not None else ""
        return f"Transition({self._source!r} -> {self._to!r}{trigger})"
