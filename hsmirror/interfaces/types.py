# hsmirror/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from enum import Enum, auto
from typing import Hashable, Optional

StateID = str
TriggerKey = Hashable


class StateKind(Enum):
    """The two variants a hierarchical node can take."""

    LEAF = auto()
    MACHINE = auto()


class PseudoSource(Enum):
    """
    Sources that are not a concrete state.

    ANY stands for "whichever state is active within the declaring scope".
    """

    ANY = auto()

    def __repr__(self) -> str:
        return "ANY_STATE"


ANY_STATE = PseudoSource.ANY


class ConditionMode(Enum):
    IF = auto()
    IF_NOT = auto()


class ParameterType(Enum):
    BOOL = auto()
    TRIGGER = auto()
    INT = auto()
    FLOAT = auto()


# Transition destination; None means "not wired yet".
Destination = Optional[StateID]
