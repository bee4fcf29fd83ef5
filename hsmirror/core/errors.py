# hsmirror/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Dict, Optional


class MirrorError(Exception):
    """
    Base exception class for errors raised while mirroring a state machine.

    :param message: Human readable description.
    :param details: Optional structured context for diagnostics.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(MirrorError):
    """
    Raised when the source hierarchy cannot be mirrored as configured, e.g. it
    has no states yet or reuses a name across nesting levels. Raised before the
    offending part of the target is mutated.
    """

    def __init__(
        self,
        message: str,
        component: str,
        validation_errors: Optional[Dict[str, Any]] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.component = component
        self.validation_errors = validation_errors or {}


class ResolutionError(MirrorError):
    """
    Raised when a transition points at a name that is neither a mirrored node
    nor a mirrored subgraph.
    """

    def __init__(
        self,
        message: str,
        destination: str,
        scope: Optional[str],
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.destination = destination
        self.scope = scope
