# tests/unit/test_errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""Test suite for the mirror error classes."""

import pytest

from hsmirror.core.errors import ConfigurationError, MirrorError, ResolutionError


def test_mirror_error_base():
    """Test the base error class."""
    message = "Test error message"
    details = {"key": "value"}
    error = MirrorError(message, details)

    assert str(error) == message
    assert error.message == message
    assert error.details == details


def test_error_with_empty_details():
    error = MirrorError("Test message")
    assert error.details == {}


def test_configuration_error():
    """Test ConfigurationError with validation errors."""
    validation_errors = {"duplicate_names": [("Idle", "Root", "Combo")]}
    error = ConfigurationError("Configuration invalid", "Root", validation_errors)

    assert isinstance(error, MirrorError)
    assert error.component == "Root"
    assert error.validation_errors == validation_errors
    assert error.details == {}


def test_resolution_error():
    error = ResolutionError("Unknown destination", "Missing", "Combo", details={"source": "Punch"})

    assert isinstance(error, MirrorError)
    assert error.destination == "Missing"
    assert error.scope == "Combo"
    assert error.details == {"source": "Punch"}


def test_errors_catchable_as_base():
    with pytest.raises(MirrorError):
        raise ResolutionError("Unknown destination", "Missing", "Root")
