"""
Custom exceptions for the argument graph and dialectical engine.

Provides specific error types for each way an operation can be rejected.
"""

from __future__ import annotations


class DialecticaError(Exception):
    """Base exception for all dialectica errors."""

    pass


class ValidationError(DialecticaError, ValueError):
    """Argument data is missing a field or carries an invalid value."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class DuplicateIdError(DialecticaError):
    """An argument with the same id is already present in the graph."""

    def __init__(self, argument_id: str):
        super().__init__(f"Argument with ID {argument_id} already exists")
        self.argument_id = argument_id


class UnknownReferenceError(DialecticaError, LookupError):
    """A relationship or lookup names an id that is not in the graph."""

    def __init__(self, argument_id: str, referenced_by: str | None = None):
        if referenced_by:
            message = f"Argument {referenced_by} references unknown argument {argument_id}"
        else:
            message = f"Unknown argument ID: {argument_id}"
        super().__init__(message)
        self.argument_id = argument_id
        self.referenced_by = referenced_by


class InvalidInputError(DialecticaError, ValueError):
    """Operation received input it cannot work with."""

    pass
