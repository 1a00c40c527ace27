"""
Domain exceptions for the person table engine.

Notes
-----
Validation problems are never raised; they are appended to a caller-owned list
of messages. Exceptions are reserved for callers that violate an operation's
contract, such as deleting a row position that does not exist.
"""

from __future__ import annotations


class PersonTableError(RuntimeError):
    """Base exception for all person table domain failures."""


class RowSelectionError(PersonTableError):
    """Raised when a selected row position is outside the row collection."""
