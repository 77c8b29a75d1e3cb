"""Pastry domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class PastryNotFound(Exception):
    """The requested pastry does not exist."""


class PastryAlreadyExists(Exception):
    """Another pastry is already registered under the same name."""


class PastryInUse(Exception):
    """The pastry is referenced by at least one order item."""
