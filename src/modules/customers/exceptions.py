"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class CustomerNotFound(Exception):
    """The requested customer does not exist."""


class CustomerAlreadyExists(Exception):
    """Another customer is already registered with the same phone number."""


class CustomerHasActiveOrders(Exception):
    """The customer still has orders that are neither completed nor cancelled."""
