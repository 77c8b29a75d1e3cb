"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class OrderNotFound(Exception):
    """The requested order does not exist."""


class EmptyOrder(Exception):
    """An order was submitted without any items."""


class OrderCreationDisabled(Exception):
    """New orders are switched off by configuration (``ALLOW_NEW_ORDERS``)."""


class ItemQuantityExceeded(Exception):
    """A single line item asks for more than ``MAX_ITEM_QUANTITY`` units."""


class InvalidOrderStatus(Exception):
    """The supplied status is not one of the known order statuses."""


class StatusTransitionNotAllowed(Exception):
    """The state machine forbids moving from the current status to the target."""
