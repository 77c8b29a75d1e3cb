"""Order state machine: the full transition table."""

from __future__ import annotations

import pytest

from modules.orders.constants import (
    ACTIVE_STATES,
    TERMINAL_STATES,
    OrderStatus,
    is_transition_allowed,
    parse_status,
)
from modules.orders.models import Order

pytestmark = pytest.mark.unit

NEW = OrderStatus.NEW
PROCESSING = OrderStatus.PROCESSING
COMPLETED = OrderStatus.COMPLETED
CANCELLED = OrderStatus.CANCELLED

ALLOWED = {
    (NEW, NEW),
    (NEW, PROCESSING),
    (NEW, CANCELLED),
    (PROCESSING, PROCESSING),
    (PROCESSING, COMPLETED),
    (PROCESSING, CANCELLED),
    (COMPLETED, COMPLETED),
    (CANCELLED, CANCELLED),
}


@pytest.mark.parametrize("current", list(OrderStatus))
@pytest.mark.parametrize("target", list(OrderStatus))
def test_transition_table(current, target):
    assert is_transition_allowed(current, target) is ((current, target) in ALLOWED)


@pytest.mark.parametrize("current", list(OrderStatus))
@pytest.mark.parametrize("target", list(OrderStatus))
def test_model_delegates_to_table(current, target):
    order = Order(status=current)
    assert order.can_transition_to(target) is is_transition_allowed(current, target)


class TestStatusSets:
    def test_terminal_states(self):
        assert TERMINAL_STATES == {COMPLETED, CANCELLED}
        assert Order(status=COMPLETED).is_terminal
        assert not Order(status=PROCESSING).is_terminal

    def test_active_states_are_the_non_terminal_ones(self):
        assert set(ACTIVE_STATES) == set(OrderStatus) - TERMINAL_STATES


class TestParseStatus:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("NEW", NEW),
            ("new", NEW),
            ("Processing", PROCESSING),
            (" completed ", COMPLETED),
            ("cancelled", CANCELLED),
        ],
    )
    def test_case_insensitive(self, raw, expected):
        assert parse_status(raw) == expected

    @pytest.mark.parametrize("raw", ["", "DONE", "canceled", None, 3])
    def test_unknown_returns_none(self, raw):
        assert parse_status(raw) is None
