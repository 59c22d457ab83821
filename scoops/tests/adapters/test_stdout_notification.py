"""Unit tests for CustomerOrderObserver."""

from io import StringIO
import logging
import sys

import pytest

from scoops.adapters.notification.stdout import CustomerOrderObserver
from scoops.core.models import PLACED, BasicIceCream, Order


@pytest.fixture
def order() -> Order:
    """Create an order with one basic ice cream."""
    order = Order()
    order.add_item(BasicIceCream())
    return order


def test_greeting_on_placed(order: Order) -> None:
    """Placing an order greets the customer with the new status."""
    order.add_observer(CustomerOrderObserver("Alice"))

    captured_output = StringIO()
    old_stdout = sys.stdout
    sys.stdout = captured_output

    try:
        order.set_status(PLACED)
        output = captured_output.getvalue()

        assert output == "Dear Alice, your order status is now: Placed\n"

    finally:
        sys.stdout = old_stdout


def test_greeting_for_each_status(order: Order, capsys: pytest.CaptureFixture[str]) -> None:
    """Each status change produces one greeting line."""
    order.add_observer(CustomerOrderObserver("Bob"))

    order.set_status("Placed")
    order.set_status("Out for Delivery")

    assert capsys.readouterr().out.splitlines() == [
        "Dear Bob, your order status is now: Placed",
        "Dear Bob, your order status is now: Out for Delivery",
    ]


def test_each_customer_greeted(order: Order, capsys: pytest.CaptureFixture[str]) -> None:
    """Several customers on one order are greeted in registration order."""
    order.add_observer(CustomerOrderObserver("Alice"))
    order.add_observer(CustomerOrderObserver("Carol"))

    order.set_status(PLACED)

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Dear Alice, your order status is now: Placed",
        "Dear Carol, your order status is now: Placed",
    ]


def test_greeting_without_status(order: Order, capsys: pytest.CaptureFixture[str]) -> None:
    """Notifying before any status was set reports None."""
    observer = CustomerOrderObserver("Alice")

    observer.update(order)

    assert capsys.readouterr().out == "Dear Alice, your order status is now: None\n"


def test_greeting_logged_at_debug(order: Order, caplog: pytest.LogCaptureFixture) -> None:
    """Each greeting is also recorded in the debug log."""
    order.add_observer(CustomerOrderObserver("Alice"))

    with caplog.at_level(logging.DEBUG, logger="scoops.adapters.notification.stdout"):
        order.set_status(PLACED)

    records = [r for r in caplog.records if r.name == "scoops.adapters.notification.stdout"]
    assert [r.levelno for r in records] == [logging.DEBUG]
    assert records[0].getMessage() == "Greeted Alice with status Placed"
