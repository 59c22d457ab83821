"""Stdout notification adapter.

Implements OrderObserver by greeting the customer on the terminal
whenever their order changes status.
"""

import logging

from scoops.core.models import Order
from scoops.core.ports import OrderObserver

logger = logging.getLogger(__name__)


class CustomerOrderObserver(OrderObserver):
    """Prints a status greeting addressed to one customer."""

    def __init__(self, customer_name: str):
        """Initialize the customer observer.

        Args:
            customer_name: Name used in the greeting.
        """
        self.customer_name = customer_name

    def update(self, order: Order) -> None:
        """Greet the customer with the order's current status."""
        print(self._format_greeting(self.customer_name, order.get_status()))
        logger.debug(f"Greeted {self.customer_name} with status {order.get_status()}")

    @staticmethod
    def _format_greeting(customer_name: str, status: str | None) -> str:
        return f"Dear {customer_name}, your order status is now: {status}"
