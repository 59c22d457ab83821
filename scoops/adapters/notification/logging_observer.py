"""Logging notification adapter.

Implements OrderObserver by writing each status change to the
application log instead of the terminal.
"""

import logging

from scoops.core.models import Order
from scoops.core.ports import OrderObserver

logger = logging.getLogger(__name__)


class LoggingOrderObserver(OrderObserver):
    """Records status changes as log entries."""

    def __init__(self, level: int = logging.INFO):
        """Initialize the logging observer.

        Args:
            level: Log level used for status change records.
        """
        self.level = level

    def update(self, order: Order) -> None:
        logger.log(
            self.level,
            f"Order status is now {order.get_status()}",
            extra={
                "status": order.get_status(),
                "item_count": len(order.items),
                "total": order.calculate_total(),
            },
        )
