"""Commands invoked by the entry point.

Each command captures what it needs at construction time and runs
once via execute().
"""

import logging

from .models import PLACED, Order
from .ports import Command

logger = logging.getLogger(__name__)


class PlaceOrderCommand(Command):
    """Places an order by moving it to the Placed status.

    Setting the status notifies the order's observers before
    execute() returns.
    """

    def __init__(self, order: Order):
        """Initialize the command.

        Args:
            order: The order to place.
        """
        self.order = order

    def execute(self) -> None:
        print("Placing order...")
        self.order.set_status(PLACED)
        logger.debug(f"Order placed with {len(self.order.items)} item(s)")


class ProvideFeedbackCommand(Command):
    """Records customer feedback. Only echoes it; nothing is stored."""

    def __init__(self, feedback: str):
        self.feedback = feedback

    def execute(self) -> None:
        print(f"Providing feedback: {self.feedback}")
