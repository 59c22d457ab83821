"""Fluent construction of orders."""

import logging

from .models import Order
from .ports import IceCream, OrderObserver

logger = logging.getLogger(__name__)


class OrderBuilder:
    """Accumulates items and observers, then hands over an Order.

    Every mutating call returns the builder itself so calls can be
    chained. build() hands over the accumulated order and starts a new
    empty one, so the builder never touches an order it has returned.
    """

    def __init__(self) -> None:
        self._order = Order()

    def add_item(self, item: IceCream) -> "OrderBuilder":
        self._order.add_item(item)
        return self

    def add_observer(self, observer: OrderObserver) -> "OrderBuilder":
        self._order.add_observer(observer)
        return self

    def build(self) -> Order:
        """Return the accumulated order and reset the builder."""
        order = self._order
        self._order = Order()
        logger.debug(
            f"Built order with {len(order.items)} item(s) "
            f"and {len(order.observers)} observer(s)"
        )
        return order
