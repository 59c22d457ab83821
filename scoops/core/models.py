"""Domain models for the Scoops ordering system.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

import logging
from dataclasses import dataclass, field

from .ports import IceCream, OrderObserver, PricedOrder

logger = logging.getLogger(__name__)

# Status set by PlaceOrderCommand
PLACED = "Placed"


@dataclass(eq=False)
class BasicIceCream(IceCream):
    """The plain ice cream, before any flavor or toppings.

    Compared by identity, so two scoops with the same choices are
    still different items in an order.
    """

    DESCRIPTION = "Basic Ice Cream"
    COST = 2.0

    flavor: str | None = None
    toppings: list[str] = field(default_factory=list)

    def get_description(self) -> str:
        return self.DESCRIPTION

    def cost(self) -> float:
        return self.COST

    def get_flavor(self) -> str | None:
        return self.flavor

    def get_toppings(self) -> list[str]:
        return self.toppings

    def set_flavor(self, flavor: str) -> None:
        self.flavor = flavor

    def add_topping(self, topping: str) -> None:
        self.toppings.append(topping)


@dataclass(eq=False)
class Order(PricedOrder):
    """An aggregate of ice creams and the subject of status observers.

    The order owns its items but not its observers; an observer may be
    registered with several orders. The total is never cached.

    Status Changes:
        status starts as None and only changes through set_status(),
        which notifies every registered observer synchronously, in
        registration order. Observer failures are not isolated.

    Note: This dataclass is intentionally mutable; items, observers and
    status all change after creation. Identity equality is kept so that
    item and observer removal match by reference.
    """

    items: list[IceCream] = field(default_factory=list)
    status: str | None = None
    observers: list[OrderObserver] = field(default_factory=list)
    description: str = ""

    def add_item(self, item: IceCream) -> None:
        """Append an item; the same item may be added twice."""
        self.items.append(item)
        logger.debug(f"Added {item.get_description()} to order")

    def remove_item(self, item: IceCream) -> None:
        """Remove the first occurrence of this exact item, if present."""
        for index, existing in enumerate(self.items):
            if existing is item:
                del self.items[index]
                logger.debug(f"Removed {item.get_description()} from order")
                return

    def calculate_total(self) -> float:
        """Sum of the item costs; 0.0 for an empty order."""
        return sum((item.cost() for item in self.items), 0.0)

    def get_description(self) -> str:
        return self.description

    def add_observer(self, observer: OrderObserver) -> None:
        """Register an observer for status changes."""
        self.observers.append(observer)
        logger.debug(f"Registered observer {type(observer).__name__}")

    def remove_observer(self, observer: OrderObserver) -> None:
        """Unregister an observer. Unknown observers are ignored."""
        for index, existing in enumerate(self.observers):
            if existing is observer:
                del self.observers[index]
                logger.debug(f"Unregistered observer {type(observer).__name__}")
                return

    def notify_observers(self) -> None:
        """Call every registered observer with this order, in order."""
        for observer in list(self.observers):
            observer.update(self)

    def set_status(self, status: str) -> None:
        """Store the new status, then notify observers."""
        logger.debug(f"Order status changed: {self.status!r} -> {status!r}")
        self.status = status
        self.notify_observers()

    def get_status(self) -> str | None:
        return self.status
