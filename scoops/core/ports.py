"""Port interfaces for the Scoops ordering system.

These abstract base classes define the seams between the ordering
core and the things plugged into it. Implementations live in
core/models.py, core/decorators.py, core/commands.py and the
adapters/ package.

Port Interface Categories:

1. **Products**
   - IceCream: An orderable item with a fixed description and cost

2. **Pricing**
   - PricedOrder: Anything that can be described and totalled
     (an Order, or a decorator wrapping one)

3. **Driven Ports** (the Order calls out to adapters)
   - OrderObserver: Receives status change notifications

4. **Driving Ports** (the entry point calls into the core)
   - Command: One-shot action invoked with execute()
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Order


# ============================================================================
# PRODUCTS
# ============================================================================


class IceCream(ABC):
    """Port for an orderable ice cream.

    Each concrete variant fixes its own description and cost. Flavor
    and toppings are customer choices recorded on the instance; none
    of the operations validate their input.
    """

    @abstractmethod
    def get_description(self) -> str:
        """Return the fixed, human-readable name of this variant."""

    @abstractmethod
    def cost(self) -> float:
        """Return the fixed price of this variant."""

    @abstractmethod
    def get_flavor(self) -> str | None:
        """Return the chosen flavor, or None if none was chosen."""

    @abstractmethod
    def get_toppings(self) -> list[str]:
        """Return the toppings in the order they were added."""

    @abstractmethod
    def set_flavor(self, flavor: str) -> None:
        """Choose a flavor, replacing any previous choice."""

    @abstractmethod
    def add_topping(self, topping: str) -> None:
        """Append a topping. Duplicates are kept."""


# ============================================================================
# PRICING
# ============================================================================


class PricedOrder(ABC):
    """Capability set shared by orders and order decorators.

    Decorators wrap any PricedOrder, so a decorator can itself be
    decorated and the chain stays linear.
    """

    @abstractmethod
    def get_description(self) -> str:
        """Return the order description, including any decorations."""

    @abstractmethod
    def calculate_total(self) -> float:
        """Return the total price, including any surcharges."""


# ============================================================================
# DRIVEN PORTS (the Order calls out to adapters)
# ============================================================================


class OrderObserver(ABC):
    """Port for reacting to order status changes.

    Observers are called synchronously from Order.set_status, in
    registration order, after the new status has been stored.

    Implementations should not assume they are isolated from each
    other: an exception raised here propagates out of set_status and
    the remaining observers are not called.
    """

    @abstractmethod
    def update(self, order: "Order") -> None:
        """Handle a status change.

        Args:
            order: The order whose status changed. Its status already
                holds the new value.
        """


# ============================================================================
# DRIVING PORTS (the entry point calls into the core)
# ============================================================================


class Command(ABC):
    """Port for a one-shot action.

    A command captures its receiver and parameters at construction
    time; execute() carries out the action and returns nothing.
    """

    @abstractmethod
    def execute(self) -> None:
        """Carry out the action."""
