"""Core domain logic for the Scoops ordering system.

This package contains zero external dependencies and represents
the ordering rules of the shop. Console and logging observers live
in the adapters package.
"""

from .builder import OrderBuilder
from .commands import PlaceOrderCommand, ProvideFeedbackCommand
from .decorators import (
    GiftWrappingDecorator,
    OrderDecorator,
    SpecialPackagingDecorator,
    decorate,
)
from .models import PLACED, BasicIceCream, Order

__all__ = [
    "PLACED",
    "BasicIceCream",
    "GiftWrappingDecorator",
    "Order",
    "OrderBuilder",
    "OrderDecorator",
    "PlaceOrderCommand",
    "ProvideFeedbackCommand",
    "SpecialPackagingDecorator",
    "decorate",
]
