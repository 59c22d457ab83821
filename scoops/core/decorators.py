"""Order decorators: extra services layered on top of a finished order.

Each decorator wraps any PricedOrder by reference and adds a fixed
description suffix and a fixed surcharge. Decorators can wrap other
decorators; the chain is linear and accumulates innermost first.
"""

from collections.abc import Iterable

from .ports import PricedOrder


class OrderDecorator(PricedOrder):
    """Pass-through wrapper around a PricedOrder.

    Subclasses set SUFFIX and SURCHARGE; the wrapped value is never
    modified.
    """

    SUFFIX = ""
    SURCHARGE = 0.0

    def __init__(self, wrapped: PricedOrder):
        self._wrapped = wrapped

    @property
    def wrapped(self) -> PricedOrder:
        return self._wrapped

    def _unwind(self) -> tuple[PricedOrder, list["OrderDecorator"]]:
        """Walk the chain down to the first value that is not a decorator.

        Returns:
            The innermost PricedOrder and the decorators around it,
            innermost first.
        """
        chain: list[OrderDecorator] = []
        current: PricedOrder = self
        while isinstance(current, OrderDecorator):
            chain.append(current)
            current = current._wrapped
        chain.reverse()
        return current, chain

    def get_description(self) -> str:
        base, chain = self._unwind()
        return base.get_description() + "".join(d.SUFFIX for d in chain)

    def calculate_total(self) -> float:
        base, chain = self._unwind()
        total = base.calculate_total()
        for decorator in chain:
            total += decorator.SURCHARGE
        return total

    def __repr__(self) -> str:
        base, chain = self._unwind()
        names = [type(d).__name__ for d in reversed(chain)]
        return "(".join(names) + f"({base!r}" + ")" * len(names)


class GiftWrappingDecorator(OrderDecorator):
    SUFFIX = ", Gift Wrapping"
    SURCHARGE = 2.0


class SpecialPackagingDecorator(OrderDecorator):
    SUFFIX = ", Special Packaging"
    SURCHARGE = 1.5


# Names accepted by decorate() and the `packaging` setting
DECORATORS: dict[str, type[OrderDecorator]] = {
    "gift_wrap": GiftWrappingDecorator,
    "special_packaging": SpecialPackagingDecorator,
}


def decorate(order: PricedOrder, names: Iterable[str]) -> PricedOrder:
    """Wrap an order in the named decorators, first name innermost.

    Args:
        order: The order (or already decorated order) to wrap.
        names: Decorator names from DECORATORS, applied in order.

    Returns:
        The outermost wrapper, or the order itself if names is empty.

    Raises:
        ValueError: If a name is not a known decorator.
    """
    decorated = order
    for name in names:
        decorator_class = DECORATORS.get(name)
        if decorator_class is None:
            raise ValueError(
                f"Unknown decorator: {name}. "
                f"Expected one of: {', '.join(sorted(DECORATORS))}"
            )
        decorated = decorator_class(decorated)
    return decorated
