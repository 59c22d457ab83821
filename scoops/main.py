"""Composition root for the Scoops ordering system.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Observer instantiation
- Order construction, commands and decoration
- Final order report
"""

import logging
import sys

from scoops.adapters.notification.logging_observer import LoggingOrderObserver
from scoops.adapters.notification.stdout import CustomerOrderObserver
from scoops.config import Settings, load_settings
from scoops.core.builder import OrderBuilder
from scoops.core.commands import PlaceOrderCommand, ProvideFeedbackCommand
from scoops.core.decorators import decorate
from scoops.core.models import BasicIceCream
from scoops.core.ports import Command, PricedOrder


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Log records go to stderr so they never interleave with the
    order report on stdout.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def print_order_details(order: PricedOrder) -> None:
    """Print the final description and total of an order."""
    print("Final order details:")
    print(f"Description: {order.get_description()}")
    print(f"Total Cost: ${order.calculate_total()}")


def run(settings: Settings) -> PricedOrder:
    """Build, place and decorate one order, then print its details.

    Steps:
    1. Build an order with one basic ice cream and its observers
    2. Place the order (observers are notified)
    3. Record the customer's feedback
    4. Apply the configured packaging decorators
    5. Print the final order details

    Args:
        settings: Validated application settings.

    Returns:
        The final, decorated order.
    """
    logger = logging.getLogger(__name__)

    # Step 1: Build the order
    builder = OrderBuilder().add_item(BasicIceCream())
    builder.add_observer(CustomerOrderObserver(settings.customer_name))
    if settings.status_logging:
        builder.add_observer(LoggingOrderObserver())
    order = builder.build()

    # Steps 2-3: Run the commands in order
    commands: list[Command] = [
        PlaceOrderCommand(order),
        ProvideFeedbackCommand(settings.feedback),
    ]
    for command in commands:
        logger.debug(f"Executing {type(command).__name__}")
        command.execute()

    # Step 4: Decorate
    final_order = decorate(order, settings.packaging)
    if settings.packaging:
        logger.info(f"Applied packaging: {', '.join(settings.packaging)}")

    # Step 5: Report
    print_order_details(final_order)
    return final_order


def bootstrap() -> None:
    """Load configuration, configure logging and run the order scenario.

    Raises:
        ValidationError: If configuration is invalid.
    """
    settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info(f"Starting order for {settings.customer_name}")

    run(settings)

    logger.info("Order complete")


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful run
        1: Fatal configuration or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        bootstrap()
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
