"""Notification adapters for reporting order status changes.

Implementations support multiple output channels:
- Stdout (customer greeting)
- Logging (application log record)
"""

from .logging_observer import LoggingOrderObserver
from .stdout import CustomerOrderObserver

__all__ = ["CustomerOrderObserver", "LoggingOrderObserver"]
