"""External adapters for the Scoops ordering system.

This package provides implementations of the core port interfaces
that touch the outside world.

Adapter Organization:

- notification/: Order observers that report status changes
  (console greeting, application log)
"""
