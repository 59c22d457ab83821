"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without console output:

- FakeOrderObserver: Captured status notifications for assertion
"""

from .observer import FakeOrderObserver

__all__ = ["FakeOrderObserver"]
