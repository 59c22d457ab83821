"""Scoops: ice cream ordering with observers, decorators, builders and commands."""
