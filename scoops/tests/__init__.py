"""Test suite for the Scoops ordering system.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No external dependencies, fast execution
   - Uses in-memory fakes for observers

2. adapters/: Tests for observer adapters
   - Captures console and log output

3. fakes/: Port implementations for testing
   - In-memory implementations of OrderObserver
"""
