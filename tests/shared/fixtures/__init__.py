"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.factories import TestUserFactory

__all__ = [
    "TestUserFactory",
]
