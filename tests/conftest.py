"""Pytest configuration and shared fixtures."""

# Shared fixture modules
pytest_plugins = [
    "tests.fixtures.discord",
]
