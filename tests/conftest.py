"""Shared pytest configuration: registers the mailprobe fixtures."""

pytest_plugins = ["mailprobe.testing.fixtures"]
