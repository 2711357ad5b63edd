"""Test package helpers shared across tfplanformat suites."""
