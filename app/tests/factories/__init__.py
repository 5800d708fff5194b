"""Test data factories for deterministic test data generation."""

from tests.factories.commands import (
    make_command,
    make_command_context,
    make_entity_resolver,
    make_execution,
)

__all__ = [
    "make_command",
    "make_command_context",
    "make_entity_resolver",
    "make_execution",
]
