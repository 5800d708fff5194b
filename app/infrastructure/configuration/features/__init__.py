"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.commands import CommandsSettings

__all__ = [
    "CommandsSettings",
]
