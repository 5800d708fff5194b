"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the bot
using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    CommandsSettings: Command dispatch settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    prefix = settings.commands.prefix
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.features.commands import CommandsSettings

__all__ = ["Settings", "CommandsSettings"]
