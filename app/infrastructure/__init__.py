"""Infrastructure modules for the bot.

Centralized infrastructure components:
- configuration: Settings management (Settings, CommandsSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- services: Application-scoped providers (get_settings, get_schema_projector)
- commands: Argument conversion, command resolution and schema projection

Subpackages are imported directly, e.g. ``from infrastructure.commands import
CommandRegistry``, so that importing one component does not load the others.
"""
