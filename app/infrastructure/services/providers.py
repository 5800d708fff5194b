"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.commands.schema.projector import SchemaProjector


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process,
    even if called from multiple packages.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_schema_projector() -> SchemaProjector:
    """
    Get application-scoped schema projector singleton.

    Returns:
        SchemaProjector: Projector configured with the description placeholder
        from application settings.
    """
    settings = get_settings()
    return SchemaProjector(
        no_description_placeholder=settings.commands.no_description_placeholder
    )
