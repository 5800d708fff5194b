"""
Dependency injection services.

Provides application-scoped provider functions. Command handlers receive their
collaborators explicitly (constructor or closure arguments) rather than through
a process-wide lookup table.
"""

from infrastructure.services.providers import (
    get_settings,
    get_schema_projector,
)

__all__ = [
    "get_settings",
    "get_schema_projector",
]
