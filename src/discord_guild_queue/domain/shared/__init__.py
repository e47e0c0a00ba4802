"""
Shared Domain Kernel

Contains constrained types, messages and exceptions shared across the package.
"""

from discord_guild_queue.domain.shared.exceptions import (
    DomainError,
    EntityNotFoundError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "EntityNotFoundError",
]
