"""
Domain Layer

Contains the queue state model organized by context:
- shared/: Cross-cutting types, messages and exceptions
- queue/: Track, guild queue and queue event channel
"""

from discord_guild_queue.domain.shared.exceptions import DomainError

__all__ = [
    "DomainError",
]
