"""Repository implementations."""

from discord_guild_queue.infrastructure.repositories.queue_repository import (
    InMemoryQueueRepository,
    create_queue_repository,
)

__all__ = [
    "InMemoryQueueRepository",
    "create_queue_repository",
]
