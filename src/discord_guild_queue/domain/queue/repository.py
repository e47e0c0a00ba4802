"""
Queue Domain Repository Interfaces

Abstract base class defining how the orchestrator keeps one queue per guild.
Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod

from discord_guild_queue.domain.queue.entities import GuildQueue, OriginatingRequest
from discord_guild_queue.domain.shared.exceptions import EntityNotFoundError


class QueueRepository(ABC):
    """Abstract repository for guild queues.

    Holds at most one GuildQueue per guild. Implementations may use in-memory
    storage, a shared cache, etc.
    """

    @abstractmethod
    async def get(self, guild_id: int) -> GuildQueue | None:
        """Retrieve a queue by guild ID.

        Args:
            guild_id: The Discord guild ID.

        Returns:
            The queue if found, None otherwise.
        """
        ...

    @abstractmethod
    async def get_or_create(
        self, guild_id: int, first_message: OriginatingRequest | None
    ) -> GuildQueue:
        """Get an existing queue or create a new one.

        Args:
            guild_id: The Discord guild ID.
            first_message: The request that started playback; only used when
                a new queue is created.

        Returns:
            The existing or newly created queue.
        """
        ...

    @abstractmethod
    async def delete(self, guild_id: int) -> bool:
        """Delete a queue by guild ID.

        Args:
            guild_id: The Discord guild ID.

        Returns:
            True if a queue was deleted, False if none existed.
        """
        ...

    @abstractmethod
    async def all(self) -> list[GuildQueue]:
        """Return every queue currently held."""
        ...

    async def count(self) -> int:
        return len(await self.all())

    async def require(self, guild_id: int) -> GuildQueue:
        """Retrieve a queue or raise if the guild has none.

        Raises:
            EntityNotFoundError: If no queue exists for the guild.
        """
        queue = await self.get(guild_id)
        if queue is None:
            raise EntityNotFoundError("GuildQueue", guild_id)
        return queue
