"""In-memory implementation of the queue repository."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from discord_guild_queue.domain.queue.entities import GuildQueue, OriginatingRequest
from discord_guild_queue.domain.queue.repository import QueueRepository
from discord_guild_queue.domain.shared.messages import LogTemplates
from discord_guild_queue.domain.shared.validators import (
    validate_discord_snowflake,
    validate_filter_names,
)

if TYPE_CHECKING:
    from discord_guild_queue.config.settings import Settings

logger = logging.getLogger(__name__)


class InMemoryQueueRepository(QueueRepository):
    """Keeps one queue per guild for the lifetime of the process.

    Creation and deletion are serialized with a lock so two requests racing
    for the same guild end up sharing a single queue. Mutating a queue once
    it has been handed out is still up to its caller.
    """

    def __init__(self, filter_names: Iterable[str]) -> None:
        self._filter_names = validate_filter_names(filter_names)
        self._queues: dict[int, GuildQueue] = {}
        self._lock = asyncio.Lock()

    @property
    def filter_names(self) -> tuple[str, ...]:
        return self._filter_names

    async def get(self, guild_id: int) -> GuildQueue | None:
        return self._queues.get(guild_id)

    async def get_or_create(
        self, guild_id: int, first_message: OriginatingRequest | None
    ) -> GuildQueue:
        validate_discord_snowflake(guild_id)
        async with self._lock:
            queue = self._queues.get(guild_id)
            if queue is not None:
                logger.debug(LogTemplates.QUEUE_REUSED, guild_id)
                return queue

            queue = GuildQueue.create(guild_id, first_message, self._filter_names)
            self._queues[guild_id] = queue
            logger.info(LogTemplates.QUEUE_CREATED, guild_id, len(self._filter_names))
            return queue

    async def delete(self, guild_id: int) -> bool:
        async with self._lock:
            queue = self._queues.pop(guild_id, None)

        if queue is None:
            logger.debug(LogTemplates.QUEUE_DELETE_MISSING, guild_id)
            return False

        queue.events.clear()
        logger.info(LogTemplates.QUEUE_DELETED, guild_id)
        return True

    async def all(self) -> list[GuildQueue]:
        return list(self._queues.values())

    async def clear(self) -> int:
        """Drop every queue and return how many were held."""
        async with self._lock:
            queues = list(self._queues.values())
            self._queues.clear()

        for queue in queues:
            queue.events.clear()
        logger.info(LogTemplates.QUEUES_CLEARED, len(queues))
        return len(queues)


def create_queue_repository(settings: Settings | None = None) -> InMemoryQueueRepository:
    """Build a repository using the configured filter names."""
    if settings is None:
        from discord_guild_queue.config.settings import get_settings

        settings = get_settings()
    return InMemoryQueueRepository(settings.queue.filter_names)
