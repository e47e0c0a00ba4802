"""
Queue Bounded Context

Per-guild queue state, tracks, filters and the queue event channel.
"""

from discord_guild_queue.domain.queue.entities import GuildQueue
from discord_guild_queue.domain.queue.events import (
    QueueEnded,
    QueueEvent,
    QueueEventChannel,
    TrackChanged,
    VoiceChannelEmptied,
)
from discord_guild_queue.domain.queue.repository import QueueRepository
from discord_guild_queue.domain.queue.value_objects import (
    AudioFilter,
    FilterStates,
    QueueEventKind,
    Track,
    TrackId,
)

__all__ = [
    # Entities
    "GuildQueue",
    # Value Objects
    "Track",
    "TrackId",
    "AudioFilter",
    "FilterStates",
    "QueueEventKind",
    # Events
    "QueueEvent",
    "QueueEnded",
    "VoiceChannelEmptied",
    "TrackChanged",
    "QueueEventChannel",
    # Repository
    "QueueRepository",
]
