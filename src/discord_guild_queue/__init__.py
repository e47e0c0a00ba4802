"""Per-guild music queue state for Discord playback orchestration."""

from discord_guild_queue.domain.queue.entities import GuildQueue
from discord_guild_queue.domain.queue.events import (
    QueueEnded,
    QueueEventChannel,
    TrackChanged,
    VoiceChannelEmptied,
)
from discord_guild_queue.domain.queue.value_objects import (
    AudioFilter,
    FilterStates,
    QueueEventKind,
    Track,
    TrackId,
)

__all__ = [
    "GuildQueue",
    "Track",
    "TrackId",
    "AudioFilter",
    "FilterStates",
    "QueueEventKind",
    "QueueEventChannel",
    "QueueEnded",
    "VoiceChannelEmptied",
    "TrackChanged",
]
