"""Core domain entities for the queue context."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

import discord
from discord.ext import commands
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from discord_guild_queue.domain.queue.events import (
    QueueEnded,
    QueueEventChannel,
    TrackChanged,
    VoiceChannelEmptied,
)
from discord_guild_queue.domain.queue.value_objects import AudioFilter, FilterStates, Track
from discord_guild_queue.domain.shared.constants import LimitConstants
from discord_guild_queue.domain.shared.messages import LogTemplates
from discord_guild_queue.domain.shared.types import (
    DiscordSnowflake,
    StreamTimeMs,
    VolumePercent,
)

logger = logging.getLogger(__name__)

OriginatingRequest = discord.Message | discord.Interaction | commands.Context


class GuildQueue(BaseModel):
    """Playback state for a single Discord guild.

    The queue is created, mutated and discarded by the playback orchestrator.
    It never opens or closes the voice connection or the stream it holds, and
    it never publishes events on its own: the orchestrator uses ``events`` (or
    the ``emit_*`` helpers) when a transition happens.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
        strict=True,
    )

    guild_id: DiscordSnowflake = Field(frozen=True)
    voice_connection: discord.VoiceProtocol | None = None
    stream: discord.AudioSource | None = None
    tracks: list[Track] = Field(default_factory=list)
    stopped: bool = False
    last_skipped: bool = False
    volume: VolumePercent = LimitConstants.DEFAULT_VOLUME
    paused: bool = True
    repeat_mode: bool = False
    filters: FilterStates = Field(default_factory=FilterStates, frozen=True)
    additional_stream_time: StreamTimeMs = 0
    first_message: OriginatingRequest | None = Field(default=None, frozen=True)

    _events: QueueEventChannel = PrivateAttr(default_factory=QueueEventChannel)

    @field_validator("filters", mode="before")
    @classmethod
    def build_filter_states(cls, v: object) -> object:
        if isinstance(v, Mapping) and not isinstance(v, FilterStates):
            return FilterStates.from_mapping(v)
        return v

    @classmethod
    def create(
        cls,
        guild_id: DiscordSnowflake,
        first_message: OriginatingRequest | None,
        filter_names: Iterable[str],
    ) -> GuildQueue:
        """Create an idle queue with every given filter switched off."""
        return cls(
            guild_id=guild_id,
            first_message=first_message,
            filters=FilterStates(filter_names),
        )

    # ── Derived state ───────────────────────────────────────────────

    @property
    def playing(self) -> Track | None:
        """The track at the head of the queue, if any."""
        return self.tracks[0] if self.tracks else None

    @property
    def calculated_volume(self) -> int:
        """Output volume with the bass boost offset applied."""
        if self.filters.get(AudioFilter.BASSBOOST):
            return self.volume + LimitConstants.BASSBOOST_VOLUME_BOOST
        return self.volume

    @property
    def events(self) -> QueueEventChannel:
        return self._events

    @property
    def is_connected(self) -> bool:
        return self.voice_connection is not None

    @property
    def enabled_filters(self) -> list[str]:
        return self.filters.enabled

    # ── Filters ─────────────────────────────────────────────────────

    def set_filter(self, name: str, enabled: bool) -> None:
        """Switch a known filter on or off. Unknown names are rejected."""
        self.filters[name] = enabled
        logger.debug(LogTemplates.FILTER_CHANGED, name, enabled, self.guild_id)

    def toggle_filter(self, name: str) -> bool:
        """Flip a known filter and return its new state."""
        enabled = self.filters.toggle(name)
        logger.debug(LogTemplates.FILTER_CHANGED, name, enabled, self.guild_id)
        return enabled

    # ── External handles ────────────────────────────────────────────

    def attach_voice(self, connection: discord.VoiceProtocol) -> None:
        self.voice_connection = connection
        logger.debug(LogTemplates.VOICE_ATTACHED, self.guild_id)

    def detach_voice(self) -> discord.VoiceProtocol | None:
        """Forget the voice connection and hand it back to the caller.

        The connection is not disconnected.
        """
        connection = self.voice_connection
        self.voice_connection = None
        logger.debug(LogTemplates.VOICE_DETACHED, self.guild_id)
        return connection

    def attach_stream(self, stream: discord.AudioSource) -> None:
        self.stream = stream
        logger.debug(LogTemplates.STREAM_ATTACHED, self.guild_id)

    def detach_stream(self) -> discord.AudioSource | None:
        """Forget the stream and hand it back to the caller without cleaning it up."""
        stream = self.stream
        self.stream = None
        logger.debug(LogTemplates.STREAM_DETACHED, self.guild_id)
        return stream

    # ── Event emission ──────────────────────────────────────────────

    async def emit_end(self) -> None:
        logger.debug(LogTemplates.QUEUE_ENDED, self.guild_id)
        await self._events.publish(QueueEnded(guild_id=self.guild_id))

    async def emit_channel_empty(self) -> None:
        logger.debug(LogTemplates.CHANNEL_EMPTY, self.guild_id)
        await self._events.publish(VoiceChannelEmptied(guild_id=self.guild_id))

    async def emit_track_changed(
        self,
        old_track: Track | None,
        new_track: Track,
        skipped: bool | None = None,
    ) -> None:
        """Publish a track change.

        When ``skipped`` is omitted the current value of ``last_skipped`` is used.
        """
        if skipped is None:
            skipped = self.last_skipped
        logger.debug(LogTemplates.TRACK_CHANGED, self.guild_id, old_track, new_track, skipped)
        await self._events.publish(
            TrackChanged(
                guild_id=self.guild_id,
                old_track=old_track,
                new_track=new_track,
                skipped=skipped,
            )
        )
