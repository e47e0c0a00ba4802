"""Queue events and the per-queue channel that dispatches them.

A guild queue does not raise these events itself. The playback orchestrator
publishes them through the queue's channel when a state transition happens,
and notification handlers subscribe by event kind.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections import defaultdict
from collections.abc import Awaitable, Callable
from typing import Any, ClassVar, TypeVar
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from discord_guild_queue.domain.queue.value_objects import QueueEventKind, Track
from discord_guild_queue.domain.shared.datetime_utils import utcnow
from discord_guild_queue.domain.shared.exceptions import ValidationError
from discord_guild_queue.domain.shared.messages import ErrorMessages, LogTemplates
from discord_guild_queue.domain.shared.types import (
    DiscordSnowflake,
    NonEmptyStr,
    UtcDatetimeField,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound="QueueEvent")
EventHandler = Callable[[E], Awaitable[None] | None]


class QueueEvent(BaseModel):
    """Base class for all queue events."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[QueueEventKind]

    guild_id: DiscordSnowflake
    event_id: NonEmptyStr = Field(default_factory=lambda: str(uuid4()))
    occurred_at: UtcDatetimeField = Field(default_factory=utcnow)


class QueueEnded(QueueEvent):
    """The track list has been fully consumed."""

    kind: ClassVar[QueueEventKind] = QueueEventKind.END


class VoiceChannelEmptied(QueueEvent):
    """Every listener has left the voice channel of the queue."""

    kind: ClassVar[QueueEventKind] = QueueEventKind.CHANNEL_EMPTY


class TrackChanged(QueueEvent):
    """The current track changed.

    ``old_track`` is ``None`` only for the first track of a queue. ``skipped``
    is true when the change came from an explicit skip rather than the track
    finishing or being replayed by repeat mode.
    """

    kind: ClassVar[QueueEventKind] = QueueEventKind.TRACK_CHANGED

    old_track: Track | None = None
    new_track: Track
    skipped: bool = False

    @property
    def payload(self) -> tuple[Track | None, Track, bool]:
        """The ``(old_track, new_track, skipped)`` triple."""
        return self.old_track, self.new_track, self.skipped


def _resolve_kind(kind: QueueEventKind | str) -> QueueEventKind:
    try:
        return QueueEventKind(kind)
    except ValueError:
        raise ValidationError(
            ErrorMessages.UNKNOWN_EVENT_KIND.format(
                kind=kind, known=", ".join(k.value for k in QueueEventKind)
            ),
            field="kind",
        ) from None


class QueueEventChannel:
    """In-memory pub/sub channel owned by a single guild queue.

    Handlers may be plain callables or coroutine functions and receive the
    event model. All handlers for an event are started in subscription order
    and run concurrently. Exceptions in handlers are logged but do not prevent
    other handlers from running.
    """

    def __init__(self) -> None:
        self._handlers: dict[QueueEventKind, list[EventHandler[Any]]] = defaultdict(list)

    def subscribe(self, kind: QueueEventKind | str, handler: EventHandler[Any]) -> None:
        resolved = _resolve_kind(kind)
        self._handlers[resolved].append(handler)
        logger.debug(LogTemplates.EVENT_SUBSCRIBED, resolved.value)

    def unsubscribe(self, kind: QueueEventKind | str, handler: EventHandler[Any]) -> None:
        resolved = _resolve_kind(kind)
        handlers = self._handlers.get(resolved, [])
        if handler in handlers:
            handlers.remove(handler)
            logger.debug(LogTemplates.EVENT_UNSUBSCRIBED, resolved.value)

    def listener_count(self, kind: QueueEventKind | str) -> int:
        return len(self._handlers.get(_resolve_kind(kind), []))

    async def publish(self, event: QueueEvent) -> None:
        handlers = list(self._handlers.get(event.kind, []))

        if not handlers:
            logger.debug(LogTemplates.EVENT_NO_HANDLERS, event.kind.value)
            return

        logger.debug(LogTemplates.EVENT_PUBLISHING, event.kind.value, len(handlers))

        async def safe_call(handler: EventHandler[Any]) -> None:
            try:
                result = handler(event)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.exception(LogTemplates.EVENT_HANDLER_ERROR, event.kind.value, e)

        async with asyncio.TaskGroup() as tg:
            for handler in handlers:
                tg.create_task(safe_call(handler))

    def clear(self) -> None:
        """Remove all handlers."""
        self._handlers.clear()
        logger.debug(LogTemplates.EVENT_HANDLERS_CLEARED)
