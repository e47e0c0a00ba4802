"""Immutable value objects for the queue context."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from discord_guild_queue.domain.shared.exceptions import ValidationError
from discord_guild_queue.domain.shared.messages import ErrorMessages
from discord_guild_queue.domain.shared.types import (
    DiscordSnowflake,
    DurationSeconds,
    HttpUrlStr,
    NonEmptyStr,
    TrackTitleStr,
    UtcDatetimeField,
)
from discord_guild_queue.domain.shared.validators import validate_filter_names


@dataclass(frozen=True)
class TrackId:
    """Typically a YouTube video ID or a hash of the URL."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError(ErrorMessages.EMPTY_TRACK_ID)

    def __str__(self) -> str:
        return self.value


class AudioFilter(StrEnum):
    """Audio filters the stream helper knows how to apply.

    Members compare and hash equal to their string values, so they can be
    used directly as keys of a queue's ``filters`` mapping.
    """

    BASSBOOST = "bassboost"
    EIGHT_D = "8D"
    VAPORWAVE = "vaporwave"
    NIGHTCORE = "nightcore"
    PHASER = "phaser"
    TREMOLO = "tremolo"
    VIBRATO = "vibrato"
    REVERSE = "reverse"
    TREBLE = "treble"
    NORMALIZER = "normalizer"
    SURROUNDING = "surrounding"
    PULSATOR = "pulsator"
    SUBBOOST = "subboost"
    KARAOKE = "karaoke"
    FLANGER = "flanger"
    GATE = "gate"
    HAAS = "haas"
    MCOMPAND = "mcompand"

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """All filter names in declaration order."""
        return tuple(member.value for member in cls)


class FilterStates(MutableMapping[str, bool]):
    """On/off state per filter name.

    The set of names is fixed when the mapping is built: values can be
    switched, but names cannot be added or removed, and only ``bool`` values
    are stored.
    """

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._states: dict[str, bool] = {name: False for name in validate_filter_names(names)}

    @classmethod
    def from_mapping(cls, states: Mapping[str, bool]) -> FilterStates:
        filters = cls(states)
        for name, enabled in states.items():
            filters[name] = enabled
        return filters

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._states)

    @property
    def enabled(self) -> list[str]:
        """Names of the filters switched on, in construction order."""
        return [name for name, enabled in self._states.items() if enabled]

    def require(self, name: str) -> str:
        """Return ``name`` as a plain string if it is a known filter.

        Raises:
            ValidationError: If the name was not given at construction.
        """
        if name not in self._states:
            raise ValidationError(
                ErrorMessages.UNKNOWN_FILTER.format(
                    name=name, known=", ".join(self._states) or "none"
                ),
                field="filters",
            )
        return str(name)

    def toggle(self, name: str) -> bool:
        key = self.require(name)
        self._states[key] = not self._states[key]
        return self._states[key]

    def __getitem__(self, name: str) -> bool:
        return self._states[name]

    def __setitem__(self, name: str, enabled: bool) -> None:
        key = self.require(name)
        if not isinstance(enabled, bool):
            raise ValidationError(
                ErrorMessages.FILTER_STATE_NOT_BOOL.format(name=key, value=enabled),
                field="filters",
            )
        self._states[key] = enabled

    def __delitem__(self, name: str) -> None:
        raise ValidationError(ErrorMessages.FILTER_KEYS_FIXED, field="filters")

    def __iter__(self) -> Iterator[str]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._states!r})"


class QueueEventKind(StrEnum):
    """Names of the events a guild queue can carry."""

    END = "end"
    CHANNEL_EMPTY = "channelEmpty"
    TRACK_CHANGED = "trackChanged"


class Track(BaseModel):
    """Immutable value object representing a playable track."""

    model_config = ConfigDict(frozen=True, strict=True)

    id: TrackId
    title: TrackTitleStr
    webpage_url: HttpUrlStr
    stream_url: HttpUrlStr | None = None
    duration_seconds: DurationSeconds | None = None
    thumbnail_url: HttpUrlStr | None = None

    # Request metadata (set when queued)
    requested_by_id: DiscordSnowflake | None = None
    requested_by_name: NonEmptyStr | None = None
    requested_at: UtcDatetimeField | None = None

    @property
    def duration_formatted(self) -> str:
        """Format duration as MM:SS or HH:MM:SS."""
        if self.duration_seconds is None:
            return "Unknown"

        hours, remainder = divmod(self.duration_seconds, 3600)
        minutes, seconds = divmod(remainder, 60)

        if hours > 0:
            return f"{hours}:{minutes:02d}:{seconds:02d}"
        return f"{minutes}:{seconds:02d}"

    @property
    def display_title(self) -> str:
        """Get display title with duration if available."""
        if self.duration_seconds:
            return f"{self.title} [{self.duration_formatted}]"
        return self.title

    def __str__(self) -> str:
        return self.title
