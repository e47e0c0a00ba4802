"""Reusable Pydantic Annotated types for domain-wide validation.

Every constrained type used across the package is defined here once,
so models can simply annotate their fields::

    from discord_guild_queue.domain.shared.types import DiscordSnowflake, VolumePercent

    class MyModel(BaseModel):
        guild_id: DiscordSnowflake
        volume: VolumePercent
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from pydantic import BeforeValidator, Field

from discord_guild_queue.domain.shared.constants import LimitConstants

# ── Numeric constraints ─────────────────────────────────────────────

DiscordSnowflake = Annotated[int, Field(gt=0, lt=LimitConstants.MAX_DISCORD_SNOWFLAKE)]
"""Positive integer that fits a Discord snowflake (1 … 2^64-1)."""

VolumePercent = Annotated[
    int, Field(ge=LimitConstants.MIN_VOLUME, le=LimitConstants.MAX_VOLUME)
]
"""Base output volume in percent: 0 … 100."""


# ── String constraints ──────────────────────────────────────────────

NonEmptyStr = Annotated[str, Field(min_length=1)]
"""String with at least one character."""

TrackTitleStr = Annotated[str, Field(min_length=1, max_length=500)]
"""Track title: 1-500 characters."""

HttpUrlStr = Annotated[str, Field(pattern=r"^https?://")]
"""String that starts with http:// or https://."""


# ── Domain-specific numeric constraints ─────────────────────────────

DurationSeconds = Annotated[int, Field(ge=0, le=86_400)]
"""Track duration in seconds: 0 … 86 400 (24 hours)."""

StreamTimeMs = Annotated[int | float, Field(ge=0)]
"""Stream time offset in milliseconds."""


# ── Datetime constraints ────────────────────────────────────────────

def _ensure_utc(v: datetime) -> datetime:
    """Validate that a datetime is timezone-aware and normalise to UTC."""
    if v.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    return v.astimezone(UTC)


UtcDatetimeField = Annotated[datetime, BeforeValidator(_ensure_utc)]
"""Timezone-aware datetime, normalised to UTC on input."""
