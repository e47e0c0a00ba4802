"""Shared validators for domain models."""

from __future__ import annotations

from collections.abc import Iterable

from discord_guild_queue.domain.shared.constants import LimitConstants
from discord_guild_queue.domain.shared.exceptions import ValidationError
from discord_guild_queue.domain.shared.messages import ErrorMessages


def validate_discord_snowflake(value: int) -> int:
    """Validate a Discord snowflake ID.

    Raises:
        ValueError: If the snowflake ID is invalid.
    """
    if value <= 0:
        raise ValueError(ErrorMessages.INVALID_SNOWFLAKE)
    if value >= LimitConstants.MAX_DISCORD_SNOWFLAKE:
        raise ValueError(ErrorMessages.SNOWFLAKE_TOO_LARGE)
    return value


def validate_filter_names(names: Iterable[str]) -> tuple[str, ...]:
    """Validate a set of filter names and return them in their given order.

    Args:
        names: Filter names to validate.

    Returns:
        The names as a tuple, order preserved.

    Raises:
        ValidationError: If a name is blank or listed more than once.
    """
    seen: list[str] = []
    for name in names:
        if not name or not str(name).strip():
            raise ValidationError(ErrorMessages.EMPTY_FILTER_NAME, field="filters")
        if name in seen:
            raise ValidationError(
                ErrorMessages.DUPLICATE_FILTER_NAME.format(name=name), field="filters"
            )
        seen.append(str(name))
    return tuple(seen)
