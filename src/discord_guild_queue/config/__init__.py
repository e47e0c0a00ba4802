"""Configuration loading."""

from discord_guild_queue.config.settings import (
    QueueSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "Settings",
    "QueueSettings",
    "get_settings",
    "clear_settings_cache",
]
