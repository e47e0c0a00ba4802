from unittest.mock import MagicMock

import discord
import pytest

from discord_guild_queue.domain.queue.value_objects import AudioFilter

# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Make every test load settings from its own environment."""
    from discord_guild_queue.config.settings import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


# ============================================================================
# Collaborator Handle Fixtures
# ============================================================================


@pytest.fixture
def mock_message():
    """Create a mock Discord message that started playback."""
    message = MagicMock(spec=discord.Message)
    message.content = "!play never gonna give you up"
    return message


@pytest.fixture
def mock_voice_client():
    """Create a mock Discord voice client."""
    return MagicMock(spec=discord.VoiceClient)


@pytest.fixture
def mock_audio_source():
    """Create a mock audio source standing in for the media stream."""
    return MagicMock(spec=discord.AudioSource)


# ============================================================================
# Domain Entity Fixtures
# ============================================================================


@pytest.fixture
def sample_track():
    """Create a sample track for testing."""
    from discord_guild_queue.domain.queue.value_objects import Track, TrackId

    return Track(
        id=TrackId("test-track-123"),
        title="Test Track",
        webpage_url="https://youtube.com/watch?v=test123",
        stream_url="https://stream.example.com/test123",
        duration_seconds=180,
    )


@pytest.fixture
def second_track():
    """Create a second track for ordering tests."""
    from discord_guild_queue.domain.queue.value_objects import Track, TrackId

    return Track(
        id=TrackId("test-track-456"),
        title="Second Track",
        webpage_url="https://youtube.com/watch?v=test456",
        duration_seconds=3725,
    )


@pytest.fixture
def guild_queue(mock_message):
    """Create a fresh queue knowing every built-in filter."""
    from discord_guild_queue.domain.queue.entities import GuildQueue

    return GuildQueue.create(123456789, mock_message, AudioFilter.names())
