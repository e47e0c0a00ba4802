"""
Unit Tests for the Queue Domain

Tests for:
- Value Objects: TrackId, Track, AudioFilter, FilterStates
- Entities: GuildQueue construction, derived state, filters and handles
"""

from unittest.mock import MagicMock

import pytest
from discord.ext import commands
from pydantic import ValidationError as PydanticValidationError

from discord_guild_queue.domain.queue.entities import GuildQueue
from discord_guild_queue.domain.queue.value_objects import (
    AudioFilter,
    FilterStates,
    Track,
    TrackId,
)
from discord_guild_queue.domain.shared.exceptions import ValidationError

# =============================================================================
# TrackId Value Object Tests
# =============================================================================


class TestTrackId:
    """Unit tests for TrackId value object."""

    def test_create_valid_track_id(self):
        """Should create TrackId with valid value."""
        track_id = TrackId("dQw4w9WgXcQ")
        assert track_id.value == "dQw4w9WgXcQ"
        assert str(track_id) == "dQw4w9WgXcQ"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_raises_error(self, value):
        """Should reject empty or whitespace-only IDs."""
        with pytest.raises(ValueError, match="cannot be empty"):
            TrackId(value)


# =============================================================================
# Track Value Object Tests
# =============================================================================


class TestTrack:
    """Unit tests for the Track value object."""

    def test_duration_formatted(self, sample_track, second_track):
        assert sample_track.duration_formatted == "3:00"
        assert second_track.duration_formatted == "1:02:05"

    def test_duration_unknown(self):
        track = Track(id=TrackId("x"), title="No Duration", webpage_url="https://example.com/x")
        assert track.duration_formatted == "Unknown"
        assert track.display_title == "No Duration"

    def test_display_title_includes_duration(self, sample_track):
        assert sample_track.display_title == "Test Track [3:00]"

    def test_track_is_frozen(self, sample_track):
        with pytest.raises(PydanticValidationError):
            sample_track.title = "Changed"


# =============================================================================
# FilterStates Value Object Tests
# =============================================================================


class TestFilterStates:
    """Unit tests for the fixed-key filter mapping."""

    def test_all_off_in_given_order(self):
        filters = FilterStates(["treble", AudioFilter.BASSBOOST])

        assert filters.names == ("treble", "bassboost")
        assert dict(filters) == {"treble": False, "bassboost": False}

    def test_toggle(self):
        filters = FilterStates(["gate"])
        assert filters.toggle("gate") is True
        assert filters.enabled == ["gate"]

    def test_missing_key_reads_as_absent(self):
        filters = FilterStates(["gate"])
        assert filters.get("bassboost") is None
        assert "bassboost" not in filters

    def test_from_mapping_rejects_non_bool(self):
        with pytest.raises(ValidationError, match="must be switched with a bool"):
            FilterStates.from_mapping({"gate": "on"})


# =============================================================================
# GuildQueue Construction Tests
# =============================================================================


class TestGuildQueueConstruction:
    """Unit tests for creating a GuildQueue."""

    def test_defaults(self, guild_queue, mock_message):
        """Should start idle with full volume and no handles."""
        assert guild_queue.guild_id == 123456789
        assert guild_queue.tracks == []
        assert guild_queue.stopped is False
        assert guild_queue.last_skipped is False
        assert guild_queue.volume == 100
        assert guild_queue.paused is True
        assert guild_queue.repeat_mode is False
        assert guild_queue.additional_stream_time == 0
        assert guild_queue.voice_connection is None
        assert guild_queue.stream is None
        assert guild_queue.first_message is mock_message

    def test_filters_have_exactly_given_keys_all_off(self, mock_message):
        names = ["bassboost", "nightcore", "custom"]
        queue = GuildQueue.create(1, mock_message, names)

        assert queue.filters == {"bassboost": False, "nightcore": False, "custom": False}

    def test_every_builtin_filter_starts_off(self, guild_queue):
        assert set(guild_queue.filters) == set(AudioFilter.names())
        assert not any(guild_queue.filters.values())

    def test_empty_filter_set_is_valid(self, mock_message):
        queue = GuildQueue.create(1, mock_message, [])
        assert queue.filters == {}
        assert queue.enabled_filters == []

    def test_first_message_may_be_command_context(self):
        ctx = MagicMock(spec=commands.Context)
        queue = GuildQueue.create(1, ctx, [])
        assert queue.first_message is ctx

    def test_first_message_must_be_a_request(self):
        with pytest.raises(PydanticValidationError):
            GuildQueue.create(1, "!play", [])

    def test_first_message_may_be_absent(self):
        queue = GuildQueue.create(1, None, ["bassboost"])
        assert queue.first_message is None

    def test_blank_filter_name_rejected(self, mock_message):
        with pytest.raises(ValidationError, match="cannot be empty"):
            GuildQueue.create(1, mock_message, ["bassboost", " "])

    def test_duplicate_filter_name_rejected(self, mock_message):
        with pytest.raises(ValidationError, match="more than once"):
            GuildQueue.create(1, mock_message, ["bassboost", "bassboost"])

    @pytest.mark.parametrize("guild_id", [0, -5, 2**64])
    def test_invalid_guild_id_rejected(self, guild_id, mock_message):
        with pytest.raises(PydanticValidationError):
            GuildQueue.create(guild_id, mock_message, [])

    def test_guild_id_is_immutable(self, guild_queue):
        with pytest.raises(PydanticValidationError):
            guild_queue.guild_id = 987654321

    def test_first_message_is_immutable(self, guild_queue):
        with pytest.raises(PydanticValidationError):
            guild_queue.first_message = None

    def test_each_queue_gets_its_own_channel(self, mock_message):
        first = GuildQueue.create(1, mock_message, [])
        second = GuildQueue.create(2, mock_message, [])
        assert first.events is not second.events


# =============================================================================
# GuildQueue Derived State Tests
# =============================================================================


class TestGuildQueuePlaying:
    """Unit tests for the currently playing track."""

    def test_empty_queue_plays_nothing(self, guild_queue):
        assert guild_queue.playing is None

    def test_head_is_playing(self, guild_queue, sample_track, second_track):
        guild_queue.tracks = [sample_track, second_track]
        assert guild_queue.playing == sample_track

    def test_removing_head_is_reflected_immediately(self, guild_queue, sample_track, second_track):
        """Should read the new head right after the old one is removed."""
        guild_queue.tracks = [sample_track, second_track]

        guild_queue.tracks.pop(0)
        assert guild_queue.playing == second_track

        guild_queue.tracks.pop(0)
        assert guild_queue.playing is None

    def test_appending_does_not_change_head(self, guild_queue, sample_track, second_track):
        guild_queue.tracks.append(sample_track)
        guild_queue.tracks.append(second_track)
        assert guild_queue.playing == sample_track

    def test_tracks_must_be_tracks(self, guild_queue):
        with pytest.raises(PydanticValidationError):
            guild_queue.tracks = ["not a track"]


class TestGuildQueueVolume:
    """Unit tests for base and calculated volume."""

    def test_calculated_volume_without_bassboost(self, guild_queue):
        guild_queue.volume = 40
        assert guild_queue.calculated_volume == 40

    def test_calculated_volume_with_bassboost(self, guild_queue):
        guild_queue.volume = 40
        guild_queue.set_filter(AudioFilter.BASSBOOST, True)
        assert guild_queue.calculated_volume == 90

    def test_bassboost_does_not_change_base_volume(self, guild_queue):
        guild_queue.volume = 70
        guild_queue.toggle_filter("bassboost")

        assert guild_queue.volume == 70
        assert guild_queue.calculated_volume == 120

    def test_missing_bassboost_key_counts_as_off(self, mock_message):
        queue = GuildQueue.create(1, mock_message, ["nightcore"])
        queue.volume = 55
        queue.set_filter("nightcore", True)
        assert queue.calculated_volume == 55

    @pytest.mark.parametrize("volume", [0, 100])
    def test_volume_bounds_accepted(self, guild_queue, volume):
        guild_queue.volume = volume
        assert guild_queue.volume == volume

    @pytest.mark.parametrize("volume", [-1, 101, 150])
    def test_out_of_range_volume_rejected(self, guild_queue, volume):
        """Should reject the write and keep the previous volume."""
        with pytest.raises(PydanticValidationError):
            guild_queue.volume = volume
        assert guild_queue.volume == 100

    def test_negative_stream_time_rejected(self, guild_queue):
        guild_queue.additional_stream_time = 1500
        with pytest.raises(PydanticValidationError):
            guild_queue.additional_stream_time = -1
        assert guild_queue.additional_stream_time == 1500


# =============================================================================
# GuildQueue Filter Tests
# =============================================================================


class TestGuildQueueFilters:
    """Unit tests for toggling filters."""

    def test_set_filter(self, guild_queue):
        guild_queue.set_filter("nightcore", True)
        assert guild_queue.filters["nightcore"] is True

        guild_queue.set_filter("nightcore", False)
        assert guild_queue.filters["nightcore"] is False

    def test_toggle_filter_returns_new_state(self, guild_queue):
        assert guild_queue.toggle_filter(AudioFilter.KARAOKE) is True
        assert guild_queue.toggle_filter(AudioFilter.KARAOKE) is False

    def test_unknown_filter_rejected(self, guild_queue):
        with pytest.raises(ValidationError) as exc_info:
            guild_queue.set_filter("chipmunk", True)

        assert exc_info.value.field == "filters"
        assert "chipmunk" not in guild_queue.filters

    def test_unknown_filter_toggle_rejected(self, mock_message):
        queue = GuildQueue.create(1, mock_message, [])
        with pytest.raises(ValidationError, match="known filters: none"):
            queue.toggle_filter("bassboost")
        assert queue.filters == {}

    def test_keys_never_change(self, guild_queue):
        keys_before = set(guild_queue.filters)
        guild_queue.toggle_filter("vaporwave")
        guild_queue.set_filter("8D", True)
        assert set(guild_queue.filters) == keys_before

    def test_reassigning_filters_rejected(self, mock_message):
        """Should keep the construction-time filter set when filters is reassigned."""
        queue = GuildQueue.create(1, mock_message, ["bassboost", "nightcore"])

        with pytest.raises(PydanticValidationError):
            queue.filters = {"chipmunk": True}
        with pytest.raises(PydanticValidationError):
            queue.filters = {}

        assert set(queue.filters) == {"bassboost", "nightcore"}
        assert queue.toggle_filter("bassboost") is True

    def test_adding_key_through_mapping_rejected(self, guild_queue):
        keys_before = set(guild_queue.filters)

        with pytest.raises(ValidationError, match="Unknown filter 'chipmunk'"):
            guild_queue.filters["chipmunk"] = True
        with pytest.raises(ValidationError):
            guild_queue.filters.update({"chipmunk": True})

        assert set(guild_queue.filters) == keys_before

    def test_removing_key_through_mapping_rejected(self, guild_queue):
        keys_before = set(guild_queue.filters)

        with pytest.raises(ValidationError, match="cannot be added or removed"):
            del guild_queue.filters["bassboost"]
        with pytest.raises(ValidationError):
            guild_queue.filters.pop("nightcore")
        with pytest.raises(ValidationError):
            guild_queue.filters.clear()

        assert set(guild_queue.filters) == keys_before

    def test_switching_through_mapping(self, guild_queue):
        guild_queue.volume = 40
        guild_queue.filters["bassboost"] = True

        assert guild_queue.calculated_volume == 90
        assert guild_queue.enabled_filters == ["bassboost"]

    @pytest.mark.parametrize("value", ["yes", 1, None])
    def test_non_bool_state_rejected(self, guild_queue, value):
        with pytest.raises(ValidationError, match="must be switched with a bool"):
            guild_queue.set_filter("bassboost", value)

        assert guild_queue.filters["bassboost"] is False

    def test_direct_construction_from_mapping(self, mock_message):
        queue = GuildQueue(
            guild_id=1,
            first_message=mock_message,
            filters={"bassboost": True, "gate": False},
        )

        assert isinstance(queue.filters, FilterStates)
        assert queue.enabled_filters == ["bassboost"]
        assert queue.calculated_volume == 150

    def test_enabled_filters_in_construction_order(self, mock_message):
        queue = GuildQueue.create(1, mock_message, ["treble", "bassboost", "gate"])
        queue.set_filter("gate", True)
        queue.set_filter("treble", True)
        assert queue.enabled_filters == ["treble", "gate"]


# =============================================================================
# GuildQueue Handle Tests
# =============================================================================


class TestGuildQueueHandles:
    """Unit tests for attaching and detaching external handles."""

    def test_attach_and_detach_voice(self, guild_queue, mock_voice_client):
        guild_queue.attach_voice(mock_voice_client)
        assert guild_queue.voice_connection is mock_voice_client
        assert guild_queue.is_connected

        detached = guild_queue.detach_voice()

        assert detached is mock_voice_client
        assert guild_queue.voice_connection is None
        assert not guild_queue.is_connected

    def test_detach_voice_does_not_disconnect(self, guild_queue, mock_voice_client):
        guild_queue.attach_voice(mock_voice_client)
        guild_queue.detach_voice()
        mock_voice_client.disconnect.assert_not_called()

    def test_detach_without_voice_returns_none(self, guild_queue):
        assert guild_queue.detach_voice() is None

    def test_attach_and_detach_stream(self, guild_queue, mock_audio_source):
        guild_queue.attach_stream(mock_audio_source)
        assert guild_queue.stream is mock_audio_source

        assert guild_queue.detach_stream() is mock_audio_source
        assert guild_queue.stream is None
        mock_audio_source.cleanup.assert_not_called()

    def test_voice_connection_must_be_voice_protocol(self, guild_queue):
        with pytest.raises(PydanticValidationError):
            guild_queue.voice_connection = "not a connection"

    def test_stop_is_a_flag(self, guild_queue, mock_voice_client):
        guild_queue.attach_voice(mock_voice_client)
        guild_queue.stopped = True
        assert guild_queue.stopped is True
        assert guild_queue.voice_connection is mock_voice_client
