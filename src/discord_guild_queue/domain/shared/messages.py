"""Centralized message constants for error messages and log output."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Discord ID Validation Errors
    INVALID_SNOWFLAKE = "Discord snowflake ID must be positive"
    SNOWFLAKE_TOO_LARGE = "Discord snowflake ID exceeds maximum value (2^64)"

    # Track Validation Errors
    EMPTY_TRACK_ID = "Track ID cannot be empty"

    # Filter Errors
    FILTER_STATE_NOT_BOOL = "Filter '{name}' must be switched with a bool, got {value!r}"
    FILTER_KEYS_FIXED = "Filters cannot be added or removed once the queue exists"
    EMPTY_FILTER_NAME = "Filter name cannot be empty"
    DUPLICATE_FILTER_NAME = "Filter '{name}' is listed more than once"
    UNKNOWN_FILTER = "Unknown filter '{name}' (known filters: {known})"

    # Event Errors
    UNKNOWN_EVENT_KIND = "Unknown queue event '{kind}' (known events: {known})"

    # Settings Errors
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting and structured logging support.
    """

    # Queue Lifecycle
    QUEUE_CREATED = "Created queue for guild %s with %d filters"
    QUEUE_REUSED = "Reusing existing queue for guild %s"
    QUEUE_DELETED = "Deleted queue for guild %s"
    QUEUE_DELETE_MISSING = "No queue to delete for guild %s"
    QUEUES_CLEARED = "Cleared %d guild queues"

    # Handles
    VOICE_ATTACHED = "Attached voice connection to queue for guild %s"
    VOICE_DETACHED = "Detached voice connection from queue for guild %s"
    STREAM_ATTACHED = "Attached stream to queue for guild %s"
    STREAM_DETACHED = "Detached stream from queue for guild %s"

    # Filters
    FILTER_CHANGED = "Filter %s set to %s in guild %s"

    # Events
    EVENT_SUBSCRIBED = "Subscribed handler to: %s"
    EVENT_UNSUBSCRIBED = "Unsubscribed handler from %s"
    EVENT_NO_HANDLERS = "No handlers for %s"
    EVENT_PUBLISHING = "Publishing %s to %d handlers"
    EVENT_HANDLER_ERROR = "Error in handler for %s: %s"
    EVENT_HANDLERS_CLEARED = "Cleared all event handlers"
    TRACK_CHANGED = "Track changed in guild %s: %r -> %r (skipped=%s)"
    QUEUE_ENDED = "Queue ended in guild %s"
    CHANNEL_EMPTY = "Voice channel empty in guild %s"
