"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

This module defines typed event names for structured logging.

Event Naming Convention:
    <component>.<action>  or  error.<kind>

    component: codec, figure
    action: initialized, destroyed, encoded, decoded, published

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, message, metadata.length
    | filter event = "figure.encoded"
    | stats count() by bin(5m)
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - codec.*: Encoder/decoder lifecycle transitions
    - figure.*: Per-message processing
    - error.*: Error conditions
    """

    # ========== Codec Lifecycle Events ==========
    CODEC_INITIALIZED = "codec.initialized"
    """Codec activated by the host transport (init called)."""

    CODEC_DESTROYED = "codec.destroyed"
    """Codec torn down by the host transport (destroy called)."""

    # ========== Figure Events ==========
    FIGURE_ENCODED = "figure.encoded"
    """Figure serialized to JSON text."""

    FIGURE_DECODED = "figure.decoded"
    """Inbound JSON text parsed into a figure."""

    FIGURE_PUBLISHED = "figure.published"
    """Encoded figure handed to the transport send callable."""

    # ========== Error Events ==========
    ENCODING_ERROR = "error.encoding"
    """Figure value missing or not representable as JSON."""

    DECODING_ERROR = "error.decoding"
    """Inbound text is not well-formed JSON."""

    LIFECYCLE_VIOLATION = "error.lifecycle"
    """Codec operation invoked outside the READY state."""

    SEND_ERROR = "error.send"
    """Transport send callable raised."""


# Event categories for filtering
CODEC_EVENTS = {
    LogEvent.CODEC_INITIALIZED,
    LogEvent.CODEC_DESTROYED,
}

FIGURE_EVENTS = {
    LogEvent.FIGURE_ENCODED,
    LogEvent.FIGURE_DECODED,
    LogEvent.FIGURE_PUBLISHED,
}

ERROR_EVENTS = {
    LogEvent.ENCODING_ERROR,
    LogEvent.DECODING_ERROR,
    LogEvent.LIFECYCLE_VIOLATION,
    LogEvent.SEND_ERROR,
}
