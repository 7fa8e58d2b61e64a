"""
Structured Logging for figurecast
=================================

Bounded Context: Observability

JSON-structured logging with typed event names.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from figurecast_ws.logging import create_logger, LogEvent
    >>> logger = create_logger("figure_encoder")
    >>> logger.info(
    ...     event=LogEvent.CODEC_INITIALIZED,
    ...     message="Encoder ready",
    ...     metadata={'path': '/figures'}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
