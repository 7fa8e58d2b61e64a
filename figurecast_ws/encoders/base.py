"""
Base Text Codec
===============

Bounded Context: Transport Codec Infrastructure

Base class for codecs plugged into a message-based transport's
encoder/decoder extension point (e.g. a WebSocket endpoint).

Lifecycle:
    UNINITIALIZED --init(config)--> READY --destroy()--> DESTROYED

The host transport owns the sequencing: init() once, any number of
encode/decode calls, destroy() once. Work is only accepted in READY;
anything else raises LifecycleViolation.

Architecture:
    BaseTextCodec
        |
    FigureEncoder, FigureDecoder (concrete)

Thread Safety:
    Per-message work is pure; only statistics counters are shared and
    they are guarded by a lock. init/destroy are not meant to race.
"""

import threading
from enum import Enum
from typing import Any, Dict, Optional

from ..config import EncoderConfig
from ..errors import LifecycleViolation
from ..logging import LogEvent, StructuredLogger, create_logger


class CodecState(str, Enum):
    """Codec lifecycle phase."""
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    DESTROYED = "destroyed"


class BaseTextCodec:
    """
    Lifecycle-managed text codec.

    Subclasses implement their per-message operation and call
    _require_ready() before doing any work.

    Attributes:
        component: Component name used for logging
        settings: Output policy
        logger: Structured logger instance
        config: Endpoint config received in init() (None before)
    """

    component = "codec"

    def __init__(
        self,
        logger: Optional[StructuredLogger] = None,
        settings: Optional[EncoderConfig] = None
    ):
        self.settings = settings or EncoderConfig()
        self.logger = logger or create_logger(self.component, level=self.settings.level)
        self.config: Optional[Any] = None

        self._state = CodecState.UNINITIALIZED
        self._message_count = 0
        self._error_count = 0
        self._stats_lock = threading.Lock()

    @property
    def state(self) -> CodecState:
        return self._state

    def is_ready(self) -> bool:
        return self._state is CodecState.READY

    def init(self, config: Any = None) -> None:
        """
        Activate the codec for an endpoint.

        Args:
            config: Endpoint configuration; stored, not interpreted

        Raises:
            LifecycleViolation: Codec already initialized or destroyed
        """
        if self._state is not CodecState.UNINITIALIZED:
            self._violation("init", "init() may only be called once, before use")

        self.config = config
        self._state = CodecState.READY
        self.logger.info(
            event=LogEvent.CODEC_INITIALIZED,
            message=f"{type(self).__name__} initialized",
            metadata={'config': config}
        )

    def destroy(self) -> None:
        """
        Tear the codec down. No further work is accepted afterwards.

        Raises:
            LifecycleViolation: Codec not initialized or already destroyed
        """
        if self._state is not CodecState.READY:
            self._violation("destroy", "destroy() requires an initialized codec")

        self._state = CodecState.DESTROYED
        self.logger.info(
            event=LogEvent.CODEC_DESTROYED,
            message=f"{type(self).__name__} destroyed",
            metadata=self.get_stats()
        )

    def _require_ready(self, operation: str) -> None:
        if self._state is not CodecState.READY:
            self._violation(operation, f"{operation}() requires a READY codec")

    def _violation(self, operation: str, reason: str) -> None:
        error = LifecycleViolation(f"{reason} (state={self._state.value})")
        self.logger.error(
            event=LogEvent.LIFECYCLE_VIOLATION,
            message=f"Lifecycle violation in {operation}()",
            metadata={'state': self._state.value, 'operation': operation},
            exc_info=error
        )
        raise error

    def _record_success(self) -> int:
        with self._stats_lock:
            self._message_count += 1
            return self._message_count

    def _record_error(self) -> None:
        with self._stats_lock:
            self._error_count += 1

    def get_stats(self) -> Dict[str, Any]:
        """
        Get codec statistics.

        Example:
            >>> stats = encoder.get_stats()
            >>> print(f"Encoded {stats['message_count']} figures")
        """
        with self._stats_lock:
            return {
                'message_count': self._message_count,
                'error_count': self._error_count,
                'state': self._state.value,
            }
