"""
Figure Publisher
================

Bounded Context: Host-Side Transport Binding

Drives a FigureEncoder on behalf of a transport session: open() activates
the encoder, publish_figure() encodes and hands the text to a send
callable, close() tears the encoder down. The transport itself (socket,
framing, session management) stays outside; send is whatever writes one
text message, e.g. a WebSocket connection's send method.

Example:
    >>> from figurecast_ws.publishers import FigurePublisher
    >>> from figurecast_ws.logging import create_logger
    >>> from figurecast_ws.schemas import Figure
    >>>
    >>> sent = []
    >>> publisher = FigurePublisher(send=sent.append, logger=create_logger("session"))
    >>> publisher.open()
    >>> publisher.publish_figure(Figure({"type": "circle", "radius": 5}))
    True
    >>> publisher.close()
"""

import threading
from typing import Any, Callable, Dict, Optional

from ..encoders import FigureEncoder
from ..errors import EncodingError
from ..logging import LogEvent, StructuredLogger
from ..schemas import Figure


class FigurePublisher:
    """
    Publishes figures as text messages through a caller-supplied send.

    Attributes:
        send: Callable taking one encoded text message
        encoder: FigureEncoder whose lifecycle this publisher owns
        config: Endpoint config forwarded to encoder.init()
        logger: Structured logger instance

    Thread Safety:
        publish_figure() may be called from several threads once open;
        counters are guarded by a lock. send must be safe for that use.
    """

    def __init__(
        self,
        send: Callable[[str], Any],
        logger: StructuredLogger,
        encoder: Optional[FigureEncoder] = None,
        config: Any = None
    ):
        """
        Initialize figure publisher.

        Args:
            send: Writes one text message to the transport
            logger: Structured logger for observability
            encoder: Encoder to drive (default: new FigureEncoder sharing logger)
            config: Endpoint configuration passed to encoder.init()
        """
        self.send = send
        self.logger = logger
        self.encoder = encoder or FigureEncoder(logger=logger)
        self.config = config

        self._published_count = 0
        self._failed_count = 0
        self._stats_lock = threading.Lock()

    def open(self) -> None:
        """Activate the encoder (transport session opened)."""
        self.encoder.init(self.config)

    def close(self) -> None:
        """Tear the encoder down (transport session closed)."""
        self.encoder.destroy()

    def is_open(self) -> bool:
        return self.encoder.is_ready()

    def __enter__(self) -> 'FigurePublisher':
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def publish_figure(self, figure: Figure) -> bool:
        """
        Encode a figure and send it.

        Args:
            figure: Figure to publish

        Returns:
            True if sent, False if encoding or sending failed (logged)

        Raises:
            LifecycleViolation: Publisher not open
        """
        try:
            text = self.encoder.encode(figure)
        except EncodingError:
            # Already logged by the encoder; drop the message
            self._record(success=False)
            return False

        try:
            self.send(text)
        except Exception as e:
            self._record(success=False)
            self.logger.error(
                event=LogEvent.SEND_ERROR,
                message="Transport send failed",
                exc_info=e,
                metadata={'figure_type': figure.figure_type}
            )
            return False

        count = self._record(success=True)
        self.logger.debug(
            event=LogEvent.FIGURE_PUBLISHED,
            message="Published figure",
            metadata={
                'figure_type': figure.figure_type,
                'published_count': count
            }
        )
        return True

    def _record(self, success: bool) -> int:
        with self._stats_lock:
            if success:
                self._published_count += 1
                return self._published_count
            self._failed_count += 1
            return self._failed_count

    def get_stats(self) -> Dict[str, Any]:
        """
        Get publisher statistics.

        Returns:
            Dictionary with published/failed counts and encoder state
        """
        with self._stats_lock:
            return {
                'published_count': self._published_count,
                'failed_count': self._failed_count,
                'encoder_state': self.encoder.state.value,
            }
