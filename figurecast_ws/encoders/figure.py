"""
Figure Codecs
=============

Bounded Context: Figure Text Encoding

FigureEncoder turns a Figure into the canonical JSON text sent as one
WebSocket text message; FigureDecoder is the inbound counterpart.

Message Flow:
    Figure -> FigureEncoder.encode() -> host transport -> client
    client -> host transport -> FigureDecoder.decode() -> Figure

Example:
    >>> from figurecast_ws.encoders import FigureEncoder
    >>> from figurecast_ws.schemas import Figure
    >>>
    >>> encoder = FigureEncoder()
    >>> encoder.init(None)
    >>> encoder.encode(Figure({"type": "circle", "radius": 5}))
    '{"type":"circle","radius":5}'
    >>> encoder.destroy()
"""

from typing import Optional, Union

from ..errors import DecodingError, EncodingError
from ..logging import LogEvent
from ..schemas import Figure, parse_json_text
from .base import BaseTextCodec


class FigureEncoder(BaseTextCodec):
    """
    Text encoder for Figure messages.

    Output follows self.settings (compact, insertion-ordered by default) and
    is deterministic: the same figure value always yields the same text.
    """

    component = "figure_encoder"

    def encode(self, figure: Figure) -> str:
        """
        Encode a figure to JSON text.

        Args:
            figure: Figure with a value set

        Returns:
            JSON text for one transport message

        Raises:
            LifecycleViolation: Called before init() or after destroy()
            EncodingError: Value unset or not representable as JSON
        """
        self._require_ready("encode")

        if not isinstance(figure, Figure):
            raise self._failed(
                EncodingError(f"FigureEncoder expects a Figure, got {type(figure).__name__}"),
                figure_type=None
            )

        try:
            text = figure.to_text(**self.settings.dump_options())
        except EncodingError as e:
            raise self._failed(e, figure_type=figure.figure_type)

        count = self._record_success()
        self.logger.debug(
            event=LogEvent.FIGURE_ENCODED,
            message="Encoded figure",
            metadata={
                'figure_type': figure.figure_type,
                'length': len(text),
                'message_count': count
            }
        )
        return text

    def _failed(self, error: EncodingError, figure_type: Optional[str]) -> EncodingError:
        self._record_error()
        self.logger.error(
            event=LogEvent.ENCODING_ERROR,
            message="Failed to encode figure",
            metadata={'figure_type': figure_type},
            exc_info=error
        )
        return error


class FigureDecoder(BaseTextCodec):
    """
    Text decoder for inbound Figure messages.

    Accepts strict JSON only: duplicate keys, NaN and Infinity are rejected.
    """

    component = "figure_decoder"

    def will_decode(self, text: Union[str, bytes]) -> bool:
        """
        Check whether text looks decodable without raising.

        Raises:
            LifecycleViolation: Called before init() or after destroy()
        """
        self._require_ready("will_decode")
        try:
            parse_json_text(text)
        except (TypeError, ValueError, RecursionError):
            return False
        return True

    def decode(self, text: Union[str, bytes]) -> Figure:
        """
        Decode JSON text into a Figure.

        Raises:
            LifecycleViolation: Called before init() or after destroy()
            DecodingError: Text is not strict, well-formed JSON
        """
        self._require_ready("decode")

        try:
            figure = Figure.from_text(text)
        except DecodingError as e:
            self._record_error()
            self.logger.error(
                event=LogEvent.DECODING_ERROR,
                message="Failed to decode figure",
                metadata={'length': len(text) if hasattr(text, '__len__') else None},
                exc_info=e
            )
            raise

        count = self._record_success()
        self.logger.debug(
            event=LogEvent.FIGURE_DECODED,
            message="Decoded figure",
            metadata={
                'figure_type': figure.figure_type,
                'message_count': count
            }
        )
        return figure
