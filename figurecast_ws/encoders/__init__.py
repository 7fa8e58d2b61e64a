"""
Figure Codecs
=============

Bounded Context: Transport Codec Extension Point

Encoders and decoders a host transport (e.g. a WebSocket endpoint)
activates with init(config), uses per message, and tears down with
destroy().

Public API
----------
    CodecState: Lifecycle phase (enum)
    BaseTextCodec: Lifecycle base (for custom codecs)
    FigureEncoder: Figure -> JSON text
    FigureDecoder: JSON text -> Figure
"""

from .base import BaseTextCodec, CodecState
from .figure import FigureDecoder, FigureEncoder

__all__ = [
    'BaseTextCodec',
    'CodecState',
    'FigureEncoder',
    'FigureDecoder',
]
