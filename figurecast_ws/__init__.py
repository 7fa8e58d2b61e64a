"""
figurecast WebSocket Codec Package
==================================

Bounded Context: Figure Encoding for Streaming Transports

Serializes structured figures (JSON trees, optionally embedding 2D
coordinates) to canonical JSON text, one text message per figure, for a
WebSocket endpoint or any other message-based transport.

Architecture:
- schemas/: Coordinates, JsonValue (tagged variant), Figure
- encoders/: Lifecycle-managed FigureEncoder / FigureDecoder
- publishers/: FigurePublisher host-side binding
- logging/: Structured JSON logging
- config.py: YAML-loadable encoder and endpoint settings
- errors.py: EncodingError, DecodingError, LifecycleViolation

Wire Format:
    Compact JSON, object members in insertion order, UTF-8 kept as is:
    {"type":"circle","radius":5,"center":{"x":1.0,"y":2.0}}

Example:
    >>> from figurecast_ws import Figure, FigureEncoder, EndpointConfig
    >>>
    >>> encoder = FigureEncoder()
    >>> encoder.init(EndpointConfig(path="/figures"))
    >>> encoder.encode(Figure({"type": "circle", "radius": 5,
    ...                        "center": {"x": 1.0, "y": 2.0}}))
    '{"type":"circle","radius":5,"center":{"x":1.0,"y":2.0}}'
    >>> encoder.destroy()
"""

# Version
__version__ = "1.0.0"

# Errors
from .errors import (
    FigureCastError,
    EncodingError,
    DecodingError,
    LifecycleViolation,
)

# Schemas
from .schemas import (
    Coordinates,
    JsonKind,
    JsonValue,
    Figure,
)

# Config
from .config import EncoderConfig, EndpointConfig

# Codecs
from .encoders import (
    BaseTextCodec,
    CodecState,
    FigureEncoder,
    FigureDecoder,
)

# Publishers
from .publishers import FigurePublisher

# Logging
from .logging import (
    LogEvent,
    StructuredLogger,
    create_logger,
)

__all__ = [
    # Version
    '__version__',
    # Errors
    'FigureCastError',
    'EncodingError',
    'DecodingError',
    'LifecycleViolation',
    # Schemas
    'Coordinates',
    'JsonKind',
    'JsonValue',
    'Figure',
    # Config
    'EncoderConfig',
    'EndpointConfig',
    # Codecs
    'BaseTextCodec',
    'CodecState',
    'FigureEncoder',
    'FigureDecoder',
    # Publishers
    'FigurePublisher',
    # Logging
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
