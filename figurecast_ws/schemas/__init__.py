"""
figurecast Schemas
==================

Bounded Context: Data Structures

Public API
----------
    Coordinates: Mutable (x, y) pair
    JsonKind: JSON node kinds (enum)
    JsonValue: Tagged-variant JSON tree
    Figure: Transmittable container of a JSON value
    parse_json_text: Strict JSON text -> JsonValue

Example:
    >>> from figurecast_ws.schemas import Coordinates, Figure
    >>> fig = Figure.of_coordinates("point", at=Coordinates(1.0, 2.0))
    >>> str(fig)
    '{"type":"point","at":{"x":1.0,"y":2.0}}'
"""

from .coordinates import Coordinates
from .json_value import JsonKind, JsonValue, parse_json_text
from .figure import COMPACT_SEPARATORS, Figure

__all__ = [
    'Coordinates',
    'JsonKind',
    'JsonValue',
    'parse_json_text',
    'COMPACT_SEPARATORS',
    'Figure',
]
