"""
Figure Schema
=============

Bounded Context: Transmittable Figure Data

A Figure wraps a structured JSON value and knows how to render it as
canonical JSON text. The value is opaque: it may describe a circle, a
polyline of Coordinates, or anything else the client understands.

Message Flow:
    Caller -> Figure -> FigureEncoder -> host transport (WebSocket text frame)
"""

import json
from typing import Any, Optional, Tuple, Union

from ..errors import DecodingError, EncodingError
from .json_value import JsonKind, JsonValue, parse_json_text

COMPACT_SEPARATORS: Tuple[str, str] = (",", ":")
"""Default wire whitespace policy: no spaces after ',' or ':'."""


class Figure:
    """
    Container for a structured JSON value.

    The setter performs no copying and no validation; representability is
    checked when text is requested.

    Attributes:
        json: JsonValue, plain Python JSON data, or None (unset)

    Example:
        >>> fig = Figure({"type": "circle", "radius": 5,
        ...               "center": {"x": 1.0, "y": 2.0}})
        >>> fig.to_text()
        '{"type":"circle","radius":5,"center":{"x":1.0,"y":2.0}}'
    """

    def __init__(self, json: Optional[Any] = None):
        self.json = json

    def get_json(self) -> Optional[Any]:
        return self.json

    def set_json(self, json: Optional[Any]) -> None:
        self.json = json

    @property
    def has_value(self) -> bool:
        """True once a value (possibly JSON null) has been set."""
        return self.json is not None

    def to_value(self) -> JsonValue:
        """Current value as a JsonValue tree.

        Raises:
            EncodingError: Value unset or not representable as JSON
        """
        if self.json is None:
            raise EncodingError("Figure has no value to encode")
        try:
            return JsonValue.from_python(self.json)
        except (TypeError, ValueError, RecursionError) as e:
            raise EncodingError(f"Figure value is not representable as JSON: {e}") from e

    @property
    def figure_type(self) -> Optional[str]:
        """The "type" member of an object value, if it is a string."""
        try:
            value = self.to_value()
        except EncodingError:
            return None
        member = value.get("type")
        if member is not None and member.kind is JsonKind.STRING:
            return member.payload
        return None

    def to_text(
        self,
        separators: Tuple[str, str] = COMPACT_SEPARATORS,
        sort_keys: bool = False,
        ensure_ascii: bool = False,
        indent: Optional[int] = None
    ) -> str:
        """Render canonical JSON text.

        Args:
            separators: Item and key separators (default: compact)
            sort_keys: Sort object members by key (default: keep order)
            ensure_ascii: Escape non-ASCII characters (default: keep UTF-8)
            indent: Pretty-print indent (default: single line)

        Returns:
            JSON text

        Raises:
            EncodingError: Value unset or not representable as JSON
        """
        value = self.to_value()
        try:
            return json.dumps(
                value.to_python(),
                separators=separators,
                sort_keys=sort_keys,
                ensure_ascii=ensure_ascii,
                indent=indent,
                allow_nan=False,
            )
        except (TypeError, ValueError, RecursionError) as e:
            raise EncodingError(f"Failed to render figure as JSON: {e}") from e

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Figure(json={self.json!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Figure):
            return NotImplemented
        if self.json is None or other.json is None:
            return self.json is None and other.json is None
        try:
            return self.to_value() == other.to_value()
        except EncodingError:
            return False

    __hash__ = None

    @classmethod
    def from_text(cls, text: Union[str, bytes]) -> 'Figure':
        """Parse wire text into a Figure holding a JsonValue.

        Raises:
            DecodingError: Text is not strict, well-formed JSON
        """
        try:
            return cls(parse_json_text(text))
        except (TypeError, ValueError, RecursionError) as e:
            raise DecodingError(f"Invalid figure text: {e}") from e

    @classmethod
    def of_coordinates(cls, figure_type: str, **members: Any) -> 'Figure':
        """Build a typed figure; Coordinates members become {"x", "y"} objects.

        Example:
            >>> Figure.of_coordinates("line", start=Coordinates(0, 0),
            ...                       end=Coordinates(3, 4)).to_text()
            '{"type":"line","start":{"x":0,"y":0},"end":{"x":3,"y":4}}'
        """
        if "type" in members:
            raise ValueError("figure_type is given positionally, not as a 'type' member")
        payload = {"type": figure_type}
        payload.update(members)
        try:
            return cls(JsonValue.from_python(payload))
        except (TypeError, ValueError) as e:
            raise EncodingError(f"Figure members are not representable as JSON: {e}") from e
