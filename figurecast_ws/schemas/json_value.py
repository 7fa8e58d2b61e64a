"""
Structured JSON Value
=====================

Bounded Context: Figure Payload Data Structures

A tagged-variant representation of a JSON tree. Every node carries its
kind explicitly, so rendering a value to text is total: anything that
constructs is representable.

Design:
- Immutable (frozen dataclass, tuples for containers)
- Object members keep insertion order; keys are unique strings
- Numbers are int or finite float, never bool
- Equality: object members compare order-insensitively, arrays by position,
  and 5 != 5.0 so the wire form survives a round trip

Example:
    >>> value = JsonValue.from_python({"type": "circle", "radius": 5})
    >>> value.kind
    <JsonKind.OBJECT: 'object'>
    >>> value.get("radius").to_python()
    5
"""

import json
import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union


class JsonKind(str, Enum):
    """JSON node kinds."""
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


@dataclass(frozen=True, eq=False)
class JsonValue:
    """
    Single node of a JSON tree.

    Attributes:
        kind: Node kind
        payload: Kind-specific data
            OBJECT  -> tuple of (key, JsonValue) pairs
            ARRAY   -> tuple of JsonValue
            STRING  -> str
            NUMBER  -> int or float
            BOOLEAN -> bool
            NULL    -> None

    Use the named constructors (object, array, string, number, boolean, null)
    or from_python() rather than building nodes by hand.
    """
    kind: JsonKind
    payload: Any = None

    def __post_init__(self):
        """Validate payload against kind."""
        kind = self.kind
        payload = self.payload

        if kind is JsonKind.OBJECT:
            if not isinstance(payload, tuple):
                raise TypeError("Object payload must be a tuple of (key, value) pairs")
            seen = set()
            for pair in payload:
                if not (isinstance(pair, tuple) and len(pair) == 2):
                    raise TypeError(f"Object member must be a (key, value) pair, got {pair!r}")
                key, value = pair
                if not isinstance(key, str):
                    raise TypeError(f"Object keys must be strings, got {type(key).__name__}")
                if not isinstance(value, JsonValue):
                    raise TypeError(f"Object member '{key}' is not a JsonValue")
                if key in seen:
                    raise ValueError(f"Duplicate object key: '{key}'")
                seen.add(key)

        elif kind is JsonKind.ARRAY:
            if not isinstance(payload, tuple):
                raise TypeError("Array payload must be a tuple")
            for item in payload:
                if not isinstance(item, JsonValue):
                    raise TypeError(f"Array item is not a JsonValue: {item!r}")

        elif kind is JsonKind.STRING:
            if not isinstance(payload, str):
                raise TypeError(f"String payload must be str, got {type(payload).__name__}")

        elif kind is JsonKind.NUMBER:
            if isinstance(payload, bool) or not isinstance(payload, (int, float)):
                raise TypeError(f"Number payload must be int or float, got {type(payload).__name__}")
            if isinstance(payload, float) and not math.isfinite(payload):
                raise ValueError(f"Number must be finite, got {payload}")

        elif kind is JsonKind.BOOLEAN:
            if not isinstance(payload, bool):
                raise TypeError(f"Boolean payload must be bool, got {type(payload).__name__}")

        elif kind is JsonKind.NULL:
            if payload is not None:
                raise TypeError("Null payload must be None")

        else:
            raise TypeError(f"Unknown JSON kind: {kind!r}")

    # ------------------------------------------------------------------
    # Named constructors
    # ------------------------------------------------------------------

    @classmethod
    def object(cls, members: Iterable[Tuple[str, 'JsonValue']] = ()) -> 'JsonValue':
        """Build an object node from (key, JsonValue) pairs."""
        if isinstance(members, Mapping):
            members = members.items()
        return cls(JsonKind.OBJECT, tuple((key, value) for key, value in members))

    @classmethod
    def array(cls, items: Iterable['JsonValue'] = ()) -> 'JsonValue':
        return cls(JsonKind.ARRAY, tuple(items))

    @classmethod
    def string(cls, value: str) -> 'JsonValue':
        return cls(JsonKind.STRING, value)

    @classmethod
    def number(cls, value: Union[int, float]) -> 'JsonValue':
        # Normalize int/float subclasses (IntEnum etc.) to the builtin type
        if isinstance(value, int) and not isinstance(value, bool):
            value = int(value)
        elif isinstance(value, float):
            value = float(value)
        return cls(JsonKind.NUMBER, value)

    @classmethod
    def boolean(cls, value: bool) -> 'JsonValue':
        return cls(JsonKind.BOOLEAN, value)

    @classmethod
    def null(cls) -> 'JsonValue':
        return cls(JsonKind.NULL, None)

    @classmethod
    def from_python(cls, data: Any) -> 'JsonValue':
        """Convert plain Python data into a JsonValue tree.

        Accepts dict (string keys), list, tuple, str, int, float, bool, None,
        existing JsonValue nodes, and any object exposing to_dict()
        (e.g. Coordinates).

        Raises:
            TypeError: Unsupported type or non-string object key
            ValueError: Non-finite number or duplicate key
        """
        if isinstance(data, JsonValue):
            return data
        if data is None:
            return cls.null()
        # bool before int: bool is an int subclass
        if isinstance(data, bool):
            return cls.boolean(data)
        if isinstance(data, (int, float)):
            return cls.number(data)
        if isinstance(data, str):
            return cls.string(data)
        if isinstance(data, Mapping):
            members = []
            for key, value in data.items():
                if not isinstance(key, str):
                    raise TypeError(
                        f"Object keys must be strings, got {type(key).__name__}: {key!r}"
                    )
                members.append((key, cls.from_python(value)))
            return cls.object(members)
        if isinstance(data, (list, tuple)):
            return cls.array(cls.from_python(item) for item in data)

        to_dict = getattr(data, 'to_dict', None)
        if callable(to_dict):
            return cls.from_python(to_dict())

        raise TypeError(f"Value of type {type(data).__name__} is not JSON serializable")

    # ------------------------------------------------------------------
    # Conversion & access
    # ------------------------------------------------------------------

    def to_python(self) -> Any:
        """Convert to plain dict/list/scalars (object order preserved)."""
        if self.kind is JsonKind.OBJECT:
            return {key: value.to_python() for key, value in self.payload}
        if self.kind is JsonKind.ARRAY:
            return [item.to_python() for item in self.payload]
        return self.payload

    def is_object(self) -> bool:
        return self.kind is JsonKind.OBJECT

    def is_array(self) -> bool:
        return self.kind is JsonKind.ARRAY

    def is_null(self) -> bool:
        return self.kind is JsonKind.NULL

    def keys(self) -> List[str]:
        """Object member names in order."""
        self._expect(JsonKind.OBJECT)
        return [key for key, _ in self.payload]

    def items(self) -> List[Tuple[str, 'JsonValue']]:
        self._expect(JsonKind.OBJECT)
        return list(self.payload)

    def get(self, key: str, default: Optional['JsonValue'] = None) -> Optional['JsonValue']:
        """Look up an object member; returns default for non-objects too."""
        if self.kind is not JsonKind.OBJECT:
            return default
        for member_key, value in self.payload:
            if member_key == key:
                return value
        return default

    def __getitem__(self, index: Union[str, int]) -> 'JsonValue':
        if self.kind is JsonKind.OBJECT:
            value = self.get(index)
            if value is None:
                raise KeyError(index)
            return value
        if self.kind is JsonKind.ARRAY:
            return self.payload[index]
        raise TypeError(f"JSON {self.kind.value} is not subscriptable")

    def __len__(self) -> int:
        if self.kind in (JsonKind.OBJECT, JsonKind.ARRAY):
            return len(self.payload)
        raise TypeError(f"JSON {self.kind.value} has no length")

    def __iter__(self) -> Iterator[Any]:
        if self.kind is JsonKind.OBJECT:
            return iter(self.keys())
        if self.kind is JsonKind.ARRAY:
            return iter(self.payload)
        raise TypeError(f"JSON {self.kind.value} is not iterable")

    def _expect(self, kind: JsonKind) -> None:
        if self.kind is not kind:
            raise TypeError(f"Expected JSON {kind.value}, got {self.kind.value}")

    # ------------------------------------------------------------------
    # Structural equality
    # ------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        if self.kind is JsonKind.OBJECT:
            return dict(self.payload) == dict(other.payload)
        if self.kind is JsonKind.NUMBER:
            return type(self.payload) is type(other.payload) and self.payload == other.payload
        return self.payload == other.payload

    def __hash__(self) -> int:
        if self.kind is JsonKind.OBJECT:
            return hash((self.kind, frozenset(self.payload)))
        if self.kind is JsonKind.NUMBER:
            return hash((self.kind, type(self.payload), self.payload))
        return hash((self.kind, self.payload))


def _object_pairs(pairs: List[Tuple[str, Any]]) -> dict:
    result = {}
    for key, value in pairs:
        if key in result:
            raise ValueError(f"Duplicate object key: '{key}'")
        result[key] = value
    return result


def _reject_constant(name: str) -> None:
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_json_text(text: Union[str, bytes]) -> JsonValue:
    """Parse strict JSON text into a JsonValue tree.

    Duplicate object keys, NaN/Infinity literals and numbers that overflow
    to infinity are rejected.

    Raises:
        ValueError: Malformed or non-strict JSON (json.JSONDecodeError included)
        TypeError: text is not str/bytes
    """
    data = json.loads(
        text,
        object_pairs_hook=_object_pairs,
        parse_constant=_reject_constant,
    )
    return JsonValue.from_python(data)
