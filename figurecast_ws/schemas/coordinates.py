"""
Coordinates Schema
==================

Bounded Context: Geometric Primitives

A mutable (x, y) pair used as a building block for figure payloads.
Unlike the message DTOs, coordinates are edited in place while a figure
is being assembled, so the dataclass is not frozen.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass
class Coordinates:
    """
    2D coordinate pair.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate

    Example:
        >>> point = Coordinates(1.0, 2.0)
        >>> point.set_x(3.5)
        >>> point.to_dict()
        {'x': 3.5, 'y': 2.0}
    """
    x: float = 0.0
    y: float = 0.0

    def get_x(self) -> float:
        return self.x

    def set_x(self, x: float) -> None:
        self.x = x

    def get_y(self) -> float:
        return self.y

    def set_y(self, y: float) -> None:
        self.y = y

    def to_dict(self) -> Dict[str, float]:
        """Serialize to JSON-compatible dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Coordinates':
        """Deserialize from dict.

        Args:
            data: Dictionary with keys: x, y

        Returns:
            Coordinates instance

        Raises:
            ValueError: If required keys missing or values not numeric
        """
        try:
            return cls(x=float(data['x']), y=float(data['y']))
        except KeyError as e:
            raise ValueError(f"Missing required Coordinates field: {e}")
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid Coordinates data: {e}")
