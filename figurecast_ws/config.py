"""
Configuration schema for figure codecs.

EncoderConfig controls the wire whitespace policy and log level of a codec.
EndpointConfig describes the WebSocket endpoint a codec is activated for;
the host transport hands it to init() and the codec only records it.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union
import yaml

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class EncoderConfig:
    """
    Encoder output policy.

    The default is the compact wire form: separators (",", ":"), object
    members in insertion order, non-ASCII kept as UTF-8, single line.
    """

    sort_keys: bool = False
    ensure_ascii: bool = False
    indent: Optional[int] = None  # None = single line
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate encoder configuration."""
        if self.indent is not None:
            if isinstance(self.indent, bool) or not isinstance(self.indent, int):
                raise ValueError(
                    f"indent must be an integer or null, got {self.indent!r}"
                )
            if self.indent < 0:
                raise ValueError(f"indent must be >= 0, got {self.indent}")

        if not isinstance(self.log_level, str):
            raise ValueError(f"log_level must be a string, got {self.log_level!r}")
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )

    @property
    def separators(self) -> Tuple[str, str]:
        """Compact separators for single-line output, spaced after ':' otherwise."""
        if self.indent is None:
            return (",", ":")
        return (",", ": ")

    @property
    def level(self) -> int:
        """log_level as a logging module constant."""
        return getattr(logging, self.log_level.upper())

    def dump_options(self) -> Dict[str, Any]:
        """Keyword arguments for Figure.to_text()."""
        return {
            "separators": self.separators,
            "sort_keys": self.sort_keys,
            "ensure_ascii": self.ensure_ascii,
            "indent": self.indent,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EncoderConfig":
        try:
            return cls(**data)
        except TypeError as e:
            raise ValueError(f"Invalid encoder config: {e}")

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "EncoderConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            encoder:
              sort_keys: false
              ensure_ascii: false
              indent: null
              log_level: "INFO"

        A bare mapping without the "encoder" section is accepted too.
        """
        data = _load_yaml(yaml_path)
        if "encoder" in data:
            return cls.from_dict(data["encoder"] or {})
        return cls.from_dict({k: v for k, v in data.items() if k != "endpoint"})


@dataclass(frozen=True)
class EndpointConfig:
    """WebSocket endpoint description passed to codec init()."""

    path: str = "/figures"
    subprotocols: Tuple[str, ...] = ()
    user_properties: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate endpoint configuration."""
        if not self.path.startswith("/"):
            raise ValueError(f"Endpoint path must start with '/', got {self.path!r}")

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "EndpointConfig":
        """
        Load endpoint configuration from YAML file.

        Example YAML:
            endpoint:
              path: "/figures"
              subprotocols: ["figure.v1"]
              user_properties:
                room: "lobby"
        """
        data = _load_yaml(yaml_path).get("endpoint") or {}
        return cls(
            path=data.get("path", "/figures"),
            subprotocols=tuple(data.get("subprotocols", ())),
            user_properties=dict(data.get("user_properties", {})),
        )


def _load_yaml(yaml_path: Union[str, Path]) -> Dict[str, Any]:
    path = Path(yaml_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping in {yaml_path}")
    return data
