"""
Configuration for the Balatro advisor.
"""

import json
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Optional

from .engine.errors import ConfigError, UnknownHandType
from .engine.hand_detector import HandType, MAX_HAND_CARDS

CONFIG_ENV_VAR = "BALATRO_ADVISOR_CONFIG"


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class AdvisorConfig:
    """Defaults for an advisor session."""
    play_size: int = 5
    target_score: int = 300
    hands_remaining: int = 3
    discards_remaining: int = 3
    hand_size: int = 8
    alternatives: int = 3
    exhaustive_limit: int = 12
    strong_hand_threshold: int = 100
    hand_levels: dict = field(default_factory=dict)  # HandType name -> level

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        for name in ("play_size", "hand_size", "exhaustive_limit"):
            value = getattr(self, name)
            if not _is_int(value) or value < 1:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
        if self.play_size > MAX_HAND_CARDS:
            raise ConfigError(f"play_size must be at most {MAX_HAND_CARDS}, got {self.play_size}")
        for name in ("target_score", "hands_remaining", "discards_remaining",
                     "alternatives", "strong_hand_threshold"):
            value = getattr(self, name)
            if not _is_int(value) or value < 0:
                raise ConfigError(f"{name} must be a non-negative integer, got {value!r}")
        if not isinstance(self.hand_levels, dict):
            raise ConfigError(f"hand_levels must be a mapping, got {type(self.hand_levels).__name__}")
        for name, level in self.hand_levels.items():
            try:
                HandType.from_name(name)
            except UnknownHandType as e:
                raise ConfigError(str(e)) from e
            if not _is_int(level) or level < 1:
                raise ConfigError(f"Level for {name} must be an integer >= 1, got {level!r}")

    def with_overrides(self, **overrides) -> "AdvisorConfig":
        """Copy with known keys replaced; unknown and None values are skipped."""
        known = {f.name for f in fields(self)}
        changes = {k: v for k, v in overrides.items() if k in known and v is not None}
        return replace(self, **changes)

    @classmethod
    def from_file(cls, path) -> "AdvisorConfig":
        """Load a JSON config file."""
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"Config file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigError(f"Config file {path} is not UTF-8 text: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must hold a JSON object")
        return cls().with_overrides(**data)

    @classmethod
    def load(cls, path=None) -> "AdvisorConfig":
        """Load from ``path``, else from $BALATRO_ADVISOR_CONFIG, else defaults."""
        path = path or os.environ.get(CONFIG_ENV_VAR)
        if path:
            return cls.from_file(path)
        return cls()

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_config(path: Optional[str] = None) -> AdvisorConfig:
    return AdvisorConfig.load(path)
