"""
Configuration for building schema models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ConfigError(ValueError):
    """Raised when a configuration value is not recognized."""


class KeyOrder(str, Enum):
    """Order of object properties and definitions after construction."""

    SORTED = "sorted"  # Default: lexicographic by name
    INSERTION = "insertion"  # Iteration order of the input mapping


class MissingRequiredPolicy(str, Enum):
    """What to do with a required name that has no matching property.

    The name is dropped in every case; construction never fails.
    """

    IGNORE = "ignore"
    WARN = "warn"  # Log a warning naming the missing properties


@dataclass
class ModelConfig:
    """Configuration options for model construction."""

    key_order: KeyOrder = KeyOrder.SORTED

    missing_required: MissingRequiredPolicy = MissingRequiredPolicy.IGNORE

    @staticmethod
    def from_dict(d: dict) -> ModelConfig:
        """Create a config from a dictionary."""
        config = ModelConfig()
        for k, v in d.items():
            if k == "key_order":
                config.key_order = _parse_enum(KeyOrder, k, v)
            elif k == "missing_required":
                config.missing_required = _parse_enum(MissingRequiredPolicy, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "key_order": self.key_order.value,
            "missing_required": self.missing_required.value,
        }


def _parse_enum(enum_cls: type[Enum], key: str, value):
    try:
        return enum_cls(value)
    except ValueError as e:
        choices = ", ".join(repr(member.value) for member in enum_cls)
        raise ConfigError(f"Invalid value {value!r} for '{key}', expected one of {choices}") from e
