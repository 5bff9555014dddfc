"""Abstract base for wire-format normalizers.

A normalizer translates one family of values to and from JSON-compatible
scalars and arrays.  Several normalizers can compete for the same wire
shape; the supports-predicates let a registry pick the right one.

Rules:
    1. normalize() must return only str / list[str] data.
    2. denormalize() maps None to None and never mutates its input.
    3. Invalid content raises; nothing is logged and dropped.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Normalizer(ABC):
    """Base class for converting domain values to and from wire data."""

    @abstractmethod
    def can_normalize(self, value: Any) -> bool:
        """Return True if this normalizer knows how to serialise *value*."""
        ...

    @abstractmethod
    def can_denormalize(self, target: Any) -> bool:
        """Return True if this normalizer can build values of type *target*.

        Must be a fast check on the type alone.
        """
        ...

    @abstractmethod
    def normalize(self, value: Any) -> Any:
        ...

    @abstractmethod
    def denormalize(self, data: Any, target: Any) -> Any:
        """Build a *target* value from wire *data*, or None if *data* is None."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name used in logs and stats."""
        ...
