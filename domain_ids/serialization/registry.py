"""Normalizer Registry — selects a normalizer for a value or a target type.

The registry holds normalizers in registration order and hands each value
to the first one whose supports-predicate accepts it.

No fallback.  Fail fast if nothing matches.
"""

from __future__ import annotations

import logging
from typing import Any

from domain_ids.domain.errors import IdentifierError, NoNormalizerFound
from domain_ids.serialization.base import Normalizer

logger = logging.getLogger(__name__)


class NormalizerStats:
    """Per-normalizer counters for observability."""

    __slots__ = ("normalizer_name", "normalized_count", "denormalized_count", "rejected_count")

    def __init__(self, normalizer_name: str) -> None:
        self.normalizer_name = normalizer_name
        self.normalized_count: int = 0
        self.denormalized_count: int = 0
        self.rejected_count: int = 0

    def to_dict(self) -> dict:
        return {
            "normalizer_name": self.normalizer_name,
            "normalized_count": self.normalized_count,
            "denormalized_count": self.denormalized_count,
            "rejected_count": self.rejected_count,
        }


class NormalizerRegistry:
    """Registry of normalizers with selection and stats tracking.

    Usage:
        registry = NormalizerRegistry()
        registry.register(IdentifierNormalizer())
        registry.register(CollectionNormalizer())

        data = registry.normalize(user_ids)
        user_ids = registry.denormalize(data, UniqueIdentifierCollection[UserId])
    """

    def __init__(self) -> None:
        self._normalizers: list[Normalizer] = []
        self._stats: dict[str, NormalizerStats] = {}

    def register(self, normalizer: Normalizer) -> None:
        """Add a normalizer to the registry."""
        self._normalizers.append(normalizer)
        self._stats[normalizer.name] = NormalizerStats(normalizer.name)
        logger.info("Registered normalizer: %s", normalizer.name)

    def normalizer_for_value(self, value: Any) -> Normalizer:
        for normalizer in self._normalizers:
            if normalizer.can_normalize(value):
                return normalizer
        raise NoNormalizerFound(f"No normalizer can normalize {type(value).__name__}")

    def normalizer_for_target(self, target: Any) -> Normalizer:
        for normalizer in self._normalizers:
            if normalizer.can_denormalize(target):
                return normalizer
        raise NoNormalizerFound(f"No normalizer can denormalize into {target!r}")

    def supports_normalization(self, value: Any) -> bool:
        return any(n.can_normalize(value) for n in self._normalizers)

    def supports_denormalization(self, target: Any) -> bool:
        return any(n.can_denormalize(target) for n in self._normalizers)

    def normalize(self, value: Any) -> Any:
        """Serialise *value* with the first matching normalizer.

        Raises:
            NoNormalizerFound: If no normalizer supports *value*.
        """
        normalizer = self.normalizer_for_value(value)
        data = normalizer.normalize(value)
        self._stats[normalizer.name].normalized_count += 1
        logger.debug("Normalizer '%s' serialised %r", normalizer.name, value)
        return data

    def denormalize(self, data: Any, target: Any) -> Any:
        """Build a *target* value from *data* with the first matching normalizer.

        Raises:
            NoNormalizerFound: If no normalizer supports *target*.
            IdentifierError: If the matched normalizer rejects *data*.
        """
        normalizer = self.normalizer_for_target(target)
        stats = self._stats[normalizer.name]
        try:
            value = normalizer.denormalize(data, target)
        except IdentifierError as exc:
            stats.rejected_count += 1
            logger.warning("Normalizer '%s' rejected payload: %s", normalizer.name, exc)
            raise
        stats.denormalized_count += 1
        return value

    @property
    def normalizer_names(self) -> list[str]:
        """Registered normalizer names in registration order."""
        return [n.name for n in self._normalizers]

    @property
    def stats(self) -> list[dict]:
        return [s.to_dict() for s in self._stats.values()]
