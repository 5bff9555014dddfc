"""Wiring helpers for applications embedding domain_ids.

Configures logging from settings and builds the default normalizer registry
(identifiers first, then collections).
"""

from __future__ import annotations

import logging

from domain_ids.config import Settings, settings
from domain_ids.serialization.normalizers import CollectionNormalizer, IdentifierNormalizer
from domain_ids.serialization.registry import NormalizerRegistry

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(config: Settings = settings) -> None:
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)


def build_normalizer_registry() -> NormalizerRegistry:
    registry = NormalizerRegistry()
    registry.register(IdentifierNormalizer())
    registry.register(CollectionNormalizer())
    return registry
