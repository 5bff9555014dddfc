from domain_ids.serialization.base import Normalizer
from domain_ids.serialization.normalizers import CollectionNormalizer, IdentifierNormalizer
from domain_ids.serialization.registry import NormalizerRegistry

__all__ = ["Normalizer", "IdentifierNormalizer", "CollectionNormalizer", "NormalizerRegistry"]
