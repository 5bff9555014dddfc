"""Normalizers for identifiers and identifier collections."""

from __future__ import annotations

from typing import Any, Optional, get_args, get_origin

from domain_ids.domain.collection import IdentifierCollection, ensure_string_list
from domain_ids.domain.errors import InvalidIdentifier
from domain_ids.domain.identifier import Identifier
from domain_ids.serialization.base import Normalizer


def is_identifier_kind(target: Any) -> bool:
    return isinstance(target, type) and issubclass(target, Identifier) and target is not Identifier


class IdentifierNormalizer(Normalizer):
    """Identifier <-> canonical UUID string."""

    def can_normalize(self, value: Any) -> bool:
        return isinstance(value, Identifier)

    def can_denormalize(self, target: Any) -> bool:
        return is_identifier_kind(target)

    def normalize(self, value: Identifier) -> str:
        return str(value)

    def denormalize(self, data: Any, target: type[Identifier]) -> Optional[Identifier]:
        if data is None:
            return None
        if not isinstance(data, str):
            raise InvalidIdentifier(data)
        return target.from_string(data)

    @property
    def name(self) -> str:
        return "identifier"


class CollectionNormalizer(Normalizer):
    """Identifier collection <-> list of canonical UUID strings.

    Targets are parameterised collection types, for example
    ``UniqueIdentifierCollection[UserId]``.  The type argument is the kind
    every element is decoded into.
    """

    def can_normalize(self, value: Any) -> bool:
        return isinstance(value, IdentifierCollection)

    def can_denormalize(self, target: Any) -> bool:
        origin = get_origin(target)
        if not isinstance(origin, type) or origin is IdentifierCollection:
            return False
        if not issubclass(origin, IdentifierCollection):
            return False
        args = get_args(target)
        return len(args) == 1 and is_identifier_kind(args[0])

    def normalize(self, value: IdentifierCollection[Any]) -> list[str]:
        return value.values()

    def denormalize(self, data: Any, target: Any) -> Optional[IdentifierCollection[Any]]:
        """Decode *data* into the collection type named by *target*.

        Raises:
            InvalidIdentifierList: If *data* is not a list of strings.
            InvalidIdentifier: If an element is not UUID text.
            DuplicateIdentifiers: If two elements denote the same identifier.
        """
        if data is None:
            return None
        collection_type = get_origin(target)
        (kind,) = get_args(target)
        return collection_type.from_strings(kind, ensure_string_list(data))

    @property
    def name(self) -> str:
        return "identifier_collection"
