"""domain-ids — strongly-typed UUID identifiers and identifier collections."""

from domain_ids.domain.collection import IdentifierCollection, UniqueIdentifierCollection
from domain_ids.domain.errors import (
    CollectionContainsEvery,
    CollectionContainsNone,
    CollectionEmpty,
    CollectionMissingMember,
    CollectionNotEmpty,
    CollectionsEqual,
    CollectionsInSameOrder,
    CollectionsNotEqual,
    CollectionsOrderMismatch,
    CollectionsOverlap,
    DifferentIdentifierKinds,
    DuplicateIdentifiers,
    IdentifierAlreadyPresent,
    IdentifierEqual,
    IdentifierError,
    IdentifierGuardError,
    IdentifierKindNotHandled,
    IdentifierNotEqual,
    IdentifierNotPresent,
    IdentifierPresent,
    InvalidIdentifier,
    InvalidIdentifierList,
    NoNormalizerFound,
)
from domain_ids.domain.identifier import Identifier
from domain_ids.domain.mutable import MutableIdentifierCollection
from domain_ids.domain.ordered import OrderedIdentifierCollection

__all__ = [
    "Identifier",
    "IdentifierCollection",
    "UniqueIdentifierCollection",
    "OrderedIdentifierCollection",
    "MutableIdentifierCollection",
    "IdentifierError",
    "IdentifierGuardError",
    "InvalidIdentifier",
    "InvalidIdentifierList",
    "IdentifierKindNotHandled",
    "DuplicateIdentifiers",
    "DifferentIdentifierKinds",
    "IdentifierNotEqual",
    "IdentifierEqual",
    "IdentifierAlreadyPresent",
    "IdentifierNotPresent",
    "IdentifierPresent",
    "CollectionMissingMember",
    "CollectionContainsEvery",
    "CollectionContainsNone",
    "CollectionsOverlap",
    "CollectionEmpty",
    "CollectionNotEmpty",
    "CollectionsNotEqual",
    "CollectionsEqual",
    "CollectionsOrderMismatch",
    "CollectionsInSameOrder",
    "NoNormalizerFound",
]
