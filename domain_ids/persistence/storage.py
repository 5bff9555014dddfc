"""Conversions between identifiers and their storage encodings.

A single identifier is stored as its canonical text; a collection as the
ordered list of its members' canonical texts.  None maps to None in both
directions and never raises.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, TypeVar

from domain_ids.domain.collection import IdentifierCollection, UniqueIdentifierCollection, ensure_kind
from domain_ids.domain.errors import IdentifierKindNotHandled
from domain_ids.domain.identifier import Identifier

IdentifierT = TypeVar("IdentifierT", bound=Identifier)


def to_storage_text(identifier: Optional[Identifier], kind: Optional[type[Identifier]] = None) -> Optional[str]:
    """Return the canonical text of *identifier*, checking its kind when *kind* is given."""
    if identifier is None:
        return None
    if kind is not None and type(identifier) is not kind:
        raise IdentifierKindNotHandled(kind, type(identifier))
    return identifier.value


def from_storage_text(text: Optional[str], kind: type[IdentifierT]) -> Optional[IdentifierT]:
    """Rebuild an identifier of *kind*.  Raises InvalidIdentifier on malformed text."""
    if text is None:
        return None
    return kind.from_string(text)


def to_storage_list(
    collection: Optional[IdentifierCollection[Any]],
    kind: Optional[type[Identifier]] = None,
) -> Optional[list[str]]:
    """Return member values in the collection's natural order."""
    if collection is None:
        return None
    if kind is not None and collection.kind is not kind:
        raise IdentifierKindNotHandled(kind, collection.kind)
    return collection.values()


def from_storage_list(
    values: Optional[Iterable[str]],
    kind: type[Identifier],
    collection_type: type[IdentifierCollection[Any]] = UniqueIdentifierCollection,
) -> Optional[IdentifierCollection[Any]]:
    """Rebuild a collection of *kind* from stored values.

    Raises:
        InvalidIdentifier: If a stored value is not UUID text.
        DuplicateIdentifiers: If a value is stored twice.
    """
    if values is None:
        return None
    ensure_kind(kind)
    return collection_type.from_strings(kind, values)
