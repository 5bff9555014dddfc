"""Ordered identifier collection.

Behaves like :class:`UniqueIdentifierCollection`, but the position of each
member is part of its meaning: ``add`` appends, ``add_all`` appends the other
collection's members in their order, and ``diff``/``intersect``/``filter``
keep the order of the receiver.  Equality stays set-based; use
:meth:`OrderedIdentifierCollection.is_in_same_order` to compare orderings.
"""

from __future__ import annotations

from typing import Optional, overload

from domain_ids.domain.collection import IdentifierCollection, K, UniqueIdentifierCollection
from domain_ids.domain.errors import CollectionsInSameOrder, CollectionsOrderMismatch
from domain_ids.domain.guards import ErrorFactory, fail


class OrderedIdentifierCollection(UniqueIdentifierCollection[K]):
    """Immutable collection of identifiers of one kind with a meaningful order."""

    __slots__ = ()

    # ── Positional access ────────────────────────────────────────────────

    @overload
    def __getitem__(self, position: int) -> K: ...

    @overload
    def __getitem__(self, position: slice) -> OrderedIdentifierCollection[K]: ...

    def __getitem__(self, position):
        identifiers = list(self._members.values())
        if isinstance(position, slice):
            return self._derive({identifier.value: identifier for identifier in identifiers[position]})
        return identifiers[position]

    def identifier_at(self, position: int) -> K:
        """Return the member at *position*.  Raises IndexError when out of range."""
        return self[position]

    def index_of(self, identifier: K) -> int:
        self.must_contain(identifier)
        return list(self._members).index(identifier.value)

    def first(self) -> Optional[K]:
        return next(iter(self._members.values()), None)

    def last(self) -> Optional[K]:
        return next(reversed(self._members.values()), None)

    def reversed_order(self) -> OrderedIdentifierCollection[K]:
        return self._derive(dict(reversed(self._members.items())))

    # ── Order comparison ─────────────────────────────────────────────────

    def is_in_same_order(self, other: IdentifierCollection[K]) -> bool:
        """Check that the identifiers both collections share appear in the same order.

        Members that only one of the two collections holds are ignored, so a
        caller-supplied ordering of a subset can be validated against the
        canonical one.
        """
        self._check_collection(other)
        own = [value for value in self._members if value in other._members]
        theirs = [value for value in other._members if value in self._members]
        return own == theirs

    def is_not_in_same_order(self, other: IdentifierCollection[K]) -> bool:
        return not self.is_in_same_order(other)

    def must_be_in_same_order(
        self,
        other: IdentifierCollection[K],
        on_failure: Optional[ErrorFactory] = None,
    ) -> None:
        if self.is_not_in_same_order(other):
            fail(on_failure, CollectionsOrderMismatch)

    def must_not_be_in_same_order(
        self,
        other: IdentifierCollection[K],
        on_failure: Optional[ErrorFactory] = None,
    ) -> None:
        if self.is_in_same_order(other):
            fail(on_failure, CollectionsInSameOrder)
