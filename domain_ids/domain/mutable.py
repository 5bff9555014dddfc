"""Mutable identifier collection for iterative accumulation.

Shares every predicate and guard with the immutable variants.  The mutators
change the receiver and return nothing; a mutator that raises leaves the
collection untouched.  Read-only helpers (``diff``, ``filter``, ``map``, …)
still return new values.

Thread-safety note:
    There is no internal locking.  Callers that share an instance between
    threads or tasks must serialise mutations themselves.
"""

from __future__ import annotations

from domain_ids.domain.collection import IdentifierCollection, K, UniqueIdentifierCollection
from domain_ids.domain.errors import IdentifierAlreadyPresent


class MutableIdentifierCollection(IdentifierCollection[K]):
    """Duplicate-free collection of identifiers of one kind, changed in place."""

    __slots__ = ()

    __hash__ = None  # type: ignore[assignment]

    # ── Mutation ─────────────────────────────────────────────────────────

    def add(self, identifier: K) -> None:
        if self.contains(identifier):
            raise IdentifierAlreadyPresent(identifier)
        self._members[identifier.value] = identifier

    def add_if_absent(self, identifier: K) -> None:
        if self.not_contains(identifier):
            self._members[identifier.value] = identifier

    def add_all(self, other: IdentifierCollection[K]) -> None:
        self.must_contain_none(other)
        self._members.update(other._members)

    def add_all_if_absent(self, other: IdentifierCollection[K]) -> None:
        self._check_collection(other)
        for value, identifier in other._members.items():
            self._members.setdefault(value, identifier)

    def remove(self, identifier: K) -> None:
        self.must_contain(identifier)
        del self._members[identifier.value]

    def remove_if_present(self, identifier: K) -> None:
        self._check_identifier(identifier)
        self._members.pop(identifier.value, None)

    def remove_all(self, other: IdentifierCollection[K]) -> None:
        self.must_contain_every(other)
        for value in list(other._members):
            del self._members[value]

    def remove_all_if_present(self, other: IdentifierCollection[K]) -> None:
        self._check_collection(other)
        for value in list(other._members):
            self._members.pop(value, None)

    def clear(self) -> None:
        self._members.clear()

    # ── Snapshots ────────────────────────────────────────────────────────

    def freeze(self) -> UniqueIdentifierCollection[K]:
        """Return an immutable snapshot of the current members."""
        return UniqueIdentifierCollection._from_members(self._kind, dict(self._members))

    def copy(self) -> MutableIdentifierCollection[K]:
        return self._derive(dict(self._members))
