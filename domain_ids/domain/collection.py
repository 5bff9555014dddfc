"""Identifier collections — homogeneous, duplicate-free sets of identifiers.

Every collection declares the single identifier kind it accepts when it is
built, and checks each member against it.  Members are kept in a mapping
from canonical value to identifier, which gives O(1) membership and makes
duplicates structurally impossible.

:class:`IdentifierCollection` carries everything the three variants share:
construction, predicates, guards and the pure helpers (``diff``,
``intersect``, ``filter``, ``map``, …).  The variants only differ in how they
change their content:

    - UniqueIdentifierCollection: transformers return new collections.
    - OrderedIdentifierCollection: same, and member order is semantic.
    - MutableIdentifierCollection: mutators change the receiver in place.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Callable, Generic, Optional, TypeVar, get_args

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from domain_ids.domain.errors import (
    CollectionContainsEvery,
    CollectionContainsNone,
    CollectionEmpty,
    CollectionMissingMember,
    CollectionNotEmpty,
    CollectionsEqual,
    CollectionsNotEqual,
    CollectionsOverlap,
    DuplicateIdentifiers,
    IdentifierAlreadyPresent,
    IdentifierKindNotHandled,
    IdentifierNotPresent,
    IdentifierPresent,
    InvalidIdentifierList,
)
from domain_ids.domain.guards import ErrorFactory, fail
from domain_ids.domain.identifier import Identifier

K = TypeVar("K", bound=Identifier)
R = TypeVar("R")
CollectionT = TypeVar("CollectionT", bound="IdentifierCollection[Any]")


def ensure_kind(kind: Any) -> None:
    """Reject anything that is not a declared identifier kind."""
    if not (isinstance(kind, type) and issubclass(kind, Identifier)) or kind is Identifier:
        raise TypeError(f"{kind!r} is not an identifier kind")


def ensure_string_list(data: Any) -> list[str]:
    """Return *data* as a list of strings, or raise InvalidIdentifierList."""
    if not isinstance(data, (list, tuple)):
        raise InvalidIdentifierList(data)
    for item in data:
        if not isinstance(item, str):
            raise InvalidIdentifierList(data)
    return list(data)


def _index_members(kind: type[K], identifiers: Iterable[K]) -> dict[str, K]:
    members: dict[str, K] = {}
    duplicates: list[str] = []
    for identifier in identifiers:
        if type(identifier) is not kind:
            raise IdentifierKindNotHandled(kind, type(identifier))
        if identifier.value in members:
            duplicates.append(identifier.value)
            continue
        members[identifier.value] = identifier
    if duplicates:
        raise DuplicateIdentifiers(duplicates)
    return members


class IdentifierCollection(Generic[K]):
    """Shared read-only behaviour of every identifier collection.

    Args:
        kind: The identifier kind every member must have.
        identifiers: Initial members.  Validated immediately.

    Raises:
        IdentifierKindNotHandled: If a member is not of *kind*.
        DuplicateIdentifiers: If two members share a value.
    """

    __slots__ = ("_kind", "_members")

    _kind: type[K]
    _members: dict[str, K]

    def __init__(self, kind: type[K], identifiers: Iterable[K] = ()) -> None:
        ensure_kind(kind)
        self._kind = kind
        self._members = _index_members(kind, identifiers)

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_identifiers(cls: type[CollectionT], kind: type[K], identifiers: Iterable[K]) -> CollectionT:
        return cls(kind, identifiers)

    @classmethod
    def empty(cls: type[CollectionT], kind: type[K]) -> CollectionT:
        return cls(kind)

    @classmethod
    def from_collections(
        cls: type[CollectionT],
        kind: type[K],
        collections: Iterable[IdentifierCollection[K]],
    ) -> CollectionT:
        """Merge several collections.  Identifiers present in more than one are kept once."""
        ensure_kind(kind)
        members: dict[str, K] = {}
        for collection in collections:
            if collection.kind is not kind:
                raise IdentifierKindNotHandled(kind, collection.kind)
            for value, identifier in collection._members.items():
                members.setdefault(value, identifier)
        return cls._from_members(kind, members)

    @classmethod
    def from_strings(cls: type[CollectionT], kind: type[K], values: Iterable[str]) -> CollectionT:
        """Build a collection from raw UUID strings.

        Raises:
            InvalidIdentifier: If a string is not UUID text.
            DuplicateIdentifiers: If two strings denote the same identifier.
        """
        ensure_kind(kind)
        return cls(kind, [kind.from_string(value) for value in values])

    @classmethod
    def from_map(
        cls: type[CollectionT],
        kind: type[K],
        items: Iterable[Any],
        mapper: Callable[[Any], K],
    ) -> CollectionT:
        """Build a collection by extracting one identifier from each item."""
        return cls(kind, [mapper(item) for item in items])

    @classmethod
    def _from_members(cls: type[CollectionT], kind: type[K], members: dict[str, K]) -> CollectionT:
        # Members are already validated; skip the checks of __init__.
        collection = cls.__new__(cls)
        collection._kind = kind
        collection._members = members
        return collection

    def _derive(self: CollectionT, members: dict[str, K]) -> CollectionT:
        return self._from_members(self._kind, members)

    # ── Argument checks ──────────────────────────────────────────────────

    def _check_identifier(self, identifier: K) -> None:
        if type(identifier) is not self._kind:
            raise IdentifierKindNotHandled(self._kind, type(identifier))

    def _check_collection(self, other: IdentifierCollection[Any]) -> None:
        if other._kind is not self._kind:
            raise IdentifierKindNotHandled(self._kind, other._kind)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def kind(self) -> type[K]:
        return self._kind

    def count(self) -> int:
        return len(self._members)

    def values(self) -> list[str]:
        """Canonical values of the members, in natural order."""
        return list(self._members)

    def identifiers(self) -> list[K]:
        return list(self._members.values())

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[K]:
        return iter(list(self._members.values()))

    def __contains__(self, identifier: object) -> bool:
        if not isinstance(identifier, Identifier):
            return False
        if type(identifier) is not self._kind:
            return False
        return self.contains(identifier)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdentifierCollection):
            return NotImplemented
        return other._kind is self._kind and self._members.keys() == other._members.keys()

    def __repr__(self) -> str:
        return f"{type(self).__name__}[{self._kind.__name__}]({self.values()!r})"

    # ── Predicates ───────────────────────────────────────────────────────

    def contains(self, identifier: K) -> bool:
        self._check_identifier(identifier)
        return identifier.value in self._members

    def not_contains(self, identifier: K) -> bool:
        return not self.contains(identifier)

    def contains_every(self, other: IdentifierCollection[K]) -> bool:
        self._check_collection(other)
        return all(value in self._members for value in other._members)

    def not_contains_every(self, other: IdentifierCollection[K]) -> bool:
        return not self.contains_every(other)

    def contains_some(self, other: IdentifierCollection[K]) -> bool:
        self._check_collection(other)
        return any(value in self._members for value in other._members)

    def contains_none(self, other: IdentifierCollection[K]) -> bool:
        return not self.contains_some(other)

    def is_empty(self) -> bool:
        return not self._members

    def is_not_empty(self) -> bool:
        return bool(self._members)

    def is_equal_to(self, other: IdentifierCollection[K]) -> bool:
        """Same cardinality and same members.  Order is irrelevant."""
        self._check_collection(other)
        if len(self._members) != len(other._members):
            return False
        return all(value in other._members for value in self._members)

    def is_not_equal_to(self, other: IdentifierCollection[K]) -> bool:
        return not self.is_equal_to(other)

    # ── Pure helpers ─────────────────────────────────────────────────────

    def diff(self: CollectionT, other: IdentifierCollection[K]) -> CollectionT:
        """Members of this collection that are absent from *other*."""
        self._check_collection(other)
        return self._derive(
            {value: identifier for value, identifier in self._members.items() if value not in other._members}
        )

    def intersect(self: CollectionT, other: IdentifierCollection[K]) -> CollectionT:
        """Members present in both collections, in the order of this collection."""
        self._check_collection(other)
        return self._derive(
            {value: identifier for value, identifier in self._members.items() if value in other._members}
        )

    def filter(self: CollectionT, predicate: Callable[[K], bool]) -> CollectionT:
        return self._derive(
            {value: identifier for value, identifier in self._members.items() if predicate(identifier)}
        )

    def map(self, function: Callable[[K], R]) -> list[R]:
        return [function(identifier) for identifier in self._members.values()]

    def map_with_value_keys(self, function: Callable[[K], R]) -> dict[str, R]:
        return {value: function(identifier) for value, identifier in self._members.items()}

    def every(self, predicate: Callable[[K], bool]) -> bool:
        return all(predicate(identifier) for identifier in self._members.values())

    def some(self, predicate: Callable[[K], bool]) -> bool:
        return any(predicate(identifier) for identifier in self._members.values())

    def reduce(self, function: Callable[[R, K], R], initial: R) -> R:
        result = initial
        for identifier in self._members.values():
            result = function(result, identifier)
        return result

    # ── Guards ───────────────────────────────────────────────────────────

    def must_contain(self, identifier: K, on_failure: Optional[ErrorFactory] = None) -> None:
        if self.not_contains(identifier):
            fail(on_failure, lambda: IdentifierNotPresent(identifier))

    def must_not_contain(self, identifier: K, on_failure: Optional[ErrorFactory] = None) -> None:
        if self.contains(identifier):
            fail(on_failure, lambda: IdentifierPresent(identifier))

    def must_contain_every(
        self,
        other: IdentifierCollection[K],
        on_failure: Optional[ErrorFactory] = None,
    ) -> None:
        if self.not_contains_every(other):
            fail(on_failure, lambda: CollectionMissingMember(self._missing_from(other)))

    def must_not_contain_every(
        self,
        other: IdentifierCollection[K],
        on_failure: Optional[ErrorFactory] = None,
    ) -> None:
        if self.contains_every(other):
            fail(on_failure, CollectionContainsEvery)

    def must_contain_some(
        self,
        other: IdentifierCollection[K],
        on_failure: Optional[ErrorFactory] = None,
    ) -> None:
        if self.contains_none(other):
            fail(on_failure, CollectionContainsNone)

    def must_contain_none(
        self,
        other: IdentifierCollection[K],
        on_failure: Optional[ErrorFactory] = None,
    ) -> None:
        if self.contains_some(other):
            fail(on_failure, lambda: CollectionsOverlap(self._shared_with(other)))

    def must_not_contain_some(
        self,
        other: IdentifierCollection[K],
        on_failure: Optional[ErrorFactory] = None,
    ) -> None:
        self.must_contain_none(other, on_failure)

    def must_be_empty(self, on_failure: Optional[ErrorFactory] = None) -> None:
        if self.is_not_empty():
            fail(on_failure, lambda: CollectionNotEmpty(len(self._members)))

    def must_not_be_empty(self, on_failure: Optional[ErrorFactory] = None) -> None:
        if self.is_empty():
            fail(on_failure, CollectionEmpty)

    def must_be_equal_to(
        self,
        other: IdentifierCollection[K],
        on_failure: Optional[ErrorFactory] = None,
    ) -> None:
        if self.is_not_equal_to(other):
            fail(on_failure, CollectionsNotEqual)

    def must_not_be_equal_to(
        self,
        other: IdentifierCollection[K],
        on_failure: Optional[ErrorFactory] = None,
    ) -> None:
        if self.is_equal_to(other):
            fail(on_failure, CollectionsEqual)

    def _missing_from(self, other: IdentifierCollection[K]) -> list[K]:
        return [identifier for value, identifier in other._members.items() if value not in self._members]

    def _shared_with(self, other: IdentifierCollection[K]) -> list[K]:
        return [identifier for value, identifier in self._members.items() if value in other._members]

    # ── pydantic integration ─────────────────────────────────────────────

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        args = get_args(source)
        if len(args) != 1:
            raise TypeError(
                f"{cls.__name__} must be parameterised with an identifier kind, "
                f"e.g. {cls.__name__}[UserId]"
            )
        kind = args[0]
        ensure_kind(kind)

        def from_data(data: Any) -> IdentifierCollection[Any]:
            if isinstance(data, cls):
                if data.kind is not kind:
                    raise IdentifierKindNotHandled(kind, data.kind)
                return data
            return cls.from_strings(kind, ensure_string_list(data))

        return core_schema.no_info_plain_validator_function(
            from_data,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda collection: collection.values()
            ),
        )


class UniqueIdentifierCollection(IdentifierCollection[K]):
    """Immutable, unordered collection of identifiers of one kind.

    Every transformer returns a new collection; the receiver never changes,
    so instances are hashable and safe to share between threads.
    """

    __slots__ = ()

    def __hash__(self) -> int:
        return hash((self._kind, frozenset(self._members)))

    # ── Transformers ─────────────────────────────────────────────────────

    def add(self: CollectionT, identifier: K) -> CollectionT:
        if self.contains(identifier):
            raise IdentifierAlreadyPresent(identifier)
        members = dict(self._members)
        members[identifier.value] = identifier
        return self._derive(members)

    def add_if_absent(self: CollectionT, identifier: K) -> CollectionT:
        if self.contains(identifier):
            return self
        return self.add(identifier)

    def add_all(self: CollectionT, other: IdentifierCollection[K]) -> CollectionT:
        """Union of both collections.

        Raises:
            CollectionsOverlap: If *other* shares any identifier with this collection.
        """
        self.must_contain_none(other)
        members = dict(self._members)
        members.update(other._members)
        return self._derive(members)

    def add_all_if_absent(self: CollectionT, other: IdentifierCollection[K]) -> CollectionT:
        self._check_collection(other)
        members = dict(self._members)
        for value, identifier in other._members.items():
            members.setdefault(value, identifier)
        return self._derive(members)

    def remove(self: CollectionT, identifier: K) -> CollectionT:
        self.must_contain(identifier)
        members = dict(self._members)
        del members[identifier.value]
        return self._derive(members)

    def remove_if_present(self: CollectionT, identifier: K) -> CollectionT:
        if self.not_contains(identifier):
            return self
        return self.remove(identifier)

    def remove_all(self: CollectionT, other: IdentifierCollection[K]) -> CollectionT:
        """This collection without the members of *other*.

        Raises:
            CollectionMissingMember: If a member of *other* is not in this collection.
        """
        self.must_contain_every(other)
        return self.diff(other)

    def remove_all_if_present(self: CollectionT, other: IdentifierCollection[K]) -> CollectionT:
        return self.diff(other)
