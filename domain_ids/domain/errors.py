"""Exception catalog for identifiers and identifier collections.

Two families:
    - Validation errors are raised while building a value (construction or a
      boundary crossing).  Nothing partially built is ever returned.
    - Guard errors are the default errors of the ``must_*`` assertions.  A
      caller may replace any of them by passing an ``on_failure`` factory.
"""

from __future__ import annotations

from typing import Any


class IdentifierError(Exception):
    """Base class for every error raised by domain_ids."""


# ── Validation ───────────────────────────────────────────────────────────────


class InvalidIdentifier(IdentifierError, ValueError):
    """Raised when a value is not well-formed UUID text."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"The identifier {value!r} is invalid")


class InvalidIdentifierList(IdentifierError, ValueError):
    """Raised when a wire payload is not a list of strings."""

    def __init__(self, data: Any) -> None:
        self.data = data
        super().__init__(
            f"Expected a list of identifier strings, got {type(data).__name__}"
        )


class IdentifierKindNotHandled(IdentifierError, TypeError):
    """Raised when a collection receives an identifier of another kind."""

    def __init__(self, collection_kind: type, identifier_kind: type) -> None:
        self.collection_kind = collection_kind
        self.identifier_kind = identifier_kind
        super().__init__(
            f"A collection of {collection_kind.__name__} does not handle "
            f"identifiers of kind {identifier_kind.__name__}"
        )


class DuplicateIdentifiers(IdentifierError, ValueError):
    """Raised when the input of a collection contains the same value twice."""

    def __init__(self, duplicates: list[str]) -> None:
        self.duplicates = duplicates
        super().__init__(f"Duplicate identifiers found: {', '.join(duplicates)}")


class DifferentIdentifierKinds(IdentifierError, TypeError):
    """Raised when two identifiers of different kinds are compared."""

    def __init__(self, left: Any, right: Any) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot compare identifier of kind {type(left).__name__} "
            f"with identifier of kind {type(right).__name__}"
        )


# ── Guards ───────────────────────────────────────────────────────────────────


class IdentifierGuardError(IdentifierError):
    """Base class for the default errors of the guard clauses."""


class IdentifierNotEqual(IdentifierGuardError):
    def __init__(self, left: Any, right: Any) -> None:
        self.left = left
        self.right = right
        super().__init__(f"The identifier {left} is not equal to identifier {right}")


class IdentifierEqual(IdentifierGuardError):
    def __init__(self, left: Any, right: Any) -> None:
        self.left = left
        self.right = right
        super().__init__(f"The identifier {left} is equal to identifier {right}")


class IdentifierAlreadyPresent(IdentifierGuardError):
    def __init__(self, identifier: Any) -> None:
        self.identifier = identifier
        super().__init__(f"The identifier {identifier} is already in the collection")


class IdentifierNotPresent(IdentifierGuardError):
    def __init__(self, identifier: Any) -> None:
        self.identifier = identifier
        super().__init__(f"The collection does not contain identifier {identifier}")


class IdentifierPresent(IdentifierGuardError):
    def __init__(self, identifier: Any) -> None:
        self.identifier = identifier
        super().__init__(f"The collection does contain identifier {identifier}")


class CollectionMissingMember(IdentifierGuardError):
    """The collection does not contain every identifier of the other one."""

    def __init__(self, missing: list[Any]) -> None:
        self.missing = missing
        super().__init__(
            "The collection does not contain every identifier, missing: "
            + ", ".join(str(identifier) for identifier in missing)
        )


class CollectionContainsEvery(IdentifierGuardError):
    def __init__(self) -> None:
        super().__init__("The collection does contain every identifier of the other collection")


class CollectionContainsNone(IdentifierGuardError):
    def __init__(self) -> None:
        super().__init__("The collection does not contain any identifier of the other collection")


class CollectionsOverlap(IdentifierGuardError):
    """The collections share at least one identifier."""

    def __init__(self, shared: list[Any]) -> None:
        self.shared = shared
        super().__init__(
            "The collections share identifiers: "
            + ", ".join(str(identifier) for identifier in shared)
        )


class CollectionEmpty(IdentifierGuardError):
    def __init__(self) -> None:
        super().__init__("The collection is empty")


class CollectionNotEmpty(IdentifierGuardError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"The collection is not empty ({count} identifiers)")


class CollectionsNotEqual(IdentifierGuardError):
    def __init__(self) -> None:
        super().__init__("The collections must be equal")


class CollectionsEqual(IdentifierGuardError):
    def __init__(self) -> None:
        super().__init__("The collections must not be equal")


class CollectionsOrderMismatch(IdentifierGuardError):
    def __init__(self) -> None:
        super().__init__("The shared identifiers are not in the same order")


class CollectionsInSameOrder(IdentifierGuardError):
    def __init__(self) -> None:
        super().__init__("The shared identifiers are in the same order")


# ── Boundary ─────────────────────────────────────────────────────────────────


class NoNormalizerFound(IdentifierError, LookupError):
    """Raised when no registered normalizer supports a value or target type."""
