"""Identifier — an immutable, validated UUID value typed by domain concept.

A kind is declared as a direct subclass of :class:`Identifier`::

    class UserId(Identifier):
        \"\"\"Identifies a user.\"\"\"

    class ProjectId(Identifier):
        \"\"\"Identifies a project.\"\"\"

Both wrap the same textual format, but a ``UserId`` is never accepted where a
``ProjectId`` is expected.  Kinds are leaves: a kind cannot be subclassed
again, and ``Identifier`` itself cannot be instantiated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, TypeVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from domain_ids.config import settings
from domain_ids.domain.errors import (
    DifferentIdentifierKinds,
    IdentifierEqual,
    IdentifierNotEqual,
    InvalidIdentifier,
)
from domain_ids.domain.guards import ErrorFactory, fail
from domain_ids.foundation.identifiers import canonicalize, new_uuid_text

if TYPE_CHECKING:
    from domain_ids.domain.collection import IdentifierCollection

IdentifierT = TypeVar("IdentifierT", bound="Identifier")


class Identifier:
    """Base of every identifier kind.  Equality is by kind and value."""

    __slots__ = ("_value",)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for base in cls.__bases__:
            if base is not Identifier and issubclass(base, Identifier):
                raise TypeError(
                    f"{cls.__name__} cannot extend identifier kind {base.__name__}; "
                    "declare kinds as direct subclasses of Identifier"
                )

    def __init__(self, value: str) -> None:
        if type(self) is Identifier:
            raise TypeError("Identifier is abstract; declare a kind by subclassing it")
        canonical = canonicalize(value, accept_uppercase=settings.accept_uppercase)
        if canonical is None:
            raise InvalidIdentifier(value)
        object.__setattr__(self, "_value", canonical)

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_string(cls: type[IdentifierT], value: str) -> IdentifierT:
        return cls(value)

    @classmethod
    def generate_random(cls: type[IdentifierT]) -> IdentifierT:
        """Create an identifier from a freshly generated random v4 UUID."""
        return cls(new_uuid_text())

    # ── Value semantics ──────────────────────────────────────────────────

    @property
    def value(self) -> str:
        """Canonical lowercase UUID text."""
        return self._value

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self._value}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._value,))

    # ── Accessors ────────────────────────────────────────────────────────

    def is_equal_to(self, other: Identifier) -> bool:
        """Compare by value.  Identifiers of different kinds are not comparable."""
        if type(self) is not type(other):
            raise DifferentIdentifierKinds(self, other)
        return self._value == other._value

    def is_not_equal_to(self, other: Identifier) -> bool:
        return not self.is_equal_to(other)

    def is_in(self, collection: IdentifierCollection[Any]) -> bool:
        return collection.contains(self)

    def is_not_in(self, collection: IdentifierCollection[Any]) -> bool:
        return collection.not_contains(self)

    # ── Guards ───────────────────────────────────────────────────────────

    def must_be_equal_to(
        self,
        other: Identifier,
        on_failure: Optional[ErrorFactory] = None,
    ) -> None:
        if self.is_not_equal_to(other):
            fail(on_failure, lambda: IdentifierNotEqual(self, other))

    def must_not_be_equal_to(
        self,
        other: Identifier,
        on_failure: Optional[ErrorFactory] = None,
    ) -> None:
        if self.is_equal_to(other):
            fail(on_failure, lambda: IdentifierEqual(self, other))

    # ── pydantic integration ─────────────────────────────────────────────

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        from_text = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls.from_string),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_text,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_text]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )
