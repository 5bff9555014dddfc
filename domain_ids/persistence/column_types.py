"""SQLAlchemy column types for identifiers and identifier collections.

    class Membership(Base):
        __tablename__ = "memberships"

        user_id: Mapped[UserId] = mapped_column(IdentifierType(UserId), primary_key=True)
        project_ids: Mapped[UniqueIdentifierCollection[ProjectId]] = mapped_column(
            IdentifierCollectionType(ProjectId),
        )

The column types only translate values; they never query.
"""

from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import JSON, String
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from domain_ids.config import settings
from domain_ids.domain.collection import IdentifierCollection, UniqueIdentifierCollection, ensure_kind
from domain_ids.domain.identifier import Identifier
from domain_ids.persistence.storage import (
    from_storage_list,
    from_storage_text,
    to_storage_list,
    to_storage_text,
)


class IdentifierType(TypeDecorator):
    """Stores an identifier of one kind as canonical UUID text."""

    impl = String
    cache_ok = True

    def __init__(self, kind: type[Identifier], length: Optional[int] = None) -> None:
        ensure_kind(kind)
        self.kind = kind
        super().__init__(length or settings.storage_column_length)

    def process_bind_param(self, value: Optional[Identifier], dialect: Dialect) -> Optional[str]:
        return to_storage_text(value, self.kind)

    def process_result_value(self, value: Optional[str], dialect: Dialect) -> Optional[Identifier]:
        return from_storage_text(value, self.kind)

    @property
    def python_type(self) -> type:
        return self.kind


class IdentifierCollectionType(TypeDecorator):
    """Stores an identifier collection as a JSON array of canonical UUID texts.

    SQL NULL and Python None map onto each other; an empty collection is
    stored as an empty array.
    """

    impl = JSON
    cache_ok = True

    def __init__(
        self,
        kind: type[Identifier],
        collection_type: type[IdentifierCollection[Any]] = UniqueIdentifierCollection,
    ) -> None:
        ensure_kind(kind)
        self.kind = kind
        self.collection_type = collection_type
        super().__init__(none_as_null=True)

    def process_bind_param(
        self,
        value: Optional[IdentifierCollection[Any]],
        dialect: Dialect,
    ) -> Optional[list[str]]:
        return to_storage_list(value, self.kind)

    def process_result_value(
        self,
        value: Optional[list[str]],
        dialect: Dialect,
    ) -> Optional[IdentifierCollection[Any]]:
        return from_storage_list(value, self.kind, self.collection_type)

    @property
    def python_type(self) -> type:
        return self.collection_type
