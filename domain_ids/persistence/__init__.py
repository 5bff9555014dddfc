from domain_ids.persistence.column_types import IdentifierCollectionType, IdentifierType
from domain_ids.persistence.storage import (
    from_storage_list,
    from_storage_text,
    to_storage_list,
    to_storage_text,
)

__all__ = [
    "IdentifierType",
    "IdentifierCollectionType",
    "to_storage_text",
    "from_storage_text",
    "to_storage_list",
    "from_storage_list",
]
