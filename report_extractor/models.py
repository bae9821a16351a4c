"""
Record and query state types shared by the parser, store and exporter.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


@dataclass(frozen=True)
class ExtractedRecord:
    """One parsed table row with the document it came from."""
    source_document: str
    entity_name: str
    code: str
    description: str
    quantity: str
    discount: str

    def to_dict(self) -> dict:
        return {column.value: column.value_of(self) for column in Column}


class Column(Enum):
    """Declared record columns, in export order."""
    DOCUMENT = "document"
    ENTITY_NAME = "entity_name"
    CODE = "code"
    DESCRIPTION = "description"
    QUANTITY = "quantity"
    DISCOUNT = "discount"

    @property
    def attribute(self) -> str:
        return _ATTRIBUTES[self]

    @property
    def header(self) -> str:
        return _HEADERS[self]

    @property
    def is_free_text(self) -> bool:
        return self in (Column.DOCUMENT, Column.ENTITY_NAME, Column.DESCRIPTION)

    def value_of(self, record: ExtractedRecord) -> str:
        return getattr(record, self.attribute)

    @classmethod
    def resolve(cls, column: Union["Column", str]) -> "Column":
        """
        Resolve a column from an enum member, its value or its name.

        Raises:
            ValueError: If no column matches
        """
        if isinstance(column, Column):
            return column
        key = str(column).strip()
        for member in cls:
            if key.lower() in (member.value, member.name.lower()):
                return member
        raise ValueError(
            f"Unknown column: {column!r} (expected one of {', '.join(m.value for m in cls)})"
        )


_ATTRIBUTES = {
    Column.DOCUMENT: "source_document",
    Column.ENTITY_NAME: "entity_name",
    Column.CODE: "code",
    Column.DESCRIPTION: "description",
    Column.QUANTITY: "quantity",
    Column.DISCOUNT: "discount",
}

_HEADERS = {
    Column.DOCUMENT: "Archivo",
    Column.ENTITY_NAME: "Razón Social",
    Column.CODE: "Código",
    Column.DESCRIPTION: "Descripción",
    Column.QUANTITY: "Cantidad",
    Column.DISCOUNT: "Descuento",
}


class SortDirection(Enum):
    NONE = "none"
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class SortConfig:
    """Active sort column and direction; at most one column is sorted."""
    column: Optional[Column] = None
    direction: SortDirection = SortDirection.NONE

    @property
    def active(self) -> bool:
        return self.column is not None and self.direction is not SortDirection.NONE


@dataclass
class DocumentResult:
    """Outcome of processing a single document."""
    source_id: str
    records: List[ExtractedRecord] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "source": self.source_id,
            "status": "ok" if self.ok else "error",
            "records": len(self.records),
            "error": self.error,
        }
