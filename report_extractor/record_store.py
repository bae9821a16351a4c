"""
In-memory record collection with column filters and single-column sort.
"""

from functools import cmp_to_key
from typing import Dict, Iterable, List, Union
import locale

from .models import Column, ExtractedRecord, SortConfig, SortDirection
from .utils import setup_logger, parse_number


logger = setup_logger(__name__)

_NEXT_DIRECTION = {
    SortDirection.NONE: SortDirection.ASCENDING,
    SortDirection.ASCENDING: SortDirection.DESCENDING,
    SortDirection.DESCENDING: SortDirection.NONE,
}


def compare_values(left: str, right: str) -> int:
    """
    Compare two cell values.

    Numeric when both parse as floats, otherwise locale-aware string order.
    """
    left_number = parse_number(left)
    right_number = parse_number(right)
    if left_number is not None and right_number is not None:
        return (left_number > right_number) - (left_number < right_number)
    return locale.strcoll(left, right)


class RecordStore:
    """
    Aggregate of records from every parsed document.

    The collection only grows through ingest() or is emptied by clear();
    view() derives the filtered and sorted projection on every call.
    """

    def __init__(self):
        self._records: List[ExtractedRecord] = []
        self._filters: Dict[Column, str] = {column: "" for column in Column}
        self._sort = SortConfig()
        self._has_ingested = False

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> List[ExtractedRecord]:
        return list(self._records)

    @property
    def has_ingested(self) -> bool:
        """True once any ingest ran, even if it contributed no records."""
        return self._has_ingested

    @property
    def filters(self) -> Dict[Column, str]:
        return dict(self._filters)

    @property
    def sort_config(self) -> SortConfig:
        return self._sort

    def ingest(self, records: Iterable[ExtractedRecord]):
        """Append records to the collection."""
        batch = list(records)
        self._records.extend(batch)
        self._has_ingested = True
        logger.debug(f"Ingested {len(batch)} record(s), total {len(self._records)}")

    def clear(self):
        """Drop every record and reset filters and sort."""
        self._records = []
        self._filters = {column: "" for column in Column}
        self._sort = SortConfig()
        self._has_ingested = False
        logger.debug("Record store cleared")

    def set_filter(self, column: Union[Column, str], pattern: str):
        column = Column.resolve(column)
        self._filters[column] = pattern or ""

    def cycle_sort(self, column: Union[Column, str]) -> SortConfig:
        """
        Advance the sort state for a column.

        The same column cycles none -> ascending -> descending -> none;
        a different column starts at ascending.
        """
        column = Column.resolve(column)
        if self._sort.column is column:
            direction = _NEXT_DIRECTION[self._sort.direction]
        else:
            direction = SortDirection.ASCENDING

        if direction is SortDirection.NONE:
            self._sort = SortConfig()
        else:
            self._sort = SortConfig(column=column, direction=direction)
        return self._sort

    def matches(self, record: ExtractedRecord) -> bool:
        for column, pattern in self._filters.items():
            if pattern and pattern.casefold() not in column.value_of(record).casefold():
                return False
        return True

    def view(self) -> List[ExtractedRecord]:
        """Return the filtered, then sorted, records."""
        rows = [record for record in self._records if self.matches(record)]
        if not self._sort.active:
            return rows

        column = self._sort.column
        if self._sort.direction is SortDirection.DESCENDING:
            comparator = lambda a, b: compare_values(column.value_of(b), column.value_of(a))
        else:
            comparator = lambda a, b: compare_values(column.value_of(a), column.value_of(b))
        # sorted() is stable, so equal keys keep insertion order in both directions
        return sorted(rows, key=cmp_to_key(comparator))
