"""
Record-to-row mapping and tabular export.
"""

from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence, Union
import pandas as pd

from .models import Column, ExtractedRecord
from .utils import setup_logger


logger = setup_logger(__name__)

HEADERS = [column.header for column in Column]


def quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def record_to_row(record: ExtractedRecord) -> List[str]:
    """
    Map a record to its six export cells.

    Free-text cells (document, entity name, description) are quoted;
    code, quantity and discount are written as-is.
    """
    row = []
    for column in Column:
        value = column.value_of(record)
        row.append(quote(value) if column.is_free_text else value)
    return row


def records_to_csv(records: Sequence[ExtractedRecord]) -> str:
    """
    Serialize records as comma-separated text, header first.

    Written by hand rather than with DataFrame.to_csv because quoting is
    decided per column: free-text cells are quoted, numeric cells are not.

    Args:
        records: Records in export order (usually RecordStore.view())

    Returns:
        CSV text without a trailing newline
    """
    lines = [",".join(HEADERS)]
    lines.extend(",".join(record_to_row(record)) for record in records)
    return "\n".join(lines)


def records_to_dataframe(records: Sequence[ExtractedRecord]) -> pd.DataFrame:
    """
    Convert records to a DataFrame with the export headers as columns.

    Args:
        records: Records to convert

    Returns:
        DataFrame with one row per record, values kept as strings
    """
    data = [[column.value_of(record) for column in Column] for record in records]
    df = pd.DataFrame(data, columns=HEADERS, dtype=str)
    logger.debug(f"Built DataFrame with shape {df.shape}")
    return df


def default_export_name(day: Optional[date] = None, prefix: str = "tabla_extraida") -> str:
    day = day or date.today()
    return f"{prefix}_{day.isoformat()}.csv"


def save_csv(records: Sequence[ExtractedRecord], output_path: Union[str, Path]) -> Path:
    """
    Save records to a CSV file.

    Args:
        records: Records in export order
        output_path: Output file path

    Returns:
        Path of the written file
    """
    output_path = Path(output_path)
    try:
        output_path.write_text(records_to_csv(records), encoding='utf-8')
        logger.info(f"Saved {len(records)} record(s) to {output_path}")
    except OSError as e:
        logger.error(f"Failed to save CSV: {e}")
        raise
    return output_path
