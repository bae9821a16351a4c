"""
Report Extraction System for fixed-layout text reports

Finds the "Código / Descripción / Cantidad / Descuento" table in plain-text
reports, turns its rows into records tagged with the document's
"Razón Social", and serves them for filtering, sorting and CSV export.
"""

from .config import Config, DEFAULT_CONFIG
from .models import Column, DocumentResult, ExtractedRecord, SortConfig, SortDirection
from .report_parser import ReportParser, parse_report
from .record_store import RecordStore
from .document_loader import DocumentLoader, gather_input_files
from .pipeline import ReportExtractionPipeline

__version__ = "1.0.0"
__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "Column",
    "DocumentResult",
    "ExtractedRecord",
    "SortConfig",
    "SortDirection",
    "ReportParser",
    "parse_report",
    "RecordStore",
    "DocumentLoader",
    "gather_input_files",
    "ReportExtractionPipeline",
]
