"""
Main report extraction pipeline orchestrating all components.
"""

from datetime import date
from typing import Iterable, List, Optional, Union
from pathlib import Path

from .config import Config, DEFAULT_CONFIG
from .utils import setup_logger, ensure_dir
from .document_loader import DocumentLoader
from .report_parser import ReportParser
from .record_store import RecordStore
from .models import DocumentResult, ExtractedRecord
from . import exporter


logger = setup_logger(__name__)


class ReportExtractionPipeline:
    """
    Complete pipeline for extracting table rows from text reports.

    This pipeline:
    1. Loads each report in submission order
    2. Parses its table section into records
    3. Appends the records to the shared store
    4. Exports the current view as CSV
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize extraction pipeline.

        Args:
            config: Configuration object (uses DEFAULT_CONFIG if None)
        """
        self.config = config or DEFAULT_CONFIG

        self.loader = DocumentLoader(self.config)
        self.parser = ReportParser(self.config)
        self.store = RecordStore()

        logger.debug("Pipeline initialized")

    def process_text(self, text: str, source_id: str) -> DocumentResult:
        """
        Parse already-decoded text and ingest its records.

        Args:
            text: Document text
            source_id: Document identifier

        Returns:
            DocumentResult with the parsed records
        """
        records = self.parser.parse(text, source_id)
        self.store.ingest(records)
        logger.info(f"{source_id}: {len(records)} record(s) extracted")
        return DocumentResult(source_id=source_id, records=records)

    def process_file(self, input_path: Union[str, Path]) -> DocumentResult:
        """
        Load, parse and ingest a single report file.

        A file that cannot be read contributes zero records; the failure is
        reported in the returned DocumentResult instead of raised.

        Args:
            input_path: Path to the report

        Returns:
            DocumentResult for the file
        """
        input_path = Path(input_path)
        source_id = input_path.name

        try:
            text = self.loader.load(input_path)
        except (OSError, ValueError) as e:
            logger.error(f"Error reading file {source_id}: {e}")
            self.store.ingest([])
            return DocumentResult(source_id=source_id, error=str(e))

        return self.process_text(text, source_id)

    def process_files(self, paths: Iterable[Union[str, Path]]) -> List[DocumentResult]:
        """
        Process reports one at a time, in order.

        Args:
            paths: Report paths

        Returns:
            One DocumentResult per path
        """
        results = []
        paths = list(paths)
        for idx, path in enumerate(paths, 1):
            logger.info(f"Processing document {idx}/{len(paths)}: {path}")
            results.append(self.process_file(path))

        total = sum(len(result.records) for result in results)
        failed = sum(1 for result in results if not result.ok)
        logger.info(f"Total records extracted: {total} ({failed} document(s) failed)")
        return results

    def view(self) -> List[ExtractedRecord]:
        return self.store.view()

    def clear(self):
        self.store.clear()

    def export_csv(self, output_dir: Optional[Union[str, Path]] = None,
                   day: Optional[date] = None) -> Path:
        """
        Save the current view to a dated CSV file.

        Args:
            output_dir: Output directory (uses config.output_dir if None)
            day: Date used in the file name (today if None)

        Returns:
            Path of the written CSV
        """
        output_dir = Path(ensure_dir(str(output_dir or self.config.output_dir)))
        name = exporter.default_export_name(day, prefix=self.config.export_prefix)
        return exporter.save_csv(self.store.view(), output_dir / name)
