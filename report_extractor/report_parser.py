"""
Line-oriented parsing of fixed-layout text reports into records.
"""

from typing import List, Optional
import re

from .config import Config, DEFAULT_CONFIG
from .models import ExtractedRecord
from .utils import setup_logger


logger = setup_logger(__name__)


class ReportParser:
    """
    Extracts the labeled table section of a plain-text report.

    Parsing runs two linear passes over the lines:
    1. Metadata pass: the first "Razón Social: ..." line gives the entity name
    2. Table pass: rows between the header line and the section terminator
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize report parser.

        Args:
            config: Configuration object (uses DEFAULT_CONFIG if None)
        """
        self.config = config or DEFAULT_CONFIG
        self.entity_regex = re.compile(self.config.entity_pattern)
        self.separator_regex = re.compile(self.config.separator_pattern)
        self.terminator_regex = re.compile(self.config.terminator_pattern)
        self.row_regex = re.compile(self.config.row_pattern)

    def parse(self, text: str, source_id: str) -> List[ExtractedRecord]:
        """
        Parse one document into records.

        Args:
            text: Decoded document text
            source_id: Identifier of the document (usually the filename)

        Returns:
            List of ExtractedRecord objects, possibly empty
        """
        lines = [line.rstrip("\r") for line in text.split("\n")]

        entity_name = self.find_entity_name(lines)
        records = []
        in_table_section = False
        discarded = 0

        for line_number, line in enumerate(lines, 1):
            if self.is_header(line):
                in_table_section = True
                continue

            if not in_table_section:
                continue

            if self.separator_regex.match(line.lstrip()):
                continue

            if not line.strip():
                continue

            if self.is_terminator(line):
                logger.debug(f"{source_id}: table section ends at line {line_number}")
                break

            record = self._parse_row(line, source_id, entity_name)
            if record is None:
                discarded += 1
                if self.config.log_discarded_lines:
                    logger.debug(f"{source_id}: discarded line {line_number}: {line.strip()!r}")
                continue

            records.append(record)

        logger.debug(f"{source_id}: {len(records)} record(s), {discarded} line(s) discarded")
        return records

    def find_entity_name(self, lines: List[str]) -> str:
        """Return the first "Razón Social" value, or an empty string."""
        for line in lines:
            if self.config.entity_marker not in line:
                continue
            match = self.entity_regex.search(line)
            if match:
                return match.group(1).strip()
        return ""

    def is_header(self, line: str) -> bool:
        return all(token in line for token in self.config.header_tokens)

    def is_terminator(self, line: str) -> bool:
        return (bool(self.terminator_regex.match(line.strip()))
                or self.config.terminator_substring in line)

    def _parse_row(self, line: str, source_id: str, entity_name: str) -> Optional[ExtractedRecord]:
        match = self.row_regex.match(line)
        if not match:
            return None

        code, description, quantity, discount = (group.strip() for group in match.groups())
        # [0-9.]+ alone accepts "1.2.3"
        if discount.count(".") > 1:
            return None

        return ExtractedRecord(
            source_document=source_id,
            entity_name=entity_name,
            code=code,
            description=description,
            quantity=quantity,
            discount=discount,
        )


def parse_report(text: str, source_id: str) -> List[ExtractedRecord]:
    """Parse a document with the default configuration."""
    return ReportParser().parse(text, source_id)
