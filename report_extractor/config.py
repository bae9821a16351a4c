"""
Configuration settings for the report extraction pipeline.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class Config:
    """Central configuration for report extraction pipeline."""

    # Metadata settings
    entity_marker: str = "Razón Social"
    entity_pattern: str = r"Razón Social\s*:\s*(.+)"

    # Table section markers
    header_tokens: Tuple[str, ...] = ("Código", "Descripción", "Cantidad", "Descuento")
    separator_pattern: str = r"^-{5,}"
    terminator_pattern: str = r"^[*=-]{3,}"
    terminator_substring: str = "* "
    row_pattern: str = r"^\s*([0-9]{10})\s+(.+?)\s+([0-9]+)\s+([0-9.]+)\s*$"

    # Document loading settings
    accepted_extensions: Tuple[str, ...] = (".txt",)
    encoding: str = "utf-8"
    fallback_encoding: str = "latin-1"

    # Output settings
    output_dir: str = "outputs"
    export_prefix: str = "tabla_extraida"

    # Logging
    log_discarded_lines: bool = True

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.header_tokens:
            raise ValueError("header_tokens must contain at least one token")
        if not self.entity_marker:
            raise ValueError("entity_marker must not be empty")
        if not self.terminator_substring:
            raise ValueError("terminator_substring must not be empty")
        self.accepted_extensions = tuple(ext.lower() for ext in self.accepted_extensions)
        if not all(ext.startswith(".") for ext in self.accepted_extensions):
            raise ValueError("accepted_extensions must start with '.'")


# Default configuration instance
DEFAULT_CONFIG = Config()
