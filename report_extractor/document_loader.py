"""
Plain-text report loading utilities.
"""

from typing import Iterable, List, Optional, Union
from pathlib import Path
import os

from .utils import setup_logger
from .config import Config, DEFAULT_CONFIG


logger = setup_logger(__name__)


class DocumentLoader:
    """Reads report files and decodes them to text."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize document loader.

        Args:
            config: Configuration object
        """
        self.config = config or DEFAULT_CONFIG
        self.encoding = self.config.encoding
        self.fallback_encoding = self.config.fallback_encoding

    def is_supported(self, path: Union[str, Path]) -> bool:
        return Path(path).suffix.lower() in self.config.accepted_extensions

    def load(self, input_path: Union[str, Path]) -> str:
        """
        Load a report file as text.

        Args:
            input_path: Path to a .txt report

        Returns:
            Decoded document text

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file format is not supported
        """
        input_path = Path(input_path)

        if not input_path.exists():
            raise FileNotFoundError(f"File not found: {input_path}")

        if not self.is_supported(input_path):
            raise ValueError(f"Unsupported file format: {input_path.suffix.lower() or '(none)'}")

        return self.decode(input_path.read_bytes(), str(input_path))

    def decode(self, data: bytes, source_id: str) -> str:
        """
        Decode raw bytes, falling back to the secondary encoding.

        Args:
            data: Raw file content
            source_id: Document identifier used in log messages

        Returns:
            Decoded text
        """
        try:
            text = data.decode(self.encoding)
        except UnicodeDecodeError:
            logger.warning(
                f"{source_id} is not valid {self.encoding}, decoding as {self.fallback_encoding}"
            )
            text = data.decode(self.fallback_encoding)

        # utf-8 files saved by Windows editors start with a BOM
        text = text.lstrip("\ufeff")
        logger.debug(f"Loaded {source_id} ({len(text)} characters)")
        return text


def gather_input_files(inputs: Iterable[Union[str, Path]], recursive: bool = False,
                       loader: Optional[DocumentLoader] = None) -> List[str]:
    """Expand files and folders into a de-duplicated list of supported reports."""
    loader = loader or DocumentLoader()
    collected = []

    for path in inputs:
        path = str(path)
        if os.path.isfile(path):
            if loader.is_supported(path):
                collected.append(path)
            else:
                logger.warning(f"Ignored unsupported file: {path}")
        elif os.path.isdir(path):
            for root, _, filenames in os.walk(path):
                for name in filenames:
                    if loader.is_supported(name):
                        collected.append(os.path.join(root, name))
                if not recursive:
                    break
        else:
            logger.warning(f"Path not found: {path}")

    return sorted(set(collected))
