"""POD file parser for source files with embedded documentation."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from .pieces import Piece
from .scanner import PodScanner

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Result of parsing a source file for POD."""

    success: bool
    content: str = None
    pieces: List[Piece] = None
    stripped: str = None
    error: str = None

    @property
    def has_pod(self) -> bool:
        return bool(self.pieces) and any(piece.is_pod for piece in self.pieces)


class PodFileParser:
    """Reads source files and splits them into POD pieces."""

    def __init__(self, scanner: PodScanner = None, encoding: str = "utf-8"):
        self.scanner = scanner or PodScanner()
        self.encoding = encoding

    def parse_file(self, file_path: Union[str, Path]) -> ParseResult:
        """
        Parse a source file for POD.

        Args:
            file_path: Path to a Perl module, script or .pod file

        Returns:
            ParseResult with pieces and stripped text, or error information
        """
        file_path = Path(file_path)

        if not file_path.exists():
            return ParseResult(success=False, error=f"File not found: {file_path}")

        if not file_path.is_file():
            return ParseResult(success=False, error=f"Path is not a file: {file_path}")

        try:
            # newline="" keeps line endings untouched so offsets match the file
            with open(file_path, "r", encoding=self.encoding, newline="") as f:
                content = f.read()
        except UnicodeDecodeError as e:
            return ParseResult(
                success=False, error=f"Unable to read file as {self.encoding}: {e}"
            )
        except OSError as e:
            return ParseResult(success=False, error=f"Error reading file: {e}")

        return self.parse_content(content)

    def parse_content(self, content_text: str) -> ParseResult:
        """
        Parse a string for POD.

        Args:
            content_text: Source text

        Returns:
            ParseResult with pieces and stripped text
        """
        if content_text is None:
            return ParseResult(success=False, error="Missing content")

        pieces, stripped = self.scanner.scan_and_strip(content_text)
        logger.debug(f"Parsed {len(pieces)} pieces")

        return ParseResult(
            success=True,
            content=content_text,
            pieces=pieces,
            stripped=stripped,
        )
