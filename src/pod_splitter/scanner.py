"""Scan driver: splits a buffer into command, paragraph and non-POD pieces."""

import logging
from typing import List, Tuple

from .command_matcher import CommandMatcher
from .grammar import GrammarConfig
from .paragraph_matcher import ParagraphMatcher
from .pieces import NonPodPiece, Piece, Text

logger = logging.getLogger(__name__)


def validate_text(text) -> Text:
    """Reject missing or unsupported input; snapshot mutable buffers."""
    if text is None:
        raise ValueError("Missing text parameter")
    if isinstance(text, bytearray):
        return bytes(text)
    if not isinstance(text, (str, bytes)):
        raise TypeError(f"Expected str, bytes or bytearray, got {type(text).__name__}")
    return text


class PodScanner:
    """Scans text for POD and returns an ordered list of pieces."""

    def __init__(self, config: GrammarConfig = None):
        self.config = config or GrammarConfig()
        self.command_matcher = CommandMatcher(self.config)
        self.paragraph_matcher = ParagraphMatcher()

    def scan(self, text) -> List[Piece]:
        """
        Split text into pieces covering the whole buffer.

        Outside a POD block the scanner searches forward for the next command;
        everything before it becomes a non-POD piece. After any command other
        than the terminator, body paragraphs are drained until the next
        command or the end of input.

        Args:
            text: Buffer to scan (str, bytes or bytearray)

        Returns:
            Pieces in offset order; concatenating their raw text gives the input
        """
        text = validate_text(text)

        pieces: List[Piece] = []
        pos = 0

        while True:
            command = self.command_matcher.search(text, pos)
            if command is None:
                break

            if command.start_pos > pos:
                pieces.append(
                    NonPodPiece(
                        raw=text[pos : command.start_pos],
                        start_pos=pos,
                        end_pos=command.start_pos,
                    )
                )

            pieces.append(command.piece)
            pos = command.end_pos

            if command.closes_block:
                continue

            while True:
                paragraph = self.paragraph_matcher.match(text, pos)
                if paragraph is None:
                    break
                pieces.append(paragraph)
                pos = paragraph.end_pos

        if pos < len(text):
            pieces.append(NonPodPiece(raw=text[pos:], start_pos=pos, end_pos=len(text)))

        logger.debug(
            f"Scanned {len(text)} characters into {len(pieces)} pieces "
            f"({sum(1 for piece in pieces if piece.is_pod)} POD)"
        )
        return pieces

    def scan_and_strip(self, text) -> Tuple[List[Piece], Text]:
        """
        Scan text and also return a copy with all POD removed.

        Returns:
            Tuple of (annotated pieces, stripped text)
        """
        # Imported here, the stripper scans through this module
        from .stripper import PodStripper

        text = validate_text(text)
        pieces = self.scan(text)
        stripped, pieces = PodStripper(self).strip(text, pieces)
        return pieces, stripped


_default_scanner = PodScanner()


def scan(text) -> List[Piece]:
    """Scan text with the default grammar."""
    return _default_scanner.scan(text)


def scan_and_strip(text) -> Tuple[List[Piece], Text]:
    """Scan text with the default grammar and strip its POD."""
    return _default_scanner.scan_and_strip(text)
