"""Strip POD pieces out of a buffer and put them back again."""

import logging
from typing import List, Optional, Sequence, Tuple

from .pieces import Piece, Text
from .scanner import PodScanner, validate_text

logger = logging.getLogger(__name__)


def _splice(buffer, start: int, length: int, replacement):
    """
    Replace buffer[start:start + length] with replacement.

    A bytearray is edited in place; str and bytes produce a new value.

    Returns:
        Tuple of (resulting buffer, text that was replaced)
    """
    end = start + length
    if start < 0 or end > len(buffer):
        raise ValueError(
            f"Span {start}:{end} is outside of a buffer of length {len(buffer)}"
        )

    if isinstance(buffer, bytearray):
        replaced = bytes(buffer[start:end])
        buffer[start:end] = replacement
        return buffer, replaced

    replaced = buffer[start:end]
    return buffer[:start] + replacement + buffer[end:], replaced


class PodStripper:
    """Removes POD pieces from text and reinserts them."""

    def __init__(self, scanner: PodScanner = None):
        self.scanner = scanner or PodScanner()

    def strip(self, text, pieces: Optional[List[Piece]] = None) -> Tuple[Text, List[Piece]]:
        """
        Return text with every POD piece removed.

        Pieces are removed in ascending order; each removal shifts the rest
        of the buffer left, so later offsets are corrected by the running
        shrinkage. Every removed piece gets the text it covered recorded in
        ``removed``.

        Args:
            text: str or bytes (copied) or bytearray (edited in place)
            pieces: Pieces from a previous scan of text; scanned if omitted

        Returns:
            Tuple of (stripped text, annotated pieces)
        """
        if text is None:
            raise ValueError("Missing text parameter")

        buffer = text if isinstance(text, bytearray) else validate_text(text)
        if pieces is None:
            pieces = self.scanner.scan(buffer)

        shrinkage = 0
        for piece in pieces:
            if not piece.is_pod:
                continue

            new_start = piece.start_pos - shrinkage
            buffer, piece.removed = _splice(
                buffer, new_start, piece.length, buffer[:0]
            )
            shrinkage += piece.length

        logger.debug(f"Stripped {shrinkage} characters of POD")
        return buffer, pieces

    def reconstruct(self, stripped, pieces: Sequence[Piece]) -> Text:
        """
        Rebuild the original text from stripped text and its pieces.

        Pieces are reinserted at their original offsets in ascending order.
        Each insertion restores everything before the next piece, so the
        original offsets stay valid against the growing buffer.

        Args:
            stripped: Output of strip (a bytearray is edited in place)
            pieces: Pieces annotated by strip

        Returns:
            The original text
        """
        if stripped is None:
            raise ValueError("Missing stripped text parameter")

        buffer = stripped if isinstance(stripped, bytearray) else validate_text(stripped)

        for piece in pieces:
            if not piece.is_pod:
                continue

            fragment = piece.removed if piece.removed is not None else piece.raw
            buffer, _ = _splice(buffer, piece.start_pos, 0, fragment)

        return buffer


_default_stripper = PodStripper()


def strip(text, pieces: Optional[List[Piece]] = None) -> Tuple[Text, List[Piece]]:
    """Strip POD from text with the default grammar."""
    return _default_stripper.strip(text, pieces)


def reconstruct(stripped, pieces: Sequence[Piece]) -> Text:
    """Reinsert stripped POD pieces."""
    return _default_stripper.reconstruct(stripped, pieces)
