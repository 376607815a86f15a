"""Body paragraph matcher for text inside an open POD block."""

from typing import Optional

from .grammar import COMMAND_MARKER, PARAGRAPH_END, compile_pattern
from .pieces import ParagraphPiece

# Lines that do not start with the command marker, as few as needed to reach
# a paragraph boundary.
BODY_PARAGRAPH = rf"""
    (?P<paragraph>
        (?: ^[^{COMMAND_MARKER}] .*? $ )+?
    )
    {PARAGRAPH_END}
"""


class ParagraphMatcher:
    """Matches one body paragraph anchored at the cursor."""

    def __init__(self):
        self._patterns = {
            False: compile_pattern(BODY_PARAGRAPH),
            True: compile_pattern(BODY_PARAGRAPH, binary=True),
        }

    def match(self, text, pos: int) -> Optional[ParagraphPiece]:
        """
        Match a body paragraph starting exactly at pos.

        Args:
            text: Buffer being scanned (str or bytes)
            pos: Cursor inside an open POD block

        Returns:
            ParagraphPiece, or None if a command or the end of input is next
        """
        match = self._patterns[not isinstance(text, str)].match(text, pos)
        if match is None:
            return None

        return ParagraphPiece(
            raw=match.group(0),
            start_pos=match.start(),
            end_pos=match.end(),
            paragraph=match.group("paragraph"),
        )
