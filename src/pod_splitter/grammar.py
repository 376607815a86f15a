"""POD grammar configuration and the paragraph boundary rule."""

import os
import re
from dataclasses import dataclass
from typing import List

COMMAND_MARKER = "="

PATTERN_FLAGS = re.MULTILINE | re.DOTALL | re.VERBOSE

# A paragraph ends at a blank line, at a line break followed by another
# command (lookahead only, the command is left for the next match), or at the
# end of the input. Allowing the lookahead is more lenient than perlpodspec,
# which wants a blank line after every paragraph.
PARAGRAPH_END = rf"""
    (?:
        \n{{2,}}
      | \n+ (?= ^{COMMAND_MARKER}\w+ )
      | \Z
    )
"""

_DIRECTIVE_NAME_PATTERN = re.compile(r"^\w+$")


@dataclass
class GrammarConfig:
    """Configuration for the command grammar."""

    terminator: str = "cut"
    cut_like_commands: List[str] = None

    def __post_init__(self):
        if self.cut_like_commands is None:
            self.cut_like_commands = [self.terminator]
        elif self.terminator not in self.cut_like_commands:
            self.cut_like_commands = [self.terminator] + list(self.cut_like_commands)

        for name in self.cut_like_commands:
            if not _DIRECTIVE_NAME_PATTERN.match(name):
                raise ValueError(f"Invalid directive name: {name!r}")

    @classmethod
    def from_env(cls) -> "GrammarConfig":
        """Create configuration from environment variables."""
        terminator = os.getenv("POD_TERMINATOR", "cut").strip()
        cut_like = os.getenv("POD_CUT_LIKE_COMMANDS", terminator)
        return cls(
            terminator=terminator,
            cut_like_commands=[name.strip() for name in cut_like.split(",") if name.strip()],
        )

    def cut_like_alternation(self) -> str:
        """Regex alternation of every directive parsed with the terminator grammar."""
        # Longest first so that a name is never shadowed by its own prefix
        names = sorted(self.cut_like_commands, key=len, reverse=True)
        return "|".join(re.escape(name) for name in names)


def compile_pattern(source: str, binary: bool = False) -> re.Pattern:
    """Compile a grammar pattern for ``str`` input, or for ``bytes`` input if binary."""
    if binary:
        return re.compile(source.encode("ascii"), PATTERN_FLAGS)
    return re.compile(source, PATTERN_FLAGS)


class BoundaryClassifier:
    """Answers whether a paragraph ends at a given offset."""

    def __init__(self):
        self._patterns = {
            False: compile_pattern(PARAGRAPH_END),
            True: compile_pattern(PARAGRAPH_END, binary=True),
        }

    def boundary_at(self, text, pos: int) -> int:
        """
        Return the offset just past the paragraph boundary starting at pos.

        Args:
            text: Buffer being scanned (str or bytes)
            pos: Offset to test

        Returns:
            End offset of the boundary, or -1 when no paragraph ends at pos
        """
        match = self._patterns[not isinstance(text, str)].match(text, pos)
        return match.end() if match else -1

    def ends_paragraph(self, text, pos: int) -> bool:
        """Check whether a paragraph terminates at pos."""
        return self.boundary_at(text, pos) != -1
