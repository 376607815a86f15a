"""Command paragraph matcher."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .grammar import COMMAND_MARKER, PARAGRAPH_END, GrammarConfig, compile_pattern
from .pieces import CommandPiece


class CommandVariant(str, Enum):
    """Which command grammar produced a match."""

    GENERAL = "general"
    TERMINATOR = "terminator"


@dataclass
class CommandMatch:
    """A command found by the matcher."""

    piece: CommandPiece
    variant: CommandVariant
    closes_block: bool

    @property
    def start_pos(self) -> int:
        return self.piece.start_pos

    @property
    def end_pos(self) -> int:
        return self.piece.end_pos


def build_command_pattern(config: GrammarConfig) -> str:
    """
    Build the combined command pattern for a grammar configuration.

    The general grammar splits ``=head1 Title`` into name, level and text and
    ends at a paragraph boundary. A directive with nothing after its name on
    the first line ends at that line's break. The terminator grammar covers
    ``=cut`` and friends: the line itself plus at most one further line
    break, no blank line required.
    """
    cut_like = config.cut_like_alternation()
    return rf"""
        (?P<general>
            ^{COMMAND_MARKER}
            (?!{cut_like})
            (?P<name>\w+?)
            (?P<level>\d*)
            (?:
                [ \t]+ (?P<text>.*?) {PARAGRAPH_END}
              | {PARAGRAPH_END}
              | \n
            )
        )
      |
        (?P<terminator>
            ^{COMMAND_MARKER}
            (?P<cut_name>{cut_like})
            (?:
                [ \t]+ (?P<cut_text>.*?) \n
              | \n
            )
            \n?
        )
    """


class CommandMatcher:
    """Finds command paragraphs in a buffer."""

    def __init__(self, config: GrammarConfig = None):
        self.config = config or GrammarConfig()
        source = build_command_pattern(self.config)
        self._patterns = {
            False: compile_pattern(source),
            True: compile_pattern(source, binary=True),
        }

    def search(self, text, pos: int) -> Optional[CommandMatch]:
        """
        Find the next command at or after pos.

        Args:
            text: Buffer being scanned (str or bytes)
            pos: Offset to start searching from

        Returns:
            The first command found, or None when no command follows pos
        """
        match = self._patterns[not isinstance(text, str)].search(text, pos)
        if match is None:
            return None
        return self._to_command_match(match)

    def match(self, text, pos: int) -> Optional[CommandMatch]:
        """Match a command anchored at pos."""
        match = self._patterns[not isinstance(text, str)].match(text, pos)
        if match is None:
            return None
        return self._to_command_match(match)

    def _to_command_match(self, match) -> CommandMatch:
        empty = match.string[:0]

        if match.group("terminator") is not None:
            variant = CommandVariant.TERMINATOR
            directive = match.group("cut_name")
            level = None
            text = match.group("cut_text")
            start, end = match.span("terminator")
        else:
            variant = CommandVariant.GENERAL
            directive = match.group("name")
            level = match.group("level")
            text = match.group("text")
            start, end = match.span("general")

        if isinstance(directive, bytes):
            directive = directive.decode("ascii")

        piece = CommandPiece(
            raw=match.string[start:end],
            start_pos=start,
            end_pos=end,
            directive=directive,
            level=int(level) if level else None,
            text=text if text is not None else empty,
        )

        # Cut-like directives share the grammar, but only the terminator ends a block
        closes_block = (
            variant is CommandVariant.TERMINATOR and directive == self.config.terminator
        )
        return CommandMatch(piece=piece, variant=variant, closes_block=closes_block)
