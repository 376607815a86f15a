"""Data classes for the pieces produced by a POD scan."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Iterable, List, Optional, Union

Text = Union[str, bytes]


class PieceKind(str, Enum):
    """Discriminant for the three kinds of piece."""

    COMMAND = "command"
    PARAGRAPH = "paragraph"
    NON_POD = "non_pod"


@dataclass
class Piece:
    """One classified span of the scanned buffer.

    Offsets index the original buffer (code points for ``str``, bytes for
    ``bytes``); ``end_pos`` is exclusive. ``removed`` is filled in by the
    stripper with the exact text it cut out of the buffer.
    """

    kind: ClassVar[PieceKind]

    raw: Text
    start_pos: int
    end_pos: int
    removed: Optional[Text] = field(default=None, kw_only=True, repr=False, compare=False)

    @property
    def is_pod(self) -> bool:
        return self.kind is not PieceKind.NON_POD

    @property
    def length(self) -> int:
        return self.end_pos - self.start_pos

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary view, suitable for JSON output."""
        data = {
            "kind": self.kind.value,
            "start_pos": self.start_pos,
            "end_pos": self.end_pos,
            "raw": self.raw,
        }
        data.update(self._extra_fields())
        return data

    def _extra_fields(self) -> Dict[str, Any]:
        return {}


@dataclass
class CommandPiece(Piece):
    """A command paragraph such as ``=head1 NAME``."""

    kind: ClassVar[PieceKind] = PieceKind.COMMAND

    directive: str = ""
    level: Optional[int] = None  # numeric suffix, e.g. 1 for =head1
    text: Text = ""

    def _extra_fields(self) -> Dict[str, Any]:
        return {"directive": self.directive, "level": self.level, "text": self.text}


@dataclass
class ParagraphPiece(Piece):
    """A body paragraph inside an open POD block."""

    kind: ClassVar[PieceKind] = PieceKind.PARAGRAPH

    paragraph: Text = ""

    def _extra_fields(self) -> Dict[str, Any]:
        return {"paragraph": self.paragraph}


@dataclass
class NonPodPiece(Piece):
    """Anything not claimed by a command or body paragraph."""

    kind: ClassVar[PieceKind] = PieceKind.NON_POD


def pod_pieces(pieces: Iterable[Piece]) -> List[Piece]:
    """Return the command and body paragraph pieces, in order."""
    return [piece for piece in pieces if piece.is_pod]


def non_pod_pieces(pieces: Iterable[Piece]) -> List[NonPodPiece]:
    """Return the non-POD pieces, in order."""
    return [piece for piece in pieces if not piece.is_pod]
