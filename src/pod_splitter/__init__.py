"""POD splitter for separating embedded documentation from source text."""

from .command_matcher import CommandMatch, CommandMatcher, CommandVariant
from .file_scanner import DirectoryScanner, ScannerConfig
from .grammar import BoundaryClassifier, GrammarConfig
from .paragraph_matcher import ParagraphMatcher
from .parser import ParseResult, PodFileParser
from .pieces import (
    CommandPiece,
    NonPodPiece,
    ParagraphPiece,
    Piece,
    PieceKind,
    non_pod_pieces,
    pod_pieces,
)
from .scanner import PodScanner, scan, scan_and_strip
from .stripper import PodStripper, reconstruct, strip

__all__ = [
    "BoundaryClassifier",
    "CommandMatch",
    "CommandMatcher",
    "CommandPiece",
    "CommandVariant",
    "DirectoryScanner",
    "GrammarConfig",
    "NonPodPiece",
    "ParagraphMatcher",
    "ParagraphPiece",
    "ParseResult",
    "Piece",
    "PieceKind",
    "PodFileParser",
    "PodScanner",
    "PodStripper",
    "ScannerConfig",
    "non_pod_pieces",
    "pod_pieces",
    "reconstruct",
    "scan",
    "scan_and_strip",
    "strip",
]
