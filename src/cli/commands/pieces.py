"""Pieces command - dump the pieces of a source file as JSON."""

import json
import logging

from src.cli.config import Config
from src.pod_splitter.parser import PodFileParser
from src.pod_splitter.pieces import pod_pieces
from src.pod_splitter.scanner import PodScanner

logger = logging.getLogger(__name__)


def pieces_command(config: Config, file_path: str, pod_only: bool = False) -> int:
    """Print the pieces found in file_path."""
    parser = PodFileParser(PodScanner(config.grammar), encoding=config.encoding)

    result = parser.parse_file(file_path)
    if not result.success:
        logger.error(f"❌ {result.error}")
        return 1

    pieces = pod_pieces(result.pieces) if pod_only else result.pieces
    logger.info(f"Found {len(pieces)} pieces in {file_path}")

    print(json.dumps([piece.to_dict() for piece in pieces], indent=2, ensure_ascii=False))
    return 0
