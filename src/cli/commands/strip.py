"""Strip command - print a source file without its POD."""

import logging
import sys

from src.cli.config import Config
from src.pod_splitter.parser import PodFileParser
from src.pod_splitter.scanner import PodScanner

logger = logging.getLogger(__name__)


def strip_command(config: Config, file_path: str) -> int:
    """Print file_path with every command and body paragraph removed."""
    parser = PodFileParser(PodScanner(config.grammar), encoding=config.encoding)

    result = parser.parse_file(file_path)
    if not result.success:
        logger.error(f"❌ {result.error}")
        return 1

    logger.info(f"Removed {len(result.content) - len(result.stripped)} characters of POD")
    sys.stdout.write(result.stripped)
    return 0
