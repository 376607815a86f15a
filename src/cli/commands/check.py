"""Check command - verify the strip/reconstruct round trip on source files."""

import logging
from pathlib import Path
from typing import Iterator, List

from src.cli.config import Config
from src.pod_splitter.file_scanner import DirectoryScanner
from src.pod_splitter.parser import PodFileParser
from src.pod_splitter.scanner import PodScanner
from src.pod_splitter.stripper import PodStripper

logger = logging.getLogger(__name__)


def _expand_paths(config: Config, paths: List[str]) -> Iterator[Path]:
    """Yield files, walking any directories with the configured extensions."""
    scanner = DirectoryScanner(config.scanner_config())
    for path in paths:
        path = Path(path)
        if path.is_dir():
            for relative_path in scanner.scan_for_source_files(str(path)):
                yield path / relative_path
        else:
            yield path


def check_command(config: Config, paths: List[str]) -> int:
    """Strip and reinsert POD for every file and report whether it round-trips."""
    scanner = PodScanner(config.grammar)
    parser = PodFileParser(scanner, encoding=config.encoding)
    stripper = PodStripper(scanner)

    checked = 0
    failed = 0

    for file_path in _expand_paths(config, paths):
        result = parser.parse_file(file_path)
        if not result.success:
            logger.error(f"❌ {result.error}")
            print(f"not ok - {file_path}")
            failed += 1
            continue

        rebuilt = stripper.reconstruct(result.stripped, result.pieces)
        checked += 1

        if rebuilt == result.content:
            print(f"ok - {file_path}")
        else:
            print(f"not ok - {file_path}")
            failed += 1

    logger.info(f"Checked {checked} files, {failed} failed")
    return 1 if failed else 0
