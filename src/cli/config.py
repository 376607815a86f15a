"""Configuration management for the pod-splitter CLI."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from src.pod_splitter.file_scanner import ScannerConfig
from src.pod_splitter.grammar import GrammarConfig


class Config:
    """Configuration loaded from .env file."""

    def __init__(self, env_file: Optional[str] = None):
        """Load configuration from .env file."""
        if env_file:
            load_dotenv(env_file)
        else:
            # Load from project root .env
            project_root = Path(__file__).parent.parent.parent
            env_path = project_root / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        # Source discovery
        self.file_extensions = [
            ext.strip() for ext in os.getenv("POD_FILE_EXTENSIONS", ".pl,.pm,.pod,.t").split(",") if ext.strip()
        ]
        self.skip_hidden_files = os.getenv("SKIP_HIDDEN_FILES", "true").lower() == "true"
        self.encoding = os.getenv("POD_ENCODING", "utf-8")

        # Grammar
        self.grammar = GrammarConfig.from_env()

    def scanner_config(self) -> ScannerConfig:
        """Directory scanner settings derived from this configuration."""
        return ScannerConfig(
            skip_hidden_files=self.skip_hidden_files,
            supported_extensions=[ext.lower() for ext in self.file_extensions],
        )
