"""Environment variable loading utilities.

This module provides consistent .env handling for the HTTP handler and CLI.
"""

from __future__ import annotations
from pathlib import Path
from typing import List, Optional
import logging

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _find_env_files(start: Path) -> List[Path]:
    """Collect .env files from the filesystem root down to ``start``."""
    env_paths = []
    for directory in [*reversed(start.parents), start]:
        candidate = directory / ".env"
        if candidate.exists():
            env_paths.append(candidate)
    return env_paths


def load_env(env_file: Optional[str] = None, override: bool = False) -> None:
    """Load environment variables from .env file.

    Args:
        env_file: Path to .env file. If None, searches for .env in current
                 directory and parent directories.
        override: Whether to override existing environment variables.
    """
    if env_file:
        env_path = Path(env_file)
        env_paths = [env_path] if env_path.exists() else []
    else:
        env_paths = _find_env_files(Path.cwd())

    if not env_paths:
        logger.debug("No .env file found, using system environment")
        return

    for path in env_paths:
        load_dotenv(path, override=override)
        logger.debug(f"Loaded environment from {path}")
