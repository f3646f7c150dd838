"""
CLI Utilities

Project discovery helpers for Lagoon CLI.
"""

from pathlib import Path
from typing import Optional

from lagoon_cli.constants import LAGOON_YML


def find_project_root(start: Optional[Path] = None) -> Optional[Path]:
    """
    Find the nearest directory containing .lagoon.yml.

    Args:
        start: Directory to start from (defaults to the working directory)

    Returns:
        Project root, or None if no .lagoon.yml exists up to the filesystem root
    """
    current = Path(start or Path.cwd()).resolve()
    for directory in [current, *current.parents]:
        if (directory / LAGOON_YML).is_file():
            return directory
    return None
