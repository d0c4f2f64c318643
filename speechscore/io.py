"""
speechscore.io - Text input helpers.
"""

from __future__ import annotations

import sys
from pathlib import Path


def read_text(path: Path) -> str:
    """Read text file with UTF-8 encoding.

    Args:
        path: Path to text file

    Returns:
        File contents as string
    """
    with open(path, encoding="utf-8") as f:
        return f.read()


def read_transcript(source: str) -> str:
    """Read a transcript from a file path, or from stdin when source is "-"."""
    if source == "-":
        return sys.stdin.read()
    return read_text(Path(source).expanduser())
