"""
Module used to import text corpora
"""

import os
from collections.abc import Iterator
from pathlib import Path

from constants import DATA


def resolve_path(path: str | os.PathLike[str]) -> Path:
    """
    Resolve a corpus path.

    Existing paths are used as given; otherwise the path is looked up in the
    DATA directory, so `tinyTale.txt` finds the bundled resource.
    """
    candidate = Path(path)
    if candidate.exists():
        return candidate
    bundled = DATA / candidate
    if bundled.exists():
        return bundled
    raise FileNotFoundError(f"No such corpus: {path} (also looked in {DATA})")


def path_to_lines(path: str | os.PathLike[str]) -> Iterator[str]:
    """Lazily yield the lines of a text file."""
    with open(resolve_path(path), "r", encoding="utf-8") as file:
        yield from file
