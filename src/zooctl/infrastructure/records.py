"""Line-delimited, comma-separated record files."""

from __future__ import annotations

from pathlib import Path


def read_records(path: Path, *, encoding: str = "utf-8") -> list[str]:
    """Read *path* into a list of lines without line terminators.

    A trailing newline does not produce an empty final record.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    return path.read_text(encoding=encoding).splitlines()


def split_fields(line: str) -> list[str]:
    """Split a record into comma-separated fields with surrounding blanks removed."""
    return [part.strip() for part in line.split(",")]
