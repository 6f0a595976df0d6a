"""ActivityLog — the append-only output file of a run.

INVARIANT: The file is opened once and closed exactly once, however many
commands failed in between.  Use it as a context manager.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from types import TracebackType
from typing import TextIO


class ActivityLog:
    """Append-only line sink backed by a text file."""

    def __init__(self, path: Path, *, encoding: str = "utf-8") -> None:
        self.path = path
        self._encoding = encoding
        self._handle: TextIO | None = None
        self.line_count = 0

    def open(self) -> ActivityLog:
        """Create (or truncate) the file.

        Raises:
            OSError: If the file cannot be created.
        """
        if self._handle is None:
            self._handle = self.path.open("w", encoding=self._encoding, newline="\n")
        return self

    @property
    def closed(self) -> bool:
        return self._handle is None

    def write(self, line: str) -> None:
        if self._handle is None:
            msg = f"Activity log {self.path} is not open"
            raise ValueError(msg)
        self._handle.write(line + "\n")
        self.line_count += 1

    def extend(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write(line)

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> ActivityLog:
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
