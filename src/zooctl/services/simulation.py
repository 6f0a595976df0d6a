"""SimulationService — one full run from input files to activity log.

Pipeline: READ → LOAD → OPEN LOG → WRITE LOAD SECTIONS → REPLAY → CLOSE

All four inputs are read and loaded before the activity log is created,
so an unreadable input (or a strict-mode load failure) leaves no partial
log behind.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import structlog

from zooctl.infrastructure.activity_log import ActivityLog
from zooctl.infrastructure.records import read_records
from zooctl.services.base import BaseService
from zooctl.services.dispatch import CommandService
from zooctl.services.loader import LoadService
from zooctl.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RunPaths:
    """The five files of a run, in CLI argument order."""

    animals: Path
    persons: Path
    foods: Path
    commands: Path
    output: Path

    def inputs(self) -> dict[str, Path]:
        return {
            "animals": self.animals,
            "persons": self.persons,
            "foods": self.foods,
            "commands": self.commands,
        }


class SimulationService(BaseService):
    """Loads the zoo, replays commands, and writes the activity log."""

    def run(self, paths: RunPaths) -> ServiceResult:
        op = "run"
        encoding = self._settings.log.encoding

        # ── READ ─────────────────────────────────────────────
        records: dict[str, list[str]] = {}
        for name, path in paths.inputs().items():
            try:
                records[name] = read_records(path, encoding=encoding)
            except (OSError, UnicodeDecodeError) as exc:
                return _io_error(op, path, exc)

        # ── LOAD ─────────────────────────────────────────────
        loader = LoadService(self._zoo, self._settings)
        loads = [
            loader.load_animals(records["animals"]),
            loader.load_persons(records["persons"]),
            loader.load_foods(records["foods"]),
        ]
        warnings = [w for result in loads for w in result.warnings]
        for result in loads:
            if not result.ok:
                return ServiceResult(ok=False, op=op, warnings=warnings, error=result.error)

        # ── OPEN LOG / REPLAY / CLOSE ────────────────────────
        activity = ActivityLog(paths.output, encoding=encoding)
        try:
            activity.open()
        except OSError as exc:
            return _io_error(op, paths.output, exc)

        written: list[str] = []

        def append(lines: Iterable[str]) -> None:
            batch = list(lines)
            activity.extend(batch)
            written.extend(batch)

        with activity:
            for result in loads:
                append(result.lines)
            summary = CommandService(self._zoo, self._settings).run(
                records["commands"], sink=append
            )

        log.debug("run.complete", output=str(paths.output), lines=activity.line_count)
        return ServiceResult(
            ok=True,
            op=op,
            lines=written,
            data={
                "output": str(paths.output),
                "animals": len(self._zoo.animals),
                "people": len(self._zoo.people),
                "log_lines": activity.line_count,
                **summary.data,
            },
            warnings=warnings,
        )


def _io_error(op: str, path: Path, exc: Exception) -> ServiceResult:
    log.error("run.io_error", path=str(path), error=str(exc))
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code="IO_ERROR",
            message=f"IO Error: {exc}",
            detail={"path": str(path)},
        ),
    )
