"""Human/JSON/quiet rendering of ServiceResult for the terminal.

The activity log itself is written by the simulation service; this
module only renders the run summary.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from zooctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from zooctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        exclude = None if settings.verbose else {"lines"}
        return result.model_dump_json(indent=2, exclude=exclude)
    if settings.quiet:
        return _render_quiet(result)
    return _render_human(result, verbose=settings.verbose)


def _render_quiet(result: ServiceResult) -> str:
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return str(result.data.get("output", f"OK: {result.op}"))


def _render_human(result: ServiceResult, *, verbose: bool) -> str:
    console = create_console()
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        console.print(Text("ERROR", style="zoo.error"), Text(f"  {result.op}", style="zoo.op"))
        console.print(f"  {msg}", markup=False)
        if verbose and result.error and result.error.detail:
            _render_mapping(console, result.error.detail)
        return get_output(console).rstrip("\n")

    console.print(Text("OK", style="zoo.ok"), Text(f"  {result.op}", style="zoo.op"))
    _render_mapping(console, result.data)
    if verbose:
        for line in result.lines:
            console.print(f"  {line}", markup=False)
    return get_output(console).rstrip("\n")


def _render_mapping(console: Any, data: dict[str, Any]) -> None:
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        line = Text(f"  {key}: ", style="zoo.key")
        line.append(str(value))
        console.print(line)
