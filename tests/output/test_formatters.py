"""Tests for format_result and OutputSettings."""

import json

from zooctl.output.console import ZOO_THEME
from zooctl.output.formatters import OutputSettings, format_result
from zooctl.services.result import ServiceError, ServiceResult


def _ok() -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="run",
        lines=["Leo has been given 10.000 kgs of meat"],
        data={"output": "out.txt", "commands": 2, "failures": {"UNAUTHORIZED": 1}},
    )


def _err() -> ServiceResult:
    return ServiceResult(
        ok=False,
        op="run",
        error=ServiceError(code="IO_ERROR", message="IO Error: missing", detail={"path": "a"}),
    )


class TestJson:
    def test_excludes_lines_by_default(self) -> None:
        data = json.loads(format_result(_ok(), settings=OutputSettings(json_output=True)))
        assert data["ok"] is True
        assert data["data"]["commands"] == 2
        assert "lines" not in data

    def test_verbose_includes_lines(self) -> None:
        settings = OutputSettings(json_output=True, verbose=True)
        data = json.loads(format_result(_ok(), settings=settings))
        assert data["lines"] == ["Leo has been given 10.000 kgs of meat"]

    def test_error(self) -> None:
        data = json.loads(format_result(_err(), settings=OutputSettings(json_output=True)))
        assert data["error"]["code"] == "IO_ERROR"


class TestQuiet:
    def test_prints_output_path(self) -> None:
        assert format_result(_ok(), settings=OutputSettings(quiet=True)) == "out.txt"

    def test_error(self) -> None:
        assert format_result(_err(), settings=OutputSettings(quiet=True)) == (
            "ERROR: run — IO Error: missing"
        )


class TestHuman:
    def test_default_settings(self) -> None:
        output = format_result(_ok())
        assert output.startswith("OK")
        assert "run" in output
        assert "commands: 2" in output
        assert '{"UNAUTHORIZED":1}' in output
        assert "Leo has been given" not in output

    def test_verbose_shows_lines(self) -> None:
        output = format_result(_ok(), settings=OutputSettings(verbose=True))
        assert "Leo has been given 10.000 kgs of meat" in output

    def test_error(self) -> None:
        output = format_result(_err())
        assert output.startswith("ERROR")
        assert "IO Error: missing" in output
        assert "path" not in output

    def test_verbose_error_detail(self) -> None:
        output = format_result(_err(), settings=OutputSettings(verbose=True))
        assert "path: a" in output


def test_theme_defines_only_rendered_styles() -> None:
    zoo_styles = {name for name in ZOO_THEME.styles if name.startswith("zoo.")}
    assert zoo_styles == {"zoo.ok", "zoo.error", "zoo.op", "zoo.key"}
