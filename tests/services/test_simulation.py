"""End-to-end tests for SimulationService."""

from __future__ import annotations

from pathlib import Path

from tests.conftest import RunFiles
from zooctl.config.settings import ZooSettings
from zooctl.domain.zoo import Zoo
from zooctl.services.result import ServiceResult
from zooctl.services.simulation import RunPaths, SimulationService

SEPARATOR = "*" * 35


def _run(paths: list[Path], settings: ZooSettings) -> tuple[Zoo, ServiceResult]:
    zoo = Zoo()
    result = SimulationService(zoo, settings).run(RunPaths(*paths))
    return zoo, result


class TestSimulation:
    def test_full_log(self, run_files: RunFiles, settings: ZooSettings) -> None:
        paths = run_files(
            animals=["Lion,Leo,5", "Tiger,Shere,3"],
            persons=["Personnel,Paul,P1", "Visitor,Vera,V1"],
            foods=["Meat,30.0"],
            commands=["Feed Animal,P1,Leo,2", "Feed Animal,V1,Leo,1", "List Food Stock"],
        )
        zoo, result = _run(paths, settings)

        assert result.ok
        assert result.data["commands"] == 3
        assert result.data["failed"] == 1
        assert result.data["animals"] == 1
        assert result.data["people"] == 2

        log = paths[4].read_text(encoding="utf-8").splitlines()
        assert log == [
            SEPARATOR,
            "***Initializing Animal information***",
            "Added new Lion with name Leo aged 5.",
            SEPARATOR,
            "***Initializing Visitor and Personnel information***",
            "Added new Personnel with id P1 and name Paul.",
            "Added new Visitor with id V1 and name Vera.",
            SEPARATOR,
            "***Initializing Food Stock***",
            "There are 30.000 kg of Meat in stock",
            SEPARATOR,
            "***Processing new Command***",
            "Paul attempts to feed Leo.",
            "Leo has been given 10.000 kgs of meat",
            SEPARATOR,
            "***Processing new Command***",
            "Vera tried to feed Leo",
            "Error: Visitors do not have the authority to feed animals.",
            SEPARATOR,
            "***Processing new Command***",
            "Listing available Food Stock:",
            "Plant: 0.000 kgs",
            "Fish: 0.000 kgs",
            "Meat: 20.000 kgs",
        ]
        assert result.data["log_lines"] == len(log)
        assert result.lines == log

    def test_insufficient_stock_scenario(self, run_files: RunFiles, settings: ZooSettings) -> None:
        paths = run_files(
            animals=["Lion,Leo,5"],
            persons=["Personnel,Paul,P1"],
            foods=["Meat,5.0"],
            commands=["Feed Animal,P1,Leo,2", "List Food Stock"],
        )
        _, result = _run(paths, settings)
        log = paths[4].read_text(encoding="utf-8")
        assert "Error: Not enough Meat" in log
        assert "Meat: 5.000 kgs" in log
        assert result.data["failures"] == {"INSUFFICIENT_STOCK": 1}

    def test_visitation_scenario(self, run_files: RunFiles, settings: ZooSettings) -> None:
        paths = run_files(
            animals=["Lion,Leo,5"],
            persons=["Personnel,Paul,P1"],
            commands=["Animal Visitation,P1,Leo"],
        )
        _run(paths, settings)
        log = paths[4].read_text(encoding="utf-8").splitlines()
        assert log[-2:] == [
            "Paul started cleaning Leo's habitat.",
            "Cleaning Leo's habitat: Removing bones and refreshing sand.",
        ]

    def test_missing_input_is_fatal_and_creates_no_log(
        self, run_files: RunFiles, settings: ZooSettings
    ) -> None:
        paths = run_files()
        paths[2].unlink()
        _, result = _run(paths, settings)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "IO_ERROR"
        assert result.error.detail["path"] == str(paths[2])
        assert not paths[4].exists()

    def test_unwritable_output_is_fatal(
        self, run_files: RunFiles, settings: ZooSettings, tmp_path: Path
    ) -> None:
        paths = run_files()
        paths[4] = tmp_path / "missing-dir" / "output.txt"
        _, result = _run(paths, settings)
        assert result.error is not None
        assert result.error.code == "IO_ERROR"

    def test_malformed_records_become_warnings(
        self, run_files: RunFiles, settings: ZooSettings
    ) -> None:
        paths = run_files(animals=["Lion,Leo,five", "Lion,Simba,3"], foods=["Meat,x"])
        _, result = _run(paths, settings)
        assert result.ok
        assert len(result.warnings) == 2
        assert "Added new Lion with name Simba aged 3." in paths[4].read_text(encoding="utf-8")

    def test_strict_loading_aborts_before_log(self, run_files: RunFiles, tmp_path: Path) -> None:
        (tmp_path / "zooctl.toml").write_text("[loading]\nstrict = true\n")
        settings = ZooSettings.from_cli(search_root=tmp_path)
        paths = run_files(animals=["Lion,Leo,five"])
        _, result = _run(paths, settings)
        assert result.error is not None
        assert result.error.code == "INVALID_RECORD"
        assert not paths[4].exists()
