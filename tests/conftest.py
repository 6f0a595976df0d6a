"""Shared pytest fixtures and test helpers for zooctl tests."""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from pathlib import Path

import pytest
from click.testing import CliRunner

from zooctl.config.settings import ZooSettings
from zooctl.domain.animals import Animal
from zooctl.domain.people import Person
from zooctl.domain.types import Role, Species
from zooctl.domain.zoo import Zoo

SEPARATOR = "*" * 35
COMMAND_HEADER = [SEPARATOR, "***Processing new Command***"]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> ZooSettings:
    """Default settings, isolated from any zooctl.toml or ZOOCTL_* env vars."""
    monkeypatch.delenv("ZOOCTL_CONFIG", raising=False)
    return ZooSettings.from_cli(search_root=tmp_path)


@pytest.fixture
def zoo() -> Zoo:
    """A zoo with one animal per species, one visitor, one keeper, and no food."""
    z = Zoo()
    z.register_animal(Animal(species=Species.LION, name="Leo", age=5))
    z.register_animal(Animal(species=Species.ELEPHANT, name="Dumbo", age=20))
    z.register_animal(Animal(species=Species.PENGUIN, name="Pingu", age=4))
    z.register_animal(Animal(species=Species.CHIMPANZEE, name="Bubbles", age=10))
    z.register_person(Person(role=Role.VISITOR, name="Vera", id="V1"))
    z.register_person(Person(role=Role.PERSONNEL, name="Paul", id="P1"))
    return z


def stock(zoo: Zoo, **amounts: str) -> None:
    """Add ``Category="amount"`` pairs to the zoo's ledger."""
    for category, amount in amounts.items():
        zoo.ledger.add(category, Decimal(amount))


RunFiles = Callable[..., list[Path]]


@pytest.fixture
def run_files(tmp_path: Path) -> RunFiles:
    """Write the four input files and return all five run paths.

    Usage::

        paths = run_files(animals=["Lion,Leo,5"], commands=["List Food Stock"])
    """

    def _write(
        *,
        animals: list[str] | None = None,
        persons: list[str] | None = None,
        foods: list[str] | None = None,
        commands: list[str] | None = None,
    ) -> list[Path]:
        paths = []
        for name, lines in (
            ("animals", animals),
            ("persons", persons),
            ("foods", foods),
            ("commands", commands),
        ):
            path = tmp_path / f"{name}.txt"
            path.write_text("".join(f"{line}\n" for line in lines or []), encoding="utf-8")
            paths.append(path)
        paths.append(tmp_path / "output.txt")
        return paths

    return _write
