"""LoadService — populate the zoo from animal, person and food records.

Record shapes::

    species,name,age        (animals)
    role,name,id            (persons)
    category,amount         (foods)

Unknown species and roles are skipped silently.  Malformed records
(missing fields, unparsable numbers, negative amounts) are skipped with
a warning, or abort the load when ``[loading] strict`` is set.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import structlog

from zooctl.domain.animals import Animal
from zooctl.domain.people import Person
from zooctl.domain.quantity import ZERO, InvalidQuantity, format_kg, to_count, to_quantity
from zooctl.domain.types import parse_role, parse_species
from zooctl.infrastructure.records import split_fields
from zooctl.services.base import BaseService
from zooctl.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)


class MalformedRecord(ValueError):
    """A record that cannot be turned into an entity."""


# A record parser returns the log line for an accepted record, or None to skip it.
RecordParser = Callable[[list[str]], str | None]


class LoadService(BaseService):
    """Turns record lines into registered entities and ledger stock."""

    def load_animals(self, records: Iterable[str]) -> ServiceResult:
        return self._load("load_animals", "Initializing Animal information", records, self._animal)

    def load_persons(self, records: Iterable[str]) -> ServiceResult:
        return self._load(
            "load_persons",
            "Initializing Visitor and Personnel information",
            records,
            self._person,
        )

    def load_foods(self, records: Iterable[str]) -> ServiceResult:
        return self._load("load_foods", "Initializing Food Stock", records, self._food)

    # ------------------------------------------------------------------
    # Record parsers
    # ------------------------------------------------------------------

    def _animal(self, fields: list[str]) -> str | None:
        _require(fields, 3)
        species = parse_species(fields[0])
        if species is None:
            return None
        name = fields[1]
        try:
            age = to_count(fields[2])
        except InvalidQuantity as exc:
            msg = f"Invalid age: {fields[2]!r}"
            raise MalformedRecord(msg) from exc
        self._zoo.register_animal(Animal(species=species, name=name, age=age))
        return f"Added new {species} with name {name} aged {age}."

    def _person(self, fields: list[str]) -> str | None:
        _require(fields, 3)
        role = parse_role(fields[0])
        if role is None:
            return None
        name, person_id = fields[1], fields[2]
        self._zoo.register_person(Person(role=role, name=name, id=person_id))
        return f"Added new {role} with id {person_id} and name {name}."

    def _food(self, fields: list[str]) -> str | None:
        _require(fields, 2)
        category = fields[0]
        try:
            amount = to_quantity(fields[1])
        except InvalidQuantity as exc:
            raise MalformedRecord(str(exc)) from exc
        if amount < ZERO:
            msg = f"Negative amount for {category}: {fields[1]}"
            raise MalformedRecord(msg)
        self._zoo.ledger.add(category, amount)
        return f"There are {format_kg(amount)} kg of {category} in stock"

    # ------------------------------------------------------------------
    # Shared loop
    # ------------------------------------------------------------------

    def _load(
        self,
        op: str,
        title: str,
        records: Iterable[str],
        parse: RecordParser,
    ) -> ServiceResult:
        lines = self._banner(title)
        warnings: list[str] = []
        loaded = skipped = 0

        for number, record in enumerate(records, start=1):
            try:
                line = parse(split_fields(record))
            except MalformedRecord as exc:
                message = f"Malformed record at line {number}: {record!r} ({exc})"
                if self._settings.loading.strict:
                    log.error("record.malformed", op=op, line=number, record=record)
                    return ServiceResult(
                        ok=False,
                        op=op,
                        lines=lines,
                        error=ServiceError(
                            code="INVALID_RECORD",
                            message=message,
                            detail={"line": number, "record": record},
                        ),
                    )
                log.warning("record.skipped", op=op, line=number, record=record, reason=str(exc))
                warnings.append(message)
                continue
            if line is None:
                skipped += 1
                log.debug("record.unknown_tag", op=op, line=number, record=record)
                continue
            lines.append(line)
            loaded += 1

        return ServiceResult(
            ok=True,
            op=op,
            lines=lines,
            data={"loaded": loaded, "skipped": skipped, "malformed": len(warnings)},
            warnings=warnings,
        )


def _require(fields: list[str], count: int) -> None:
    if len(fields) < count or not all(fields[:count]):
        msg = f"Expected {count} non-empty fields"
        raise MalformedRecord(msg)
