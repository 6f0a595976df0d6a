"""CommandService — replay command records against the zoo.

Each record is ``kind,field,...``.  Every command gets its own log
section; a failed command is logged and the next one runs.

INVARIANT: Nothing unwinds past the command boundary.  A command's
ledger effects are either fully applied or not applied at all.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import structlog

from zooctl.domain.outcome import FailureCode, Outcome
from zooctl.domain.quantity import InvalidQuantity, format_kg, to_count
from zooctl.domain.types import CommandKind, parse_command_kind
from zooctl.infrastructure.records import split_fields
from zooctl.services.base import BaseService
from zooctl.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)

UNKNOWN_COMMAND = "Unknown command."

# Fields required per command kind, including the kind itself.
_ARITY: dict[CommandKind, int] = {
    CommandKind.LIST_FOOD_STOCK: 1,
    CommandKind.ANIMAL_VISITATION: 3,
    CommandKind.FEED_ANIMAL: 4,
}

LineSink = Callable[[Iterable[str]], None]


class CommandService(BaseService):
    """Dispatches command records to person and animal behaviour."""

    def execute(self, record: str) -> ServiceResult:
        """Run one command record and return its log section."""
        fields = split_fields(record)
        kind = parse_command_kind(fields[0])
        lines = self._banner("Processing new Command")

        if kind is None:
            log.debug("command.unknown", record=record)
            lines.append(UNKNOWN_COMMAND)
            return ServiceResult(ok=True, op="unknown", lines=lines, data={"unknown": True})

        op = kind.name.lower()
        try:
            outcome = self._dispatch(kind, fields, record)
        except Exception as exc:
            log.exception("command.crashed", op=op, record=record)
            outcome = Outcome.fail(
                FailureCode.INTERNAL_ERROR,
                str(exc),
                error=type(exc).__name__,
            )

        lines.extend(outcome.lines)
        if outcome.ok:
            log.debug("command.ok", op=op, record=record)
            consumed = {c: format_kg(q) for c, q in outcome.consumed.items()}
            return ServiceResult(ok=True, op=op, lines=lines, data={"consumed": consumed})

        failure = outcome.failure
        assert failure is not None
        log.debug("command.failed", op=op, record=record, code=str(failure.code))
        if failure.code is FailureCode.INVALID_NUMBER:
            lines.append(f"Error processing command: {record}")
        lines.append(f"Error: {failure.message}")
        return ServiceResult(
            ok=False,
            op=op,
            lines=lines,
            error=ServiceError(
                code=str(failure.code),
                message=failure.message,
                detail=dict(failure.detail),
            ),
        )

    def run(self, records: Iterable[str], *, sink: LineSink | None = None) -> ServiceResult:
        """Run every record in order.

        With a *sink*, each command's lines are handed over as soon as the
        command finishes; otherwise they are collected into the result.
        """
        collected: list[str] = []
        emit = sink if sink is not None else collected.extend
        total = failed = unknown = 0
        failures: dict[str, int] = {}

        for record in records:
            result = self.execute(record)
            emit(result.lines)
            total += 1
            if result.op == "unknown":
                unknown += 1
            if not result.ok and result.error is not None:
                failed += 1
                failures[result.error.code] = failures.get(result.error.code, 0) + 1

        return ServiceResult(
            ok=True,
            op="run_commands",
            lines=collected,
            data={
                "commands": total,
                "failed": failed,
                "unknown": unknown,
                "failures": failures,
            },
        )

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _dispatch(self, kind: CommandKind, fields: list[str], record: str) -> Outcome:
        if len(fields) < _ARITY[kind]:
            return Outcome.fail(
                FailureCode.MALFORMED_COMMAND,
                f"Malformed command: {record}",
                expected=_ARITY[kind],
                received=len(fields),
            )
        match kind:
            case CommandKind.LIST_FOOD_STOCK:
                return Outcome.success(self._zoo.ledger.stock_report())
            case CommandKind.ANIMAL_VISITATION:
                return self._visit(person_id=fields[1], animal_name=fields[2])
            case CommandKind.FEED_ANIMAL:
                return self._feed(person_id=fields[1], animal_name=fields[2], raw_meals=fields[3])

    def _resolve(self, person_id: str, animal_name: str) -> Outcome | None:
        """Return a failure if either entity is missing, else None."""
        if self._zoo.find_person(person_id) is None:
            return Outcome.fail(
                FailureCode.PERSON_NOT_FOUND,
                f"There are no visitors or personnel with the id {person_id}",
                kind="Person",
                key=person_id,
            )
        if self._zoo.find_animal(animal_name) is None:
            return Outcome.fail(
                FailureCode.ANIMAL_NOT_FOUND,
                f"There are no animals with the name {animal_name}.",
                kind="Animal",
                key=animal_name,
            )
        return None

    def _visit(self, person_id: str, animal_name: str) -> Outcome:
        missing = self._resolve(person_id, animal_name)
        if missing is not None:
            return missing
        person = self._zoo.people[person_id]
        animal = self._zoo.animals[animal_name]
        return Outcome.success([person.visit_notice(animal.name), *person.visit(animal)])

    def _feed(self, person_id: str, animal_name: str, raw_meals: str) -> Outcome:
        missing = self._resolve(person_id, animal_name)
        if missing is not None:
            return missing
        person = self._zoo.people[person_id]
        animal = self._zoo.animals[animal_name]
        try:
            meals = to_count(raw_meals)
        except InvalidQuantity:
            return Outcome.fail(
                FailureCode.INVALID_NUMBER,
                f"Invalid meal count: {raw_meals}",
                value=raw_meals,
            )
        notice = person.feed_notice(animal.name)
        outcome = person.feed(animal, meals, self._zoo.ledger)
        return outcome.prepend([notice]) if notice is not None else outcome
