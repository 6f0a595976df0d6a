"""Outcome — the result type returned by every domain operation.

Recoverable failures (missing entities, unauthorized feeding, short stock,
bad numbers) are values, not exceptions.  An Outcome carries the activity
lines produced *before* it succeeded or failed, so a caller can log a
partial narrative followed by the failure message.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import StrEnum
from typing import Any


class FailureCode(StrEnum):
    """Recoverable failure kinds."""

    PERSON_NOT_FOUND = "PERSON_NOT_FOUND"
    ANIMAL_NOT_FOUND = "ANIMAL_NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    INVALID_NUMBER = "INVALID_NUMBER"
    MALFORMED_COMMAND = "MALFORMED_COMMAND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class Failure:
    """Why an operation was rejected."""

    code: FailureCode
    message: str
    detail: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Outcome:
    """Result of a domain operation.

    Attributes:
        ok: Whether the operation was fully applied.
        lines: Activity log lines, in emission order.
        failure: Set when ``ok`` is False.
        consumed: Ledger deductions applied, by category (empty on failure).
    """

    ok: bool
    lines: tuple[str, ...] = ()
    failure: Failure | None = None
    consumed: Mapping[str, Decimal] = field(default_factory=dict)

    @classmethod
    def success(
        cls,
        lines: Iterable[str] = (),
        *,
        consumed: Mapping[str, Decimal] | None = None,
    ) -> Outcome:
        return cls(ok=True, lines=tuple(lines), consumed=dict(consumed or {}))

    @classmethod
    def fail(
        cls,
        code: FailureCode,
        message: str,
        *,
        lines: Iterable[str] = (),
        **detail: Any,
    ) -> Outcome:
        return cls(
            ok=False,
            lines=tuple(lines),
            failure=Failure(code=code, message=message, detail=detail),
        )

    def prepend(self, lines: Iterable[str]) -> Outcome:
        """Return a copy with *lines* emitted before this outcome's own lines."""
        return replace(self, lines=(*lines, *self.lines))
