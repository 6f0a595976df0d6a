"""FoodLedger — the zoo's shared food inventory.

INVARIANT: No balance ever goes negative.  A request that cannot be met
in full is rejected in full; the ledger is left exactly as it was.

Multi-category requests (a Chimpanzee eats Meat *and* Plant) go through
the two-phase API: :meth:`FoodLedger.shortfall` checks every category
first, then :meth:`FoodLedger.commit` applies all deductions.  A
concurrent caller must hold one lock around both phases.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal

from zooctl.domain.outcome import FailureCode, Outcome
from zooctl.domain.quantity import ZERO, format_kg, quantize_kg
from zooctl.domain.types import FoodCategory

DEFAULT_CANONICAL: tuple[str, ...] = tuple(c.value for c in FoodCategory)


class FoodLedger:
    """Quantity-by-category inventory with atomic consumption."""

    def __init__(self, canonical: Iterable[str] = DEFAULT_CANONICAL) -> None:
        self._canonical = tuple(canonical)
        self._stock: dict[str, Decimal] = {}

    def add(self, category: str, amount: Decimal) -> None:
        """Increase *category* by *amount*.

        Raises:
            ValueError: If *amount* is negative.
        """
        if amount < ZERO:
            msg = f"Cannot add a negative amount of {category}: {amount}"
            raise ValueError(msg)
        self._stock[category] = self._stock.get(category, ZERO) + amount

    def available(self, category: str) -> Decimal:
        return self._stock.get(category, ZERO)

    def categories(self) -> list[str]:
        """Canonical categories first, then any others in first-seen order."""
        extra = [c for c in self._stock if c not in self._canonical]
        return [*self._canonical, *extra]

    # ------------------------------------------------------------------
    # Consumption
    # ------------------------------------------------------------------

    def shortfall(self, demand: Mapping[str, Decimal]) -> str | None:
        """Return the first category in *demand* that cannot be covered.

        Returns None when every category has enough stock.
        """
        for category, amount in demand.items():
            if self.available(category) < amount:
                return category
        return None

    def commit(self, demand: Mapping[str, Decimal]) -> None:
        """Apply every deduction in *demand*.

        Callers check :meth:`shortfall` first.

        Raises:
            ValueError: If *demand* is not affordable.
        """
        short = self.shortfall(demand)
        if short is not None:
            msg = f"Unaffordable demand committed: not enough {short}"
            raise ValueError(msg)
        for category, amount in demand.items():
            self._stock[category] = self.available(category) - amount

    def consume_all(self, demand: Mapping[str, Decimal]) -> Outcome:
        """Deduct every category in *demand*, or nothing at all."""
        short = self.shortfall(demand)
        if short is not None:
            return Outcome.fail(
                FailureCode.INSUFFICIENT_STOCK,
                f"Not enough {short}",
                category=short,
                available=format_kg(self.available(short)),
                requested=format_kg(demand[short]),
            )
        self.commit(demand)
        return Outcome.success(consumed=demand)

    def consume(self, category: str, amount: Decimal) -> Outcome:
        """Deduct *amount* from a single *category*."""
        return self.consume_all({category: amount})

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def snapshot(self) -> dict[str, Decimal]:
        """Balances rounded to three places, canonical categories always present."""
        return {c: quantize_kg(self.available(c)) for c in self.categories()}

    def stock_report(self) -> list[str]:
        """Activity lines for the ``List Food Stock`` command."""
        lines = ["Listing available Food Stock:"]
        lines.extend(f"{c}: {format_kg(q)} kgs" for c, q in self.snapshot().items())
        return lines
