"""Animal model — per-species meal formulas, diets and cleaning routines.

Species behaviour is data, not subclasses: :data:`SPECIES_PROFILES` maps
each :class:`Species` to its formula constants, diet split and log texts.
Adding a species means adding one profile.

Meal formula: ``base + (age - pivot_age) * rate`` kilograms per meal.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from pydantic import BaseModel

from zooctl.domain.outcome import FailureCode, Outcome
from zooctl.domain.quantity import format_kg
from zooctl.domain.types import FoodCategory, Species

if TYPE_CHECKING:
    from zooctl.domain.ledger import FoodLedger


@dataclass(frozen=True)
class SpeciesProfile:
    """Formula constants and texts for one species.

    ``diet`` maps food category to its share of a meal; shares sum to 1.
    ``fed_template`` is formatted with ``name`` plus one keyword per diet
    category holding the rendered quantity.
    """

    base: Decimal
    pivot_age: int
    rate: Decimal
    diet: dict[str, Decimal]
    fed_template: str
    cleaning: str


_MEAT = FoodCategory.MEAT.value
_PLANT = FoodCategory.PLANT.value
_FISH = FoodCategory.FISH.value
_WHOLE = Decimal("1")
_HALF = Decimal("0.5")

SPECIES_PROFILES: dict[Species, SpeciesProfile] = {
    Species.LION: SpeciesProfile(
        base=Decimal("5.0"),
        pivot_age=5,
        rate=Decimal("0.05"),
        diet={_MEAT: _WHOLE},
        fed_template="{name} has been given {Meat} kgs of meat",
        cleaning="Removing bones and refreshing sand.",
    ),
    Species.ELEPHANT: SpeciesProfile(
        base=Decimal("10.0"),
        pivot_age=20,
        rate=Decimal("0.015"),
        diet={_PLANT: _WHOLE},
        fed_template="{name} has been given {Plant} kgs assorted fruits and hay",
        cleaning="Washing the water area.",
    ),
    Species.PENGUIN: SpeciesProfile(
        base=Decimal("3.0"),
        pivot_age=4,
        rate=Decimal("0.04"),
        diet={_FISH: _WHOLE},
        fed_template="{name} has been given {Fish} kgs of various kinds of fish",
        cleaning="Replenishing ice and scrubbing walls.",
    ),
    Species.CHIMPANZEE: SpeciesProfile(
        base=Decimal("6.0"),
        pivot_age=10,
        rate=Decimal("0.025"),
        diet={_MEAT: _HALF, _PLANT: _HALF},
        fed_template="{name} has been given {Meat} kgs of meat and {Plant} kgs of leaves",
        cleaning="Sweeping the enclosure and replacing branches.",
    ),
}


def meal_amount(species: Species, age: int) -> Decimal:
    """Kilograms of food one meal requires for *species* at *age*."""
    profile = SPECIES_PROFILES[species]
    return profile.base + (age - profile.pivot_age) * profile.rate


class Animal(BaseModel):
    """A zoo animal. Holds no mutable state; feeding only touches the ledger."""

    model_config = {"frozen": True}

    species: Species
    name: str
    age: int

    @property
    def profile(self) -> SpeciesProfile:
        return SPECIES_PROFILES[self.species]

    def meal_amount(self) -> Decimal:
        return meal_amount(self.species, self.age)

    def ration(self, meals: int) -> dict[str, Decimal]:
        """Split ``meal_amount() * meals`` across the species diet."""
        total = self.meal_amount() * meals
        return {category: total * share for category, share in self.profile.diet.items()}

    def feed(self, meals: int, ledger: FoodLedger) -> Outcome:
        """Consume *meals* meals worth of food from *ledger*.

        All diet categories are checked before any is deducted, so a
        short category leaves every balance untouched.
        """
        if meals < 0:
            return Outcome.fail(
                FailureCode.INVALID_NUMBER,
                f"Invalid meal count: {meals}",
                value=str(meals),
            )
        demand = self.ration(meals)
        outcome = ledger.consume_all(demand)
        if not outcome.ok:
            return outcome
        rendered = {category: format_kg(amount) for category, amount in demand.items()}
        line = self.profile.fed_template.format(name=self.name, **rendered)
        return Outcome.success([line], consumed=demand)

    def clean_habitat(self) -> str:
        return f"Cleaning {self.name}'s habitat: {self.profile.cleaning}"

    def describe(self) -> str:
        return f"{self.species} named {self.name} aged {self.age}"
