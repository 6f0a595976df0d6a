"""Zoo — the registries and ledger shared by every command.

Registries are filled once by the loaders and only read while commands
are replayed.
"""

from __future__ import annotations

from collections.abc import Iterable

from zooctl.domain.animals import Animal
from zooctl.domain.ledger import DEFAULT_CANONICAL, FoodLedger
from zooctl.domain.people import Person


class Zoo:
    """Animals by name, people by id, and the single food ledger."""

    def __init__(self, canonical_categories: Iterable[str] = DEFAULT_CANONICAL) -> None:
        self.animals: dict[str, Animal] = {}
        self.people: dict[str, Person] = {}
        self.ledger = FoodLedger(canonical_categories)

    def register_animal(self, animal: Animal) -> None:
        # Later records with the same name replace earlier ones.
        self.animals[animal.name] = animal

    def register_person(self, person: Person) -> None:
        self.people[person.id] = person

    def find_animal(self, name: str) -> Animal | None:
        return self.animals.get(name)

    def find_person(self, person_id: str) -> Person | None:
        return self.people.get(person_id)
