"""Person model — visitors observe, personnel clean and feed.

Role behaviour is selected by matching on :class:`Role`; the two roles
differ only in what they are allowed to do with an animal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from zooctl.domain.outcome import FailureCode, Outcome
from zooctl.domain.types import Role

if TYPE_CHECKING:
    from zooctl.domain.animals import Animal
    from zooctl.domain.ledger import FoodLedger

UNAUTHORIZED_FEEDING = "Visitors do not have the authority to feed animals."


class Person(BaseModel):
    """A visitor or staff member, keyed by ``id``."""

    model_config = {"frozen": True}

    role: Role
    name: str
    id: str

    @property
    def may_feed(self) -> bool:
        return self.role is Role.PERSONNEL

    def visit_notice(self, animal_name: str) -> str:
        """Line logged before a visitation is carried out."""
        match self.role:
            case Role.VISITOR:
                return f"{self.name} tried to register for a visit to {animal_name}."
            case Role.PERSONNEL:
                return f"{self.name} attempts to clean {animal_name}'s habitat."

    def feed_notice(self, animal_name: str) -> str | None:
        """Line logged before a feeding attempt, if the role has one."""
        if self.role is Role.VISITOR:
            return f"{self.name} tried to feed {animal_name}"
        return None

    def visit(self, animal: Animal) -> list[str]:
        """Visitors look around; personnel clean the habitat."""
        match self.role:
            case Role.VISITOR:
                return [f"{self.name} successfully visited {animal.name}."]
            case Role.PERSONNEL:
                return [
                    f"{self.name} started cleaning {animal.name}'s habitat.",
                    animal.clean_habitat(),
                ]

    def feed(self, animal: Animal, meals: int, ledger: FoodLedger) -> Outcome:
        """Feed *animal*. Visitors are refused before the ledger is touched."""
        if not self.may_feed:
            return Outcome.fail(FailureCode.UNAUTHORIZED, UNAUTHORIZED_FEEDING, role=str(self.role))
        attempt = f"{self.name} attempts to feed {animal.name}."
        return animal.feed(meals, ledger).prepend([attempt])

    def describe(self) -> str:
        return f"{self.name} (ID: {self.id})"
