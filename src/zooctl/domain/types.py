"""Entity tags and command kinds.

Species and roles are closed sets; food categories are open (any string
key is a legal ledger category) but three of them are canonical and always
appear in stock reports.
"""

from __future__ import annotations

from enum import StrEnum


class Species(StrEnum):
    """Animal species known to the zoo."""

    LION = "Lion"
    ELEPHANT = "Elephant"
    PENGUIN = "Penguin"
    CHIMPANZEE = "Chimpanzee"


class Role(StrEnum):
    """Person roles. Only personnel may feed or clean."""

    VISITOR = "Visitor"
    PERSONNEL = "Personnel"


class FoodCategory(StrEnum):
    """Canonical food categories, in stock-report order."""

    PLANT = "Plant"
    FISH = "Fish"
    MEAT = "Meat"


class CommandKind(StrEnum):
    """First field of a command record."""

    LIST_FOOD_STOCK = "List Food Stock"
    ANIMAL_VISITATION = "Animal Visitation"
    FEED_ANIMAL = "Feed Animal"


def parse_species(tag: str) -> Species | None:
    """Return the species for *tag*, or None if it is not a known species."""
    try:
        return Species(tag)
    except ValueError:
        return None


def parse_role(tag: str) -> Role | None:
    """Return the role for *tag*, or None if it is not a known role."""
    try:
        return Role(tag)
    except ValueError:
        return None


def parse_command_kind(tag: str) -> CommandKind | None:
    try:
        return CommandKind(tag)
    except ValueError:
        return None
