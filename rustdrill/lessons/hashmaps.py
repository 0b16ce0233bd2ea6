"""Dictionaries: fruit baskets and a football scores table."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from enum import Enum

_U8_MAX = 255
_DEFAULT_NEW_FRUIT = 3


class Fruit(Enum):
    """Kinds of fruit that may go into a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds and five pieces of fruit."""
    return {"banana": 2, "apple": 1, "ananas": 5}


def fill_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add three of every kind of fruit not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, _DEFAULT_NEW_FRUIT)


@dataclass
class Team:
    """A team's goal tally."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        """Add one match's goals; tallies must stay within 0..=255."""
        scored_total = self.goals_scored + scored
        conceded_total = self.goals_conceded + conceded
        if scored_total > _U8_MAX or conceded_total > _U8_MAX:
            raise OverflowError(f"goal tally of {self.name} exceeds {_U8_MAX}")
        self.goals_scored = scored_total
        self.goals_conceded = conceded_total


def _parse_goals(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not all("0" <= c <= "9" for c in digits):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(digits)
    if value > _U8_MAX:
        raise ValueError(f"goal count too large: {text!r}")
    return value


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table from lines of "team1,team2,goals1,goals2".

    Raises ValueError for a line with fewer than four fields or a goal
    count that is not a number in 0..=255.
    """
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        first, second = fields[0], fields[1]
        first_goals = _parse_goals(fields[2])
        second_goals = _parse_goals(fields[3])
        scores.setdefault(first, Team(first)).record(first_goals, second_goals)
        scores.setdefault(second, Team(second)).record(second_goals, first_goals)
    return scores