"""Major Arcana tarot draws."""

from __future__ import annotations

import enum
import json
import random
import sys
from dataclasses import asdict, dataclass
from typing import TextIO


class Case(enum.Enum):
    """Output case format for card names."""

    PROPER = "proper"
    SNAKE = "snake"


@dataclass(frozen=True)
class Card:
    snake: str
    proper: str

    def format(self, case: Case) -> str:
        return self.proper if case is Case.PROPER else self.snake


CARDS: tuple[Card, ...] = (
    Card("the_fool", "The Fool"),
    Card("the_magician", "The Magician"),
    Card("the_high_priestess", "The High Priestess"),
    Card("the_empress", "The Empress"),
    Card("the_emperor", "The Emperor"),
    Card("the_hierophant", "The Hierophant"),
    Card("the_lovers", "The Lovers"),
    Card("the_chariot", "The Chariot"),
    Card("strength", "Strength"),
    Card("the_hermit", "The Hermit"),
    Card("wheel_of_fortune", "Wheel of Fortune"),
    Card("justice", "Justice"),
    Card("the_hanged_man", "The Hanged Man"),
    Card("death", "Death"),
    Card("temperance", "Temperance"),
    Card("the_devil", "The Devil"),
    Card("the_tower", "The Tower"),
    Card("the_star", "The Star"),
    Card("the_moon", "The Moon"),
    Card("the_sun", "The Sun"),
    Card("judgement", "Judgement"),
    Card("the_world", "The World"),
)

UPRIGHT = "upright"
REVERSED = "reversed"


@dataclass(frozen=True)
class TarotDraw:
    card: str
    orientation: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def draw(count: int = 1, case: Case = Case.SNAKE, rng: random.Random | None = None) -> list[TarotDraw]:
    """Draw cards without replacement; count is clamped to 1..deck size."""
    if rng is None:
        rng = random.Random()
    count = min(max(count, 1), len(CARDS))
    deck = list(CARDS)
    rng.shuffle(deck)
    return [
        TarotDraw(card.format(case), UPRIGHT if rng.random() < 0.5 else REVERSED)
        for card in deck[:count]
    ]


def run(
    count: int = 1,
    as_json: bool = False,
    case: Case | None = None,
    rng: random.Random | None = None,
    out: TextIO | None = None,
) -> None:
    """Draw and print cards; reversed cards are printed with their name reversed."""
    if out is None:
        out = sys.stdout
    if case is None:
        case = Case.SNAKE if as_json else Case.PROPER
    draws = draw(count, case, rng)
    if as_json:
        print(json.dumps([d.to_dict() for d in draws], indent=2), file=out)
        return
    for d in draws:
        print(d.card if d.orientation == UPRIGHT else d.card[::-1], file=out)