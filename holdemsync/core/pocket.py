"""
Pocket (hole card) classification.
"""

from __future__ import annotations
from typing import List, Sequence
from enum import Enum

from holdemsync.core.card import Card, rank_char
from holdemsync.core.errors import InvalidInputError


class PocketCategory(Enum):
    """Starting hand categories."""
    UNSUITED = "UNSUITED"
    SUITED = "SUITED"
    PAIR = "PAIR"


class Pocket:
    """
    A player's two hole cards, higher-ranking card first (Ace high).

    Usage:
        pocket = Pocket(parse_cards("Ts Ah"))
        pocket.high_card   # A♥
        pocket.category    # PocketCategory.UNSUITED
        pocket.label       # "ATo"
    """

    __slots__ = ("_cards", "_category")

    def __init__(self, cards: Sequence[Card]):
        if len(cards) != 2:
            raise InvalidInputError(f"Pocket needs exactly 2 cards, got {len(cards)}")
        if cards[0] == cards[1]:
            raise InvalidInputError(f"Duplicate pocket card: {cards[0]}")

        first, second = cards
        if first.value < second.value:
            first, second = second, first
        self._cards = (first, second)

        if first.rank == second.rank:
            self._category = PocketCategory.PAIR
        elif first.suit == second.suit:
            self._category = PocketCategory.SUITED
        else:
            self._category = PocketCategory.UNSUITED

    @property
    def category(self) -> PocketCategory:
        return self._category

    @property
    def high_card(self) -> Card:
        return self._cards[0]

    @property
    def low_card(self) -> Card:
        return self._cards[1]

    @property
    def cards(self) -> List[Card]:
        return list(self._cards)

    @property
    def label(self) -> str:
        """Starting hand shorthand: 'AA', 'AKs', 'T9o'."""
        ranks = rank_char(self.high_card.value) + rank_char(self.low_card.value)
        if self._category == PocketCategory.PAIR:
            return ranks
        return ranks + ("s" if self._category == PocketCategory.SUITED else "o")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Pocket):
            return self._cards == other._cards
        return False

    def __hash__(self) -> int:
        return hash(self._cards)

    def __repr__(self) -> str:
        return f"Pocket({self.high_card.short_str} {self.low_card.short_str})"

    def __str__(self) -> str:
        return f"[{self.high_card} {self.low_card}]"


def classify_pocket(cards: Sequence[Card]) -> PocketCategory:
    """Category of a 2-card starting hand."""
    return Pocket(cards).category
