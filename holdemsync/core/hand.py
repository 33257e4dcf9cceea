"""
Hand Evaluation for Texas Hold'em.

A ``Hand`` is exactly five cards. Its ranking key is a tuple of the hand
category and the tiebreak values in category order, so plain tuple
comparison orders hands: higher key = better hand, equal keys tie.

Hand Rankings (best to worst):
1. Straight Flush: 5 consecutive cards of same suit
2. Four of a Kind: 4 cards of same rank
3. Full House: 3 of a kind + pair
4. Flush: 5 cards of same suit
5. Straight: 5 consecutive cards
6. Three of a Kind: 3 cards of same rank
7. Two Pair: 2 different pairs
8. One Pair: 2 cards of same rank
9. High Card: No made hand

Note: Ace can be low in A-2-3-4-5 straight (wheel).

``HandPool`` picks the best five of 5-7 cards by evaluating every
5-card subset.
"""

from __future__ import annotations
from typing import List, NamedTuple, Optional, Sequence, Tuple
from itertools import combinations
from enum import IntEnum
from collections import Counter
import functools

from holdemsync.core.card import ACE_HIGH, Card, Rank, rank_char
from holdemsync.core.errors import InsufficientCardsError, InvalidInputError


HAND_SIZE = 5
MAX_POOL_SIZE = 7

# Rank value of the five in a wheel straight.
_WHEEL_HIGH = int(Rank.FIVE)


class HandRank(IntEnum):
    """Hand categories from best (highest value) to worst (lowest value)."""
    STRAIGHT_FLUSH = 9
    FOUR_OF_A_KIND = 8
    FULL_HOUSE = 7
    FLUSH = 6
    STRAIGHT = 5
    THREE_OF_A_KIND = 4
    TWO_PAIR = 3
    ONE_PAIR = 2
    HIGH_CARD = 1


HAND_RANK_NAMES = {
    HandRank.STRAIGHT_FLUSH: "Straight Flush",
    HandRank.FOUR_OF_A_KIND: "Four of a Kind",
    HandRank.FULL_HOUSE: "Full House",
    HandRank.FLUSH: "Flush",
    HandRank.STRAIGHT: "Straight",
    HandRank.THREE_OF_A_KIND: "Three of a Kind",
    HandRank.TWO_PAIR: "Two Pair",
    HandRank.ONE_PAIR: "One Pair",
    HandRank.HIGH_CARD: "High Card",
}


class RankingKey(NamedTuple):
    """Comparable strength of a 5-card hand."""
    category: HandRank
    tiebreaks: Tuple[int, ...]


def _validate(cards: Sequence[Card], low: int, high: int) -> None:
    if len(set(cards)) != len(cards):
        raise InvalidInputError(f"Duplicate cards: {[str(c) for c in cards]}")
    if len(cards) < low:
        if low == HAND_SIZE and high > HAND_SIZE:
            raise InsufficientCardsError(f"Need at least 5 cards, got {len(cards)}")
        raise InvalidInputError(f"Need exactly 5 cards, got {len(cards)}")
    if len(cards) > high:
        if low == high:
            raise InvalidInputError(f"Need exactly {low} cards, got {len(cards)}")
        raise InvalidInputError(f"Need {low}-{high} cards, got {len(cards)}")


def evaluate_hand(cards: Sequence[Card]) -> RankingKey:
    """
    Evaluate exactly 5 cards.

    Returns:
        RankingKey of (category, tiebreak values). Values use the Ace as 13,
        except the wheel straight which is keyed on its five.

    Raises:
        InvalidInputError: If not 5 distinct cards.
    """
    _validate(cards, HAND_SIZE, HAND_SIZE)

    values = sorted((c.value for c in cards), reverse=True)
    is_flush = len({c.suit for c in cards}) == 1
    straight_high = _straight_high(values)

    # Ranks ordered by (count, value) descending: quads/trips/pairs lead.
    counts = Counter(values)
    grouped = sorted(counts, key=lambda v: (counts[v], v), reverse=True)
    shape = sorted(counts.values(), reverse=True)

    if straight_high is not None and is_flush:
        return RankingKey(HandRank.STRAIGHT_FLUSH, (straight_high,))
    if shape == [4, 1]:
        return RankingKey(HandRank.FOUR_OF_A_KIND, tuple(grouped))
    if shape == [3, 2]:
        return RankingKey(HandRank.FULL_HOUSE, tuple(grouped))
    if is_flush:
        return RankingKey(HandRank.FLUSH, tuple(values))
    if straight_high is not None:
        return RankingKey(HandRank.STRAIGHT, (straight_high,))
    if shape == [3, 1, 1]:
        return RankingKey(HandRank.THREE_OF_A_KIND, tuple(grouped))
    if shape == [2, 2, 1]:
        return RankingKey(HandRank.TWO_PAIR, tuple(grouped))
    if shape == [2, 1, 1, 1]:
        return RankingKey(HandRank.ONE_PAIR, tuple(grouped))
    return RankingKey(HandRank.HIGH_CARD, tuple(values))


def _straight_high(values: List[int]) -> Optional[int]:
    """
    High card value of the straight formed by five sorted values, if any.
    """
    if len(set(values)) != HAND_SIZE:
        return None
    if values[0] - values[4] == 4:
        return values[0]
    # Wheel (A-2-3-4-5): the Ace plays low.
    if values == [ACE_HIGH, 4, 3, 2, 1]:
        return _WHEEL_HIGH
    return None


@functools.total_ordering
class Hand:
    """
    Exactly five cards with a derived ranking key.

    Hands compare by key only: two hands with the same category and
    tiebreaks are equal even when their suits differ.
    """

    __slots__ = ("_cards", "_key")

    def __init__(self, cards: Sequence[Card]):
        self._key = evaluate_hand(cards)
        self._cards = tuple(_order_cards(cards, self._key))

    @property
    def cards(self) -> List[Card]:
        """The five cards, ordered by significance (e.g. trips before kickers)."""
        return list(self._cards)

    @property
    def key(self) -> RankingKey:
        return self._key

    @property
    def category(self) -> HandRank:
        return self._key.category

    def compare(self, other: Hand) -> int:
        """Return 1 if this hand wins, -1 if it loses, 0 on a tie."""
        if self._key > other._key:
            return 1
        if self._key < other._key:
            return -1
        return 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Hand):
            return self._key == other._key
        return NotImplemented

    def __lt__(self, other: Hand) -> bool:
        return self._key < other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        return f"Hand({' '.join(c.short_str for c in self._cards)}, {self.category.name})"

    def __str__(self) -> str:
        return describe_hand(self)


def _order_cards(cards: Sequence[Card], key: RankingKey) -> List[Card]:
    """Sort cards by the key's tiebreak order; the wheel puts the Ace last."""
    counts = Counter(c.value for c in cards)
    ordered = sorted(cards, key=lambda c: (counts[c.value], c.value), reverse=True)
    if key.category in (HandRank.STRAIGHT, HandRank.STRAIGHT_FLUSH) and key.tiebreaks[0] == _WHEEL_HIGH:
        ordered = ordered[1:] + ordered[:1]
    return ordered


class HandPool:
    """
    A pool of 5-7 cards that a best hand of five is chosen from.

    Every 5-card subset is evaluated (21 for seven cards); a pool can hold
    several competing categories at once, e.g. a flush and a full house.
    """

    def __init__(self, cards: Sequence[Card]):
        _validate(cards, HAND_SIZE, MAX_POOL_SIZE)
        self._cards = list(cards)
        self._best: Optional[Hand] = None

    @property
    def cards(self) -> List[Card]:
        return list(self._cards)

    def hands(self) -> List[Hand]:
        """Every 5-card hand in the pool."""
        return [Hand(combo) for combo in combinations(self._cards, HAND_SIZE)]

    def best_hand(self) -> Hand:
        """A best hand of five cards, computed once."""
        if self._best is None:
            best = None
            for hand in self.hands():
                if best is None or hand > best:
                    best = hand
            self._best = best
        return self._best


def best_hand(cards: Sequence[Card]) -> Hand:
    """
    Best 5-card hand from 5-7 unique cards.

    Raises:
        InsufficientCardsError: If fewer than 5 cards.
        InvalidInputError: If more than 7 cards or duplicates.
    """
    return HandPool(cards).best_hand()


def compare_hands(cards1: Sequence[Card], cards2: Sequence[Card]) -> int:
    """
    Compare the best hands from two card pools.

    Returns:
        1 if cards1 wins, -1 if cards2 wins, 0 if tie
    """
    return best_hand(cards1).compare(best_hand(cards2))


def describe_hand(hand: Hand) -> str:
    """Human-readable description of a Hand."""
    category, tiebreaks = hand.key

    if category == HandRank.STRAIGHT_FLUSH:
        if tiebreaks[0] == ACE_HIGH:
            return "Royal Flush"
        return f"Straight Flush, {_rank_name(tiebreaks[0])} high"
    elif category == HandRank.FOUR_OF_A_KIND:
        return f"Four of a Kind, {_rank_name(tiebreaks[0])}s"
    elif category == HandRank.FULL_HOUSE:
        return f"Full House, {_rank_name(tiebreaks[0])}s full of {_rank_name(tiebreaks[1])}s"
    elif category == HandRank.FLUSH:
        return f"Flush, {_rank_name(tiebreaks[0])} high"
    elif category == HandRank.STRAIGHT:
        if tiebreaks[0] == _WHEEL_HIGH:
            return "Straight, Five high (Wheel)"
        return f"Straight, {_rank_name(tiebreaks[0])} high"
    elif category == HandRank.THREE_OF_A_KIND:
        return f"Three of a Kind, {_rank_name(tiebreaks[0])}s"
    elif category == HandRank.TWO_PAIR:
        return f"Two Pair, {_rank_name(tiebreaks[0])}s and {_rank_name(tiebreaks[1])}s"
    elif category == HandRank.ONE_PAIR:
        return f"Pair of {_rank_name(tiebreaks[0])}s"
    else:
        return f"High Card, {_rank_name(tiebreaks[0])}"


def get_hand_description(cards: Sequence[Card]) -> str:
    """Get a human-readable description of the best hand in 5-7 cards."""
    if len(cards) < HAND_SIZE:
        return "Incomplete hand"
    return describe_hand(best_hand(cards))


_RANK_NAMES = {
    1: "Two", 2: "Three", 3: "Four", 4: "Five", 5: "Six", 6: "Seven",
    7: "Eight", 8: "Nine", 9: "Ten", 10: "Jack", 11: "Queen", 12: "King",
    ACE_HIGH: "Ace",
}


def _rank_name(value: int) -> str:
    """Get the name of a rank value."""
    return _RANK_NAMES.get(value, rank_char(value))
