"""
Card and Deck classes for Texas Hold'em.

A card is identified by a rank index (0 = Ace, 1..12 = Two..King) and a
suit. The card index ``suit * 13 + rank`` is the compact form used when a
deck is serialized for guests.

Hand evaluation treats the Ace as 13 (above the King) except inside the
5-4-3-2-A wheel, so both 0 and 13 render as "A".
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Optional
from enum import IntEnum

from holdemsync.core.errors import DeckEmptyError, InvalidInputError, SyncFormatError


class Suit(IntEnum):
    """Card suits in index order."""
    DIAMOND = 0  # ♦
    CLUB = 1     # ♣
    HEART = 2    # ♥
    SPADE = 3    # ♠


class Rank(IntEnum):
    """Card ranks. The Ace sits at 0; see ACE_HIGH for its evaluation value."""
    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12


# Value of an Ace when it plays above the King.
ACE_HIGH = 13

# Indexed by rank value 0..13, so the low and high Ace share a glyph.
RANK_CHARS = "A23456789TJQKA"

SUIT_SYMBOLS = {
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
    Suit.HEART: "♥",
    Suit.SPADE: "♠",
}

SUIT_CHARS = {
    Suit.DIAMOND: "d",
    Suit.CLUB: "c",
    Suit.HEART: "h",
    Suit.SPADE: "s",
}

CHAR_TO_RANK = {RANK_CHARS[r]: Rank(r) for r in Rank}
CHAR_TO_SUIT = {v: k for k, v in SUIT_CHARS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

# One character per card index in the serialized deck.
DECK_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ALPHABET_INDEX = {c: i for i, c in enumerate(DECK_ALPHABET)}

DECK_SIZE = 52


def rank_char(value: int) -> str:
    """Display character for a rank value (0..13)."""
    return RANK_CHARS[value]


@dataclass(frozen=True)
class Card:
    """
    An immutable playing card.

    Cards can be created from:
    - Rank and Suit enums: Card(Rank.ACE, Suit.SPADE)
    - String notation: Card.from_string("As") or Card.from_string("A♠")
    - Index (0-51): Card.from_index(51) = King of Spades
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "rank", Rank(self.rank))
            object.__setattr__(self, "suit", Suit(self.suit))
        except ValueError as e:
            raise InvalidInputError(f"Invalid card: {e}") from e

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from string notation.

        Accepts formats:
        - "As", "Kh", "Td", "2c" (rank + suit char)
        - "A♠", "K♥", "T♦", "2♣" (rank + suit symbol)
        - "10h" (ten written out)
        """
        s = s.strip()
        if s.startswith("10"):
            s = "T" + s[2:]
        if len(s) != 2:
            raise InvalidInputError(f"Invalid card string: {s}")

        rank_char_ = s[0].upper()
        suit_part = s[1]

        if rank_char_ not in CHAR_TO_RANK:
            raise InvalidInputError(f"Invalid rank: {rank_char_}")
        rank = CHAR_TO_RANK[rank_char_]

        if suit_part.lower() in CHAR_TO_SUIT:
            suit = CHAR_TO_SUIT[suit_part.lower()]
        elif suit_part in SYMBOL_TO_SUIT:
            suit = SYMBOL_TO_SUIT[suit_part]
        else:
            raise InvalidInputError(f"Invalid suit: {suit_part}")

        return cls(rank, suit)

    @classmethod
    def from_index(cls, index: int) -> Card:
        """Create a card from its index (0-51)."""
        if not 0 <= index < DECK_SIZE:
            raise InvalidInputError(f"Card index must be 0-51, got {index}")
        return cls(Rank(index % 13), Suit(index // 13))

    @property
    def index(self) -> int:
        """The index (0-51) of this card."""
        return int(self.suit) * 13 + int(self.rank)

    @property
    def value(self) -> int:
        """Rank value with the Ace high (2 = 1 ... King = 12, Ace = 13)."""
        return ACE_HIGH if self.rank == Rank.ACE else int(self.rank)

    def __lt__(self, other: Card) -> bool:
        """Compare by ace-high value only (for sorting)."""
        return self.value < other.value

    def __repr__(self) -> str:
        return f"Card({self.short_str})"

    def __str__(self) -> str:
        return f"{rank_char(self.rank)}{SUIT_SYMBOLS[self.suit]}"

    @property
    def short_str(self) -> str:
        """Short string like 'As', 'Kh'."""
        return f"{rank_char(self.rank)}{SUIT_CHARS[self.suit]}"

    @property
    def color(self) -> str:
        """Return 'red' for hearts/diamonds, 'black' for clubs/spades."""
        return "red" if self.suit in (Suit.HEART, Suit.DIAMOND) else "black"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "rank": rank_char(self.rank),
            "suit": SUIT_SYMBOLS[self.suit],
            "text": str(self),
            "color": self.color,
        }


class Deck:
    """
    A 52-card deck drawn from the front.

    Usage:
        deck = Deck()
        deck.shuffle()
        card = deck.draw_card()
        data = deck.serialize()      # hand to a guest
        same = Deck.deserialize(data)
    """

    def __init__(self, shuffle: bool = False, rng: Optional[random.Random] = None):
        """Initialize a full deck in index order, optionally shuffled."""
        self._rng = rng or random.Random()
        self.reset()
        if shuffle:
            self.shuffle()

    def reset(self) -> None:
        """Reset the deck to a full 52 cards in index order."""
        self._cards: List[Card] = [Card.from_index(i) for i in range(DECK_SIZE)]

    def shuffle(self) -> None:
        """Shuffle the remaining cards in the deck."""
        self._rng.shuffle(self._cards)

    def draw_card(self) -> Card:
        """
        Remove and return the next card.

        Raises:
            DeckEmptyError: If no cards remain.
        """
        if not self._cards:
            raise DeckEmptyError("Cannot draw from an empty deck")
        return self._cards.pop(0)

    def deal(self, n: int = 1) -> List[Card]:
        """Draw n cards from the top of the deck."""
        if n > len(self._cards):
            raise DeckEmptyError(f"Cannot deal {n} cards, only {len(self._cards)} remain")
        return [self.draw_card() for _ in range(n)]

    @property
    def cards(self) -> List[Card]:
        """Remaining cards in draw order."""
        return list(self._cards)

    @property
    def remaining(self) -> int:
        """Number of cards remaining in the deck."""
        return len(self._cards)

    def serialize(self) -> str:
        """Encode the remaining cards, in draw order, one character per card."""
        return "".join(DECK_ALPHABET[card.index] for card in self._cards)

    @classmethod
    def deserialize(cls, data: str) -> Deck:
        """
        Rebuild a deck from serialize() output.

        Raises:
            SyncFormatError: On an unknown character or a repeated card.
        """
        indices = []
        for ch in data:
            if ch not in _ALPHABET_INDEX:
                raise SyncFormatError(f"Invalid card character in deck data: {ch!r}")
            indices.append(_ALPHABET_INDEX[ch])
        if len(set(indices)) != len(indices):
            raise SyncFormatError("Deck data contains a repeated card")

        deck = cls()
        deck._cards = [Card.from_index(i) for i in indices]
        return deck

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck({self.remaining} cards remaining)"


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse multiple cards from a string.

    Accepts formats:
    - "As Kh Td" (space-separated)
    - "AsKhTd" (no separator, 2 chars each)
    - "A♠ K♥ T♦" (with symbols)
    """
    cards_str = cards_str.strip()

    if " " in cards_str:
        return [Card.from_string(s) for s in cards_str.split()]

    if len(cards_str) % 2:
        raise InvalidInputError(f"Cannot parse cards: {cards_str}")
    return [Card.from_string(cards_str[i:i + 2]) for i in range(0, len(cards_str), 2)]
