"""
Player ledger for Texas Hold'em.

Tracks a seated player's chips across hands:
- chips: uncommitted stack
- bet: wager in the current betting round
- pot_contribution: wagers from finished betting rounds of this hand
- chips_awarded: payout for this hand, including returned chips
"""

from __future__ import annotations
from typing import List, Optional, Dict, Any
from dataclasses import dataclass, field
import logging

from holdemsync.core.card import Card, Deck
from holdemsync.core.hand import Hand, HandPool, describe_hand
from holdemsync.core.pocket import Pocket
from holdemsync.core.rules import HOLE_CARDS


logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Player:
    """
    A player seated at the table.

    Attributes:
        player_id: Unique identifier for the player
        name: Display name
        chips: Chips not yet committed to the current hand
        bet: Chips put up in the current betting round (not incremental)
        pot_contribution: Chips committed in earlier rounds of this hand
        chips_awarded: Chips paid back to this player at the end of the hand
        pocket_cards: 0 or 2 hole cards
        best_hand: Best 5-card hand, set at showdown
        is_folded: True once the player folds, until the next hand
        is_ready: True when the player wants the next hand dealt
    """
    player_id: str
    name: str
    chips: int
    bet: int = 0
    pot_contribution: int = 0
    chips_awarded: int = 0
    pocket_cards: List[Card] = field(default_factory=list)
    best_hand: Optional[Hand] = None
    is_folded: bool = False
    is_ready: bool = False

    def cleanup_hand(self) -> None:
        """Reset per-hand fields. The chip stack carries over."""
        self.bet = 0
        self.pot_contribution = 0
        self.chips_awarded = 0
        self.pocket_cards = []
        self.best_hand = None
        self.is_folded = False

    def draw_cards(self, deck: Deck) -> None:
        """Draw the two pocket cards."""
        self.pocket_cards = [deck.draw_card() for _ in range(HOLE_CARDS)]

    @property
    def pocket(self) -> Optional[Pocket]:
        if len(self.pocket_cards) != HOLE_CARDS:
            return None
        return Pocket(self.pocket_cards)

    def construct_best_hand(self, board_cards: List[Card]) -> Hand:
        """Build the best hand from the pocket cards and the board."""
        self.best_hand = HandPool(self.pocket_cards + list(board_cards)).best_hand()
        return self.best_hand

    def post_bet(self, amount: int) -> None:
        """
        Set this round's bet to ``amount``.

        The stack moves by the difference from the previous bet, so a lower
        amount returns chips. Legality is the game's job; an overdraft is
        logged and left in place.
        """
        difference = amount - self.bet
        self.chips -= difference
        self.bet = amount

        if self.chips < 0:
            logger.warning(
                f"Player {self.name} bet {amount} but only had {self.chips + difference} chips"
            )

    def conclude_round(self) -> None:
        """Move the round's bet into the pot contribution."""
        self.pot_contribution += self.bet
        self.bet = 0

    def fold(self) -> None:
        """Fold the hand."""
        self.is_folded = True

    def award_chips(self, amount: int) -> None:
        self.chips_awarded += amount
        self.chips += amount

    def return_bets(self) -> None:
        """Take back everything committed to the hand (abandoned hand)."""
        self.chips += self.total_bet()
        self.bet = 0
        self.pot_contribution = 0

    def max_bet(self) -> int:
        """The all-in ceiling for the current betting round."""
        return self.chips + self.bet

    def total_bet(self) -> int:
        """Chips committed to the current hand so far."""
        return self.pot_contribution + self.bet

    @property
    def is_broke(self) -> bool:
        """True if the player has nothing left, committed or not."""
        return self.chips + self.bet + self.pot_contribution == 0

    @property
    def is_all_in(self) -> bool:
        return self.chips == 0 and not self.is_broke

    @property
    def net(self) -> int:
        """Chips won or lost on the hand."""
        return self.chips_awarded - self.pot_contribution

    def to_dict(self, hide_cards: bool = True) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Args:
            hide_cards: If True, don't include pocket cards
        """
        result = {
            "id": self.player_id,
            "name": self.name,
            "chips": self.chips,
            "bet": self.bet,
            "pot_contribution": self.pot_contribution,
            "chips_awarded": self.chips_awarded,
            "folded": self.is_folded,
            "ready": self.is_ready,
        }

        if not hide_cards and self.pocket_cards:
            result["cards"] = [card.to_dict() for card in self.pocket_cards]
        if self.best_hand is not None:
            result["best_hand"] = describe_hand(self.best_hand)

        return result

    def __repr__(self) -> str:
        return (
            f"Player({self.name}, chips={self.chips}, "
            f"bet={self.bet}, pot_contribution={self.pot_contribution})"
        )

    def __str__(self) -> str:
        return self.name
