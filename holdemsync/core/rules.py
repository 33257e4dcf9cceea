"""
Texas Hold'em Rules and Constants.

The hand moves through the betting states in order:

    NONE -> BET_1 (preflop) -> BET_2 (flop) -> BET_3 (turn)
         -> BET_4 (river) -> HAND_DONE

A hand may jump straight to HAND_DONE when all but one player folds.
NONE is both the state before the first deal and the state after a
disconnect.
"""

from enum import Enum
from dataclasses import dataclass


class State(Enum):
    """States of one hand of poker, in play order."""
    NONE = 0
    BET_1 = 1
    BET_2 = 2
    BET_3 = 3
    BET_4 = 4
    HAND_DONE = 5

    @property
    def is_betting(self) -> bool:
        return self in BETTING_STATES

    @property
    def description(self) -> str:
        return STATE_DESCRIPTIONS.get(self, "")


BETTING_STATES = (State.BET_1, State.BET_2, State.BET_3, State.BET_4)

STATE_DESCRIPTIONS = {
    State.BET_1: "Preflop",
    State.BET_2: "Flop",
    State.BET_3: "Turn",
    State.BET_4: "River",
}

# Board cards revealed when each betting round closes.
BOARD_CARDS_AFTER = {
    State.BET_1: 3,  # flop
    State.BET_2: 1,  # turn
    State.BET_3: 1,  # river
}


# Default game settings
DEFAULT_BUY_IN = 20
DEFAULT_SMALL_BLIND = 1
DEFAULT_BIG_BLIND = 2
MIN_PLAYERS = 2

# Cards per phase
HOLE_CARDS = 2
TOTAL_COMMUNITY_CARDS = 5


@dataclass(frozen=True)
class TableConfig:
    """Chip settings for a table."""
    buy_in: int = DEFAULT_BUY_IN
    small_blind: int = DEFAULT_SMALL_BLIND
    big_blind: int = DEFAULT_BIG_BLIND

    def __post_init__(self) -> None:
        if self.buy_in <= 0:
            raise ValueError(f"Buy-in must be positive, got {self.buy_in}")
        if self.small_blind <= 0:
            raise ValueError(f"Small blind must be positive, got {self.small_blind}")
        if self.big_blind < self.small_blind:
            raise ValueError(
                f"Big blind ({self.big_blind}) must be at least the small blind ({self.small_blind})"
            )


def min_raise_to(to_call_amount: int, pot_contribution: int, big_blind: int) -> int:
    """
    Suggested minimum raise target for the current betting round.

    Advisory only: the state machine accepts any bet above the call amount
    as a raise.
    """
    return max(big_blind, to_call_amount * 2 + pot_contribution)
