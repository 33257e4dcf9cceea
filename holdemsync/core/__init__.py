"""
HoldemSync Core - Pure Python Texas Hold'em Game Logic

This module contains all game logic without any network dependencies.
"""

from holdemsync.core.card import Card, Deck, Rank, Suit, parse_cards
from holdemsync.core.errors import (
    PokerError, InvalidInputError, InsufficientCardsError, DeckEmptyError, SyncFormatError,
)
from holdemsync.core.hand import (
    Hand, HandPool, HandRank, RankingKey, evaluate_hand, best_hand, compare_hands,
    describe_hand, get_hand_description,
)
from holdemsync.core.pocket import Pocket, PocketCategory, classify_pocket
from holdemsync.core.player import Player
from holdemsync.core.ring import PlayerRing
from holdemsync.core.rules import State, TableConfig
from holdemsync.core.message import GameMessage, MessageType, ActionType
from holdemsync.core.game import (
    TexasHoldemGame, HostGame, GuestGame, Role, MessageStatus, MessageResult, create_game,
)

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "parse_cards",
    "PokerError",
    "InvalidInputError",
    "InsufficientCardsError",
    "DeckEmptyError",
    "SyncFormatError",
    "Hand",
    "HandPool",
    "HandRank",
    "RankingKey",
    "evaluate_hand",
    "best_hand",
    "compare_hands",
    "describe_hand",
    "get_hand_description",
    "Pocket",
    "PocketCategory",
    "classify_pocket",
    "Player",
    "PlayerRing",
    "State",
    "TableConfig",
    "GameMessage",
    "MessageType",
    "ActionType",
    "TexasHoldemGame",
    "HostGame",
    "GuestGame",
    "Role",
    "MessageStatus",
    "MessageResult",
    "create_game",
]
