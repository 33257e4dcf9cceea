"""
HoldemSync - Texas Hold'em Engine with Host/Guest Synchronization

A standalone Texas Hold'em project with:
- Pure Python hand ranking and betting state machine
- Host/guest message protocol that keeps every table copy in lockstep
- FastAPI + WebSocket relay server

Usage:
    from holdemsync.core import HostGame, GuestGame, GameMessage
    from holdemsync.core import Card, HandPool, best_hand
"""

__version__ = "0.1.0"

from holdemsync.core.card import Card, Deck
from holdemsync.core.player import Player
from holdemsync.core.game import HostGame, GuestGame, create_game
from holdemsync.core.hand import HandRank, evaluate_hand, best_hand

__all__ = [
    "Card",
    "Deck",
    "Player",
    "HostGame",
    "GuestGame",
    "create_game",
    "HandRank",
    "evaluate_hand",
    "best_hand",
    "__version__",
]
