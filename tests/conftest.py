"""
Pytest configuration and shared fixtures for HoldemSync tests.
"""

import random

import pytest
from holdemsync.core.card import Card, Deck, Rank, Suit, DECK_ALPHABET, parse_cards
from holdemsync.core.game import GuestGame, HostGame
from holdemsync.core.message import GameMessage
from holdemsync.core.player import Player
from holdemsync.core.rules import TableConfig


@pytest.fixture
def deck():
    """Create a fresh deck shuffled with a fixed seed."""
    return Deck(shuffle=True, rng=random.Random(1234))


@pytest.fixture
def unshuffled_deck():
    """Create a fresh unshuffled deck."""
    return Deck(shuffle=False)


@pytest.fixture
def sample_player():
    """Create a sample player with the default buy-in."""
    return Player(player_id="test_player", name="Tester", chips=20)


@pytest.fixture
def config():
    return TableConfig()


@pytest.fixture
def host_game():
    """A host table with a seeded shuffle and no players."""
    return HostGame(local_player_id="h", rng=random.Random(42))


@pytest.fixture
def heads_up_host(host_game):
    """A host table where the host and one guest have joined; hand 1 is dealt."""
    host_game.handle_message(GameMessage.joining("h", "Host", is_host=True))
    host_game.handle_message(GameMessage.joining("g", "Guest"))
    return host_game


@pytest.fixture
def stacked_deck():
    """
    Build a serialized deck whose first cards are the given ones.

    Cards are drawn in seat order (two per player dealt in), then
    flop, turn and river.
    """
    def _build(cards: str) -> str:
        top = parse_cards(cards)
        rest = [c for c in Deck().cards if c not in top]
        return "".join(DECK_ALPHABET[c.index] for c in top + rest)
    return _build


@pytest.fixture
def make_guest(stacked_deck):
    """
    Create a guest table with a hand dealt from a stacked deck.

    Usage:
        game = make_guest([("a", 20), ("b", 20)], button="a", cards="As Ah Kc Kd ...")
    """
    def _make(players, button, cards, config=None):
        roster = ",".join(f"{pid},{pid.upper()},{chips}" for pid, chips in players)
        game = GuestGame(local_player_id=players[0][0], config=config)
        game.set_new_hand(len(players), f"{stacked_deck(cards)},{button},{roster}")
        return game
    return _make


@pytest.fixture
def check_down():
    """
    Play out the current hand with every actor calling or checking.

    Any extra games receive the same messages, as relayed guests would.
    """
    def _play(game, *relay_to):
        for _ in range(200):
            if not game.state.is_betting:
                return
            message = GameMessage.bet(game.actor.player_id, game.to_call_amount)
            game.handle_message(message)
            for other in relay_to:
                other.handle_message(message)
        raise AssertionError("Hand did not finish")
    return _play


@pytest.fixture
def royal_flush():
    """Create a royal flush hand."""
    return [
        Card(Rank.ACE, Suit.SPADE),
        Card(Rank.KING, Suit.SPADE),
        Card(Rank.QUEEN, Suit.SPADE),
        Card(Rank.JACK, Suit.SPADE),
        Card(Rank.TEN, Suit.SPADE),
    ]


@pytest.fixture
def wheel_straight():
    """Create a wheel straight (A-2-3-4-5)."""
    return [
        Card(Rank.ACE, Suit.SPADE),
        Card(Rank.TWO, Suit.HEART),
        Card(Rank.THREE, Suit.DIAMOND),
        Card(Rank.FOUR, Suit.CLUB),
        Card(Rank.FIVE, Suit.SPADE),
    ]
