"""
Tests for pot settlement.

A winner can only take from each opponent as much as the winner put in;
anything above the lowest winning contribution goes back to whoever bet it.
Even splits hand odd chips out one at a time in seat order.
"""

from holdemsync.core.game import MessageStatus
from holdemsync.core.message import GameMessage
from holdemsync.core.rules import State


SHORT_STACK = [("a", 10), ("b", 30), ("c", 30)]


def _all_in_preflop(game):
    """Button a (short) shoves, b re-shoves, c calls, a checks its all-in."""
    game.handle_message(GameMessage.bet("a", 10))
    game.handle_message(GameMessage.bet("b", 30))
    game.handle_message(GameMessage.bet("c", 30))
    # a is all-in but still gets the turn; a bet of its whole stack is a call.
    result = game.handle_message(GameMessage.bet("a", 10))
    assert result.status == MessageStatus.APPLIED


class TestShortStackWins:
    """The all-in player holds the best hand."""

    def test_excess_returned(self, make_guest, check_down):
        """Test that the excess over the short stack is returned."""
        game = make_guest(
            SHORT_STACK, button="a",
            cards="As Ah Kc Kd Qc Qd 2s 7h 9d 3c 5h",
        )
        _all_in_preflop(game)
        assert game.state == State.BET_2
        assert game.pot == 70
        check_down(game)

        a, b, c = game.players
        assert [w.player_id for w in game.winners] == ["a"]
        assert a.chips == 30
        assert b.chips == 20
        assert c.chips == 20
        assert a.chips_awarded == 30
        assert b.chips_awarded == 20
        assert sum(p.chips for p in game.players) == 70

    def test_net_results(self, make_guest, check_down):
        """Test net results after a short-stack win."""
        game = make_guest(
            SHORT_STACK, button="a",
            cards="As Ah Kc Kd Qc Qd 2s 7h 9d 3c 5h",
        )
        _all_in_preflop(game)
        check_down(game)
        a, b, c = game.players
        assert (a.net, b.net, c.net) == (20, -10, -10)


class TestShortStackLoses:
    """The all-in player loses and the deep stacks tie."""

    def test_deep_stacks_split_everything(self, make_guest, check_down):
        """Test deep stacks tying over a losing short stack."""
        game = make_guest(
            SHORT_STACK, button="a",
            cards="4c 6d Kc Qd Kd Qc As Ah 9s 8h Jd",
        )
        _all_in_preflop(game)
        check_down(game)

        a, b, c = game.players
        assert [w.player_id for w in game.winners] == ["b", "c"]
        assert a.chips == 0
        assert b.chips == 35
        assert c.chips == 35
        assert game.winning_cards

    def test_short_stack_eliminated(self, make_guest, check_down):
        """Test that the short stack is out."""
        game = make_guest(
            SHORT_STACK, button="a",
            cards="4c 6d Kc Qd Kd Qc As Ah 9s 8h Jd",
        )
        _all_in_preflop(game)
        check_down(game)
        assert not game.is_game_over()
        assert game.players_with_chips == [game.players[1], game.players[2]]


class TestSplitPot:
    """Tests for tied hands."""

    def test_odd_chip_to_earlier_seat(self, make_guest, check_down):
        """Test that the odd chip goes to the earlier seat."""
        game = make_guest(
            [("a", 20), ("b", 20), ("c", 20)], button="a",
            cards="2c 3d 7s 7h 2d 3c As Ks Qh Jd 9c",
        )
        game.handle_message(GameMessage.bet("a", 2))
        game.handle_message(GameMessage.fold("b"))
        game.handle_message(GameMessage.bet("c", 2))
        assert game.pot == 5
        check_down(game)

        a, b, c = game.players
        assert [w.player_id for w in game.winners] == ["a", "c"]
        assert a.chips == 21
        assert b.chips == 19
        assert c.chips == 20

    def test_pocket_aces_split_evenly(self, make_guest, check_down):
        """Test splitting with matching hands."""
        game = make_guest(
            [("a", 20), ("b", 20)], button="a",
            cards="As Ah Ad Ac 2s 7h 9d Jc Kh",
        )
        check_down(game)
        a, b = game.players
        assert a.best_hand == b.best_hand
        assert (a.chips, b.chips) == (20, 20)
        assert a.chips_awarded == b.chips_awarded == 2


class TestGameOver:
    """Tests for a player losing every chip."""

    def test_heads_up_all_in(self, make_guest, check_down):
        """Test a heads-up all-in ending the game."""
        game = make_guest(
            [("a", 20), ("b", 20)], button="a",
            cards="As Ah Kc Kd 2s 7h 9d 3c 5h",
        )
        game.handle_message(GameMessage.bet("b", 20))
        game.handle_message(GameMessage.bet("a", 20))
        assert game.state == State.BET_2
        check_down(game)

        a, b = game.players
        assert (a.chips, b.chips) == (40, 0)
        assert game.is_game_over()
        assert game.get_game_winner() is a
        assert not game.is_win_due_to_folding()
        assert "Pair of Aces" == game.hand_history[-1]["winners"][0]["description"]
