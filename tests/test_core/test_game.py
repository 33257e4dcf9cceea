"""
Tests for the betting state machine.
"""

import pytest
from holdemsync.core.card import parse_cards
from holdemsync.core.game import MessageStatus
from holdemsync.core.message import ActionType, GameMessage
from holdemsync.core.rules import State


THREE_PLAYERS = [("a", 20), ("b", 20), ("c", 20)]


@pytest.fixture
def three_player_game(make_guest):
    """Button a, small blind b, big blind c; a acts first."""
    return make_guest(THREE_PLAYERS, button="a", cards="")


class TestSetupHand:
    """Tests for dealing and blinds."""

    def test_blinds_posted(self, three_player_game):
        """Test posting the blinds."""
        game = three_player_game
        a, b, c = game.players
        assert (a.bet, b.bet, c.bet) == (0, 1, 2)
        assert (a.chips, b.chips, c.chips) == (20, 19, 18)
        assert game.to_call_amount == 2
        assert game.pot_size == 3
        assert game.state == State.BET_1
        assert game.state_description == "Preflop"

    def test_first_actor_after_big_blind(self, three_player_game):
        """Test that the seat after the big blind acts first."""
        assert three_player_game.actor.player_id == "a"
        assert three_player_game.last_raised is three_player_game.actor

    def test_pockets_dealt_in_seat_order(self, make_guest):
        """Test pocket cards dealt in seat order."""
        game = make_guest(THREE_PLAYERS, button="a", cards="As Ah Kc Kd Qc Qd")
        a, b, c = game.players
        assert a.pocket_cards == parse_cards("As Ah")
        assert b.pocket_cards == parse_cards("Kc Kd")
        assert c.pocket_cards == parse_cards("Qc Qd")
        assert game.deck.remaining == 46

    def test_heads_up_blinds(self, make_guest):
        """Heads-up: the seat after the button posts the small blind and acts first."""
        game = make_guest([("a", 20), ("b", 20)], button="a", cards="")
        a, b = game.players
        assert (a.bet, b.bet) == (2, 1)
        assert game.actor is b

    def test_short_blind_goes_all_in(self, make_guest):
        """Test a blind larger than the stack."""
        game = make_guest([("a", 20), ("b", 20), ("c", 1)], button="a", cards="")
        c = game.players[2]
        assert c.bet == 1
        assert c.is_all_in
        assert game.to_call_amount == 2

    def test_broke_player_not_dealt_in(self, make_guest):
        """Test that broke players sit out."""
        game = make_guest([("a", 20), ("b", 0), ("c", 20)], button="a", cards="")
        a, b, c = game.players
        assert b.pocket_cards == []
        # Small blind skips the broke seat.
        assert (a.bet, c.bet) == (2, 1)
        assert game.actor is c

    def test_hand_start_logged(self, three_player_game):
        """Test the hand start history entry."""
        entry = three_player_game.hand_history[0]
        assert entry["action"] == "HAND_START"
        assert entry["button"] == "a"
        assert entry["small_blind"] == "b"
        assert entry["big_blind"] == "c"


class TestTurnOrder:
    """Tests for who acts next."""

    def test_preflop_round(self, three_player_game):
        """Test a full preflop round of calls."""
        game = three_player_game
        game.handle_message(GameMessage.bet("a", 2))
        assert game.actor.player_id == "b"
        game.handle_message(GameMessage.bet("b", 2))
        assert game.actor.player_id == "c"
        game.handle_message(GameMessage.bet("c", 2))

        assert game.state == State.BET_2
        assert game.pot == 6
        assert len(game.board_cards) == 3
        assert game.to_call_amount == 0
        # Postflop the first player after the button opens.
        assert game.actor.player_id == "b"

    def test_four_players_first_actor_after_blinds(self, make_guest):
        """Test turn order with four players."""
        game = make_guest(THREE_PLAYERS + [("d", 20)], button="a", cards="")
        assert game.actor.player_id == "d"
        game.handle_message(GameMessage.bet("d", 6))
        for pid in ("a", "b", "c"):
            assert game.actor.player_id == pid
            game.handle_message(GameMessage.bet(pid, 6))
        # Action came back to the raiser, so the round is over.
        assert game.state == State.BET_2
        assert game.pot == 24

    def test_raise_reopens_action(self, three_player_game):
        """Test that a raise reopens the round."""
        game = three_player_game
        game.handle_message(GameMessage.bet("a", 2))
        game.handle_message(GameMessage.bet("b", 6))
        assert game.last_raised.player_id == "b"
        assert game.to_call_amount == 6
        game.handle_message(GameMessage.bet("c", 6))
        assert game.actor.player_id == "a"
        game.handle_message(GameMessage.bet("a", 6))
        assert game.state == State.BET_2
        assert game.pot == 18

    def test_folded_player_skipped_postflop(self, three_player_game):
        """Test that folded players are skipped."""
        game = three_player_game
        game.handle_message(GameMessage.bet("a", 2))
        game.handle_message(GameMessage.fold("b"))
        game.handle_message(GameMessage.bet("c", 2))
        assert game.state == State.BET_2
        assert game.actor.player_id == "c"

    def test_board_grows_each_street(self, three_player_game):
        game = three_player_game
        seen = []
        while game.state.is_betting:
            state = game.state
            game.handle_message(GameMessage.bet(game.actor.player_id, game.to_call_amount))
            if game.state != state:
                seen.append((game.state, len(game.board_cards)))
        assert seen == [
            (State.BET_2, 3), (State.BET_3, 4), (State.BET_4, 5), (State.HAND_DONE, 5),
        ]
        actions = [e["action"] for e in game.hand_history]
        assert "FLOP" in actions and "TURN" in actions and "RIVER" in actions
        assert actions[-1] == "SHOWDOWN"

    def test_first_actor_folding_preflop_ends_round(self, three_player_game):
        """The first actor is the round's marker; folding it still closes the round."""
        game = three_player_game
        game.handle_message(GameMessage.fold("a"))
        game.handle_message(GameMessage.bet("b", 2))
        game.handle_message(GameMessage.bet("c", 2))
        assert game.state == State.BET_2


class TestFoldOut:
    """Tests for winning when everyone else folds."""

    def test_two_folds_end_hand(self, three_player_game):
        """Test winning when everyone else folds."""
        game = three_player_game
        game.handle_message(GameMessage.fold("a"))
        game.handle_message(GameMessage.fold("b"))

        assert game.state == State.HAND_DONE
        assert game.is_win_due_to_folding()
        assert [w.player_id for w in game.winners] == ["c"]
        assert game.actor is None

        a, b, c = game.players
        assert (a.chips, b.chips, c.chips) == (20, 19, 21)
        assert c.chips_awarded == 3
        assert c.net == 1
        assert game.winning_cards == []
        assert game.hand_history[-1]["action"] == "WIN_BY_FOLD"

    def test_ready_flags_cleared(self, three_player_game):
        """Test that ready flags reset after a hand."""
        game = three_player_game
        for p in game.players:
            p.is_ready = True
        game.handle_message(GameMessage.fold("a"))
        game.handle_message(GameMessage.fold("b"))
        assert not any(p.is_ready for p in game.players)


class TestActionCoercion:
    """Tests for illegal actions turned into legal ones."""

    def test_under_call_is_forced_fold(self, three_player_game):
        """Test that a short call becomes a fold."""
        result = three_player_game.handle_message(GameMessage.bet("a", 1))
        assert result.status == MessageStatus.COERCED
        assert three_player_game.players[0].is_folded

    def test_over_commit_is_clamped_to_all_in(self, three_player_game):
        """Test that bets above the stack are clamped."""
        game = three_player_game
        result = game.handle_message(GameMessage.bet("a", 50))
        a = game.players[0]
        assert result.status == MessageStatus.COERCED
        assert a.bet == 20
        assert a.chips == 0
        assert game.to_call_amount == 20
        assert game.last_raised is a

    def test_fold_with_nothing_to_call_is_check(self, three_player_game):
        """Test that a free fold becomes a check."""
        game = three_player_game
        game.handle_message(GameMessage.bet("a", 2))
        game.handle_message(GameMessage.bet("b", 2))
        result = game.handle_message(GameMessage.fold("c"))
        assert result.status == MessageStatus.COERCED
        assert not game.players[2].is_folded
        assert game.state == State.BET_2

    def test_action_none_is_fold(self, three_player_game):
        """Test that ActionType.NONE is a fold."""
        result = three_player_game.handle_message(GameMessage.action("a", ActionType.NONE))
        assert result.status == MessageStatus.COERCED
        assert three_player_game.players[0].is_folded

    def test_plain_fold_is_applied(self, three_player_game):
        """Test a legal fold."""
        result = three_player_game.handle_message(GameMessage.fold("a"))
        assert result.status == MessageStatus.APPLIED

    def test_all_in_player_cannot_fold(self, make_guest):
        game = make_guest([("a", 20), ("b", 20), ("c", 5)], button="a", cards="")
        game.handle_message(GameMessage.bet("a", 10))
        game.handle_message(GameMessage.bet("b", 10))
        game.handle_message(GameMessage.bet("c", 5))
        c = game.players[2]
        assert c.is_all_in
        # Round is over once action is back at a; the all-in player still gets turns later.
        assert game.state == State.BET_2
        while game.actor is not c:
            game.handle_message(GameMessage.bet(game.actor.player_id, 0))
        result = game.handle_message(GameMessage.fold("c"))
        assert result.status == MessageStatus.COERCED
        assert not c.is_folded


class TestOutOfTurn:
    """Tests for actions from the wrong player."""

    def test_action_from_non_actor_ignored(self, three_player_game):
        """Test an action from the wrong player."""
        game = three_player_game
        result = game.handle_message(GameMessage.bet("b", 10))
        assert result.status == MessageStatus.IGNORED
        assert not result.success
        assert game.actor.player_id == "a"
        assert game.players[1].bet == 1

    def test_action_after_hand_done_ignored(self, three_player_game):
        """Test an action after the hand is over."""
        game = three_player_game
        game.handle_message(GameMessage.fold("a"))
        game.handle_message(GameMessage.fold("b"))
        result = game.handle_message(GameMessage.bet("c", 2))
        assert result.status == MessageStatus.IGNORED


class TestGameQueries:
    """Tests for derived values and the state view."""

    def test_to_raise_amount(self, three_player_game):
        """Test the suggested raise amount."""
        game = three_player_game
        assert game.to_raise_amount == 4
        game.handle_message(GameMessage.bet("a", 5))
        assert game.to_raise_amount == 10

    def test_min_pot_contribution(self, make_guest):
        """Test the lowest pot contribution."""
        game = make_guest([("a", 20), ("b", 20), ("c", 5)], button="a", cards="")
        game.handle_message(GameMessage.bet("a", 10))
        game.handle_message(GameMessage.bet("b", 10))
        game.handle_message(GameMessage.bet("c", 5))
        assert game.min_pot_contribution == 5

    def test_get_state(self, three_player_game):
        """Test the public and private state view."""
        state = three_player_game.get_state(for_player_id="a")
        public = state["public_info"]
        assert public["state"] == "BET_1"
        assert public["actor"] == "a"
        assert public["button"] == "a"
        assert public["pot"] == 3
        assert all("cards" not in p for p in public["players"])

        private = state["private_info"]
        assert len(private["hand"]) == 2
        assert private["chips_to_call"] == 2
        assert private["is_actor"]

    def test_get_state_unknown_player(self, three_player_game):
        """Test the state view for an unknown player."""
        assert three_player_game.get_state(for_player_id="zz")["private_info"] == {}

    def test_disconnect_resets(self, three_player_game):
        """Test disconnecting a table."""
        game = three_player_game
        game.disconnect()
        assert game.state == State.NONE
        assert len(game.players) == 0
        assert game.actor is None
        assert not game.is_started
