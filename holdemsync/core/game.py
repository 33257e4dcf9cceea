"""
Texas Hold'em Game Engine - State Machine Implementation.

This module drives one hand of Texas Hold'em end to end:
- Blind posting and button rotation
- Turn order and betting rounds (preflop, flop, turn, river)
- Showdown or win by folding
- Pot settlement, returning uncalled chips above the lowest winner's stake

The host is authoritative. It seats players, deals, and queues a NEW_HAND
snapshot for guests. A guest rebuilds the same deck, button and roster from
that snapshot and then replays the relayed player actions, so both sides
walk through identical states.

Messages must be delivered one at a time; each one is applied to completion
before the next.
"""

from __future__ import annotations
from typing import List, Dict, Optional, Tuple, Any
from dataclasses import dataclass
from enum import Enum
import logging
import random

from holdemsync.core.card import Card, Deck
from holdemsync.core.errors import SyncFormatError
from holdemsync.core.hand import describe_hand
from holdemsync.core.message import ActionType, GameMessage, MessageType
from holdemsync.core.player import Player
from holdemsync.core.ring import PlayerRing
from holdemsync.core.rules import (
    State, TableConfig, BOARD_CARDS_AFTER, HOLE_CARDS, MIN_PLAYERS,
    TOTAL_COMMUNITY_CARDS, min_raise_to,
)


logger = logging.getLogger(__name__)


class Role(Enum):
    """Which side of the synchronization protocol a game plays."""
    HOST = "HOST"
    GUEST = "GUEST"


class MessageStatus(Enum):
    """How an inbound message was handled."""
    APPLIED = "APPLIED"    # Taken as sent
    COERCED = "COERCED"    # Taken, but changed to a legal equivalent
    IGNORED = "IGNORED"    # Benign no-op (wrong role, out of turn, duplicate)


@dataclass
class MessageResult:
    """Result of handling one message."""
    status: MessageStatus
    detail: str = ""

    @property
    def success(self) -> bool:
        return self.status != MessageStatus.IGNORED


def _ignored(detail: str, level: int = logging.WARNING) -> MessageResult:
    logger.log(level, detail)
    return MessageResult(MessageStatus.IGNORED, detail)


# ============= New-hand snapshot =============

def format_new_hand(deck: Deck, button: Player, players: List[Player]) -> str:
    """
    Snapshot sent with NEW_HAND: ``deck,buttonId,(playerId,name,chips)*``.
    """
    roster = ",".join(f"{p.player_id},{p.name},{p.chips}" for p in players)
    return f"{deck.serialize()},{button.player_id},{roster}"


def parse_new_hand(player_count: int, data: str) -> Tuple[Deck, List[Player], Player]:
    """
    Parse a NEW_HAND snapshot into a deck, a fresh roster and the button.

    Raises:
        SyncFormatError: If anything about the snapshot is malformed.
    """
    parts = data.split(",", 2)
    if len(parts) != 3:
        raise SyncFormatError(f"Bad NEW_HAND snapshot: {data!r}")
    deck_data, button_id, roster = parts

    deck = Deck.deserialize(deck_data)

    fields = roster.split(",")
    if player_count < MIN_PLAYERS or len(fields) != player_count * 3:
        raise SyncFormatError(
            f"Bad NEW_HAND snapshot: expected {player_count} players, got {len(fields)} fields"
        )

    players: List[Player] = []
    for i in range(player_count):
        player_id, name, chips_str = fields[i * 3:i * 3 + 3]
        try:
            chips = int(chips_str)
        except ValueError:
            raise SyncFormatError(f"Bad chip count for {player_id!r}: {chips_str!r}")
        if not player_id or chips < 0:
            raise SyncFormatError(f"Bad player entry: {player_id!r},{name!r},{chips_str!r}")
        players.append(Player(player_id=player_id, name=name, chips=chips))

    if len({p.player_id for p in players}) != len(players):
        raise SyncFormatError("Bad NEW_HAND snapshot: duplicate player ids")

    button = next((p for p in players if p.player_id == button_id), None)
    if button is None:
        raise SyncFormatError(f"Bad NEW_HAND snapshot: unknown button {button_id!r}")

    dealt_in = sum(1 for p in players if p.chips > 0)
    if dealt_in < MIN_PLAYERS:
        raise SyncFormatError("Bad NEW_HAND snapshot: fewer than two players have chips")
    if deck.remaining < dealt_in * HOLE_CARDS + TOTAL_COMMUNITY_CARDS:
        raise SyncFormatError(f"Bad NEW_HAND snapshot: only {deck.remaining} cards in deck")

    return deck, players, button


class TexasHoldemGame:
    """
    State shared by both roles, and the betting state machine.

    Use HostGame or GuestGame (or create_game) rather than this class.

    Usage:
        host = HostGame(local_player_id="h")
        host.handle_message(GameMessage.joining("h", "Host", is_host=True))
        host.handle_message(GameMessage.joining("g", "Guest"))
        for msg in host.drain_outbox():
            guest.handle_message(msg)          # NEW_HAND

        result = host.handle_message(GameMessage.bet(host.actor.player_id, 2))
        if result.success:
            guest.handle_message(...)          # relay the same message
    """

    role: Role

    def __init__(self, local_player_id: str, config: Optional[TableConfig] = None):
        """
        Args:
            local_player_id: Id of the participant running this game
            config: Buy-in and blind sizes
        """
        self.local_player_id = local_player_id
        self.config = config or TableConfig()

        self.deck: Optional[Deck] = None
        self.players = PlayerRing()
        self.board_cards: List[Card] = []

        self.button: Optional[Player] = None
        self.actor: Optional[Player] = None
        # Who last bet or raised; the first actor at the start of a round.
        self.last_raised: Optional[Player] = None
        # Set only once the hand is done.
        self.winners: Optional[List[Player]] = None

        # Chips from finished betting rounds.
        self.pot = 0
        self.to_call_amount = 0
        self.state = State.NONE
        self.hand_number = 0

        self.hand_history: List[Dict[str, Any]] = []

    # ============= Queries =============

    @property
    def is_host(self) -> bool:
        return self.role == Role.HOST

    @property
    def is_started(self) -> bool:
        """True once the first hand has been dealt."""
        return self.state != State.NONE

    @property
    def state_description(self) -> str:
        return self.state.description

    def is_game_over(self) -> bool:
        return self.state == State.HAND_DONE and len(self.players_with_chips) < MIN_PLAYERS

    def get_game_winner(self) -> Optional[Player]:
        """The player who won the game, or None if the game is not over."""
        if not self.is_game_over():
            return None
        for player in self.players:
            if player.chips > 0:
                return player
        return None

    def get_player(self, player_id: str) -> Optional[Player]:
        return self.players.find(player_id)

    @property
    def players_in_hand(self) -> List[Player]:
        """Players who have not folded and are not broke."""
        return [p for p in self.players if not p.is_folded and not p.is_broke]

    @property
    def players_with_chips(self) -> List[Player]:
        return [p for p in self.players if p.chips > 0]

    def is_win_due_to_folding(self) -> bool:
        return (
            self.state == State.HAND_DONE
            and bool(self.winners)
            and len(self.players_in_hand) == 1
        )

    @property
    def winning_cards(self) -> List[Card]:
        """Cards that make up the winners' best hands."""
        cards: List[Card] = []
        if self.state == State.HAND_DONE and self.winners:
            for winner in self.winners:
                if winner.best_hand is not None:
                    cards.extend(c for c in winner.best_hand.cards if c not in cards)
        return cards

    @property
    def pot_size(self) -> int:
        """The pot including chips bet in the current round."""
        return self.pot + sum(p.bet for p in self.players)

    @property
    def min_pot_contribution(self) -> int:
        """
        Lowest pot contribution among players still in the hand. Equal for
        all of them unless someone is all-in.
        """
        contributions = [p.pot_contribution for p in self.players_in_hand]
        return min(contributions) if contributions else 0

    @property
    def to_raise_amount(self) -> int:
        """Suggested minimum raise target for the current round."""
        return min_raise_to(self.to_call_amount, self.min_pot_contribution, self.config.big_blind)

    # ============= Connection =============

    def disconnect(self) -> None:
        """Drop all hand and seating state and return to NONE."""
        self.players.clear()
        self._cleanup_hand()
        self.deck = None
        self.button = None
        self.hand_history = []
        self.state = State.NONE
        logger.info(f"{self.role.value} game disconnected")

    # ============= Messages =============

    def handle_message(self, message: GameMessage) -> MessageResult:
        """
        Apply one inbound message.

        Protocol misuse never raises; see MessageResult. A malformed NEW_HAND
        snapshot raises SyncFormatError.
        """
        logger.debug(f"Handling game message: {message}")
        handlers = {
            MessageType.SYNC_GAME_STATE: self._on_sync_game_state,
            MessageType.PLAYER_ACTION: self._on_player_action,
            MessageType.PLAYER_JOINING: self._on_player_joining,
            MessageType.PLAYER_LEAVING: self._on_player_leaving,
            MessageType.NEW_HAND: self._on_new_hand,
            MessageType.REQUEST_NEW_HAND: self._on_request_new_hand,
        }
        return handlers[message.type](message)

    def _on_sync_game_state(self, message: GameMessage) -> MessageResult:
        return _ignored(f"SYNC_GAME_STATE from {message.player_id} is not handled", logging.INFO)

    def _on_player_joining(self, message: GameMessage) -> MessageResult:
        return _ignored(f"{self.role.value} does not seat players (from {message.player_id})", logging.DEBUG)

    def _on_player_leaving(self, message: GameMessage) -> MessageResult:
        return _ignored(f"{self.role.value} does not unseat players (from {message.player_id})", logging.DEBUG)

    def _on_new_hand(self, message: GameMessage) -> MessageResult:
        return _ignored(f"{self.role.value} does not take NEW_HAND (from {message.player_id})")

    def _on_request_new_hand(self, message: GameMessage) -> MessageResult:
        if self.is_started and self.state != State.HAND_DONE:
            return _ignored(f"REQUEST_NEW_HAND from {message.player_id} during a hand")
        player = self.get_player(message.player_id)
        if player is None:
            return _ignored(f"REQUEST_NEW_HAND from unknown player {message.player_id}")
        player.is_ready = True
        return MessageResult(MessageStatus.APPLIED, f"{player.name} is ready")

    def _on_player_action(self, message: GameMessage) -> MessageResult:
        actor = self.actor
        if actor is None or actor.player_id != message.player_id:
            return _ignored(
                f"Got PLAYER_ACTION message from an unexpected player = {message.player_id}, "
                f"not the actor = {actor.player_id if actor else 'NONE'}"
            )

        if message.action_type == ActionType.BET:
            result = self._apply_bet(actor, message.number)
        else:
            result = self._apply_fold(actor, message.action_type)

        self._continue_game()
        return result

    def _apply_fold(self, actor: Player, action_type: ActionType) -> MessageResult:
        if action_type == ActionType.NONE:
            logger.warning(f"PLAYER_ACTION from {actor.name} has action type NONE, treating as fold")

        # Folding is only possible when facing a bet the player can still call.
        if actor.bet < self.to_call_amount and actor.bet < actor.max_bet():
            actor.fold()
            self._log_action("FOLD", {"player": actor.player_id})
            if action_type == ActionType.FOLD:
                return MessageResult(MessageStatus.APPLIED, f"{actor.name} folded")
            return MessageResult(MessageStatus.COERCED, f"{actor.name} folded (no action given)")

        logger.info(f"{actor.name} cannot fold with nothing to call or while all-in, treated as check")
        self._log_action("BET", {"player": actor.player_id, "amount": actor.bet})
        return MessageResult(MessageStatus.COERCED, f"{actor.name} checked instead of folding")

    def _apply_bet(self, actor: Player, amount: int) -> MessageResult:
        status = MessageStatus.APPLIED
        detail = ""

        if amount > actor.max_bet():
            logger.warning(f"{actor.name} bet {amount} with only {actor.max_bet()} available, going all-in")
            amount = actor.max_bet()
            status = MessageStatus.COERCED
            detail = " (clamped to all-in)"

        if amount > self.to_call_amount:
            # Bet or raise.
            self.last_raised = actor
            self.to_call_amount = amount
            actor.post_bet(amount)
            detail = f"{actor.name} raised to {amount}" + detail
        elif amount < self.to_call_amount and actor.max_bet() > amount:
            # Under the call amount without going all-in.
            logger.warning(
                f"{actor.name} bet {amount}, less than the call amount {self.to_call_amount}; folding"
            )
            actor.fold()
            self._log_action("FOLD", {"player": actor.player_id})
            return MessageResult(MessageStatus.COERCED, f"{actor.name} bet under the call and was folded")
        else:
            # Check, call, or all-in for less than the call.
            actor.post_bet(amount)
            detail = f"{actor.name} called {amount}" + detail

        self._log_action("BET", {"player": actor.player_id, "amount": amount})
        return MessageResult(status, detail)

    # ============= Hand flow =============

    def _cleanup_hand(self) -> None:
        """Reset hand state on the table and on every seated player."""
        self.board_cards = []
        self.pot = 0
        self.to_call_amount = 0
        self.actor = None
        self.last_raised = None
        self.winners = None
        self.hand_history = []

        for player in self.players:
            player.cleanup_hand()

    def _setup_hand(self) -> None:
        """Deal pockets, post blinds and open the preflop betting round."""
        if self.deck is None or self.button is None:
            raise RuntimeError("Cannot set up a hand without a deck and a button")
        self.hand_number += 1

        for player in self.players:
            if not player.is_broke:
                player.draw_cards(self.deck)

        small_blind = self.players.next_active_from(self.button)
        big_blind = self.players.next_active_from(small_blind)
        small_blind.post_bet(min(self.config.small_blind, small_blind.max_bet()))
        big_blind.post_bet(min(self.config.big_blind, big_blind.max_bet()))

        self.actor = self.players.next_active_from(big_blind)
        self.last_raised = self.actor
        self.to_call_amount = self.config.big_blind
        self.state = State.BET_1

        logger.info(
            f"Hand #{self.hand_number}: button={self.button.name} "
            f"SB={small_blind.name} BB={big_blind.name}"
        )
        self._log_action("HAND_START", {
            "hand_number": self.hand_number,
            "button": self.button.player_id,
            "small_blind": small_blind.player_id,
            "big_blind": big_blind.player_id,
        })

    def _continue_game(self) -> None:
        """Move on after the current actor has acted."""
        self.actor = self._get_next_actor()
        players_in_hand = self.players_in_hand

        if len(players_in_hand) == 1:
            self._conclude_betting_round()
            self.winners = players_in_hand
            self._award_winners()
            self._finish_hand("WIN_BY_FOLD")

        elif self.actor is None:
            self._conclude_betting_round()

            if self.state == State.BET_4:
                self.winners = self._get_winners_by_showdown()
                self._award_winners()
                self._finish_hand("SHOWDOWN")
                return

            if self.deck is None:
                raise RuntimeError("Cannot deal board cards without a deck")
            for _ in range(BOARD_CARDS_AFTER[self.state]):
                self.board_cards.append(self.deck.draw_card())
            self._start_betting_round()
            self.state = State(self.state.value + 1)
            self._log_action(self.state.description.upper(), {
                "cards": [str(c) for c in self.board_cards],
            })

    def _get_next_actor(self) -> Optional[Player]:
        """
        The next player to act, or None once action is back at the last
        raiser and the round is over.
        """
        if self.actor is None:
            raise RuntimeError("No actor to pass the turn from")
        next_actor = self.players.next_active_from(self.actor)
        for _ in range(len(self.players)):
            if next_actor is None or not next_actor.is_folded:
                break
            if next_actor is self.last_raised:
                # Only happens preflop, when the first actor folded.
                return None
            next_actor = self.players.next_active_from(next_actor)

        if next_actor is None or next_actor is self.last_raised:
            return None
        return next_actor

    def _conclude_betting_round(self) -> None:
        for player in self.players:
            self.pot += player.bet
            player.conclude_round()

    def _start_betting_round(self) -> None:
        """First player still in after the button opens; nothing to call."""
        if self.button is None:
            raise RuntimeError("Cannot open a betting round without a button")
        actor = self.players.next_active_from(self.button)
        while actor is not None and actor.is_folded:
            actor = self.players.next_active_from(actor)
        self.actor = actor
        self.last_raised = actor
        self.to_call_amount = 0

    def _get_winners_by_showdown(self) -> List[Player]:
        """Players holding the best hand; several on a tie."""
        best = None
        winners: List[Player] = []
        for player in self.players_in_hand:
            hand = player.construct_best_hand(self.board_cards)
            if best is None or hand > best:
                best = hand
                winners = [player]
            elif hand == best:
                winners.append(player)
        return winners

    def _award_winners(self) -> None:
        """
        Pay the winners.

        Contributions above the lowest winner's contribution go back to
        their owners; the rest is split evenly, odd chips one at a time in
        winner order.
        """
        if not self.winners:
            raise RuntimeError("Cannot award a pot without winners")
        lowest = min(w.pot_contribution for w in self.winners)

        main_pot = 0
        for player in self.players:
            if player.is_broke:
                continue
            if player.pot_contribution > lowest:
                player.award_chips(player.pot_contribution - lowest)
                main_pot += lowest
            else:
                main_pot += player.pot_contribution

        chips_each, remainder = divmod(main_pot, len(self.winners))
        for winner in self.winners:
            awarded = chips_each
            if remainder > 0:
                awarded += 1
                remainder -= 1
            winner.award_chips(awarded)

    def _finish_hand(self, event: str) -> None:
        for player in self.players:
            player.is_ready = False
        self.actor = None
        self.state = State.HAND_DONE

        if self.winners is None:
            raise RuntimeError("Hand finished without deciding winners")
        self._log_action(event, {
            "winners": [
                {
                    "player_id": w.player_id,
                    "amount": w.chips_awarded,
                    "description": describe_hand(w.best_hand) if w.best_hand else None,
                }
                for w in self.winners
            ],
        })
        logger.info(f"Hand #{self.hand_number} won by {', '.join(w.name for w in self.winners)}")

    # ============= State view =============

    def get_state(self, for_player_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Get the current game state.

        Args:
            for_player_id: If specified, include private info for this player
        """
        public_info = {
            "state": self.state.name,
            "description": self.state_description,
            "hand_number": self.hand_number,
            "pot": self.pot_size,
            "to_call": self.to_call_amount,
            "board": [c.to_dict() for c in self.board_cards],
            "button": self.button.player_id if self.button else None,
            "actor": self.actor.player_id if self.actor else None,
            "players": [p.to_dict(hide_cards=self.state != State.HAND_DONE) for p in self.players],
            "winners": [w.player_id for w in self.winners] if self.winners is not None else None,
        }

        private_info: Dict[str, Any] = {}
        if for_player_id:
            player = self.get_player(for_player_id)
            if player:
                private_info = {
                    "hand": [c.to_dict() for c in player.pocket_cards],
                    "pocket": player.pocket.label if player.pocket else None,
                    "chips_to_call": max(0, min(self.to_call_amount, player.max_bet()) - player.bet),
                    "min_raise": self.to_raise_amount,
                    "max_bet": player.max_bet(),
                    "is_actor": self.actor is player,
                }

        return {
            "public_info": public_info,
            "private_info": private_info,
        }

    def _log_action(self, action: str, details: Dict[str, Any]) -> None:
        """Log an action to hand history."""
        self.hand_history.append({
            "action": action,
            "state": self.state.name,
            **details
        })


class HostGame(TexasHoldemGame):
    """
    The authoritative side: seats players, deals, and queues NEW_HAND
    snapshots for guests in ``outbox``.
    """

    role = Role.HOST

    def __init__(
        self,
        local_player_id: str,
        config: Optional[TableConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(local_player_id, config)
        self._rng = rng
        # Players to deal in on the next hand.
        self.pending_players: List[Player] = []
        self.outbox: List[GameMessage] = []

    def drain_outbox(self) -> List[GameMessage]:
        """Messages to broadcast to guests, oldest first."""
        messages, self.outbox = self.outbox, []
        return messages

    def disconnect(self) -> None:
        self.pending_players = []
        self.outbox = []
        super().disconnect()

    def deal_new_hand(self) -> bool:
        """
        Start a new hand: seat queued players, shuffle, rotate the button,
        and queue the NEW_HAND snapshot.

        Returns:
            True if a hand was dealt, False if fewer than two players have chips
        """
        candidates = self.players.to_list() + self.pending_players
        if sum(1 for p in candidates if p.chips > 0) < MIN_PLAYERS:
            logger.warning("Cannot deal a new hand: not enough players with chips")
            return False

        self._cleanup_hand()

        for player in self.pending_players:
            player.cleanup_hand()
            self.players.add(player)
        self.pending_players = []

        self.deck = Deck(shuffle=True, rng=self._rng)

        if self.button is None:
            first = self.players[0]
            self.button = first if not first.is_broke else self.players.next_active_from(first)
        else:
            self.button = self.players.next_active_from(self.button)

        # The snapshot holds the deck before pockets are drawn, so guests
        # draw the same cards.
        snapshot = self.serialize_new_hand()
        self._setup_hand()
        self.outbox.append(GameMessage.new_hand(self.local_player_id, len(self.players), snapshot))
        return True

    def serialize_new_hand(self) -> str:
        """Snapshot of the deck, button and roster for guests."""
        if self.deck is None or self.button is None:
            raise RuntimeError("No hand has been dealt")
        return format_new_hand(self.deck, self.button, self.players.to_list())

    def _all_players_ready_to_start(self) -> bool:
        """
        True if at least two seated or queued players have chips and all of
        them are ready.
        """
        candidates = self.players_with_chips + [p for p in self.pending_players if p.chips > 0]
        if len(candidates) < MIN_PLAYERS:
            return False
        return all(p.is_ready for p in candidates)

    def _on_player_joining(self, message: GameMessage) -> MessageResult:
        player_id = message.player_id
        if self.get_player(player_id) or any(p.player_id == player_id for p in self.pending_players):
            return _ignored(f"Got PLAYER_JOINING message from a player already in the game: {player_id}")
        if "," in message.data:
            return _ignored(f"Rejected PLAYER_JOINING from {player_id}: name contains ','")

        new_player = Player(player_id=player_id, name=message.data, chips=self.config.buy_in)
        new_player.is_ready = True

        if not self.is_started:
            self.players.add(new_player)
            logger.info(f"{new_player.name} joined the table")
        else:
            self.pending_players.append(new_player)
            logger.info(f"{new_player.name} will be dealt in on the next hand")

        if not self.state.is_betting and self._all_players_ready_to_start():
            self.deal_new_hand()

        return MessageResult(MessageStatus.APPLIED, f"{new_player.name} joined")

    def _on_player_leaving(self, message: GameMessage) -> MessageResult:
        player = self.get_player(message.player_id)
        if player is None:
            for pending in self.pending_players:
                if pending.player_id == message.player_id:
                    self.pending_players.remove(pending)
                    return MessageResult(MessageStatus.APPLIED, f"{pending.name} left before being dealt in")
            return _ignored(f"PLAYER_LEAVING from unknown player {message.player_id}")

        hand_in_progress = self.state.is_betting
        if hand_in_progress:
            # Everyone else gets back what they put in; the leaver forfeits.
            for other in self.players:
                if other is not player:
                    other.return_bets()

        if player is self.button:
            self.button = self.players.previous_of(player) if len(self.players) > 1 else None
        self.players.remove(player)
        logger.info(f"{player.name} left the table")

        if self.is_started and not self.deal_new_hand() and hand_in_progress:
            self._abandon_hand()

        return MessageResult(MessageStatus.APPLIED, f"{player.name} left")

    def _on_request_new_hand(self, message: GameMessage) -> MessageResult:
        result = super()._on_request_new_hand(message)
        if result.success and self._all_players_ready_to_start():
            self.deal_new_hand()
        return result

    def _abandon_hand(self) -> None:
        """End a hand that cannot continue, with no winners."""
        self._cleanup_hand()
        for player in self.players:
            player.is_ready = False
        self.winners = []
        self.state = State.HAND_DONE
        logger.warning("Hand abandoned: not enough players left")


class GuestGame(TexasHoldemGame):
    """
    A non-host participant. Replays host-dealt hands from NEW_HAND snapshots
    and relayed player actions.
    """

    role = Role.GUEST

    def set_new_hand(self, player_count: int, data: str) -> None:
        """
        Replace the table with the host's NEW_HAND snapshot and set up the hand.

        Raises:
            SyncFormatError: If the snapshot is malformed; the game is unchanged.
        """
        deck, players, button = parse_new_hand(player_count, data)

        self._cleanup_hand()
        self.deck = deck
        self.players = PlayerRing(players)
        self.button = button
        self._setup_hand()

    def _on_new_hand(self, message: GameMessage) -> MessageResult:
        self.set_new_hand(message.number, message.data)
        return MessageResult(MessageStatus.APPLIED, f"Hand #{self.hand_number} dealt by host")


def create_game(
    role: Role,
    local_player_id: str,
    config: Optional[TableConfig] = None,
    rng: Optional[random.Random] = None,
) -> TexasHoldemGame:
    """Build the game object for one side of a connection."""
    if role == Role.HOST:
        return HostGame(local_player_id, config, rng=rng)
    return GuestGame(local_player_id, config)
