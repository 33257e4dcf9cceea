"""
Game messages exchanged between the host and guests.

Wire form is one flat comma-joined record:

    playerId,typeOrdinal,actionTypeOrdinal,number,data

``data`` is the last field and is not escaped; everything after the fourth
comma belongs to it. ``number`` means:

    bet amount   (PLAYER_ACTION)
    host flag    (PLAYER_JOINING)
    player count (NEW_HAND)

and ``data`` carries the nickname (PLAYER_JOINING) or the new-hand
snapshot (NEW_HAND).
"""

from __future__ import annotations
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from holdemsync.core.errors import SyncFormatError


WIRE_FIELDS = 5


class MessageType(IntEnum):
    """Message types; the wire carries the ordinal."""
    SYNC_GAME_STATE = 0
    PLAYER_ACTION = 1
    PLAYER_JOINING = 2
    PLAYER_LEAVING = 3
    NEW_HAND = 4
    REQUEST_NEW_HAND = 5


class ActionType(IntEnum):
    """Player actions, meaningful only for PLAYER_ACTION."""
    NONE = 0
    FOLD = 1
    BET = 2


class GameMessage(BaseModel):
    """A message from one player about an action or the game state."""

    model_config = ConfigDict(frozen=True)

    player_id: str
    type: MessageType
    action_type: ActionType = ActionType.NONE
    number: int = 0
    data: str = ""

    @field_validator("player_id")
    @classmethod
    def _check_player_id(cls, v: str) -> str:
        if not v or "," in v:
            raise ValueError(f"player_id must be non-empty and comma-free: {v!r}")
        return v

    # ============= Constructors =============

    @classmethod
    def action(cls, player_id: str, action_type: ActionType, amount: int = 0) -> GameMessage:
        return cls(
            player_id=player_id,
            type=MessageType.PLAYER_ACTION,
            action_type=action_type,
            number=amount,
        )

    @classmethod
    def fold(cls, player_id: str) -> GameMessage:
        return cls.action(player_id, ActionType.FOLD)

    @classmethod
    def bet(cls, player_id: str, amount: int) -> GameMessage:
        return cls.action(player_id, ActionType.BET, amount)

    @classmethod
    def joining(cls, player_id: str, name: str, is_host: bool = False) -> GameMessage:
        return cls(
            player_id=player_id,
            type=MessageType.PLAYER_JOINING,
            number=int(is_host),
            data=name,
        )

    @classmethod
    def leaving(cls, player_id: str) -> GameMessage:
        return cls(player_id=player_id, type=MessageType.PLAYER_LEAVING)

    @classmethod
    def request_new_hand(cls, player_id: str) -> GameMessage:
        return cls(player_id=player_id, type=MessageType.REQUEST_NEW_HAND)

    @classmethod
    def new_hand(cls, player_id: str, player_count: int, snapshot: str) -> GameMessage:
        return cls(
            player_id=player_id,
            type=MessageType.NEW_HAND,
            number=player_count,
            data=snapshot,
        )

    # ============= Wire format =============

    def serialize(self) -> str:
        """Serialize into the flat wire record."""
        return ",".join([
            self.player_id,
            str(int(self.type)),
            str(int(self.action_type)),
            str(self.number),
            self.data,
        ])

    @classmethod
    def deserialize(cls, s: str) -> GameMessage:
        """
        Parse a wire record.

        Raises:
            SyncFormatError: If the record has too few fields, a non-numeric
                field, or an unknown type/action ordinal.
        """
        parts = s.split(",", WIRE_FIELDS - 1)
        if len(parts) != WIRE_FIELDS:
            raise SyncFormatError(f"Expected {WIRE_FIELDS} fields in message: {s!r}")

        player_id, type_ordinal, action_ordinal, number, data = parts
        try:
            return cls(
                player_id=player_id,
                type=MessageType(int(type_ordinal)),
                action_type=ActionType(int(action_ordinal)),
                number=int(number),
                data=data,
            )
        except (ValueError, ValidationError) as e:
            raise SyncFormatError(f"Bad message {s!r}: {e}") from e

    def __str__(self) -> str:
        return (
            f"[Player = {self.player_id}, Type = {self.type.name}, "
            f"ActionType = {self.action_type.name}, number = {self.number}, data = {self.data}]"
        )
