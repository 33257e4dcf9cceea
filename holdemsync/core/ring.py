"""
Seating ring for a table.

Players sit in a plain list in seating order; "next seat" is computed with
modular arithmetic, so seating and unseating are list splices.
"""

from __future__ import annotations
from typing import Iterator, List, Optional

from holdemsync.core.player import Player


class PlayerRing:
    """Players in seating (clockwise) order."""

    def __init__(self, players: Optional[List[Player]] = None):
        self._players: List[Player] = list(players or [])

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __len__(self) -> int:
        return len(self._players)

    def __getitem__(self, index: int) -> Player:
        return self._players[index]

    def __contains__(self, player: object) -> bool:
        return any(p is player for p in self._players)

    def index_of(self, player: Player) -> int:
        for i, p in enumerate(self._players):
            if p is player:
                return i
        raise ValueError(f"{player!r} is not seated")

    def add(self, player: Player) -> None:
        """Seat a player after the last seat."""
        self._players.append(player)

    def remove(self, player: Player) -> None:
        del self._players[self.index_of(player)]

    def clear(self) -> None:
        self._players.clear()

    def find(self, player_id: str) -> Optional[Player]:
        """The seated player with the given id, if any."""
        for player in self._players:
            if player.player_id == player_id:
                return player
        return None

    def next_of(self, player: Player) -> Player:
        """The player in the next seat, wrapping around."""
        return self._players[(self.index_of(player) + 1) % len(self._players)]

    def previous_of(self, player: Player) -> Player:
        return self._players[(self.index_of(player) - 1) % len(self._players)]

    def next_active_from(self, player: Player) -> Optional[Player]:
        """
        The next player after ``player`` who is not broke.

        Returns None if the walk arrives back at ``player``, i.e. everyone
        else is broke.
        """
        start = self.index_of(player)
        n = len(self._players)
        for step in range(1, n):
            candidate = self._players[(start + step) % n]
            if not candidate.is_broke:
                return candidate
        return None

    def to_list(self) -> List[Player]:
        return list(self._players)

    def __repr__(self) -> str:
        return f"PlayerRing({[p.name for p in self._players]})"
