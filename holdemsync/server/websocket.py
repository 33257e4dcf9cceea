"""
WebSocket relay for host/guest play.

This module provides:
- RoomManager: Keeps one authoritative HostGame per room
- WebSocket endpoint: Applies wire messages to the host table and relays
  them to every connection, so each client's GuestGame replays the same hand

Each text frame is one wire message (see GameMessage.serialize). Frames
that the host ignores or cannot parse are answered with ``error:<detail>``
to the sender only.
"""

from __future__ import annotations
from typing import Dict, List, Optional
from dataclasses import dataclass, field
import asyncio
import logging

from fastapi import WebSocket, WebSocketDisconnect

from holdemsync.core.errors import SyncFormatError
from holdemsync.core.game import HostGame
from holdemsync.core.message import GameMessage, MessageType
from holdemsync.core.rules import TableConfig
from holdemsync.server.config import HOST_PLAYER_ID


logger = logging.getLogger(__name__)

ERROR_PREFIX = "error:"


@dataclass(eq=False)
class RoomConnection:
    """A socket in a room, bound to a player once it joins."""
    websocket: WebSocket
    player_id: Optional[str] = None


@dataclass
class GameRoom:
    """A room with its host table and connected sockets."""
    room_id: str
    game: HostGame
    connections: List[RoomConnection] = field(default_factory=list)
    # Messages are applied and relayed one at a time.
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    async def broadcast(self, frame: str):
        """Send a frame to all connected sockets."""
        for conn in list(self.connections):
            try:
                await conn.websocket.send_text(frame)
            except Exception as e:
                logger.error(f"Error sending to {conn.player_id or 'unjoined socket'}: {e}")

    async def apply(self, conn: RoomConnection, frame: str):
        """Apply one frame from ``conn`` to the host table and relay it."""
        try:
            message = GameMessage.deserialize(frame)
        except SyncFormatError as e:
            logger.warning(f"Malformed frame in {self.room_id}: {e}")
            await conn.websocket.send_text(f"{ERROR_PREFIX}{e}")
            return

        if conn.player_id is None and message.type != MessageType.PLAYER_JOINING:
            await conn.websocket.send_text(f"{ERROR_PREFIX}join before sending {message.type.name}")
            return
        if conn.player_id is not None and message.player_id != conn.player_id:
            await conn.websocket.send_text(
                f"{ERROR_PREFIX}connection is bound to {conn.player_id}, not {message.player_id}"
            )
            return

        async with self.lock:
            await self._apply_locked(conn, message)

    async def leave(self, conn: RoomConnection):
        """Unseat the player bound to a closed socket."""
        if conn in self.connections:
            self.connections.remove(conn)
        if conn.player_id is None:
            return
        async with self.lock:
            await self._apply_locked(None, GameMessage.leaving(conn.player_id))

    async def _apply_locked(self, conn: Optional[RoomConnection], message: GameMessage):
        result = self.game.handle_message(message)
        if not result.success:
            if conn is not None:
                await conn.websocket.send_text(f"{ERROR_PREFIX}{result.detail}")
            return

        if conn is not None and message.type == MessageType.PLAYER_JOINING:
            conn.player_id = message.player_id
        elif conn is not None and message.type == MessageType.PLAYER_LEAVING:
            conn.player_id = None

        await self.broadcast(message.serialize())
        for queued in self.game.drain_outbox():
            await self.broadcast(queued.serialize())


class RoomManager:
    """
    Manages rooms and their connections.

    Usage:
        manager = RoomManager()
        room_id = manager.create_room(TableConfig())
        conn = await manager.connect(room_id, websocket)
        await manager.get_room(room_id).apply(conn, frame)
        await manager.disconnect(room_id, conn)
    """

    def __init__(self, default_config: Optional[TableConfig] = None):
        self.default_config = default_config or TableConfig()
        self.rooms: Dict[str, GameRoom] = {}
        self._room_counter = 0

    def create_room(self, config: Optional[TableConfig] = None) -> str:
        """Create a new room with its own host table."""
        self._room_counter += 1
        room_id = f"room-{self._room_counter}"

        game = HostGame(local_player_id=HOST_PLAYER_ID, config=config or self.default_config)
        self.rooms[room_id] = GameRoom(room_id=room_id, game=game)
        logger.info(f"Created room {room_id} with {game.config}")

        return room_id

    def get_room(self, room_id: str) -> Optional[GameRoom]:
        return self.rooms.get(room_id)

    async def connect(self, room_id: str, websocket: WebSocket) -> Optional[RoomConnection]:
        """
        Accept a socket into a room.

        Returns:
            The connection, or None if the room does not exist
        """
        room = self.get_room(room_id)
        if room is None:
            logger.warning(f"Room {room_id} not found")
            return None

        await websocket.accept()
        conn = RoomConnection(websocket=websocket)
        room.connections.append(conn)
        logger.info(f"Socket connected to {room_id}")
        return conn

    async def disconnect(self, room_id: str, conn: RoomConnection):
        room = self.get_room(room_id)
        if room is None:
            return
        logger.info(f"Player {conn.player_id or 'unjoined socket'} disconnected from {room_id}")
        await room.leave(conn)


async def websocket_endpoint(websocket: WebSocket, room_id: str):
    """
    WebSocket endpoint for a room.

    Protocol:
    1. Client connects to /ws/{room_id}
    2. Client sends a PLAYER_JOINING wire message; it is relayed to all
    3. Once two players are seated the host deals and relays NEW_HAND
    4. Client sends PLAYER_ACTION / REQUEST_NEW_HAND wire messages; each
       accepted one is relayed to all, followed by any new NEW_HAND
    """
    manager: RoomManager = websocket.app.state.room_manager
    conn = await manager.connect(room_id, websocket)
    if conn is None:
        await websocket.close(code=4404)
        return

    room = manager.get_room(room_id)
    try:
        while True:
            frame = await websocket.receive_text()
            await room.apply(conn, frame)
    except WebSocketDisconnect:
        logger.info(f"WebSocket disconnected: {conn.player_id}")
    finally:
        await manager.disconnect(room_id, conn)
