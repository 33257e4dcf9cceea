"""
HTTP API Routes for HoldemSync.

These routes create rooms and answer state queries.
Game messages are relayed via WebSocket.
"""

from typing import Dict, Any, Optional
from dataclasses import asdict
from fastapi import APIRouter, HTTPException, Request

from holdemsync.core.rules import TableConfig
from holdemsync.server.schemas import CreateRoomRequest, RoomInfoSchema, TableConfigSchema
from holdemsync.server.websocket import GameRoom, RoomManager

router = APIRouter()


def get_manager(request: Request) -> RoomManager:
    return request.app.state.room_manager


def get_room_or_404(request: Request, room_id: str) -> GameRoom:
    """Get a room, or raise 404."""
    room = get_manager(request).get_room(room_id)
    if room is None:
        raise HTTPException(status_code=404, detail=f"Room {room_id} not found")
    return room


@router.post("/rooms")
async def create_room(request: Request, req: Optional[CreateRoomRequest] = None) -> Dict[str, Any]:
    """
    Create a new room.

    Fields left out of the request fall back to the server's table defaults.
    """
    manager = get_manager(request)
    overrides = req.model_dump(exclude_none=True) if req else {}

    try:
        config = TableConfig(**{**asdict(manager.default_config), **overrides})
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    room_id = manager.create_room(config)
    return {
        "room_id": room_id,
        "config": asdict(config),
        "message": f"Room {room_id} created",
    }


@router.get("/rooms/{room_id}", response_model=RoomInfoSchema)
async def get_room(request: Request, room_id: str) -> RoomInfoSchema:
    """Get room information."""
    room = get_room_or_404(request, room_id)
    game = room.game
    return RoomInfoSchema(
        room_id=room_id,
        state=game.state.name,
        hand_number=game.hand_number,
        players=[p.player_id for p in game.players],
        pending_players=[p.player_id for p in game.pending_players],
        connections=len(room.connections),
        config=TableConfigSchema(**asdict(game.config)),
    )


@router.get("/rooms/{room_id}/state")
async def get_room_state(request: Request, room_id: str, player_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Get the host table's state.

    Private info is only included for ``player_id`` when given.
    """
    room = get_room_or_404(request, room_id)
    return room.game.get_state(for_player_id=player_id)
