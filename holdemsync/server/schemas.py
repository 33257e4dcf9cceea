"""
Pydantic schemas for API request/response validation.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, model_validator


# ============= Request Schemas =============

class CreateRoomRequest(BaseModel):
    """Request to create a new room. Unset fields use the server defaults."""
    buy_in: Optional[int] = Field(default=None, gt=0)
    small_blind: Optional[int] = Field(default=None, gt=0)
    big_blind: Optional[int] = Field(default=None, gt=0)

    @model_validator(mode="after")
    def _check_blinds(self) -> "CreateRoomRequest":
        if self.small_blind is not None and self.big_blind is not None:
            if self.big_blind < self.small_blind:
                raise ValueError("big_blind must be at least small_blind")
        return self


# ============= Response Schemas =============

class TableConfigSchema(BaseModel):
    """Chip settings of a room."""
    buy_in: int
    small_blind: int
    big_blind: int


class RoomInfoSchema(BaseModel):
    """Summary of a room."""
    room_id: str
    state: str
    hand_number: int
    players: List[str]
    pending_players: List[str]
    connections: int
    config: TableConfigSchema
