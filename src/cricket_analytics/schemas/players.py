"""Pydantic schemas for player data validation."""

from typing import Optional
from pydantic import BaseModel, Field, field_validator


class PlayerBase(BaseModel):
    """Base player schema with common fields."""

    name: str = Field(..., min_length=1, max_length=100, description="Player name")
    team_id: int = Field(..., ge=1, description="Team affiliation at time of record")
    role: Optional[str] = Field(None, max_length=30, description="Playing role")

    @field_validator("role")
    @classmethod
    def normalize_role(cls, v):
        """Normalize free-text role to lower case."""
        if v is not None:
            v = v.strip().lower()
            return v or None
        return v


class PlayerCreate(PlayerBase):
    """Schema for loading a player row."""

    id: int = Field(..., ge=1, description="Player ID")

