"""Pydantic schemas for team data validation."""

from typing import Optional
from pydantic import BaseModel, Field


class TeamBase(BaseModel):
    """Base team schema with common fields."""

    name: str = Field(..., min_length=1, max_length=100, description="Team name")
    city: Optional[str] = Field(None, max_length=100, description="Home city")


class TeamCreate(TeamBase):
    """Schema for loading a team row."""

    id: int = Field(..., ge=1, description="Team ID")

