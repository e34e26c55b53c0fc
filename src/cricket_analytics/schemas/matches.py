"""Pydantic schemas for match data validation."""

import datetime as dt
from typing import Optional
from pydantic import BaseModel, Field, model_validator


class MatchBase(BaseModel):
    """Base match schema with common fields."""

    season: int = Field(..., ge=1800, le=2200, description="Season year")
    team1_id: int = Field(..., ge=1, description="First team ID")
    team2_id: int = Field(..., ge=1, description="Second team ID")
    winner_team_id: Optional[int] = Field(None, description="Winner team ID, empty for no result")
    venue: Optional[str] = Field(None, max_length=200, description="Venue name")
    date: Optional[dt.date] = Field(None, description="Match date")

    @model_validator(mode="after")
    def validate_participants(self):
        """Validate the two sides differ and the winner is one of them."""
        if self.team1_id == self.team2_id:
            raise ValueError("team1 and team2 must be different")
        if self.winner_team_id is not None and self.winner_team_id not in (self.team1_id, self.team2_id):
            raise ValueError(
                f"winner_team_id {self.winner_team_id} is neither team1 ({self.team1_id}) nor team2 ({self.team2_id})"
            )
        return self


class MatchCreate(MatchBase):
    """Schema for loading a match row."""

    id: int = Field(..., ge=1, description="Match ID")

