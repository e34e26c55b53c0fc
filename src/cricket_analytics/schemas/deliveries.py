"""Pydantic schemas for delivery data validation."""

from pydantic import BaseModel, Field


class DeliveryBase(BaseModel):
    """Base delivery schema with common fields."""

    match_id: int = Field(..., ge=1, description="Match ID")
    inning: int = Field(1, ge=1, description="Inning number")
    bowler_id: int = Field(..., ge=1, description="Bowler player ID")
    batsman_id: int = Field(..., ge=1, description="Batsman player ID")
    runs_scored: int = Field(0, ge=0, description="Runs off the bat")
    is_wicket: bool = Field(False, description="Whether the delivery took a wicket")


class DeliveryCreate(DeliveryBase):
    """Schema for loading a delivery row."""

    id: int = Field(..., ge=1, description="Delivery ID")

