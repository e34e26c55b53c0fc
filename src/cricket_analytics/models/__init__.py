"""Database models for the cricket analytics tables."""

from .base import Base
from .teams import Team
from .players import Player
from .matches import Match
from .deliveries import Delivery

__all__ = [
    "Base",
    "Team",
    "Player",
    "Match",
    "Delivery",
]
