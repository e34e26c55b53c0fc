"""Player model for cricket analytics."""

from sqlalchemy import Column, String, Integer, ForeignKey, Index
from sqlalchemy.orm import relationship

from .base import Base


class Player(Base):
    """Player model; team_id is the affiliation at time of record."""

    __tablename__ = "players"

    name = Column(String(100), nullable=False, index=True)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    role = Column(String(30), nullable=True, index=True)  # batsman, bowler, all-rounder, ...

    # Relationships
    team = relationship("Team", back_populates="players")
    deliveries_faced = relationship("Delivery", foreign_keys="Delivery.batsman_id", back_populates="batsman")
    deliveries_bowled = relationship("Delivery", foreign_keys="Delivery.bowler_id", back_populates="bowler")

    __table_args__ = (
        Index("idx_player_team_role", "team_id", "role"),
    )

    def __repr__(self) -> str:
        return f"<Player(name='{self.name}', role='{self.role}')>"
