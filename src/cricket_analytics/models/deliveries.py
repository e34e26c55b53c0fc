"""Delivery model: one row per ball bowled."""

from sqlalchemy import Column, Integer, Boolean, ForeignKey, Index
from sqlalchemy.orm import relationship

from .base import Base


class Delivery(Base):
    """Ball-by-ball delivery record."""

    __tablename__ = "deliveries"

    match_id = Column(Integer, ForeignKey("matches.id"), nullable=False, index=True)
    inning = Column(Integer, nullable=False, default=1)  # 1 or 2, higher for super overs

    # Players involved
    bowler_id = Column(Integer, ForeignKey("players.id"), nullable=False, index=True)
    batsman_id = Column(Integer, ForeignKey("players.id"), nullable=False, index=True)

    # Outcome
    runs_scored = Column(Integer, default=0, nullable=False)
    is_wicket = Column(Boolean, default=False, nullable=False)

    # Relationships
    match = relationship("Match", back_populates="deliveries")
    bowler = relationship("Player", foreign_keys=[bowler_id], back_populates="deliveries_bowled")
    batsman = relationship("Player", foreign_keys=[batsman_id], back_populates="deliveries_faced")

    __table_args__ = (
        Index("idx_delivery_match_inning", "match_id", "inning"),
        Index("idx_delivery_batsman", "batsman_id", "runs_scored"),
        Index("idx_delivery_bowler", "bowler_id", "is_wicket"),
    )

    def __repr__(self) -> str:
        return f"<Delivery(match={self.match_id}, inning={self.inning}, {self.runs_scored} runs{', W' if self.is_wicket else ''})>"
