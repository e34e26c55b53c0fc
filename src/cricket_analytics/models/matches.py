"""Match model for cricket analytics."""

from sqlalchemy import Column, String, Integer, Date, ForeignKey, Index
from sqlalchemy.orm import relationship

from .base import Base


class Match(Base):
    """Match model; winner_team_id is null for abandoned or no-result games."""

    __tablename__ = "matches"

    season = Column(Integer, nullable=False, index=True)

    # Teams
    team1_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    team2_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    winner_team_id = Column(Integer, ForeignKey("teams.id"), nullable=True, index=True)

    venue = Column(String(200), nullable=True, index=True)
    date = Column(Date, nullable=True, index=True)

    # Relationships
    team1 = relationship("Team", foreign_keys=[team1_id])
    team2 = relationship("Team", foreign_keys=[team2_id])
    winner = relationship("Team", foreign_keys=[winner_team_id])
    deliveries = relationship("Delivery", back_populates="match")

    __table_args__ = (
        Index("idx_match_season_winner", "season", "winner_team_id"),
        Index("idx_match_venue_date", "venue", "date"),
    )

    def __repr__(self) -> str:
        return f"<Match(id={self.id}, season={self.season}, {self.team1_id} vs {self.team2_id}, {self.date})>"
