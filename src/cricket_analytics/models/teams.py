"""Team model for cricket analytics."""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from .base import Base


class Team(Base):
    """Team model representing a franchise or national side."""

    __tablename__ = "teams"

    name = Column(String(100), nullable=False, unique=True, index=True)
    city = Column(String(100), nullable=True, index=True)

    # Relationships
    players = relationship("Player", back_populates="team")

    def __repr__(self) -> str:
        return f"<Team(name='{self.name}', city='{self.city}')>"
