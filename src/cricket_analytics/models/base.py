"""Base model classes for the cricket analytics tables."""

from sqlalchemy import Column, Integer
from sqlalchemy.orm import declarative_base


class Base:
    """Base class for all database models."""

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)


# Create the declarative base
Base = declarative_base(cls=Base)
