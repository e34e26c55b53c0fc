"""Cricket Analytics - reporting engine over matches, teams, players and deliveries."""

from .config import get_settings
from .database import get_database_engine, get_session
from .analytics import AnalyticsEngine

__all__ = ["get_settings", "get_database_engine", "get_session", "AnalyticsEngine"]
