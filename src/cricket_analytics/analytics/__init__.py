"""Analytical reports and the engine that runs them."""

from .engine import AnalyticsEngine
from .ranking import Ranked, dense_rank, top_ranked
from .reports import REPORTS

__all__ = ["AnalyticsEngine", "Ranked", "dense_rank", "top_ranked", "REPORTS"]
