"""Application services built on top of the matchup analysis."""

from .team_session import TeamSession, compare_queries

__all__ = ["TeamSession", "compare_queries"]
