"""Type matchup analysis for the team builder."""

from .matchups import (
    calculate_defensive_matchups,
    defensive_weaknesses,
    get_offensive_strengths,
    summarize_defenses,
)
from .roster_comparator import compare_roster

__all__ = [
    "calculate_defensive_matchups",
    "compare_roster",
    "defensive_weaknesses",
    "get_offensive_strengths",
    "summarize_defenses",
]
