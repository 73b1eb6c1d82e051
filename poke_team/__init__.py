"""Pokemon type matchup and party analysis utilities."""

from .analysis import calculate_defensive_matchups, compare_roster, get_offensive_strengths
from .models import Pokemon, Roster

__all__ = [
    "Pokemon",
    "Roster",
    "calculate_defensive_matchups",
    "compare_roster",
    "get_offensive_strengths",
]
