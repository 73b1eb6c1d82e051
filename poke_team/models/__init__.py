"""Shared dataclasses for the team builder."""

from .pokemon import DefensiveProfile, Notice, Pokemon, RosterComparison
from .roster import MAX_ROSTER_SIZE, Roster, RosterConflict

__all__ = [
    "DefensiveProfile",
    "MAX_ROSTER_SIZE",
    "Notice",
    "Pokemon",
    "Roster",
    "RosterComparison",
    "RosterConflict",
]
