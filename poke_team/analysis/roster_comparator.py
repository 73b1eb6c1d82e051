"""Classify party members against the Pokemon currently on screen."""

from __future__ import annotations

from typing import Iterable, Optional

from ..models import Pokemon, RosterComparison
from .matchups import calculate_defensive_matchups, defensive_weaknesses, get_offensive_strengths


def compare_roster(subject: Optional[Pokemon], roster: Iterable[Pokemon]) -> RosterComparison:
    """Split ``roster`` into members with an edge over ``subject`` and members it threatens.

    Members are assumed to carry attacks of their own types. A member lands in
    ``advantage`` when one of its types is a subject weakness, and in ``risk``
    when its weaknesses share a type with the subject's offensive strengths.
    The two lists may overlap.
    """

    comparison = RosterComparison()
    if subject is None:
        return comparison

    subject_weaknesses = set(defensive_weaknesses(subject.types))
    subject_strengths = get_offensive_strengths(subject.types)

    for member in roster:
        if any(member_type.lower() in subject_weaknesses for member_type in member.types):
            comparison.advantage.append(member)

        member_matchups = calculate_defensive_matchups(member.types)
        if any(member_matchups[attack] > 1 for attack in subject_strengths):
            comparison.risk.append(member)

    return comparison
