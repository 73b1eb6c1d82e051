"""Defensive multiplier aggregation and offensive strength derivation."""

from __future__ import annotations

from typing import Dict, Iterable, List

from ..data.type_chart import TYPE_CHART, TYPE_ORDER, get_type_entry, normalize_type
from ..models import DefensiveProfile

FACTORS = (("double", 2.0), ("half", 0.5), ("zero", 0.0))


def calculate_defensive_matchups(types: Iterable[str]) -> Dict[str, float]:
    """Return the incoming damage multiplier of every attacking type.

    Each defending type multiplies the attackers listed in its chart entry by
    2, 0.5 or 0. Factors compound, so a dual type can reach x4 or x0.25.
    Unknown defending types are skipped.
    """

    matchups = {attack: 1.0 for attack in TYPE_ORDER}
    for defending in types:
        entry = get_type_entry(defending)
        if entry is None:
            continue
        for key, factor in FACTORS:
            for attack in entry[key]:
                matchups[attack] *= factor
    return matchups


def get_offensive_strengths(types: Iterable[str]) -> List[str]:
    """Return the defending types that any of ``types`` hits super-effectively.

    A defender is weak to an attacker when the attacker appears in the
    defender's own ``double`` list, so the whole chart is scanned.
    """

    attackers = {normalize_type(attack) for attack in types}
    return [
        defending
        for defending in TYPE_ORDER
        if attackers.intersection(TYPE_CHART[defending]["double"])
    ]


def defensive_weaknesses(types: Iterable[str]) -> List[str]:
    matchups = calculate_defensive_matchups(types)
    return [attack for attack, multiplier in matchups.items() if multiplier > 1]


def summarize_defenses(types: Iterable[str]) -> DefensiveProfile:
    """Group the defensive matchups into weaknesses, resistances and immunities."""

    type_list = [normalize_type(name) for name in types]
    matchups = calculate_defensive_matchups(type_list)

    # sorted() is stable, ties stay in chart order
    weaknesses = sorted(
        ((attack, mult) for attack, mult in matchups.items() if mult > 1),
        key=lambda pair: -pair[1],
    )
    resistances = sorted(
        ((attack, mult) for attack, mult in matchups.items() if mult < 1),
        key=lambda pair: pair[1],
    )
    immunities = [attack for attack, mult in matchups.items() if mult == 0]
    return DefensiveProfile(
        types=type_list,
        weaknesses=weaknesses,
        resistances=resistances,
        immunities=immunities,
    )
