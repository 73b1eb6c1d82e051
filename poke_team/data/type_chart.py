"""Static type chart utilities for Pokemon battle calculations.

The chart is defender-oriented: ``TYPE_CHART["fire"]["double"]`` lists the
attacking types that deal double damage *to* a Fire-type Pokemon.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

TYPE_ORDER: Tuple[str, ...] = (
    "normal",
    "fire",
    "water",
    "electric",
    "grass",
    "ice",
    "fighting",
    "poison",
    "ground",
    "flying",
    "psychic",
    "bug",
    "rock",
    "ghost",
    "dragon",
    "dark",
    "steel",
    "fairy",
)

TYPE_CHART: Dict[str, Dict[str, Tuple[str, ...]]] = {
    "normal": {"double": ("fighting",), "half": (), "zero": ("ghost",)},
    "fire": {
        "double": ("water", "ground", "rock"),
        "half": ("fire", "grass", "ice", "bug", "steel", "fairy"),
        "zero": (),
    },
    "water": {
        "double": ("electric", "grass"),
        "half": ("fire", "water", "ice", "steel"),
        "zero": (),
    },
    "electric": {
        "double": ("ground",),
        "half": ("electric", "flying", "steel"),
        "zero": (),
    },
    "grass": {
        "double": ("fire", "ice", "poison", "flying", "bug"),
        "half": ("water", "electric", "grass", "ground"),
        "zero": (),
    },
    "ice": {
        "double": ("fire", "fighting", "rock", "steel"),
        "half": ("ice",),
        "zero": (),
    },
    "fighting": {
        "double": ("flying", "psychic", "fairy"),
        "half": ("bug", "rock", "dark"),
        "zero": (),
    },
    "poison": {
        "double": ("ground", "psychic"),
        "half": ("grass", "fighting", "poison", "bug", "fairy"),
        "zero": (),
    },
    "ground": {
        "double": ("water", "grass", "ice"),
        "half": ("poison", "rock"),
        "zero": ("electric",),
    },
    "flying": {
        "double": ("electric", "ice", "rock"),
        "half": ("grass", "fighting", "bug"),
        "zero": ("ground",),
    },
    "psychic": {
        "double": ("bug", "ghost", "dark"),
        "half": ("fighting", "psychic"),
        "zero": (),
    },
    "bug": {
        "double": ("fire", "flying", "rock"),
        "half": ("grass", "fighting", "ground"),
        "zero": (),
    },
    "rock": {
        "double": ("water", "grass", "fighting", "ground", "steel"),
        "half": ("normal", "fire", "poison", "flying"),
        "zero": (),
    },
    "ghost": {
        "double": ("ghost", "dark"),
        "half": ("poison", "bug"),
        "zero": ("normal", "fighting"),
    },
    "dragon": {
        "double": ("ice", "dragon", "fairy"),
        "half": ("fire", "water", "electric", "grass"),
        "zero": (),
    },
    "dark": {
        "double": ("fighting", "bug", "fairy"),
        "half": ("ghost", "dark"),
        "zero": ("psychic",),
    },
    "steel": {
        "double": ("fire", "fighting", "ground"),
        "half": (
            "normal",
            "grass",
            "ice",
            "flying",
            "psychic",
            "bug",
            "rock",
            "dragon",
            "steel",
            "fairy",
        ),
        "zero": ("poison",),
    },
    "fairy": {
        "double": ("poison", "steel"),
        "half": ("fighting", "bug", "dark"),
        "zero": ("dragon",),
    },
}


def normalize_type(type_name: str) -> str:
    return type_name.strip().lower()


def get_type_entry(type_name: str) -> Optional[Dict[str, Tuple[str, ...]]]:
    """Return the chart entry for ``type_name`` or ``None`` for unknown types."""

    return TYPE_CHART.get(normalize_type(type_name))


def damage_multiplier(attack_type: str, defender_types: Iterable[str]) -> float:
    """Compute damage multiplier for an attack hitting defender types."""

    attack = normalize_type(attack_type)
    if attack not in TYPE_CHART:
        return 1.0

    multiplier = 1.0
    for defender in defender_types:
        entry = get_type_entry(defender)
        if entry is None:
            continue
        if attack in entry["zero"]:
            multiplier *= 0.0
        elif attack in entry["double"]:
            multiplier *= 2.0
        elif attack in entry["half"]:
            multiplier *= 0.5
    return multiplier
