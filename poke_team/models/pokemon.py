"""Core dataclasses shared across the team builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

STAT_LABELS: Dict[str, str] = {
    "hp": "HP",
    "attack": "ATK",
    "defense": "DEF",
    "special-attack": "SP.ATK",
    "special-defense": "SP.DEF",
    "speed": "SPEED",
}


@dataclass(frozen=True, slots=True)
class Pokemon:
    """A single Pokemon record as delivered by PokeAPI."""

    id: int
    name: str
    types: Tuple[str, ...]
    height: Optional[int] = None
    weight: Optional[int] = None
    stats: Dict[str, int] = field(default_factory=dict, compare=False, hash=False)
    sprite: Optional[str] = None

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "Pokemon":
        """Build a Pokemon from a ``/pokemon/{id or name}`` response body."""

        slots = sorted(payload.get("types", []), key=lambda slot: slot.get("slot", 0))
        types = tuple(slot["type"]["name"].lower() for slot in slots)
        stats = {
            entry["stat"]["name"]: entry["base_stat"]
            for entry in payload.get("stats", [])
        }
        sprites = payload.get("sprites") or {}
        return cls(
            id=int(payload["id"]),
            name=payload["name"],
            types=types,
            height=payload.get("height"),
            weight=payload.get("weight"),
            stats=stats,
            sprite=sprites.get("front_default"),
        )

    @property
    def dex_number(self) -> str:
        return f"No.{self.id:03d}"

    def stat_lines(self) -> List[Tuple[str, int]]:
        """Return ``(label, base_stat)`` pairs in PokeAPI order."""

        return [(STAT_LABELS.get(name, name.upper()), value) for name, value in self.stats.items()]


@dataclass(slots=True)
class RosterComparison:
    """Party members that beat the subject and those threatened by it."""

    advantage: List[Pokemon] = field(default_factory=list)
    risk: List[Pokemon] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.advantage and not self.risk


@dataclass(slots=True)
class DefensiveProfile:
    """Weaknesses and resistances of a type combination."""

    types: List[str]
    weaknesses: List[Tuple[str, float]] = field(default_factory=list)
    resistances: List[Tuple[str, float]] = field(default_factory=list)
    immunities: List[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Notice:
    """User-facing notification raised by the team session."""

    title: str
    description: str
    variant: str = "success"
