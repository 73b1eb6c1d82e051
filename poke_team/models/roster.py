"""Party container with the six-slot and unique-id rules."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

from .pokemon import Pokemon

MAX_ROSTER_SIZE = 6


class RosterConflict(str, Enum):
    """Reason an add was rejected. The roster is left untouched."""

    FULL = "full"
    DUPLICATE = "duplicate"


class Roster:
    """Ordered collection of up to six distinct Pokemon, keyed by id."""

    def __init__(self, members: Optional[Iterable[Pokemon]] = None) -> None:
        self._members: List[Pokemon] = []
        for pokemon in members or ():
            self.add(pokemon)

    def add(self, pokemon: Pokemon) -> Optional[RosterConflict]:
        if len(self._members) >= MAX_ROSTER_SIZE:
            return RosterConflict.FULL
        if self.contains(pokemon.id):
            return RosterConflict.DUPLICATE
        self._members.append(pokemon)
        return None

    def remove(self, pokemon_id: int) -> None:
        self._members = [member for member in self._members if member.id != pokemon_id]

    def clear(self) -> None:
        self._members.clear()

    def contains(self, pokemon_id: int) -> bool:
        return any(member.id == pokemon_id for member in self._members)

    def is_full(self) -> bool:
        return len(self._members) >= MAX_ROSTER_SIZE

    def is_empty(self) -> bool:
        return not self._members

    def open_slots(self) -> int:
        return MAX_ROSTER_SIZE - len(self._members)

    @property
    def members(self) -> Tuple[Pokemon, ...]:
        return tuple(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Pokemon]:
        return iter(tuple(self._members))
