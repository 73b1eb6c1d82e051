"""Shared fakes for the team builder tests."""

from __future__ import annotations

import pytest

from poke_team.clients import PokeAPIClient, PokemonNotFoundError
from poke_team.models import Pokemon

SPECIES = {
    1: ("bulbasaur", ["grass", "poison"]),
    4: ("charmander", ["fire"]),
    6: ("charizard", ["fire", "flying"]),
    7: ("squirtle", ["water"]),
    25: ("pikachu", ["electric"]),
    52: ("meowth", ["normal"]),
    63: ("abra", ["psychic"]),
    92: ("gastly", ["ghost", "poison"]),
    94: ("gengar", ["ghost", "poison"]),
    122: ("mr-mime", ["psychic", "fairy"]),
    130: ("gyarados", ["water", "flying"]),
}


def make_payload(pokemon_id: int, name: str, types: list[str]) -> dict:
    return {
        "id": pokemon_id,
        "name": name,
        "height": 7,
        "weight": 69,
        "sprites": {"front_default": f"https://img.example/{pokemon_id}.png"},
        "types": [
            {"slot": index + 1, "type": {"name": type_name, "url": ""}}
            for index, type_name in enumerate(types)
        ],
        "stats": [
            {"base_stat": 45, "stat": {"name": "hp"}},
            {"base_stat": 49, "stat": {"name": "attack"}},
            {"base_stat": 65, "stat": {"name": "special-attack"}},
        ],
    }


class FakePokeAPI:
    """Serves the SPECIES table instead of calling PokeAPI."""

    def __init__(self) -> None:
        self.queries: list = []

    def fetch_pokemon(self, query) -> Pokemon:
        self.queries.append(query)
        key = PokeAPIClient.resolve_query(query)
        for pokemon_id, (name, types) in SPECIES.items():
            if key == pokemon_id or key == name:
                return Pokemon.from_api(make_payload(pokemon_id, name, types))
        raise PokemonNotFoundError(key)


@pytest.fixture()
def fake_pokeapi() -> FakePokeAPI:
    return FakePokeAPI()


@pytest.fixture()
def make_pokemon():
    def _make(pokemon_id: int, name: str, types: list[str]) -> Pokemon:
        return Pokemon.from_api(make_payload(pokemon_id, name, types))

    return _make


@pytest.fixture()
def pokemon_payload():
    return make_payload
