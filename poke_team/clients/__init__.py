"""External data clients used by the team builder."""

from .pokeapi import PokeAPIClient, PokeAPIClientError, PokemonNotFoundError

__all__ = [
    "PokeAPIClient",
    "PokeAPIClientError",
    "PokemonNotFoundError",
]
