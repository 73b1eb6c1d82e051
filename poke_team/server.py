"""FastMCP server exposing type matchup and team comparison tools."""

from __future__ import annotations

from typing import Annotated, Any, Dict, List

from fastmcp import FastMCP

from .analysis import (
    calculate_defensive_matchups as _defensive_matchups,
    get_offensive_strengths as _offensive_strengths,
    summarize_defenses,
)
from .clients import PokeAPIClient, PokeAPIClientError, PokemonNotFoundError
from .data.type_chart import damage_multiplier
from .services import compare_queries

app = FastMCP("poke-team", version="0.1.0")
_pokeapi = PokeAPIClient()


def describe_pokemon(query: str) -> str:
    try:
        pokemon = _pokeapi.fetch_pokemon(query)
    except PokeAPIClientError as exc:
        return f"Error fetching {query}: {exc}"

    profile = summarize_defenses(pokemon.types)
    weak = ", ".join(f"{name} x{mult:g}" for name, mult in profile.weaknesses) or "none"
    resist = ", ".join(f"{name} x{mult:g}" for name, mult in profile.resistances) or "none"
    stats = ", ".join(f"{label} {value}" for label, value in pokemon.stat_lines()) or "unknown"
    return (
        f"{pokemon.dex_number} {pokemon.name}\n"
        f"Types: {', '.join(pokemon.types) or 'unknown'}\n"
        f"Weak to: {weak}\n"
        f"Resistant to: {resist}\n"
        f"Stats: {stats}"
    )


def describe_type_matchup(attacker_type: str, defender_types: List[str]) -> str:
    multiplier = damage_multiplier(attacker_type, defender_types)
    defenders = "/".join(name.strip().title() for name in defender_types)
    return f"{attacker_type.strip().title()} vs {defenders} -> {multiplier:g}x"


def run_team_comparison(subject: str, team: List[str]) -> Dict[str, Any]:
    try:
        return compare_queries(_pokeapi, subject, team)
    except PokemonNotFoundError:
        return {"error": f"Pokemon not found: {subject}"}
    except PokeAPIClientError as exc:
        return {"error": str(exc)}


@app.tool()
def get_pokemon_data(
    query: Annotated[str, "Pokemon name or national dex number"],
) -> str:
    """Get typing, weaknesses, resistances and stats for a Pokémon via PokéAPI."""

    return describe_pokemon(query)


@app.tool()
def calculate_defensive_matchups(
    types: Annotated[List[str], "Defending types (one or two)"],
) -> Dict[str, float]:
    """Return the incoming damage multiplier of every attacking type."""

    return _defensive_matchups(types)


@app.tool()
def get_offensive_strengths(
    types: Annotated[List[str], "Attacking types"],
) -> List[str]:
    """Return the defending types hit super-effectively by the given types."""

    return _offensive_strengths(types)


@app.tool()
def calculate_type_matchup(
    attacker_type: Annotated[str, "Attacking type"],
    defender_types: Annotated[List[str], "Defending types"],
) -> str:
    """Return the effectiveness multiplier of an attacking type against defender types."""

    return describe_type_matchup(attacker_type, defender_types)


@app.tool()
def compare_team(
    subject: Annotated[str, "Pokemon to compare the team against"],
    team: Annotated[List[str], "Up to six party members (names or ids)"],
) -> Dict[str, Any]:
    """List party members with an edge over the subject and members it threatens."""

    return run_team_comparison(subject, team)


def run() -> None:
    """Entry point for `python -m poke_team.server` or console script."""

    print("[poke-team] Starting MCP server. Press Ctrl+C to stop.")
    app.run()


if __name__ == "__main__":
    run()
