"""FastAPI web server exposing type matchup and team comparison via REST API."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from .analysis import (
    calculate_defensive_matchups,
    get_offensive_strengths,
    summarize_defenses,
)
from .clients import PokeAPIClient, PokeAPIClientError, PokemonNotFoundError
from .data.type_chart import damage_multiplier
from .services import compare_queries

app = FastAPI(
    title="Poke-Team Web API",
    description="REST API for Pokemon type matchups and party analysis",
    version="0.1.0",
)

_pokeapi = PokeAPIClient()


# Pydantic models for request/response
class CompareTeamRequest(BaseModel):
    """Request model for the party comparison endpoint."""

    subject: str
    team: List[str] = Field(default_factory=list)


class PokemonDataResponse(BaseModel):
    """Response model for Pokemon data."""

    result: Dict[str, Any]


class MatchupResponse(BaseModel):
    """Response model for the defensive matchup chart."""

    result: Dict[str, float]


class StrengthsResponse(BaseModel):
    """Response model for offensive strengths."""

    result: List[str]


class TypeMatchupResponse(BaseModel):
    """Response model for a single type matchup calculation."""

    result: float


class CompareTeamResponse(BaseModel):
    """Response model for party comparison."""

    result: Dict[str, Any]


def _raise_for_client_error(exc: PokeAPIClientError, query: Optional[str] = None) -> None:
    if isinstance(exc, PokemonNotFoundError):
        raise HTTPException(status_code=404, detail=f"Pokemon not found: {query or exc.query}")
    raise HTTPException(status_code=502, detail=f"PokeAPI request failed: {exc}")


@app.get("/api/pokemon", response_model=PokemonDataResponse)
async def get_pokemon_data(
    query: str = Query("1", description="Pokemon name or national dex number"),
) -> PokemonDataResponse:
    """Get a Pokémon's typing, stats and defensive profile via PokéAPI."""
    try:
        pokemon = _pokeapi.fetch_pokemon(query)
    except PokeAPIClientError as exc:
        _raise_for_client_error(exc, query)

    payload = asdict(pokemon)
    payload["defenses"] = asdict(summarize_defenses(pokemon.types))
    payload["offensive_strengths"] = get_offensive_strengths(pokemon.types)
    return PokemonDataResponse(result=payload)


@app.get("/api/defensive_matchups", response_model=MatchupResponse)
async def defensive_matchups(
    types: List[str] = Query(..., description="Defending types"),
) -> MatchupResponse:
    """Return the incoming damage multiplier of every attacking type."""
    return MatchupResponse(result=calculate_defensive_matchups(types))


@app.get("/api/offensive_strengths", response_model=StrengthsResponse)
async def offensive_strengths(
    types: List[str] = Query(..., description="Attacking types"),
) -> StrengthsResponse:
    """Return the defending types hit super-effectively by the given types."""
    return StrengthsResponse(result=get_offensive_strengths(types))


@app.get("/api/type_matchup", response_model=TypeMatchupResponse)
async def type_matchup(
    attacker_type: str = Query(..., description="Attacking type"),
    defender_types: List[str] = Query(..., description="Defending types"),
) -> TypeMatchupResponse:
    """Return the effectiveness multiplier of an attacking type against defender types."""
    return TypeMatchupResponse(result=damage_multiplier(attacker_type, defender_types))


@app.post("/api/compare_team", response_model=CompareTeamResponse)
async def compare_team(request: CompareTeamRequest) -> CompareTeamResponse:
    """Classify party members against the subject Pokémon."""
    try:
        result = compare_queries(_pokeapi, request.subject, request.team)
    except PokeAPIClientError as exc:
        _raise_for_client_error(exc, request.subject)
    return CompareTeamResponse(result=result)


def run(host: str = "127.0.0.1", port: int = 8000) -> None:
    """Entry point for running the web server."""
    import uvicorn

    print(f"[poke-team-web] Starting web server at http://{host}:{port}")
    print("[poke-team-web] Press Ctrl+C to stop.")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
