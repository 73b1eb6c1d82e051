"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://pokeapi.co/api/v2"
DEFAULT_USER_AGENT = "poke-team/0.1 (+https://github.com/)"


@dataclass(frozen=True, slots=True)
class Settings:
    pokeapi_base_url: str = DEFAULT_BASE_URL
    pokeapi_timeout: int = 10
    pokeapi_cache_ttl: int = 600
    pokeapi_user_agent: str = DEFAULT_USER_AGENT


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def load_settings(*, load_env_files: bool = True) -> Settings:
    """Build settings from ``POKEAPI_*`` variables.

    ``.env`` is loaded first, then ``.env.local`` so user-specific values win.
    """

    if load_env_files:
        load_dotenv()
        load_dotenv(".env.local", override=True)

    return Settings(
        pokeapi_base_url=(os.getenv("POKEAPI_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
        pokeapi_timeout=_int_env("POKEAPI_TIMEOUT", 10),
        pokeapi_cache_ttl=_int_env("POKEAPI_CACHE_TTL", 600),
        pokeapi_user_agent=os.getenv("POKEAPI_USER_AGENT") or DEFAULT_USER_AGENT,
    )
