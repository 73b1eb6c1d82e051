"""Tests for environment-driven settings."""

import pytest

from poke_team.config import DEFAULT_BASE_URL, load_settings


def test_defaults(monkeypatch) -> None:
    for name in ("POKEAPI_BASE_URL", "POKEAPI_TIMEOUT", "POKEAPI_CACHE_TTL", "POKEAPI_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings(load_env_files=False)

    assert settings.pokeapi_base_url == DEFAULT_BASE_URL
    assert settings.pokeapi_timeout == 10
    assert settings.pokeapi_cache_ttl == 600


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("POKEAPI_BASE_URL", "http://localhost:9000/api/v2/")
    monkeypatch.setenv("POKEAPI_TIMEOUT", "3")
    monkeypatch.setenv("POKEAPI_CACHE_TTL", "0")

    settings = load_settings(load_env_files=False)

    assert settings.pokeapi_base_url == "http://localhost:9000/api/v2"
    assert settings.pokeapi_timeout == 3
    assert settings.pokeapi_cache_ttl == 0


def test_invalid_integer_names_the_variable(monkeypatch) -> None:
    monkeypatch.setenv("POKEAPI_TIMEOUT", "soon")

    with pytest.raises(ValueError, match="POKEAPI_TIMEOUT"):
        load_settings(load_env_files=False)
