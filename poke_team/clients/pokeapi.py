"""Lightweight wrapper around PokeAPI for fetching Pokemon records."""

from __future__ import annotations

import re
import time
from typing import Any, Dict, Optional, Union

import requests

from ..config import Settings, load_settings
from ..models import Pokemon

Query = Union[str, int, None]


class PokeAPIClientError(RuntimeError):
    """Raised when the PokeAPI request fails."""


class PokemonNotFoundError(PokeAPIClientError):
    """Raised when PokeAPI has no Pokemon for the given id or name."""

    def __init__(self, query: Union[str, int]) -> None:
        super().__init__(f"Pokemon not found: {query}")
        self.query = query


class PokeAPIClient:
    """Small helper client with naive in-memory caching."""

    def __init__(
        self,
        *,
        session: Optional[requests.Session] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        settings = settings or load_settings()
        self.session = session or requests.Session()
        self.base_url = settings.pokeapi_base_url
        self.cache_ttl = settings.pokeapi_cache_ttl
        self.timeout = settings.pokeapi_timeout
        self.user_agent = settings.pokeapi_user_agent
        self._cache: Dict[str, tuple[float, Any]] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get_pokemon(self, query: Query) -> Dict[str, Any]:
        """Return the raw ``/pokemon`` payload for an id or a name.

        Empty queries fall back to id 1.
        """

        slug = self.resolve_query(query)
        if slug == "":
            raise PokemonNotFoundError(str(query))
        payload = self._get_json(f"pokemon/{slug}", allow_404=True)
        if payload is None:
            raise PokemonNotFoundError(slug)
        return payload

    def fetch_pokemon(self, query: Query) -> Pokemon:
        return Pokemon.from_api(self.get_pokemon(query))

    @classmethod
    def resolve_query(cls, query: Query) -> Union[str, int]:
        if isinstance(query, bool):
            query = int(query)
        if isinstance(query, int):
            return query if query > 0 else 1
        text = (query or "").strip()
        if not text:
            return 1
        if text.isdecimal():
            return int(text) or 1
        return cls._slugify_name(text)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _get_json(self, endpoint: str, *, allow_404: bool = False) -> Optional[Dict[str, Any]]:
        url = self._build_url(endpoint)
        now = time.time()
        cached = self._cache.get(url)
        if cached and now - cached[0] < self.cache_ttl:
            return cached[1]

        try:
            response = self.session.get(
                url,
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
            )
            if response.status_code == 404 and allow_404:
                return None
            response.raise_for_status()
        except requests.RequestException as exc:
            raise PokeAPIClientError(str(exc)) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise PokeAPIClientError(f"Invalid JSON from {url}: {exc}") from exc
        self._cache[url] = (now, payload)
        return payload

    def _build_url(self, endpoint: str) -> str:
        endpoint = endpoint.lstrip("/")
        return f"{self.base_url}/{endpoint}"

    @staticmethod
    def _slugify_name(name: str) -> str:
        slug = name.strip().lower()
        slug = re.sub(r"[\s\.]+", "-", slug)
        slug = slug.replace("'", "")
        slug = slug.replace(":", "")
        slug = slug.replace("%", "")
        slug = re.sub(r"[^a-z0-9\-]", "", slug)
        return slug
