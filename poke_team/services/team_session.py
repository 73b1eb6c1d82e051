"""Team builder session tying lookups, the party and matchup analysis together."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Callable, Dict, List, Optional, Union

from ..analysis import compare_roster
from ..clients import PokeAPIClient, PokemonNotFoundError
from ..models import Notice, Pokemon, Roster, RosterComparison, RosterConflict

NOT_FOUND_NOTICE = Notice(
    title="MissingNo?",
    description="Pokemon not found in the database!",
    variant="destructive",
)
FULL_NOTICE = Notice(
    title="BOX FULL!",
    description="Your party is full (max 6)!",
    variant="destructive",
)


class TeamSession:
    """Holds the Pokemon on screen and the party being built around it."""

    def __init__(
        self,
        client: Optional[PokeAPIClient] = None,
        *,
        roster: Optional[Roster] = None,
        debug_logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.client = client or PokeAPIClient()
        self.roster = roster if roster is not None else Roster()
        self.subject: Optional[Pokemon] = None
        self.notices: List[Notice] = []
        self._debug_logger = debug_logger

    def _debug(self, message: str) -> None:
        if self._debug_logger:
            self._debug_logger(message)

    def _notify(self, notice: Notice) -> Notice:
        self._debug(f"Notice: {notice.title} {notice.description}")
        self.notices.append(notice)
        return notice

    # ------------------------------------------------------------------
    # Subject lookup
    # ------------------------------------------------------------------
    def load(self, query: Union[str, int, None]) -> Optional[Notice]:
        """Fetch ``query`` and make it the subject.

        A miss clears the subject and returns the not-found notice. Other
        client errors propagate.
        """

        self._debug(f"Fetching {query!r}")
        try:
            self.subject = self.client.fetch_pokemon(query)
        except PokemonNotFoundError:
            self.subject = None
            return self._notify(NOT_FOUND_NOTICE)
        self._debug(f"Loaded {self.subject.name} ({'/'.join(self.subject.types)})")
        return None

    def search(self, text: str) -> Optional[Notice]:
        if not text or not text.strip():
            return None
        return self.load(text.strip().lower())

    def next(self) -> Optional[Notice]:
        if self.subject is None:
            return None
        return self.load(self.subject.id + 1)

    def previous(self) -> Optional[Notice]:
        if self.subject is None or self.subject.id <= 1:
            return None
        return self.load(self.subject.id - 1)

    # ------------------------------------------------------------------
    # Party edits
    # ------------------------------------------------------------------
    def add_subject(self) -> Optional[Notice]:
        if self.subject is None:
            return None
        return self.add(self.subject)

    def add(self, pokemon: Pokemon) -> Notice:
        conflict = self.roster.add(pokemon)
        if conflict is RosterConflict.FULL:
            return self._notify(FULL_NOTICE)
        if conflict is RosterConflict.DUPLICATE:
            return self._notify(
                Notice(
                    title="ALREADY CAUGHT!",
                    description=f"{pokemon.name} is already in your team!",
                    variant="warning",
                )
            )
        return self._notify(
            Notice(
                title="GOTCHA!",
                description=f"{pokemon.name} was added to the party!",
            )
        )

    def remove(self, pokemon_id: int) -> None:
        self.roster.remove(pokemon_id)

    def clear(self) -> None:
        self.roster.clear()

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------
    def comparison(self) -> RosterComparison:
        return compare_roster(self.subject, self.roster)


def compare_queries(
    client: PokeAPIClient,
    subject: Union[str, int],
    team: List[Union[str, int]],
    *,
    debug_logger: Optional[Callable[[str], None]] = None,
) -> Dict[str, Any]:
    """Fetch a subject and a party by query and report the comparison.

    Raises :class:`PokemonNotFoundError` when the subject is missing. Party
    members that are missing, duplicated or over the limit are reported under
    ``rejected``.
    """

    session = TeamSession(client, debug_logger=debug_logger)
    subject_pokemon = client.fetch_pokemon(subject)
    session.subject = subject_pokemon

    rejected: List[Dict[str, str]] = []
    for query in team:
        try:
            member = client.fetch_pokemon(query)
        except PokemonNotFoundError:
            rejected.append({"query": str(query), "reason": NOT_FOUND_NOTICE.title})
            continue
        notice = session.add(member)
        if notice.variant != "success":
            rejected.append({"query": str(query), "reason": notice.title})

    comparison = session.comparison()
    return {
        "subject": asdict(subject_pokemon),
        "team": [member.name for member in session.roster],
        "advantage": [member.name for member in comparison.advantage],
        "risk": [member.name for member in comparison.risk],
        "rejected": rejected,
    }
