"""Tests for the team builder session."""

from __future__ import annotations

import pytest

from poke_team.clients import PokemonNotFoundError
from poke_team.services import TeamSession, compare_queries


def test_search_loads_subject(fake_pokeapi) -> None:
    messages: list[str] = []
    session = TeamSession(fake_pokeapi, debug_logger=messages.append)

    assert session.search("  PIKACHU ") is None
    assert session.subject.name == "pikachu"
    assert fake_pokeapi.queries == ["pikachu"]
    assert any("Loaded pikachu" in message for message in messages)


def test_blank_search_is_ignored(fake_pokeapi) -> None:
    session = TeamSession(fake_pokeapi)
    session.load(4)

    assert session.search("   ") is None
    assert session.subject.name == "charmander"
    assert fake_pokeapi.queries == [4]


def test_not_found_clears_subject_and_empties_comparison(fake_pokeapi) -> None:
    session = TeamSession(fake_pokeapi)
    session.load(7)
    session.add_subject()
    session.load(4)

    notice = session.search("missingno")

    assert notice.title == "MissingNo?"
    assert notice.variant == "destructive"
    assert session.subject is None
    assert session.comparison().is_empty()
    assert len(session.roster) == 1


def test_add_subject_reports_conflicts(fake_pokeapi) -> None:
    session = TeamSession(fake_pokeapi)
    assert session.add_subject() is None

    session.load(25)
    assert session.add_subject().title == "GOTCHA!"
    duplicate = session.add_subject()
    assert duplicate.title == "ALREADY CAUGHT!"
    assert duplicate.description == "pikachu is already in your team!"

    for query in (1, 4, 6, 7, 52):
        session.load(query)
        session.add_subject()
    session.load(63)
    full = session.add_subject()

    assert full.title == "BOX FULL!"
    assert [p.id for p in session.roster] == [25, 1, 4, 6, 7, 52]
    assert [n.title for n in session.notices].count("GOTCHA!") == 6


def test_navigation(fake_pokeapi) -> None:
    session = TeamSession(fake_pokeapi)
    assert session.next() is None
    assert session.previous() is None

    session.load("")
    assert session.subject.id == 1
    assert session.previous() is None
    assert fake_pokeapi.queries == [""]

    session.load(6)
    session.next()
    assert session.subject.name == "squirtle"
    session.previous()
    assert session.subject.name == "charizard"


def test_comparison_tracks_roster_edits(fake_pokeapi) -> None:
    session = TeamSession(fake_pokeapi)
    for query in ("squirtle", "abra"):
        session.load(query)
        session.add_subject()
    session.load("gengar")

    comparison = session.comparison()
    assert [p.name for p in comparison.advantage] == ["abra"]
    assert [p.name for p in comparison.risk] == ["squirtle", "abra"]

    session.remove(63)
    assert [p.name for p in session.comparison().risk] == ["squirtle"]
    session.remove(63)

    session.clear()
    assert session.comparison().is_empty()


def test_compare_queries_reports_rejections(fake_pokeapi) -> None:
    result = compare_queries(fake_pokeapi, "charmander", ["squirtle", "meowth", "7", "missingno"])

    assert result["subject"]["name"] == "charmander"
    assert result["team"] == ["squirtle", "meowth"]
    assert result["advantage"] == ["squirtle"]
    assert result["rejected"] == [
        {"query": "7", "reason": "ALREADY CAUGHT!"},
        {"query": "missingno", "reason": "MissingNo?"},
    ]


def test_compare_queries_requires_subject(fake_pokeapi) -> None:
    with pytest.raises(PokemonNotFoundError):
        compare_queries(fake_pokeapi, "missingno", ["squirtle"])
