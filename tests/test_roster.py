"""Tests for the party container."""

from poke_team.models import MAX_ROSTER_SIZE, Roster, RosterConflict


def test_roster_rejects_seventh_member(make_pokemon) -> None:
    roster = Roster(make_pokemon(i, f"mon-{i}", ["normal"]) for i in range(1, 7))

    assert len(roster) == MAX_ROSTER_SIZE
    assert roster.is_full()
    assert roster.add(make_pokemon(7, "mon-7", ["water"])) is RosterConflict.FULL
    assert len(roster) == 6
    assert not roster.contains(7)


def test_roster_rejects_duplicate_id(make_pokemon) -> None:
    roster = Roster()
    assert roster.add(make_pokemon(25, "pikachu", ["electric"])) is None

    assert roster.add(make_pokemon(25, "pikachu", ["electric"])) is RosterConflict.DUPLICATE
    assert len(roster) == 1
    assert roster.open_slots() == 5


def test_full_takes_precedence_over_duplicate(make_pokemon) -> None:
    roster = Roster(make_pokemon(i, f"mon-{i}", ["normal"]) for i in range(1, 7))

    assert roster.add(make_pokemon(3, "mon-3", ["normal"])) is RosterConflict.FULL


def test_remove_and_clear(make_pokemon) -> None:
    roster = Roster([make_pokemon(4, "charmander", ["fire"]), make_pokemon(7, "squirtle", ["water"])])

    roster.remove(999)
    assert [p.id for p in roster] == [4, 7]

    roster.remove(4)
    assert [p.name for p in roster.members] == ["squirtle"]

    roster.clear()
    assert roster.is_empty()
    assert len(roster) == 0
