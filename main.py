"""Command-line interface for Pokemon type matchups and party comparison."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict

from poke_team.analysis import get_offensive_strengths, summarize_defenses
from poke_team.clients import PokeAPIClient, PokeAPIClientError
from poke_team.models import MAX_ROSTER_SIZE, DefensiveProfile, Notice
from poke_team.services import TeamSession


def _format_pairs(pairs: list[tuple[str, float]], empty: str) -> str:
    if not pairs:
        return empty
    return ", ".join(f"{name} x{mult:g}" for name, mult in pairs)


def _humanize_report(session: TeamSession, profile: DefensiveProfile, strengths: list[str]) -> str:
    subject = session.subject
    lines: list[str] = [
        f"{subject.dex_number} {subject.name.upper()}",
        f"Types: {' / '.join(subject.types)}",
        "",
        f"Weak to: {_format_pairs(profile.weaknesses, 'No weaknesses')}",
        f"Resistant to: {_format_pairs(profile.resistances, 'No resistances')}",
        f"Super effective against: {', '.join(strengths) or 'nothing'}",
    ]

    stats = subject.stat_lines()
    if stats:
        lines.append("")
        lines.append("Stats:")
        for label, value in stats:
            lines.append(f"  {label:<8} {value:>3}")

    if not session.roster.is_empty():
        comparison = session.comparison()
        lines.append("")
        lines.append(f"Party ({len(session.roster)}/{MAX_ROSTER_SIZE}): {', '.join(p.name for p in session.roster)}")
        advantage = ", ".join(p.name for p in comparison.advantage)
        risk = ", ".join(p.name for p in comparison.risk)
        lines.append(f"  Super effective vs {subject.name}: {advantage or 'None'}")
        lines.append(f"  Weak to {subject.name}: {risk or 'Team is safe'}")

    return "\n".join(lines).strip()


def _debug_print(enabled: bool, message: str) -> None:
    if enabled:
        sys.stderr.write(f"[debug] {message}\n")


def _print_notice(notice: Notice, query: str | None = None) -> None:
    prefix = f"{query}: " if query else ""
    sys.stderr.write(f"{prefix}{notice.title} {notice.description}\n")


def _build_party(session: TeamSession, queries: list[str]) -> None:
    for member_query in queries:
        notice = session.load(member_query)
        if notice is None:
            notice = session.add_subject()
        if notice is not None and notice.variant != "success":
            _print_notice(notice, member_query)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Look up a Pokémon and compare it against your party")
    parser.add_argument(
        "query",
        nargs="?",
        default="",
        help="Pokemon name or national dex number (default: 1)",
    )
    parser.add_argument(
        "--team",
        nargs="*",
        default=[],
        metavar="POKEMON",
        help="Party members (names or ids, max 6)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the report as JSON",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print debug progress information to stderr",
    )
    args = parser.parse_args(argv)

    _debug_print(args.debug, f"Arguments parsed: {args}")
    session = TeamSession(
        PokeAPIClient(),
        debug_logger=(lambda msg: _debug_print(args.debug, msg)),
    )

    try:
        _build_party(session, args.team)
        notice = session.load(args.query)
    except PokeAPIClientError as exc:
        sys.stderr.write(f"PokeAPI request failed: {exc}\n")
        return 2
    _debug_print(args.debug, f"Party has {len(session.roster)} members")

    if notice is not None:
        _print_notice(notice)
        return 1

    profile = summarize_defenses(session.subject.types)
    strengths = get_offensive_strengths(session.subject.types)
    _debug_print(args.debug, f"Computed matchups for {session.subject.name}")

    if args.json:
        comparison = session.comparison()
        payload = {
            "pokemon": asdict(session.subject),
            "defenses": asdict(profile),
            "offensive_strengths": strengths,
            "team": [member.name for member in session.roster],
            "advantage": [member.name for member in comparison.advantage],
            "risk": [member.name for member in comparison.risk],
            "notices": [asdict(n) for n in session.notices],
        }
        json.dump(payload, sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        print(_humanize_report(session, profile, strengths))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
