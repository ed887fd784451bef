"""
Fixture status and the early-decision rule.

A league fixture is six regular matches plus an optional tiebreak match.
Once every regular match is in and one side has won a majority of them, the
fixture is decided: it counts as completed and the tiebreak is dropped from
the fixture, whether or not it was played.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from hpl.standings_core.outcome import resolve_match
from hpl.standings_core.scoring import LeagueFormat, STANDARD_FORMAT
from hpl.standings_core.structure import FixtureStatus, Match, Winner


@dataclass(frozen=True)
class FixtureDecision:
    """Status of a fixture and the matches that remain part of it."""

    status: FixtureStatus
    effectively_completed: bool
    side1_wins: int
    side2_wins: int
    matches: Tuple[Match, ...]
    excluded: Tuple[Match, ...] = ()


def count_regular_wins(matches: Sequence[Match]) -> Tuple[int, int]:
    """Return (side1, side2) wins over the completed regular matches."""
    side1_wins = side2_wins = 0
    for match in matches:
        if match.is_tiebreak or not match.is_completed:
            continue
        winner = resolve_match(match).winner
        if winner is Winner.SIDE1:
            side1_wins += 1
        elif winner is Winner.SIDE2:
            side2_wins += 1
    return side1_wins, side2_wins


def generic_status(matches: Sequence[Match]) -> FixtureStatus:
    """Completed when every match is completed, in progress when some are."""
    total = len(matches)
    completed = sum(1 for m in matches if m.is_completed)
    if total > 0 and completed == total:
        return FixtureStatus.COMPLETED
    if completed > 0:
        return FixtureStatus.IN_PROGRESS
    return FixtureStatus.SCHEDULED


def resolve_fixture(
    matches: Sequence[Match], fmt: LeagueFormat = STANDARD_FORMAT
) -> FixtureDecision:
    """Decide a fixture's status and which of its matches survive.

    Until `fmt.regular_match_count` regular matches are completed nothing is
    excluded. After that, a side holding `fmt.decisive_regular_wins` regular
    wins makes the fixture effectively completed and the tiebreak matches are
    moved to `excluded`.
    """
    regular: List[Match] = [m for m in matches if not m.is_tiebreak]
    tiebreaks: List[Match] = [m for m in matches if m.is_tiebreak]
    side1_wins, side2_wins = count_regular_wins(regular)

    completed_regular = sum(1 for m in regular if m.is_completed)
    decided = completed_regular >= fmt.regular_match_count and (
        side1_wins >= fmt.decisive_regular_wins
        or side2_wins >= fmt.decisive_regular_wins
    )

    if decided:
        return FixtureDecision(
            status=FixtureStatus.COMPLETED,
            effectively_completed=True,
            side1_wins=side1_wins,
            side2_wins=side2_wins,
            matches=tuple(regular),
            excluded=tuple(tiebreaks),
        )

    return FixtureDecision(
        status=generic_status(matches),
        effectively_completed=False,
        side1_wins=side1_wins,
        side2_wins=side2_wins,
        matches=tuple(matches),
    )
