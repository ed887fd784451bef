"""
Canonical display order for matches and fixtures.

Every list that numbers matches (umpire list, API feed, streaming list,
schedule) sorts with `match_sort_key`, so "Match 3" means the same match
everywhere. The key always ends with the match ID, which makes the order
strict even when every other field ties.
"""

import datetime
from typing import Iterable, List, Optional, Tuple

from hpl.standings_core.scoring import LeagueFormat, STANDARD_FORMAT
from hpl.standings_core.structure import Fixture, Match
from hpl.standings_core.timeutils import normalize_time


def _date_key(day: Optional[datetime.date]) -> Tuple[bool, datetime.date]:
    # Unknown dates sort after every known one
    return (day is None, day or datetime.date.min)


def _time_key(time_str: Optional[str]) -> Tuple[bool, str]:
    normalized = normalize_time(time_str) if time_str else None
    return (normalized is None, normalized or "")


def match_sort_key(match: Match, fmt: LeagueFormat = STANDARD_FORMAT) -> tuple:
    return (
        _date_key(match.date),
        _time_key(match.time),
        fmt.match_type_rank(match.display_label),
        match.display_order,
        match.id,
    )


def order_matches(
    matches: Iterable[Match], fmt: LeagueFormat = STANDARD_FORMAT
) -> List[Match]:
    """Sort matches by date, time, match type, match order and finally ID."""
    return sorted(matches, key=lambda m: match_sort_key(m, fmt))


def fixture_sort_key(fixture: Fixture) -> tuple:
    return (_date_key(fixture.date), _time_key(fixture.time), fixture.id)


def order_fixtures(fixtures: Iterable[Fixture]) -> List[Fixture]:
    """Sort fixtures by date, then time, then group key."""
    return sorted(fixtures, key=fixture_sort_key)


def matches_on(matches: Iterable[Match], day: datetime.date) -> List[Match]:
    return [m for m in matches if m.date == day]


def closest_match_date(
    matches: Iterable[Match], today: datetime.date
) -> Optional[datetime.date]:
    """The scheduled date nearest to `today`, earlier date winning a tie."""
    dates = sorted({m.date for m in matches if m.date is not None})
    if not dates:
        return None
    return min(dates, key=lambda d: abs((d - today).days))
