"""
Grouping of matches into fixtures.

Matches are grouped by their explicit fixture group ID; a match without one
is a fixture of its own. Older data has no group ID and identifies fixtures
by a composite "Team1_vs_Team2_YYYY-MM-DD_Court" string instead, which is
supported here as a compatibility path only.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from hpl.standings_core.structure import Match

logger = logging.getLogger(__name__)

COMPOSITE_SEPARATOR = "_"
COMPOSITE_VS_TOKEN = "vs"
NO_TEAM = "TBD"
NO_DATE = "no-date"
NO_COURT = "no-court"

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def fixture_key(match: Match) -> str:
    return match.fixture_group_id or match.id


def group_matches(matches: Iterable[Match]) -> Dict[str, List[Match]]:
    """Partition matches into fixtures, keyed by group ID.

    The first match seen for a key fixes the fixture's orientation. Later
    matches listing the same teams the other way round are flipped into that
    orientation; matches between a different pair of teams are left out.
    """
    groups: Dict[str, List[Match]] = {}

    for match in matches:
        key = fixture_key(match)
        group = groups.get(key)
        if group is None:
            groups[key] = [match]
            continue

        expected = group[0].side_key
        if match.side_key == expected:
            group.append(match)
        elif match.side_key == (expected[1], expected[0]):
            group.append(match.flipped())
        else:
            logger.warning(
                "Match %s lists %s but fixture %s is %s; leaving it out",
                match.id,
                match.side_key,
                key,
                expected,
            )

    return groups


@dataclass(frozen=True)
class CompositeFixtureKey:
    """The parts of a legacy "Team1_vs_Team2_YYYY-MM-DD_Court" fixture key."""

    team1: str
    team2: str
    date: Optional[str] = None
    court: Optional[str] = None


def composite_fixture_key(match: Match) -> str:
    team1 = match.team1_name or NO_TEAM
    team2 = match.team2_name or NO_TEAM
    day = match.date.isoformat() if match.date else NO_DATE
    court = match.court or NO_COURT
    return COMPOSITE_SEPARATOR.join(
        [team1, COMPOSITE_VS_TOKEN, team2, day, court]
    )


def parse_composite_fixture_key(key: str) -> Optional[CompositeFixtureKey]:
    """Split a composite key into team names, date and court.

    The key is split on underscores and the first bare "vs" token separates
    the teams. Team name parts are joined back with spaces, so underscores in
    names come back as spaces. The first ISO date after "vs" ends the second
    team name and everything after it is the court. Without a date, the rest
    of the key is the second team and date and court are None.

    Returns None if the key has no "vs" token.
    """
    parts = (key or "").split(COMPOSITE_SEPARATOR)
    try:
        vs_index = parts.index(COMPOSITE_VS_TOKEN)
    except ValueError:
        logger.warning("Invalid fixture group key %r", key)
        return None

    team1 = " ".join(parts[:vs_index])
    rest = parts[vs_index + 1:]

    date_index = next(
        (i for i, part in enumerate(rest) if _ISO_DATE_RE.match(part)), None
    )
    if date_index is None:
        return CompositeFixtureKey(team1=team1, team2=" ".join(rest))

    return CompositeFixtureKey(
        team1=team1,
        team2=" ".join(rest[:date_index]),
        date=rest[date_index],
        court=" ".join(rest[date_index + 1:]),
    )


def _matches_composite(match: Match, parsed: CompositeFixtureKey) -> bool:
    # Parsing turns underscores in team names into spaces, compare the same way
    team1 = (match.team1_name or NO_TEAM).replace(COMPOSITE_SEPARATOR, " ")
    team2 = (match.team2_name or NO_TEAM).replace(COMPOSITE_SEPARATOR, " ")
    if sorted((team1, team2)) != sorted((parsed.team1, parsed.team2)):
        return False
    if parsed.date and parsed.court:
        day = match.date.isoformat() if match.date else NO_DATE
        return day == parsed.date and (match.court or NO_COURT) == parsed.court
    return True


def select_composite_fixture(matches: Iterable[Match], key: str) -> List[Match]:
    """Return the matches belonging to a legacy composite fixture key.

    Teams may appear in either order. An unparseable key selects nothing.
    """
    parsed = parse_composite_fixture_key(key)
    if parsed is None:
        return []
    return [m for m in matches if _matches_composite(m, parsed)]


def group_matches_by_composite_key(matches: Iterable[Match]) -> Dict[str, List[Match]]:
    groups: Dict[str, List[Match]] = {}
    for match in matches:
        groups.setdefault(composite_fixture_key(match), []).append(match)
    return groups
