"""
Conversion of raw store documents into league structures.

Match documents come from the match store with camelCase keys and loosely
typed values (numeric strings for scores, several date encodings, free-text
match type labels). Everything is normalized here, once, so the rest of the
engine only ever sees typed `Match` and `Team` values.
"""

import logging
import math
import re
from typing import Any, Dict, Mapping, Optional, Tuple

from hpl.standings_core.scoring import LeagueFormat, STANDARD_FORMAT
from hpl.standings_core.structure import Match, MatchKind, MatchStatus, Team
from hpl.standings_core.timeutils import normalize_time, parse_date

logger = logging.getLogger(__name__)

_GAME_KEY_RE = re.compile(r"^(?:game)?(\d+)$")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def coerce_score(value: Any) -> Optional[int]:
    """Read a score the way the scoring screens store it; None if it is not a number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        if match:
            return int(match.group(1))
    return None


def parse_scores(raw: Optional[Mapping]) -> Dict[int, int]:
    """Parse a {"game1": "11", ...} mapping into {1: 11, ...}, dropping unreadable entries."""
    scores = {}
    if not raw:
        return scores
    for key, value in raw.items():
        key_match = _GAME_KEY_RE.match(str(key))
        if not key_match:
            continue
        score = coerce_score(value)
        if score is None:
            continue
        scores[int(key_match.group(1))] = score
    return scores


def _optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return coerce_score(value)


def _optional_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def parse_players(record: Mapping[str, Any], side: int) -> Tuple[str, ...]:
    """Line-up of one side from the player1TeamN / player2TeamN fields."""
    names = (record.get(f"player{slot}Team{side}") for slot in (1, 2))
    return tuple(str(name).strip() for name in names if name and str(name).strip())


def parse_status(value: Any) -> MatchStatus:
    try:
        return MatchStatus(value)
    except ValueError:
        if value not in (None, ""):
            logger.warning("Unknown match status %r, treating as scheduled", value)
        return MatchStatus.SCHEDULED


def classify_match_kind(
    match_type: Optional[str],
    label: Optional[str],
    fmt: LeagueFormat = STANDARD_FORMAT,
) -> MatchKind:
    if fmt.is_tiebreak(match_type, label):
        return MatchKind.TIEBREAK
    return MatchKind.REGULAR


def match_from_record(
    record: Mapping[str, Any], fmt: LeagueFormat = STANDARD_FORMAT
) -> Match:
    """Build a Match from a store document.

    Raises:
        ValueError: if the document has no ID
    """
    match_id = record.get("id")
    if match_id in (None, ""):
        raise ValueError("Match record has no id")

    scores = record.get("scores") or {}
    team1_scores = parse_scores(record.get("team1Scores") or scores.get("player1"))
    team2_scores = parse_scores(record.get("team2Scores") or scores.get("player2"))

    games_count = _optional_int(record.get("gamesCount"))
    if not games_count or games_count < 1:
        games_count = fmt.default_games_count

    match_type = _optional_str(record.get("matchType"))
    label = _optional_str(record.get("matchTypeLabel"))

    return Match(
        id=str(match_id),
        tournament_id=_optional_str(record.get("tournamentId")),
        team1_id=_optional_str(record.get("team1Id", record.get("team1"))),
        team2_id=_optional_str(record.get("team2Id", record.get("team2"))),
        team1_name=record.get("team1Name") or "",
        team2_name=record.get("team2Name") or "",
        match_type=match_type,
        match_type_label=label,
        kind=classify_match_kind(match_type, label, fmt),
        games_count=games_count,
        team1_scores=team1_scores,
        team2_scores=team2_scores,
        status=parse_status(record.get("status")),
        date=parse_date(record.get("date")),
        time=normalize_time(record.get("time")),
        fixture_group_id=_optional_str(record.get("fixtureGroupId")),
        court=_optional_str(record.get("court")),
        match_order=_optional_int(record.get("matchOrder")),
        sequence=_optional_int(record.get("sequence")),
        match_number=_optional_int(record.get("matchNumber")),
        fixture_type=_optional_str(record.get("fixtureType")),
        playoff_stage=_optional_str(record.get("playoffStage")),
        playoff_number=_optional_int(record.get("playoffNumber")),
        playoff_name=_optional_str(record.get("playoffName")),
        team1_players=parse_players(record, 1),
        team2_players=parse_players(record, 2),
    )


def match_to_record(match: Match) -> Dict[str, Any]:
    """Inverse of match_from_record, for exporting snapshots."""
    record = {
        "id": match.id,
        "tournamentId": match.tournament_id,
        "team1": match.team1_id,
        "team2": match.team2_id,
        "team1Name": match.team1_name,
        "team2Name": match.team2_name,
        "matchType": match.match_type,
        "matchTypeLabel": match.match_type_label,
        "gamesCount": match.games_count,
        "scores": {
            "player1": {f"game{g}": s for g, s in sorted(match.team1_scores.items())},
            "player2": {f"game{g}": s for g, s in sorted(match.team2_scores.items())},
        },
        "status": match.status.value,
        "date": match.date.isoformat() if match.date else None,
        "time": match.time,
        "fixtureGroupId": match.fixture_group_id,
        "court": match.court,
        "matchOrder": match.match_order,
        "sequence": match.sequence,
        "matchNumber": match.match_number,
        "fixtureType": match.fixture_type,
        "playoffStage": match.playoff_stage,
        "playoffNumber": match.playoff_number,
        "playoffName": match.playoff_name,
    }
    for side, players in ((1, match.team1_players), (2, match.team2_players)):
        for slot, name in enumerate(players[:2], start=1):
            record[f"player{slot}Team{side}"] = name
    return {k: v for k, v in record.items() if v is not None}


def team_from_record(record: Mapping[str, Any]) -> Team:
    """Build a Team from a store document.

    Raises:
        ValueError: if the document has no ID
    """
    team_id = record.get("id")
    if team_id in (None, ""):
        raise ValueError("Team record has no id")
    return Team(
        id=str(team_id),
        name=record.get("name") or "",
        logo=_optional_str(record.get("logo") or record.get("logoUrl")),
        tournament_id=_optional_str(record.get("tournamentId")),
    )


def team_to_record(team: Team) -> Dict[str, Any]:
    record = {
        "id": team.id,
        "name": team.name,
        "logo": team.logo,
        "tournamentId": team.tournament_id,
    }
    return {k: v for k, v in record.items() if v is not None}
