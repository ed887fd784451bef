"""
Tests for converting store documents into league structures.
"""

import datetime
import unittest

from hpl.standings_core.records import (
    coerce_score,
    match_from_record,
    match_to_record,
    parse_scores,
    team_from_record,
)
from hpl.standings_core.structure import MatchKind, MatchStatus


def match_record(**overrides):
    record = {
        "id": "abc123",
        "tournamentId": "hpl-2025",
        "team1": "t1",
        "team2": "t2",
        "team1Name": "Smashers",
        "team2Name": "Dinkers",
        "matchType": "mensDoubles",
        "matchTypeLabel": "Men's Doubles",
        "gamesCount": 3,
        "scores": {
            "player1": {"game1": "11", "game2": 9, "game3": ""},
            "player2": {"game1": "5", "game2": "11"},
        },
        "status": "in-progress",
        "date": "2025-03-01",
        "time": "9:05",
        "fixtureGroupId": "g1",
        "court": "Court 1",
        "matchNumber": 2,
    }
    record.update(overrides)
    return record


class MatchRecordTests(unittest.TestCase):
    def test_full_record(self):
        match = match_from_record(match_record())

        self.assertEqual(match.id, "abc123")
        self.assertEqual(match.tournament_id, "hpl-2025")
        self.assertEqual((match.team1_id, match.team2_id), ("t1", "t2"))
        self.assertEqual(match.kind, MatchKind.REGULAR)
        self.assertEqual(match.team1_scores, {1: 11, 2: 9})
        self.assertEqual(match.team2_scores, {1: 5, 2: 11})
        self.assertEqual(match.status, MatchStatus.IN_PROGRESS)
        self.assertEqual(match.date, datetime.date(2025, 3, 1))
        self.assertEqual(match.time, "09:05")
        self.assertEqual(match.fixture_group_id, "g1")
        self.assertEqual(match.display_order, 2)

    def test_tiebreak_detected_from_type_or_label(self):
        by_type = match_from_record(match_record(matchType="dreamBreaker", matchTypeLabel=None))
        by_label = match_from_record(match_record(matchType=None, matchTypeLabel="Game Breaker"))
        self.assertEqual(by_type.kind, MatchKind.TIEBREAK)
        self.assertEqual(by_label.kind, MatchKind.TIEBREAK)

    def test_day_first_dates(self):
        self.assertEqual(
            match_from_record(match_record(date="15/03/2025")).date,
            datetime.date(2025, 3, 15),
        )
        # 03/15 is not a valid day-first date, so month-first is tried
        self.assertEqual(
            match_from_record(match_record(date="03/15/2025")).date,
            datetime.date(2025, 3, 15),
        )

    def test_datetime_values(self):
        match = match_from_record(match_record(date=datetime.datetime(2025, 3, 1, 18, 0)))
        self.assertEqual(match.date, datetime.date(2025, 3, 1))

    def test_bad_values_become_unknown(self):
        with self.assertLogs("hpl.standings_core", level="WARNING"):
            match = match_from_record(
                match_record(date="someday", time="late", status="postponed")
            )
        self.assertIsNone(match.date)
        self.assertIsNone(match.time)
        self.assertEqual(match.status, MatchStatus.SCHEDULED)

    def test_games_count_default(self):
        self.assertEqual(match_from_record(match_record(gamesCount=None)).games_count, 3)
        self.assertEqual(match_from_record(match_record(gamesCount=0)).games_count, 3)
        self.assertEqual(match_from_record(match_record(gamesCount="5")).games_count, 5)

    def test_missing_scores(self):
        match = match_from_record(match_record(scores=None))
        self.assertEqual(match.team1_scores, {})

    def test_missing_id(self):
        with self.assertRaises(ValueError):
            match_from_record(match_record(id=None))

    def test_export_round_trip_keeps_scores(self):
        match = match_from_record(match_record())
        self.assertEqual(match_from_record(match_to_record(match)), match)


class ScoreParsingTests(unittest.TestCase):
    def test_coerce_like_the_scoring_screens(self):
        self.assertEqual(coerce_score("11"), 11)
        self.assertEqual(coerce_score(" 7 pts"), 7)
        self.assertEqual(coerce_score(9.0), 9)
        self.assertIsNone(coerce_score("abc"))
        self.assertIsNone(coerce_score(None))
        self.assertIsNone(coerce_score(True))

    def test_non_finite_floats_are_unreadable(self):
        self.assertIsNone(coerce_score(float("nan")))
        self.assertIsNone(coerce_score(float("inf")))
        self.assertIsNone(coerce_score(float("-inf")))

    def test_non_finite_scores_count_as_unplayed(self):
        match = match_from_record(
            match_record(
                scores={
                    "player1": {"game1": float("nan"), "game2": 11},
                    "player2": {"game1": float("inf"), "game2": 4},
                },
                gamesCount=float("inf"),
            )
        )
        self.assertEqual(match.team1_scores, {2: 11})
        self.assertEqual(match.team2_scores, {2: 4})
        self.assertEqual(match.games_count, 3)

    def test_keys(self):
        self.assertEqual(parse_scores({"game1": 1, "2": 2, 3: 3, "bonus": 4}), {1: 1, 2: 2, 3: 3})


class TeamRecordTests(unittest.TestCase):
    def test_team(self):
        team = team_from_record(
            {"id": "t1", "name": "Smashers", "logoUrl": "logos/t1.png", "tournamentId": "x"}
        )
        self.assertEqual(team.logo, "logos/t1.png")
        self.assertEqual(team.tournament_id, "x")

    def test_missing_id(self):
        with self.assertRaises(ValueError):
            team_from_record({"name": "Nobody"})


class PlayerRecordTests(unittest.TestCase):
    def test_line_ups(self):
        match = match_from_record(
            match_record(player1Team1="Asha", player2Team1=" Ben ", player1Team2="Chen")
        )
        self.assertEqual(match.team1_players, ("Asha", "Ben"))
        self.assertEqual(match.team2_players, ("Chen",))
        self.assertEqual(match_to_record(match)["player2Team1"], "Ben")
