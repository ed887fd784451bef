"""
Tests for revealing player names ahead of a match.
"""

import datetime
import unittest

from hpl.standings_core.reveal import (
    displayed_line_up,
    scheduled_start,
    should_show_player_names,
)
from hpl.standings_core.scoring import LeagueFormat
from hpl.standings_core.structure import Fixture, MatchStatus
from hpl.standings_core.tests.test_utils import simple_match

MATCH_DAY = datetime.date(2025, 3, 1)


def at(hours, minutes, day=MATCH_DAY):
    return datetime.datetime(day.year, day.month, day.day, hours, minutes)


class RevealTimingTests(unittest.TestCase):
    def setUp(self):
        self.match = simple_match("m1", date=MATCH_DAY, time="18:00")

    def test_hidden_more_than_55_minutes_before(self):
        self.assertFalse(should_show_player_names(self.match, now=at(16, 50)))
        self.assertFalse(should_show_player_names(self.match, now=at(17, 4)))

    def test_shown_from_55_minutes_before(self):
        self.assertTrue(should_show_player_names(self.match, now=at(17, 5)))
        self.assertTrue(should_show_player_names(self.match, now=at(17, 30)))

    def test_shown_once_start_time_has_passed(self):
        self.assertTrue(should_show_player_names(self.match, now=at(18, 1)))

    def test_started_or_finished_matches_always_shown(self):
        for status in (MatchStatus.IN_PROGRESS, MatchStatus.COMPLETED):
            with self.subTest(status=status):
                match = simple_match("m1", date=MATCH_DAY, time="18:00", status=status)
                self.assertTrue(should_show_player_names(match, now=at(9, 0)))

    def test_no_time_shows_names(self):
        match = simple_match("m1", date=MATCH_DAY)
        self.assertTrue(should_show_player_names(match, now=at(9, 0)))

    def test_fixture_supplies_missing_date_and_time(self):
        match = simple_match("m1")
        fixture = Fixture("fx1", "t1", "t2", "A", "B", date=MATCH_DAY, time="18:00")
        self.assertFalse(should_show_player_names(match, fixture, now=at(16, 0)))
        self.assertTrue(should_show_player_names(match, fixture, now=at(17, 10)))

    def test_time_without_date_uses_today(self):
        match = simple_match("m1", time="18:00")
        today = datetime.date(2030, 6, 15)
        self.assertFalse(should_show_player_names(match, now=at(12, 0, today)))
        self.assertEqual(scheduled_start(match, today=today), at(18, 0, today))

    def test_unparseable_time_fails_open(self):
        match = simple_match("m1", date=MATCH_DAY, time="six pm")
        with self.assertLogs("hpl.standings_core.reveal", level="WARNING"):
            self.assertTrue(should_show_player_names(match, now=at(9, 0)))

    def test_aware_now_against_naive_schedule_fails_open(self):
        now = at(9, 0).replace(tzinfo=datetime.timezone.utc)
        with self.assertLogs("hpl.standings_core.reveal", level="WARNING"):
            self.assertTrue(should_show_player_names(self.match, now=now))

    def test_configurable_lead_time(self):
        fmt = LeagueFormat(reveal_lead_minutes=10)
        self.assertFalse(should_show_player_names(self.match, now=at(17, 45), fmt=fmt))
        self.assertTrue(should_show_player_names(self.match, now=at(17, 50), fmt=fmt))


class LineUpTests(unittest.TestCase):
    def test_line_up_hidden_until_reveal(self):
        match = simple_match(
            "m1",
            date=MATCH_DAY,
            time="18:00",
            team1_players=("Asha", "Ben"),
            team2_players=("Chen",),
        )
        self.assertIsNone(displayed_line_up(match, now=at(16, 0)))
        self.assertEqual(displayed_line_up(match, now=at(17, 30)), "Asha & Ben")
        self.assertEqual(displayed_line_up(match, side1=False, now=at(17, 30)), "Chen")

    def test_line_up_falls_back_to_team_name(self):
        match = simple_match("m1")
        self.assertEqual(match.line_up(), "Smashers")
        self.assertEqual(simple_match("m2", team2_name="").line_up(False), "TBD")

    def test_flipped_match_swaps_line_ups(self):
        match = simple_match("m1", team1_players=("Asha",), team2_players=("Chen",))
        self.assertEqual(match.flipped().line_up(), "Chen")
