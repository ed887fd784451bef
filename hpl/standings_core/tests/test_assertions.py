"""
Tests for the fluent assertion interface.
"""

import unittest

from hpl.standings_core.assertions import assert_league
from hpl.standings_core.builder import LeagueBuilder
from hpl.standings_core.structure import FixtureStatus


class TestLeagueAssertions(unittest.TestCase):
    """Test the fluent assertion interface for league standings."""

    def setUp(self):
        self.snapshot = (
            LeagueBuilder()
            .team("Smashers")
            .team("Dinkers")
            .fixture("Smashers", "Dinkers")
            .results("111122")
            .tiebreak((11, 3))
            .build()
        )

    def test_passing_chain(self):
        league = assert_league(self.snapshot)
        league.order("Smashers", "Dinkers")
        league.team("Smashers").assert_().position(1).points(3).battle_wins(
            1
        ).games_difference(2).points_difference(16)
        league.fixture("fx1").status(FixtureStatus.COMPLETED).excluded(1)

    def test_failures_name_the_team(self):
        with self.assertRaisesRegex(AssertionError, "Dinkers expected 3 points, got 0"):
            assert_league(self.snapshot).team("Dinkers").assert_().points(3)

    def test_unknown_names(self):
        with self.assertRaises(AssertionError):
            assert_league(self.snapshot).team("Nobody")
        with self.assertRaises(AssertionError):
            assert_league(self.snapshot).fixture("fx9")

    def test_wrong_order(self):
        with self.assertRaises(AssertionError):
            assert_league(self.snapshot).order("Dinkers", "Smashers")


class TestLeagueBuilder(unittest.TestCase):
    def test_unknown_team(self):
        with self.assertRaises(ValueError):
            LeagueBuilder().team("A").fixture("A", "B")

    def test_duplicate_team(self):
        with self.assertRaises(ValueError):
            LeagueBuilder().team("A").team("A")

    def test_match_needs_fixture(self):
        with self.assertRaises(ValueError):
            LeagueBuilder().team("A").match("Men's Doubles")

    def test_bad_result_code(self):
        builder = LeagueBuilder().team("A").team("B").fixture("A", "B")
        with self.assertRaises(ValueError):
            builder.results("1x")
        with self.assertRaises(ValueError):
            builder.results("1111111")

    def test_ids_and_sequence(self):
        snapshot = (
            LeagueBuilder("spring")
            .team("A")
            .team("B", team_id="bee")
            .fixture("A", "B")
            .results("1-")
            .build()
        )
        first, second = snapshot.matches
        self.assertEqual((first.id, second.id), ("fx1-m1", "fx1-m2"))
        self.assertEqual(first.team2_id, "bee")
        self.assertEqual(first.tournament_id, "spring")
        self.assertEqual(second.sequence, 2)
        self.assertTrue(first.is_completed)
        self.assertFalse(second.is_completed)
