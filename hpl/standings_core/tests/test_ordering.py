"""
Tests for the canonical match and fixture order.
"""

import datetime
import itertools
import unittest

from hpl.standings_core.builder import LeagueBuilder, REGULAR_MATCH_LABELS
from hpl.standings_core.ordering import (
    closest_match_date,
    match_sort_key,
    matches_on,
    order_fixtures,
    order_matches,
)
from hpl.standings_core.structure import Fixture
from hpl.standings_core.tests.test_utils import simple_match

D1 = datetime.date(2025, 3, 1)
D2 = datetime.date(2025, 3, 8)


class MatchOrderTests(unittest.TestCase):
    def test_date_then_time(self):
        matches = [
            simple_match("a", date=D2, time="09:00"),
            simple_match("b", date=D1, time="19:00"),
            simple_match("c", date=D1, time="08:30"),
        ]
        self.assertEqual([m.id for m in order_matches(matches)], ["c", "b", "a"])

    def test_match_type_rank_within_same_slot(self):
        shuffled = list(reversed(REGULAR_MATCH_LABELS)) + ["Game Breaker"]
        matches = [
            simple_match(f"m{i}", date=D1, time="18:00", match_type_label=label)
            for i, label in enumerate(shuffled)
        ]
        ordered = [m.match_type_label for m in order_matches(matches)]
        self.assertEqual(ordered, REGULAR_MATCH_LABELS + ["Game Breaker"])

    def test_label_spelling_variants_share_a_rank(self):
        a = simple_match("a", match_type_label="Mens Doubles (2)")
        b = simple_match("b", match_type_label="Men's Doubles(2)")
        c = simple_match("c", match_type="mensDoubles")
        self.assertEqual(match_sort_key(a)[2], 5)
        self.assertEqual(match_sort_key(b)[2], 5)
        self.assertEqual(match_sort_key(c)[2], 1)

    def test_label_takes_precedence_over_type(self):
        match = simple_match("a", match_type="mensDoubles", match_type_label="Mixed Doubles")
        self.assertEqual(match_sort_key(match)[2], 6)

    def test_display_order_uses_first_set_field(self):
        matches = [
            simple_match("a", match_number=1),
            simple_match("b", match_order=3, sequence=0),
            simple_match("c", sequence=2, match_number=9),
            simple_match("d"),
        ]
        self.assertEqual([m.id for m in order_matches(matches)], ["d", "a", "c", "b"])

    def test_id_breaks_all_remaining_ties(self):
        matches = [simple_match(i, date=D1, time="18:00") for i in ("m10", "m2", "m1")]
        self.assertEqual([m.id for m in order_matches(matches)], ["m1", "m10", "m2"])

    def test_unknown_date_and_time_sort_last(self):
        matches = [
            simple_match("no-date", time="07:00"),
            simple_match("no-time", date=D1),
            simple_match("bad-time", date=D1, time="25:99"),
            simple_match("known", date=D1, time="23:00"),
        ]
        self.assertEqual(
            [m.id for m in order_matches(matches)],
            ["known", "bad-time", "no-time", "no-date"],
        )

    def test_unpadded_time_is_compared_padded(self):
        matches = [
            simple_match("late", date=D1, time="10:00"),
            simple_match("early", date=D1, time="9:30"),
        ]
        self.assertEqual([m.id for m in order_matches(matches)], ["early", "late"])

    def test_order_is_total_and_independent_of_input_order(self):
        matches = [
            simple_match(f"m{i}", date=D1, time="18:00", match_type_label="Unknown")
            for i in range(4)
        ]
        expected = [m.id for m in order_matches(matches)]
        for permutation in itertools.permutations(matches):
            self.assertEqual([m.id for m in order_matches(permutation)], expected)
        keys = [match_sort_key(m) for m in matches]
        self.assertEqual(len(set(keys)), len(keys))


class FixtureOrderTests(unittest.TestCase):
    def test_fixtures_by_date_time_id(self):
        fixtures = [
            Fixture("b", "t1", "t2", "A", "B", date=D1, time="18:00"),
            Fixture("a", "t3", "t4", "C", "D", date=D1, time="18:00"),
            Fixture("c", "t1", "t3", "A", "C", date=D1, time="09:00"),
            Fixture("d", "t2", "t4", "B", "D"),
        ]
        self.assertEqual([f.id for f in order_fixtures(fixtures)], ["c", "a", "b", "d"])

    def test_closest_date(self):
        snapshot = (
            LeagueBuilder()
            .team("A")
            .team("B")
            .fixture("A", "B", date="2025-03-01")
            .results("--")
            .fixture("B", "A", date="2025-03-09")
            .results("--")
            .build()
        )
        self.assertEqual(
            closest_match_date(snapshot.matches, datetime.date(2025, 3, 5)), D1
        )
        self.assertEqual(
            closest_match_date(snapshot.matches, datetime.date(2025, 3, 6)),
            datetime.date(2025, 3, 9),
        )
        self.assertEqual(len(matches_on(snapshot.matches, D1)), 2)
        self.assertIsNone(closest_match_date([], datetime.date(2025, 3, 6)))
