"""
Tests for the snapshot seeder.
"""

import datetime
from collections import Counter

from django.test import SimpleTestCase
from faker import Faker

from hpl.league.seeders import SnapshotSeeder
from hpl.league.store import SnapshotStore
from hpl.standings_core.engine import LeagueSnapshot
from hpl.standings_core.structure import FixtureStatus

START = datetime.date(2025, 3, 1)


def create_seeder(seed=4545):
    fake = Faker()
    fake.seed_instance(seed)
    return SnapshotSeeder(fake)


def load_snapshot(data, tournament_id="hpl-season"):
    store = SnapshotStore()
    store.load(data["teams"], data["matches"])
    return LeagueSnapshot(
        teams=store.list_teams(tournament_id), matches=store.list_matches(tournament_id)
    )


class SnapshotSeederTests(SimpleTestCase):
    def test_round_robin(self):
        seeder = create_seeder()
        data = seeder.seed(teams=4, completion=1, start_date=START)

        self.assertEqual(len(data["teams"]), 4)
        self.assertEqual(len(data["matches"]), 6 * 7)
        self.assertEqual(len(seeder.created_objects), 4 + 6 * 7)

        fixtures = load_snapshot(data).fixtures()
        self.assertEqual(len(fixtures), 6)
        pairs = {frozenset((f.team1_id, f.team2_id)) for f in fixtures}
        self.assertEqual(len(pairs), 6)
        self.assertEqual(
            sorted({f.date for f in fixtures}),
            [START, START + datetime.timedelta(weeks=1), START + datetime.timedelta(weeks=2)],
        )

    def test_odd_team_count(self):
        data = create_seeder().seed(teams=5, start_date=START)
        self.assertEqual(len(load_snapshot(data).fixtures()), 10)

    def test_same_seed_same_snapshot(self):
        self.assertEqual(
            create_seeder(7).seed(teams=4, start_date=START),
            create_seeder(7).seed(teams=4, start_date=START),
        )

    def test_completed_fixtures_always_have_a_winner(self):
        data = create_seeder().seed(teams=4, completion=1, start_date=START)
        snapshot = load_snapshot(data)

        self.assertTrue(
            all(f.status is FixtureStatus.COMPLETED for f in snapshot.fixtures())
        )
        standings = snapshot.standings()
        self.assertEqual(sum(s.battle_wins for s in standings), 6)
        self.assertEqual(sum(s.battle_losses for s in standings), 6)
        self.assertEqual(sum(s.points for s in standings), 18)

    def test_partial_completion(self):
        data = create_seeder().seed(teams=4, completion=0.5, start_date=START)
        statuses = Counter(f.status for f in load_snapshot(data).fixtures())
        self.assertEqual(
            statuses,
            Counter(
                {
                    FixtureStatus.COMPLETED: 3,
                    FixtureStatus.IN_PROGRESS: 1,
                    FixtureStatus.SCHEDULED: 2,
                }
            ),
        )

    def test_playoffs(self):
        data = create_seeder().seed(teams=4, start_date=START, playoffs=True)
        snapshot = load_snapshot(data)
        self.assertEqual(
            sorted(f.fixture_type for f in snapshot.playoff_fixtures()),
            ["Eliminator", "Qualifier 1"],
        )
        self.assertEqual(len(snapshot.league_fixtures()), 6)

    def test_line_ups(self):
        data = create_seeder().seed(teams=2, start_date=START)
        by_type = {m["matchType"]: m for m in data["matches"]}
        self.assertIn("player2Team1", by_type["mensDoubles"])
        self.assertIn("player1Team2", by_type["womensSingles"])
        self.assertNotIn("player2Team2", by_type["womensSingles"])

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            create_seeder().seed(teams=1)
        with self.assertRaises(ValueError):
            create_seeder().seed(teams=4, completion=1.5)
