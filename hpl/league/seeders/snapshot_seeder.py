"""
Snapshot seeder for creating test league seasons.
"""

import datetime
from typing import Any, Dict, List, Optional, Tuple

from .base import BaseSeeder

Record = Dict[str, Any]


class SnapshotSeeder(BaseSeeder):
    """Seeder for a round-robin season in the match store document layout."""

    TEAM_NICKNAMES = [
        "Smashers",
        "Dinkers",
        "Lobbers",
        "Volleyers",
        "Aces",
        "Bangers",
        "Drop Shots",
        "Kitchen Kings",
    ]

    # (matchType, matchTypeLabel, players per side)
    REGULAR_MATCHES = [
        ("mensDoubles", "Men's Doubles", 2),
        ("womensDoubles", "Women's Doubles", 2),
        ("mensSingles", "Men's Singles", 1),
        ("womensSingles", "Women's Singles", 1),
        ("mensDoubles2", "Men's Doubles (2)", 2),
        ("mixedDoubles", "Mixed Doubles", 2),
    ]
    TIEBREAK_MATCH = ("dreamBreaker", "Game Breaker", 2)

    KICK_OFF_TIMES = ["17:00", "18:00", "19:00"]
    ROSTER_SIZE = 8

    def seed(
        self,
        teams: int = 6,
        tournament_id: str = "hpl-season",
        start_date: Optional[datetime.date] = None,
        completion: float = 0.5,
        playoffs: bool = False,
        **kwargs,
    ) -> Dict[str, List[Record]]:
        """Create a season: one fixture per pair of teams, one round a week.

        The first `completion` share of fixtures is fully played, the next one
        is in progress and the rest are scheduled.
        """
        if teams < 2:
            raise ValueError("A season needs at least two teams")
        if not 0 <= completion <= 1:
            raise ValueError("completion must be between 0 and 1")
        start_date = start_date or datetime.date.today()

        team_records = [self._team_record(tournament_id, i) for i in range(teams)]
        self.rosters = {
            team["id"]: [self.fake.name() for _ in range(self.ROSTER_SIZE)]
            for team in team_records
        }

        rounds = self._round_robin(team_records)
        total = sum(len(pairs) for pairs in rounds)
        completed = round(total * completion)

        match_records = []
        played = 0
        for round_number, pairs in enumerate(rounds, start=1):
            day = start_date + datetime.timedelta(weeks=round_number - 1)
            for court_number, (home, away) in enumerate(pairs, start=1):
                if played < completed:
                    state = "completed"
                elif played == completed:
                    state = "in-progress"
                else:
                    state = "scheduled"
                played += 1
                match_records.extend(
                    self._fixture_records(
                        tournament_id,
                        f"{tournament_id}-r{round_number}-c{court_number}",
                        home,
                        away,
                        day,
                        f"Court {court_number}",
                        state,
                    )
                )

        if playoffs and teams >= 4:
            playoff_day = start_date + datetime.timedelta(weeks=len(rounds))
            for number, (name, home, away) in enumerate(
                [
                    ("Qualifier 1", team_records[0], team_records[1]),
                    ("Eliminator", team_records[2], team_records[3]),
                ],
                start=1,
            ):
                match_records.extend(
                    self._fixture_records(
                        tournament_id,
                        f"{tournament_id}-playoff-{number}",
                        home,
                        away,
                        playoff_day,
                        f"Court {number}",
                        "scheduled",
                        playoff=(name, number),
                    )
                )

        return {"teams": team_records, "matches": match_records}

    def _team_record(self, tournament_id: str, index: int) -> Record:
        nickname = self.TEAM_NICKNAMES[index % len(self.TEAM_NICKNAMES)]
        return self._track_object(
            {
                "id": f"{tournament_id}-team{index + 1}",
                "name": f"{self.fake.unique.city()} {nickname}",
                "tournamentId": tournament_id,
            }
        )

    @staticmethod
    def _round_robin(teams: List[Record]) -> List[List[Tuple[Record, Record]]]:
        """Circle-method pairings; with an odd count one team sits out each round."""
        slots: List[Optional[Record]] = list(teams)
        if len(slots) % 2:
            slots.append(None)
        rounds = []
        for _ in range(len(slots) - 1):
            half = len(slots) // 2
            pairs = [
                (slots[i], slots[-1 - i])
                for i in range(half)
                if slots[i] is not None and slots[-1 - i] is not None
            ]
            rounds.append(pairs)
            slots = [slots[0], slots[-1]] + slots[1:-1]
        return rounds

    def _fixture_records(
        self,
        tournament_id: str,
        group_id: str,
        home: Record,
        away: Record,
        day: datetime.date,
        court: str,
        state: str,
        playoff: Optional[Tuple[str, int]] = None,
    ) -> List[Record]:
        base = {
            "tournamentId": tournament_id,
            "team1": home["id"],
            "team2": away["id"],
            "team1Name": home["name"],
            "team2Name": away["name"],
            "date": day.isoformat(),
            "time": self.fake.random.choice(self.KICK_OFF_TIMES),
            "fixtureGroupId": group_id,
            "court": court,
        }
        if playoff is not None:
            name, number = playoff
            base.update(
                fixtureType=name,
                playoffStage=name,
                playoffNumber=number,
                playoffName=f"{name}: {home['name']} vs {away['name']}",
            )

        records = []
        wins = {1: 0, 2: 0}
        for sequence, (match_type, label, players) in enumerate(self.REGULAR_MATCHES, start=1):
            if state == "completed" or (state == "in-progress" and sequence <= 3):
                status = "completed"
            elif state == "in-progress" and sequence == 4:
                status = "in-progress"
            else:
                status = "scheduled"

            record = self._match_record(
                base, group_id, match_type, label, players, sequence, 3, status
            )
            if status == "completed":
                winner = self.fake.random.choice((1, 2))
                wins[winner] += 1
                record["scores"] = self._game_scores(winner)
            elif status == "in-progress":
                record["scores"] = self._game_scores(self.fake.random.choice((1, 2)), games=1)
            records.append(record)

        match_type, label, players = self.TIEBREAK_MATCH
        tiebreak = self._match_record(
            base, group_id, match_type, label, players, len(records) + 1, 1, "scheduled"
        )
        if state == "completed" and wins[1] == wins[2]:
            winner = self.fake.random.choice((1, 2))
            loser_points = self.fake.random_int(10, 19)
            points = {winner: 21, 3 - winner: loser_points}
            tiebreak["status"] = "completed"
            tiebreak["scores"] = {
                "player1": {"game1": points[1]},
                "player2": {"game1": points[2]},
            }
        records.append(tiebreak)
        return records

    def _match_record(
        self,
        base: Record,
        group_id: str,
        match_type: str,
        label: str,
        players: int,
        sequence: int,
        games_count: int,
        status: str,
    ) -> Record:
        record = dict(
            base,
            id=f"{group_id}-{match_type}",
            matchType=match_type,
            matchTypeLabel=label,
            gamesCount=games_count,
            sequence=sequence,
            status=status,
            scores={"player1": {}, "player2": {}},
        )
        for side, team_id in ((1, base["team1"]), (2, base["team2"])):
            names = self.fake.random.sample(self.rosters[team_id], players)
            for slot, name in enumerate(names, start=1):
                record[f"player{slot}Team{side}"] = name
        return self._track_object(record)

    def _game_scores(self, winner: int, games: Optional[int] = None) -> Dict[str, Dict[str, int]]:
        """Scores of a best-of-three won by `winner`, or just its first `games` games."""
        if self.fake.boolean(chance_of_getting_true=40):
            game_winners = [winner, 3 - winner, winner]
        else:
            game_winners = [winner, winner]
        if games is not None:
            game_winners = game_winners[:games]

        scores = {"player1": {}, "player2": {}}
        for game, game_winner in enumerate(game_winners, start=1):
            loser_points = self.fake.random_int(3, 9)
            scores[f"player{game_winner}"][f"game{game}"] = 11
            scores[f"player{3 - game_winner}"][f"game{game}"] = loser_points
        return scores
