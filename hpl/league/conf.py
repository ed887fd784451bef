"""
League format configuration from Django settings.

    HPL_LEAGUE_FORMAT = {
        "battle_win_points": 3,
        "tournaments": {
            "hpl-juniors": {"regular_match_count": 4, "decisive_regular_wins": 3},
        },
    }

Top-level keys apply to every tournament, entries under "tournaments" are
layered on top for that tournament only.
"""

from typing import Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from hpl.standings_core.scoring import LeagueFormat


def league_format(tournament_id: Optional[str] = None) -> LeagueFormat:
    """The LeagueFormat configured for `tournament_id` (or the league-wide one)."""
    config = dict(getattr(settings, "HPL_LEAGUE_FORMAT", None) or {})
    overrides = config.pop("tournaments", None) or {}
    try:
        fmt = LeagueFormat.from_dict(config)
        if tournament_id is not None and tournament_id in overrides:
            fmt = LeagueFormat.from_dict(overrides[tournament_id], base=fmt)
    except (TypeError, ValueError) as e:
        raise ImproperlyConfigured(f"Invalid HPL_LEAGUE_FORMAT: {e}") from e
    return fmt
