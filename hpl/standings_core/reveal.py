"""
When player line-ups may be shown for a match.

Line-ups stay hidden until shortly before the scheduled start. Anything that
goes wrong while working out the start time reveals them: hiding names by
mistake is worse than showing them early.
"""

import datetime
import logging
from typing import Optional

from hpl.standings_core.scoring import LeagueFormat, STANDARD_FORMAT
from hpl.standings_core.structure import Fixture, Match, MatchStatus
from hpl.standings_core.timeutils import combine

logger = logging.getLogger(__name__)

_ALWAYS_SHOWN = (MatchStatus.COMPLETED, MatchStatus.IN_PROGRESS)


def scheduled_start(
    match: Match,
    fixture: Optional[Fixture] = None,
    today: Optional[datetime.date] = None,
) -> Optional[datetime.datetime]:
    """Start of the match from its own date and time, falling back to the fixture's.

    Returns None when no time is known. A known time without any date is
    taken to be `today`.

    Raises:
        ValueError: if the time cannot be parsed
    """
    time_str = match.time or (fixture.time if fixture else None)
    if not time_str:
        return None
    day = match.date or (fixture.date if fixture else None)
    if day is None:
        day = today or datetime.date.today()
    return combine(day, time_str)


def should_show_player_names(
    match: Match,
    fixture: Optional[Fixture] = None,
    now: Optional[datetime.datetime] = None,
    fmt: LeagueFormat = STANDARD_FORMAT,
) -> bool:
    """Whether player names may be displayed for `match` at `now`.

    Started and finished matches always show names, as do matches with no
    scheduled time or whose time has already passed. Otherwise names appear
    `fmt.reveal_lead_minutes` before the start.
    """
    if match.status in _ALWAYS_SHOWN:
        return True

    now = now or datetime.datetime.now()
    try:
        start = scheduled_start(match, fixture, today=now.date())
        if start is None:
            return True
        if now > start:
            return True
        return now >= start - datetime.timedelta(minutes=fmt.reveal_lead_minutes)
    except (ValueError, TypeError, OverflowError) as e:
        logger.warning("Could not work out start of match %s: %s", match.id, e)
        return True


def displayed_line_up(
    match: Match,
    side1: bool = True,
    fixture: Optional[Fixture] = None,
    now: Optional[datetime.datetime] = None,
    fmt: LeagueFormat = STANDARD_FORMAT,
) -> Optional[str]:
    """One side's line-up for display, or None while names are still hidden."""
    if not should_show_player_names(match, fixture, now, fmt):
        return None
    return match.line_up(side1)
