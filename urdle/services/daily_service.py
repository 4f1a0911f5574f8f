"""
Daily Word Selection

Decides which calendar day it is in the reference timezone and which
catalog word belongs to that day. Every player sees the same word on the
same day without any server coordination.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from ..config.game_settings import REFERENCE_TIMEZONE
from ..models.errors import ConfigurationError, InvalidArgument

DAY_KEY_FORMAT = "%Y-%m-%d"
EPOCH = date(1970, 1, 1)


def _now_in(tz: str, now: Optional[datetime] = None) -> datetime:
    zone = ZoneInfo(tz)
    if now is None:
        return datetime.now(zone)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(zone)


def today(now: Optional[datetime] = None, tz: str = REFERENCE_TIMEZONE) -> str:
    """
    Get today's date in the reference timezone as a DayKey (YYYY-MM-DD).

    Args:
        now: Moment to evaluate instead of the current time; naive values are UTC
        tz: IANA timezone name deciding where the day starts

    Returns:
        str: DayKey for the given moment
    """
    return _now_in(tz, now).strftime(DAY_KEY_FORMAT)


def parse_day_key(day_key: str) -> date:
    try:
        return datetime.strptime(day_key, DAY_KEY_FORMAT).date()
    except (TypeError, ValueError):
        raise InvalidArgument(f"Malformed day key: {day_key!r}")


def epoch_day(day_key: str) -> int:
    """Number of days between 1970-01-01 and the calendar date named by day_key."""
    return (parse_day_key(day_key) - EPOCH).days


def secret_word(catalog, day_key: str) -> str:
    """
    Deterministic daily word.

    The sequence repeats every len(catalog) days. Only appending to the
    catalog keeps past and future days stable.

    Raises:
        ConfigurationError: If the catalog is empty
        InvalidArgument: If day_key is malformed
    """
    if len(catalog) == 0:
        raise ConfigurationError("Word catalog is empty; no daily word can be chosen")
    return catalog.get(epoch_day(day_key) % len(catalog))


def time_until_next_puzzle(now: Optional[datetime] = None, tz: str = REFERENCE_TIMEZONE) -> timedelta:
    """Time left until midnight in the reference timezone, when the next word unlocks."""
    local_now = _now_in(tz, now)
    next_day = local_now.date() + timedelta(days=1)
    midnight = datetime.combine(next_day, time.min, tzinfo=local_now.tzinfo)
    # Subtract in UTC so DST transitions are counted in real elapsed time
    return midnight.astimezone(timezone.utc) - local_now.astimezone(timezone.utc)
