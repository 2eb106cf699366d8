"""Computing when the price is fetched and when it is sent."""

from __future__ import annotations

import random
from datetime import datetime, timedelta
from typing import Optional, Sequence

_VARIATION_SEC = 1800
_PROCESSING_TIME = timedelta(minutes=3)


def get_call_time(now: datetime, call_hours: Sequence[int]) -> datetime:
    """Return the next moment at one of ``call_hours`` strictly after the current hour."""
    if not call_hours:
        raise ValueError("no sending hours are configured")

    next_hour = next((hour for hour in call_hours if now.hour < hour), None)
    next_day = next_hour is None
    if next_day:
        next_hour = call_hours[0]

    midnight = datetime(now.year, now.month, now.day, tzinfo=now.tzinfo)
    return midnight + timedelta(days=1 if next_day else 0, hours=next_hour)


def dur_to_send_message(now: datetime, call_hours: Sequence[int]) -> timedelta:
    """Return how long to wait until the next sending hour."""
    return get_call_time(now, call_hours) - now


def random_dur_sec(variation: int, rng: Optional[random.Random] = None) -> timedelta:
    """Return a random whole number of seconds in ``[0, variation)``."""
    source = random if rng is None else rng
    return timedelta(seconds=source.randrange(variation))


def get_wait_dur_with_random_comp(
    now: datetime, call_hours: Sequence[int], rng: Optional[random.Random] = None
) -> timedelta:
    """Return the wait before fetching, leaving a random margin before the call time."""
    rand_comp = random_dur_sec(_VARIATION_SEC, rng) + _PROCESSING_TIME
    wait = get_call_time(now, call_hours) - now
    if wait < rand_comp:
        return timedelta(0)
    return wait - rand_comp