# hourglass/util/tz.py
from __future__ import annotations

import datetime as dt
from typing import Optional


class NonexistentLocalTime(ValueError):
    """Wall-clock time that does not occur on that date (invalid, or skipped by DST)."""


class AmbiguousLocalTime(ValueError):
    """Wall-clock time that occurs twice on that date (DST fall-back)."""


def local_now() -> dt.datetime:
    """Current time as an aware datetime in the system local timezone."""
    return dt.datetime.now().astimezone()


def today_date(now: Optional[dt.datetime] = None) -> dt.date:
    cur = now if now is not None else local_now()
    if cur.tzinfo is not None:
        cur = cur.astimezone()
    return cur.date()


def localize(naive: dt.datetime) -> dt.datetime:
    """Resolve a naive local wall-clock time to a single aware local datetime.

    Both readings of the wall time (fold=0 and fold=1) are converted to epoch
    seconds using the system local timezone:
      - a reading that does not round-trip to the same wall time lies in a
        DST gap -> NonexistentLocalTime
      - two distinct instants that both round-trip -> AmbiguousLocalTime
    """
    if naive.tzinfo is not None:
        raise ValueError("localize() expects a naive datetime")

    try:
        early = naive.replace(fold=0).timestamp()
        late = naive.replace(fold=1).timestamp()
    except (OverflowError, OSError) as ex:
        raise NonexistentLocalTime(f"{naive.isoformat()} is out of range") from ex

    if dt.datetime.fromtimestamp(early) != naive or dt.datetime.fromtimestamp(late) != naive:
        raise NonexistentLocalTime(f"{naive.isoformat()} does not exist in local time")
    if early != late:
        raise AmbiguousLocalTime(f"{naive.isoformat()} is ambiguous in local time")

    return dt.datetime.fromtimestamp(early, tz=dt.timezone.utc).astimezone()


def local_datetime_on(d: dt.date, hour: int, minute: int, second: int) -> dt.datetime:
    try:
        naive = dt.datetime(d.year, d.month, d.day, hour, minute, second)
    except (ValueError, OverflowError) as ex:
        raise NonexistentLocalTime(str(ex)) from ex
    return localize(naive)
