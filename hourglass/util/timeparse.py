# hourglass/util/timeparse.py
from __future__ import annotations

import datetime as dt
import re
from typing import Optional, Tuple

from .tz import AmbiguousLocalTime, NonexistentLocalTime, local_datetime_on, local_now, today_date

_DIGITS_RE = re.compile(r"[0-9]+")


class TargetHourError(ValueError):
    """A target hour that cannot be turned into a future local timestamp."""


def _field(raw: str, what: str) -> int:
    if not _DIGITS_RE.fullmatch(raw):
        if what == "minute":
            raise TargetHourError(f"Invalid minute: {raw!r} is not a number")
        raise TargetHourError(f"Invalid {what}")
    return int(raw)


def split_target_hour(s: str) -> Tuple[int, int, int]:
    """Split "H", "H:M" or "H:M:S" into (hour, minute, second).

    Missing fields default to 0. Range checks are left to the caller.
    """
    parts = s.split(":")
    if len(parts) > 3:
        raise TargetHourError("Invalid input format")
    parts += ["0"] * (3 - len(parts))
    return _field(parts[0], "hour"), _field(parts[1], "minute"), _field(parts[2], "second")


def parse_target_hour(s: str, now: Optional[dt.datetime] = None) -> dt.datetime:
    """Turn a target hour into the next matching aware local datetime.

    The time is first placed on today's date. If that instant is not
    strictly after `now`, exactly 24 hours are added.
    """
    hour, minute, second = split_target_hour(s)

    start = now if now is not None else local_now()
    if start.tzinfo is None:
        start = start.astimezone()
    try:
        target = local_datetime_on(today_date(start), hour, minute, second)
    except AmbiguousLocalTime as ex:
        raise TargetHourError("Ambiguous hour") from ex
    except NonexistentLocalTime as ex:
        raise TargetHourError("No datetime can be created") from ex

    if target <= start:
        target = (target + dt.timedelta(days=1)).astimezone()
    return target
