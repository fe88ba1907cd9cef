# hourglass/util/duration.py
from __future__ import annotations

import datetime as dt

_UNITS = (
    ("d", 86400),
    ("h", 3600),
    ("m", 60),
    ("s", 1),
)


def whole_seconds(td: dt.timedelta) -> int:
    # Truncate toward zero, never round.
    return int(td.total_seconds())


def format_duration(td: dt.timedelta) -> str:
    """Compact human form of a duration, e.g. 3662s -> "1h 1m 2s".

    Zero-valued units are omitted; a zero (or negative) duration yields "".
    """
    rest = whole_seconds(td)
    if rest <= 0:
        return ""
    parts = []
    for suffix, size in _UNITS:
        n, rest = divmod(rest, size)
        if n > 0:
            parts.append(f"{n}{suffix}")
    return " ".join(parts)
